"""
A/R Aging Summary row parser.

Columns are positional: Customer, Current, 1-30, 31-60, 61-90, 91 and over,
Total.
"""
from qbreports.schemas.reports import ARAgingRow, ARAgingSummary, ReportType
from qbreports.services.report_parsers.base import ReportParser, ReportSection, cell
from qbreports.services.sheet_reader import RawSheet


class ARAgingSummaryParser(ReportParser):
    """Parser for the Accounts Receivable Aging Summary report."""

    REPORT_TYPE = ReportType.AR_AGING_SUMMARY

    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        data_rows, skipped = self.data_rows(rows, data_start)
        parsed = []

        for row in data_rows:
            if self.is_total(row):
                continue

            current, days1_30, days31_60, days61_90, days_over_90 = self.normalizer.normalize_batch(
                [cell(row.cells, column) for column in range(1, 6)]
            )
            parsed.append(ARAgingRow(
                customer=row.label,
                current=current,
                days1_30=days1_30,
                days31_60=days31_60,
                days61_90=days61_90,
                days_over_90=days_over_90,
                total=self.amount(row, 6, fallback=1),
            ))

        total = sum(r.total for r in parsed)
        days60 = sum(r.days31_60 for r in parsed)
        days90 = sum(r.days61_90 for r in parsed)
        days_over_90 = sum(r.days_over_90 for r in parsed)

        summary = ARAgingSummary(
            total=total,
            current=sum(r.current for r in parsed),
            days30=sum(r.days1_30 for r in parsed),
            days60=days60,
            days90=days90,
            days_over_90=days_over_90,
            over60_pct=((days60 + days90 + days_over_90) / total) * 100 if total > 0 else 0.0,
        )
        return ReportSection(parsed=parsed, summary=summary, skipped_rows=skipped)
