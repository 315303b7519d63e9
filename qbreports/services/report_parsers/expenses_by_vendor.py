"""Expenses by Vendor Summary row parser."""
from qbreports.config import get_settings
from qbreports.schemas.reports import ExpensesByVendorSummary, ReportType, VendorExpenseRow
from qbreports.services.report_parsers.base import ReportParser, ReportSection
from qbreports.services.sheet_reader import RawSheet


class ExpensesByVendorParser(ReportParser):
    """
    Parser for the Expenses by Vendor Summary report.

    Vendors are returned largest spend first; the summary repeats the top
    entries of that ranking.
    """

    REPORT_TYPE = ReportType.EXPENSES_BY_VENDOR

    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        data_rows, skipped = self.data_rows(rows, data_start)
        parsed = []

        for row in data_rows:
            if self.is_total(row):
                continue
            parsed.append(VendorExpenseRow(vendor=row.label, amount=self.amount(row, 1, fallback=2)))

        parsed.sort(key=lambda r: r.amount, reverse=True)

        summary = ExpensesByVendorSummary(
            total_expenses=sum(r.amount for r in parsed),
            vendor_count=len(parsed),
            top_vendors=parsed[: get_settings().top_vendor_count],
        )
        return ReportSection(parsed=parsed, summary=summary, skipped_rows=skipped)
