"""Sales by Product/Service Summary row parser."""
from qbreports.schemas.reports import ReportType, SalesByProductRow, SalesByProductSummary
from qbreports.services.report_parsers.base import ReportParser, ReportSection, cell
from qbreports.services.sheet_reader import RawSheet


class SalesByProductParser(ReportParser):
    """
    Parser for the Sales by Product/Service Summary report.

    Quantity is column 1; the amount is column 2, or column 1 for exports
    that carry a single value column.
    """

    REPORT_TYPE = ReportType.SALES_BY_PRODUCT

    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        data_rows, skipped = self.data_rows(rows, data_start)
        parsed = []

        for row in data_rows:
            if self.is_total(row):
                continue
            parsed.append(SalesByProductRow(
                product=row.label,
                quantity=self.normalizer.normalize(cell(row.cells, 1)),
                amount=self.amount(row, 2, fallback=1),
            ))

        summary = SalesByProductSummary(
            total_revenue=sum(r.amount for r in parsed),
            product_count=len(parsed),
        )
        return ReportSection(parsed=parsed, summary=summary, skipped_rows=skipped)
