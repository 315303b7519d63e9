"""
Profit and Loss by Class row parser.

Class names come from the column-header row; every account line yields one
row per class column and feeds that class's revenue or expense bucket.
"""
from typing import Dict, List

from qbreports.schemas.reports import (
    ClassAmountRow,
    ClassSummary,
    ProfitLossByClassSummary,
    ReportType,
)
from qbreports.services.report_parsers.base import ReportParser, ReportSection, cell
from qbreports.services.sheet_reader import RawSheet, cell_text

REVENUE_KEYWORDS = ("income", "revenue")
EXPENSE_KEYWORDS = ("expense",)


def class_names(rows: RawSheet, data_start: int) -> List[str]:
    """Non-empty column headers (after the account column) of the header row."""
    if data_start < 1 or data_start > len(rows):
        return []
    header = rows[data_start - 1]
    if not isinstance(header, (list, tuple)):
        return []
    names = (cell_text(value).strip() for value in header[1:] if value)
    return [name for name in names if name]


class ProfitLossByClassParser(ReportParser):
    """Parser for the Profit and Loss by Class report."""

    REPORT_TYPE = ReportType.PROFIT_LOSS_BY_CLASS

    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        classes = class_names(rows, data_start)
        data_rows, skipped = self.data_rows(rows, data_start)
        parsed = []
        buckets: Dict[str, Dict[str, float]] = {}

        for row in data_rows:
            if self.is_total(row) or "net income" in row.key:
                continue

            is_revenue = any(word in row.key for word in REVENUE_KEYWORDS)
            is_expense = any(word in row.key for word in EXPENSE_KEYWORDS)

            # Amounts are read positionally against the collected class names
            for position, class_name in enumerate(classes):
                amount = self.normalizer.normalize(cell(row.cells, position + 1))
                parsed.append(ClassAmountRow(account=row.label, class_name=class_name, amount=amount))

                bucket = buckets.setdefault(class_name, {"revenue": 0.0, "expenses": 0.0})
                if is_revenue:
                    bucket["revenue"] += amount
                elif is_expense:
                    bucket["expenses"] += amount

        by_class = {}
        for class_name, bucket in buckets.items():
            margin = bucket["revenue"] - bucket["expenses"]
            by_class[class_name] = ClassSummary(
                revenue=bucket["revenue"],
                expenses=bucket["expenses"],
                margin=margin,
                margin_pct=(margin / bucket["revenue"]) * 100 if bucket["revenue"] > 0 else 0.0,
            )

        summary = ProfitLossByClassSummary(by_class=by_class)
        return ReportSection(parsed=parsed, summary=summary, skipped_rows=skipped)
