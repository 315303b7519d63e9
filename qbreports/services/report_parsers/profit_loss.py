"""
Profit and Loss row parser.

Classifies each account line as income, cost of goods sold, expense or other
and derives gross profit, gross margin and net income from those buckets.
"""
import math

import structlog

from qbreports.schemas.reports import ProfitLossRow, ProfitLossSummary, ReportType
from qbreports.services.report_parsers.base import ReportParser, ReportSection
from qbreports.services.sheet_reader import RawSheet

logger = structlog.get_logger(__name__)

INCOME_KEYWORDS = ("income", "revenue", "sales")
COGS_KEYWORDS = ("cost of goods", "cogs")
EXPENSE_KEYWORDS = ("expense", "operating")


def categorize_account(key: str) -> str:
    """Category of a lower-cased P&L account label."""
    if any(word in key for word in INCOME_KEYWORDS):
        return "income"
    if any(word in key for word in COGS_KEYWORDS):
        return "cogs"
    if any(word in key for word in EXPENSE_KEYWORDS):
        return "expense"
    return "other"


class ProfitLossParser(ReportParser):
    """Parser for the standard Profit and Loss report."""

    REPORT_TYPE = ReportType.PROFIT_LOSS

    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        data_rows, skipped = self.data_rows(rows, data_start)
        parsed = []
        totals = {"income": 0.0, "cogs": 0.0, "expense": 0.0, "other": 0.0}
        reported_net_income = None

        for row in data_rows:
            # The amount sits in column 1, or column 2 when column 1 is blank
            amount = self.amount(row, 1, fallback=2)

            # Report subtotals are recomputed from the lines
            if self.is_total(row) or "net income" in row.key:
                if "net income" in row.key:
                    reported_net_income = amount
                continue

            category = categorize_account(row.key)
            totals[category] += amount
            parsed.append(ProfitLossRow(account=row.label, amount=amount, category=category))

        gross_profit = totals["income"] - totals["cogs"]
        gross_margin_pct = (gross_profit / totals["income"]) * 100 if totals["income"] > 0 else 0.0
        net_income = gross_profit - totals["expense"]

        if reported_net_income is not None and not math.isclose(
            reported_net_income, net_income, abs_tol=0.005
        ):
            logger.info(
                "Reported net income differs from computed",
                reported=reported_net_income,
                computed=net_income,
            )

        summary = ProfitLossSummary(
            total_income=totals["income"],
            total_cogs=totals["cogs"],
            gross_profit=gross_profit,
            gross_margin_pct=gross_margin_pct,
            total_expenses=totals["expense"],
            net_income=net_income,
        )
        return ReportSection(parsed=parsed, summary=summary, skipped_rows=skipped)
