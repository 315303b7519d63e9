"""
Balance Sheet row parser.

Reported section totals (assets, liabilities, equity) are taken as printed;
cash, receivables and payables are accumulated from the account lines.
"""
from qbreports.schemas.reports import BalanceSheetRow, BalanceSheetSummary, ReportType
from qbreports.services.report_parsers.base import ReportParser, ReportSection
from qbreports.services.sheet_reader import RawSheet

# Printed total label -> summary field; a later matching row replaces an earlier one
NAMED_TOTALS = (
    ("total assets", "total_assets"),
    ("total liabilities", "total_liabilities"),
    ("total equity", "total_equity"),
)

CASH_KEYWORDS = ("cash", "checking")
RECEIVABLE_KEYWORDS = ("accounts receivable", "a/r")
PAYABLE_KEYWORDS = ("accounts payable", "a/p")


def categorize_account(key: str) -> str:
    """Category of a lower-cased balance sheet label."""
    if "asset" in key:
        return "asset"
    if "liability" in key or "liabilities" in key:
        return "liability"
    if "equity" in key:
        return "equity"
    return "other"


class BalanceSheetParser(ReportParser):
    """Parser for the Balance Sheet report."""

    REPORT_TYPE = ReportType.BALANCE_SHEET

    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        data_rows, skipped = self.data_rows(rows, data_start)
        parsed = []
        totals = {
            "total_assets": 0.0,
            "total_liabilities": 0.0,
            "total_equity": 0.0,
            "cash": 0.0,
            "accounts_receivable": 0.0,
            "accounts_payable": 0.0,
        }

        for row in data_rows:
            amount = self.amount(row, 1, fallback=2)

            named = next((name for label, name in NAMED_TOTALS if label in row.key), None)
            if named:
                totals[named] = amount
                continue
            if self.is_total(row):
                continue

            if any(word in row.key for word in CASH_KEYWORDS):
                totals["cash"] += amount
            if any(word in row.key for word in RECEIVABLE_KEYWORDS):
                totals["accounts_receivable"] += amount
            if any(word in row.key for word in PAYABLE_KEYWORDS):
                totals["accounts_payable"] += amount

            parsed.append(
                BalanceSheetRow(account=row.label, amount=amount, category=categorize_account(row.key))
            )

        return ReportSection(
            parsed=parsed,
            summary=BalanceSheetSummary(**totals),
            skipped_rows=skipped,
        )
