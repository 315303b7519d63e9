"""
Pydantic schemas for parsed QuickBooks reports.

Field names are snake_case in Python; aliases carry the JSON keys the
financial_imports records are stored with, so dumps must use ``by_alias=True``.
"""
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ReportType(str, Enum):
    """QuickBooks report shapes the importer can recognise."""

    PROFIT_LOSS = "profit_loss"
    PROFIT_LOSS_BY_CLASS = "profit_loss_by_class"
    PROFIT_LOSS_BY_LOCATION = "profit_loss_by_location"
    BALANCE_SHEET = "balance_sheet"
    CASH_FLOW_STATEMENT = "cash_flow_statement"
    AR_AGING_SUMMARY = "ar_aging_summary"
    AP_AGING_SUMMARY = "ap_aging_summary"
    SALES_BY_PRODUCT = "sales_by_product"
    EXPENSES_BY_VENDOR = "expenses_by_vendor"
    PAYROLL_SUMMARY = "payroll_summary"


class ReportModel(BaseModel):
    """Base for report rows and summaries."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self) -> dict:
        """Dump with the stored JSON key names."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Profit and Loss
# =============================================================================

class ProfitLossRow(ReportModel):
    """One account line of a Profit and Loss report."""

    account: str
    amount: float
    category: str = Field(..., description="income, cogs, expense or other")


class ProfitLossSummary(ReportModel):
    """Totals computed over a Profit and Loss report."""

    total_income: float = Field(0.0, alias="totalIncome")
    total_cogs: float = Field(0.0, alias="totalCOGS")
    gross_profit: float = Field(0.0, alias="grossProfit")
    gross_margin_pct: float = Field(0.0, alias="grossMarginPct")
    total_expenses: float = Field(0.0, alias="totalExpenses")
    net_income: float = Field(0.0, alias="netIncome")


class ClassAmountRow(ReportModel):
    """Amount of one account for one class column."""

    account: str
    class_name: str = Field(..., alias="class")
    amount: float


class ClassSummary(ReportModel):
    """Revenue and expense roll-up for one class."""

    revenue: float = 0.0
    expenses: float = 0.0
    margin: float = 0.0
    margin_pct: float = Field(0.0, alias="marginPct")


class ProfitLossByClassSummary(ReportModel):
    """Per-class roll-ups of a Profit and Loss by Class report."""

    by_class: Dict[str, ClassSummary] = Field(default_factory=dict, alias="byClass")


# =============================================================================
# Balance Sheet
# =============================================================================

class BalanceSheetRow(ReportModel):
    """One account line of a Balance Sheet."""

    account: str
    amount: float
    category: str = Field(..., description="asset, liability, equity or other")


class BalanceSheetSummary(ReportModel):
    """Reported totals and key accounts of a Balance Sheet."""

    total_assets: float = Field(0.0, alias="totalAssets")
    total_liabilities: float = Field(0.0, alias="totalLiabilities")
    total_equity: float = Field(0.0, alias="totalEquity")
    cash: float = 0.0
    accounts_receivable: float = Field(0.0, alias="accountsReceivable")
    accounts_payable: float = Field(0.0, alias="accountsPayable")


# =============================================================================
# A/R Aging Summary
# =============================================================================

class ARAgingRow(ReportModel):
    """Aging buckets for one customer."""

    customer: str
    current: float = 0.0
    days1_30: float = 0.0
    days31_60: float = 0.0
    days61_90: float = 0.0
    days_over_90: float = Field(0.0, alias="daysOver90")
    total: float = 0.0


class ARAgingSummary(ReportModel):
    """Bucket totals across all customers."""

    total: float = 0.0
    current: float = 0.0
    days30: float = 0.0
    days60: float = 0.0
    days90: float = 0.0
    days_over_90: float = Field(0.0, alias="daysOver90")
    over60_pct: float = Field(0.0, alias="over60Pct")


# =============================================================================
# Sales by Product/Service
# =============================================================================

class SalesByProductRow(ReportModel):
    """Sales line for one product or service."""

    product: str
    quantity: float = 0.0
    amount: float = 0.0


class SalesByProductSummary(ReportModel):
    total_revenue: float = Field(0.0, alias="totalRevenue")
    product_count: int = Field(0, alias="productCount")


# =============================================================================
# Expenses by Vendor
# =============================================================================

class VendorExpenseRow(ReportModel):
    """Spend with one vendor."""

    vendor: str
    amount: float = 0.0


class ExpensesByVendorSummary(ReportModel):
    total_expenses: float = Field(0.0, alias="totalExpenses")
    vendor_count: int = Field(0, alias="vendorCount")
    top_vendors: List[VendorExpenseRow] = Field(default_factory=list, alias="topVendors")
