"""
Unit tests for report type detection.
"""
import pytest

from qbreports.schemas.reports import ReportType
from qbreports.services.report_detector import REPORT_TYPE_PATTERNS, detect_report_type


def header(*lines):
    return [[line] for line in lines]


class TestDetectReportType:
    """Tests for detect_report_type."""

    @pytest.mark.parametrize(
        "title, expected",
        [
            ("Profit and Loss", ReportType.PROFIT_LOSS),
            ("P & L Detail", ReportType.PROFIT_LOSS),
            ("Income Statement", ReportType.PROFIT_LOSS),
            ("Balance Sheet", ReportType.BALANCE_SHEET),
            ("Statement of Cash Flows", ReportType.CASH_FLOW_STATEMENT),
            ("Cash Flow Statement", ReportType.CASH_FLOW_STATEMENT),
            ("A/R Aging Summary", ReportType.AR_AGING_SUMMARY),
            ("Accounts Receivable Aging Summary", ReportType.AR_AGING_SUMMARY),
            ("A/P Aging Summary", ReportType.AP_AGING_SUMMARY),
            ("Account Payable Aging", ReportType.AP_AGING_SUMMARY),
            ("Sales by Product/Service Summary", ReportType.SALES_BY_PRODUCT),
            ("Expenses by Vendor Summary", ReportType.EXPENSES_BY_VENDOR),
            ("Purchases by Vendor", ReportType.EXPENSES_BY_VENDOR),
            ("Payroll Summary", ReportType.PAYROLL_SUMMARY),
        ],
    )
    def test_titles(self, title, expected):
        rows = header("Acme Fuel Co", title, "January 2025")
        assert detect_report_type(rows) == expected

    def test_case_insensitive(self):
        assert detect_report_type(header("BALANCE SHEET")) == ReportType.BALANCE_SHEET

    def test_title_split_across_cells(self):
        rows = [["Balance", "Sheet"]]
        assert detect_report_type(rows) == ReportType.BALANCE_SHEET

    def test_by_class_resolves_to_profit_loss(self):
        """The broad Profit and Loss pattern is checked first."""
        rows = header("Profit and Loss by Class")
        assert detect_report_type(rows) == ReportType.PROFIT_LOSS

    def test_only_first_ten_rows_scanned(self):
        rows = header(*([None] * 10), "Balance Sheet")
        assert detect_report_type(rows) is None

    def test_unknown_title(self):
        assert detect_report_type(header("Delivery Tickets", "Driver log")) is None

    def test_empty_rows(self):
        assert detect_report_type([]) is None

    def test_numeric_cells_tolerated(self):
        rows = [[1000.0, None, "Balance Sheet"]]
        assert detect_report_type(rows) == ReportType.BALANCE_SHEET

    def test_every_type_has_a_pattern(self):
        assert {t for t, _ in REPORT_TYPE_PATTERNS} == set(ReportType)
