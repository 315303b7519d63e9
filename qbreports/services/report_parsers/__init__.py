"""
Report row parsers package.

Maps each ReportType with an implemented parser to its parser class.
Detectable types missing from ``PARSERS`` fail at dispatch with
ParserNotImplementedError.
"""
from typing import Dict, Optional, Type

from qbreports.schemas.reports import ReportType
from qbreports.services.report_parsers.ar_aging import ARAgingSummaryParser
from qbreports.services.report_parsers.balance_sheet import BalanceSheetParser
from qbreports.services.report_parsers.base import (
    ReportParser,
    ReportSection,
    find_data_start_row,
)
from qbreports.services.report_parsers.expenses_by_vendor import ExpensesByVendorParser
from qbreports.services.report_parsers.profit_loss import ProfitLossParser
from qbreports.services.report_parsers.profit_loss_by_class import ProfitLossByClassParser
from qbreports.services.report_parsers.sales_by_product import SalesByProductParser

PARSERS: Dict[ReportType, Type[ReportParser]] = {
    parser.REPORT_TYPE: parser
    for parser in (
        ProfitLossParser,
        ProfitLossByClassParser,
        BalanceSheetParser,
        ARAgingSummaryParser,
        SalesByProductParser,
        ExpensesByVendorParser,
    )
}


def get_report_parser(report_type: ReportType) -> Optional[ReportParser]:
    """Instantiate the parser for ``report_type``, or None if not implemented."""
    parser_cls = PARSERS.get(report_type)
    return parser_cls() if parser_cls else None


__all__ = [
    "PARSERS",
    "ReportParser",
    "ReportSection",
    "find_data_start_row",
    "get_report_parser",
    "ARAgingSummaryParser",
    "BalanceSheetParser",
    "ExpensesByVendorParser",
    "ProfitLossParser",
    "ProfitLossByClassParser",
    "SalesByProductParser",
]
