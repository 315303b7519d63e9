"""
Report type detector.

Classifies a QuickBooks export by the report title QuickBooks writes into the
first rows of every export ("Profit and Loss", "Balance Sheet", ...).
"""
import re
from typing import List, Optional, Pattern, Tuple

import structlog

from qbreports.schemas.reports import ReportType
from qbreports.services.sheet_reader import RawSheet, header_text

logger = structlog.get_logger(__name__)


# Checked in order; the first match wins. The broad Profit and Loss pattern
# precedes the by-class/by-location patterns, so those two are normally only
# reached through an explicit report type.
REPORT_TYPE_PATTERNS: List[Tuple[ReportType, Pattern[str]]] = [
    (ReportType.PROFIT_LOSS, re.compile(r"profit\s+and\s+loss|p\s*&\s*l|income\s+statement", re.IGNORECASE)),
    (ReportType.PROFIT_LOSS_BY_CLASS, re.compile(r"profit\s+and\s+loss.*by\s+class", re.IGNORECASE)),
    (ReportType.PROFIT_LOSS_BY_LOCATION, re.compile(r"profit\s+and\s+loss.*by\s+location", re.IGNORECASE)),
    (ReportType.BALANCE_SHEET, re.compile(r"balance\s+sheet", re.IGNORECASE)),
    (ReportType.CASH_FLOW_STATEMENT, re.compile(r"statement\s+of\s+cash\s+flows|cash\s+flow\s+statement", re.IGNORECASE)),
    (ReportType.AR_AGING_SUMMARY, re.compile(r"accounts?\s+receivable\s+aging|a/r\s+aging", re.IGNORECASE)),
    (ReportType.AP_AGING_SUMMARY, re.compile(r"accounts?\s+payable\s+aging|a/p\s+aging", re.IGNORECASE)),
    (ReportType.SALES_BY_PRODUCT, re.compile(r"sales\s+by\s+product|sales\s+by\s+service", re.IGNORECASE)),
    (ReportType.EXPENSES_BY_VENDOR, re.compile(r"expenses?\s+by\s+vendor|purchases?\s+by\s+vendor", re.IGNORECASE)),
    (ReportType.PAYROLL_SUMMARY, re.compile(r"payroll\s+summary|payroll\s+report", re.IGNORECASE)),
]


def detect_report_type(rows: RawSheet) -> Optional[ReportType]:
    """
    Detect the report type from the header rows.

    Args:
        rows: Raw rows of the first worksheet.

    Returns:
        The first matching ReportType, or None when no title is recognised.
    """
    if not rows:
        return None

    text = header_text(rows).lower()

    for report_type, pattern in REPORT_TYPE_PATTERNS:
        if pattern.search(text):
            logger.debug("Report type detected", report_type=report_type.value)
            return report_type

    logger.info("No report type pattern matched", header=text)
    return None
