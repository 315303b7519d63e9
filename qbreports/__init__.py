"""
QuickBooks report importer.

Parses QuickBooks report exports (Excel/CSV) into normalized rows and
summaries without requiring the QuickBooks API.
"""

from qbreports.exceptions import (
    FileTooLargeError,
    ParserNotImplementedError,
    QBReportsError,
    ReportParseError,
    ReportTypeUndetectableError,
    UnsupportedMimeTypeError,
    WorkbookReadError,
)
from qbreports.schemas.reports import ReportType
from qbreports.services.quickbooks_parser import ParseResult, parse_quickbooks_report

__version__ = "1.0.0"
__all__ = [
    "parse_quickbooks_report",
    "ParseResult",
    "ReportType",
    "QBReportsError",
    "ReportParseError",
    "UnsupportedMimeTypeError",
    "ReportTypeUndetectableError",
    "ParserNotImplementedError",
    "WorkbookReadError",
    "FileTooLargeError",
]
