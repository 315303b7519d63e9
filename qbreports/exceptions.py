"""
Custom exceptions for the QuickBooks report importer.

Provides a hierarchy of exceptions with error codes so the upload layer can
surface parse failures to users with the message verbatim.
"""
from typing import Optional, Dict, Any


class QBReportsError(Exception):
    """
    Base exception for all report import errors.

    Attributes:
        error_code: Unique error code (e.g., QBR-101)
        message: Human-readable error message
        details: Additional error context
    """
    error_code: str = "QBR-000"
    http_status: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# Report Parsing Errors (QBR-1XX)
class ReportParseError(QBReportsError):
    """Error while parsing a QuickBooks report."""
    error_code = "QBR-100"
    http_status = 422

    def __init__(self, message: str = "Failed to parse QuickBooks report", **kwargs):
        super().__init__(message, **kwargs)


class UnsupportedMimeTypeError(ReportParseError):
    """Declared MIME type has no spreadsheet or CSV reader."""
    error_code = "QBR-101"
    http_status = 415

    def __init__(self, mime_type: str, **kwargs):
        message = f"Unsupported file type: {mime_type}"
        super().__init__(message, details={"mime_type": mime_type}, **kwargs)


class ReportTypeUndetectableError(ReportParseError):
    """No report type was supplied and none could be detected."""
    error_code = "QBR-102"

    def __init__(self, **kwargs):
        message = "Could not detect QuickBooks report type. Please specify report type."
        super().__init__(message, **kwargs)


class ParserNotImplementedError(ReportParseError):
    """Report type is known (or requested) but has no row parser."""
    error_code = "QBR-103"

    def __init__(self, report_type: str, **kwargs):
        message = f"Parser not implemented for report type: {report_type}"
        super().__init__(message, details={"report_type": report_type}, **kwargs)


class WorkbookReadError(ReportParseError):
    """File bytes could not be read as a workbook or delimited text."""
    error_code = "QBR-104"

    def __init__(self, reason: str, **kwargs):
        message = f"Could not read report file: {reason}"
        super().__init__(message, details={"reason": reason}, **kwargs)


# Upload Errors (QBR-2XX)
class FileTooLargeError(QBReportsError):
    """File exceeds maximum size limit."""
    error_code = "QBR-201"
    http_status = 413

    def __init__(self, size: int, max_size: int, **kwargs):
        message = f"File too large. Maximum size: {max_size // (1024*1024)}MB"
        super().__init__(message, details={"size": size, "max_size": max_size}, **kwargs)
