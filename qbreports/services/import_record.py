"""
Financial import record builder.

Composes the ``financial_imports`` row the storage layer persists for an
uploaded report, and validates uploads before they reach the parser.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from qbreports.config import get_settings
from qbreports.exceptions import FileTooLargeError, UnsupportedMimeTypeError
from qbreports.services.quickbooks_parser import ParseResult

logger = structlog.get_logger(__name__)

IMPORT_SOURCE = "quickbooks"
STORAGE_PREFIX = "financial"

# Types accepted for upload; PDFs are stored as attachments only
SUPPORTED_UPLOAD_TYPES = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",  # .xlsx
    "application/vnd.ms-excel",  # .xls
    "text/csv",  # .csv
    "application/pdf",  # .pdf
)
ATTACHMENT_ONLY_MARKERS = ("pdf",)


def is_supported_upload_type(mime_type: str) -> bool:
    """Check whether a MIME type is accepted for upload at all."""
    kind = (mime_type or "").lower()
    return any(supported in kind for supported in SUPPORTED_UPLOAD_TYPES)


def is_parseable(mime_type: str) -> bool:
    """Check whether an accepted upload can be parsed into report data."""
    kind = (mime_type or "").lower()
    return is_supported_upload_type(kind) and not any(m in kind for m in ATTACHMENT_ONLY_MARKERS)


def validate_upload(mime_type: str, size: int) -> None:
    """
    Validate an upload before parsing.

    Raises:
        UnsupportedMimeTypeError: Type is not accepted or is attachment-only.
        FileTooLargeError: File exceeds the configured size limit.
    """
    if not is_parseable(mime_type):
        raise UnsupportedMimeTypeError(mime_type)

    max_size = get_settings().max_upload_size_bytes
    if size > max_size:
        raise FileTooLargeError(size=size, max_size=max_size)


def storage_object_path(report_type: str, filename: str, now: Optional[datetime] = None) -> str:
    """
    Object-store path for an uploaded report file.

    Example: ``financial/profit_loss/2025-02-03_14-05-09-123_pl.xlsx``
    """
    now = now or datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%d_%H-%M-%S-") + f"{now.microsecond // 1000:03d}"
    return f"{STORAGE_PREFIX}/{report_type}/{timestamp}_{filename}"


def build_import_record(
    result: ParseResult,
    filename: str,
    mime_type: str,
    size: int,
    period: Optional[str] = None,
    storage_path: Optional[str] = None,
    today: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build the financial_imports row for a parsed report.

    Args:
        result: Parsed report.
        filename: Original upload filename.
        mime_type: Declared MIME type.
        size: File size in bytes.
        period: Caller-supplied period overriding the parsed one.
        storage_path: Object-store path, when the file was stored.
        today: Clock used for the fallback period.

    Returns:
        Dict ready for insertion into financial_imports.
    """
    data = result.to_dict()

    final_period = period or result.period
    if not final_period:
        final_period = (today or datetime.now(timezone.utc)).strftime("%Y-%m")
        logger.info("No period available, using current month", period=final_period)

    return {
        "type": data["type"],
        "period": final_period,
        "period_start": data["periodStart"],
        "period_end": data["periodEnd"],
        "source": IMPORT_SOURCE,
        "file_metadata": {
            "filename": filename,
            "size": size,
            "mimeType": mime_type,
            "storagePath": storage_path,
        },
        "parsed": data["parsed"],
        "summary": data["summary"],
    }
