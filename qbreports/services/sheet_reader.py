"""
Sheet reader service.

Turns uploaded report bytes into a RawSheet: the rows of the first worksheet
as plain lists of cell values. Workbooks are read with openpyxl (cached
values, not formulas); CSV exports are read as raw text cells.
"""
import csv
import io
from datetime import date, datetime
from typing import Any, List, Optional
from zipfile import BadZipFile

import structlog
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from qbreports.config import get_settings
from qbreports.exceptions import UnsupportedMimeTypeError, WorkbookReadError

logger = structlog.get_logger(__name__)

RawSheet = List[List[Any]]

WORKBOOK_MIME_MARKERS = ("spreadsheet", "excel")
CSV_MIME_MARKERS = ("csv",)


def cell_text(value: Any) -> str:
    """
    Render a cell the way it reads in the report.

    Empty cells become "", whole floats drop their ".0" and dates render as
    ISO dates.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.date().isoformat() if value.time() == datetime.min.time() else value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def row_text(row: Any) -> str:
    """Join the cells of one row with single spaces."""
    if isinstance(row, (list, tuple)):
        return " ".join(cell_text(cell) for cell in row)
    return cell_text(row)


def header_text(rows: RawSheet, limit: Optional[int] = None) -> str:
    """Join the first ``limit`` rows into one search string (case preserved)."""
    if limit is None:
        limit = get_settings().header_scan_rows
    return " ".join(row_text(row) for row in rows[:limit])


class SheetReader:
    """
    Reads the first worksheet of an uploaded report.

    The reader is chosen by case-insensitive substring match on the declared
    MIME type: "spreadsheet"/"excel" for workbooks, "csv" for delimited text.
    """

    def read(self, file_bytes: bytes, mime_type: str) -> RawSheet:
        """
        Read report bytes into rows.

        Args:
            file_bytes: Raw uploaded file content.
            mime_type: Declared MIME type of the upload.

        Returns:
            List of rows, each a list of cell values (None for empty cells).

        Raises:
            UnsupportedMimeTypeError: MIME type matches no reader.
            WorkbookReadError: Bytes could not be read by the chosen reader.
        """
        kind = (mime_type or "").lower()

        if any(marker in kind for marker in WORKBOOK_MIME_MARKERS):
            rows = self._read_workbook(file_bytes)
        elif any(marker in kind for marker in CSV_MIME_MARKERS):
            rows = self._read_csv(file_bytes)
        else:
            raise UnsupportedMimeTypeError(mime_type)

        logger.debug("Sheet read", mime_type=mime_type, rows=len(rows))
        return rows

    def _read_workbook(self, file_bytes: bytes) -> RawSheet:
        """Read the first worksheet of an .xlsx workbook."""
        try:
            wb = load_workbook(filename=io.BytesIO(file_bytes), read_only=True, data_only=True)
        except (InvalidFileException, BadZipFile, KeyError, ValueError, OSError) as e:
            logger.warning("Failed to open workbook", error=str(e))
            raise WorkbookReadError(str(e) or type(e).__name__) from e

        try:
            if not wb.worksheets:
                return []
            ws = wb.worksheets[0]
            return [list(row) for row in ws.iter_rows(values_only=True)]
        finally:
            wb.close()

    def _read_csv(self, file_bytes: bytes) -> RawSheet:
        """Read delimited text, keeping every cell as its raw string."""
        encoding = get_settings().csv_encoding
        try:
            text = file_bytes.decode(encoding)
        except UnicodeDecodeError:
            logger.warning("CSV is not valid for configured encoding, using latin-1", encoding=encoding)
            text = file_bytes.decode("latin-1")

        try:
            reader = csv.reader(io.StringIO(text, newline=""))
            return [[cell if cell != "" else None for cell in row] for row in reader]
        except csv.Error as e:
            raise WorkbookReadError(str(e)) from e


# Singleton instance
_reader_instance: Optional[SheetReader] = None


def get_sheet_reader() -> SheetReader:
    """Get singleton SheetReader instance."""
    global _reader_instance
    if _reader_instance is None:
        _reader_instance = SheetReader()
    return _reader_instance
