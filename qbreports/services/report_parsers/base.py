"""
Shared infrastructure for QuickBooks report row parsers.

Locates where the data rows of an export begin, walks them while skipping
malformed rows, and defines the contract every report-specific parser follows.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import structlog

from qbreports.config import get_settings
from qbreports.schemas.reports import ReportModel, ReportType
from qbreports.services.numeric_parser import NumericNormalizer, get_numeric_normalizer
from qbreports.services.sheet_reader import RawSheet, cell_text, row_text

logger = structlog.get_logger(__name__)

# Words found in the column-header row of QuickBooks exports
COLUMN_HEADER_KEYWORDS = ("account", "total", "amount", "debit", "credit", "balance")


def find_data_start_row(rows: RawSheet) -> int:
    """
    Find the index of the first data row.

    QuickBooks exports open with company name, report title, date range and a
    blank row, then the column headers. The row after the first one mentioning
    a column-header keyword is taken as the start of the data.

    Args:
        rows: Raw rows of the first worksheet.

    Returns:
        Index of the first data row, or the configured fallback row.
    """
    settings = get_settings()

    for index, row in enumerate(rows[: settings.data_start_scan_rows]):
        if not isinstance(row, (list, tuple)):
            continue
        text = row_text(row).lower()
        if any(keyword in text for keyword in COLUMN_HEADER_KEYWORDS):
            return index + 1

    return settings.data_start_fallback_row


def cell(row: Any, index: int) -> Any:
    """Cell at ``index`` or None when the row is shorter."""
    if index < len(row):
        return row[index]
    return None


@dataclass
class DataRow:
    """A data row with a usable label in its first cell."""

    index: int
    cells: List[Any]
    label: str

    @property
    def key(self) -> str:
        """Lower-cased label used for keyword classification."""
        return self.label.lower()


@dataclass
class ReportSection:
    """Rows and summary produced by one row parser."""

    parsed: List[ReportModel] = field(default_factory=list)
    summary: Optional[ReportModel] = None
    skipped_rows: int = 0


class ReportParser(ABC):
    """
    Abstract base for report-specific row parsers.

    Subclasses set ``REPORT_TYPE`` and implement ``parse``. Parsers hold no
    state between calls; a single instance can serve any number of reports.
    """

    REPORT_TYPE: ReportType

    def __init__(self, normalizer: Optional[NumericNormalizer] = None):
        self.normalizer = normalizer or get_numeric_normalizer()

    @abstractmethod
    def parse(self, rows: RawSheet, data_start: int) -> ReportSection:
        """
        Walk the data rows and build the report section.

        Args:
            rows: All rows of the worksheet.
            data_start: Index of the first data row.

        Returns:
            ReportSection with typed rows and the summary.
        """

    def data_rows(self, rows: RawSheet, data_start: int) -> Tuple[List[DataRow], int]:
        """
        Collect rows from ``data_start`` that carry a label.

        Returns:
            Tuple of (rows with a label in the first cell, count of skipped rows).
        """
        collected: List[DataRow] = []
        skipped = 0

        for index in range(data_start, len(rows)):
            row = rows[index]
            if not isinstance(row, (list, tuple)) or not row:
                skipped += 1
                continue

            first = row[0]
            label = cell_text(first).strip() if first else ""
            if not label:
                skipped += 1
                continue

            collected.append(DataRow(index=index, cells=list(row), label=label))

        if skipped:
            logger.debug(
                "Rows without a label skipped",
                report_type=self.REPORT_TYPE.value,
                skipped=skipped,
            )
        return collected, skipped

    def amount(self, row: DataRow, column: int, fallback: Optional[int] = None) -> float:
        """Normalize ``column``, using ``fallback`` when that cell is empty or zero."""
        value = cell(row.cells, column)
        if not value and fallback is not None:
            value = cell(row.cells, fallback)
        return self.normalizer.normalize(value)

    @staticmethod
    def is_total(row: DataRow) -> bool:
        return "total" in row.key
