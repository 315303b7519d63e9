"""
Period extractor for QuickBooks report headers.

QuickBooks prints the reporting period under the report title in one of
three forms:
- An explicit date range: "10/01/2025 - 12/31/2025"
- A single month: "January 2025"
- A month range: "January - December 2025"

The extractor turns that text into a canonical period token (YYYY-MM,
YYYY-Qn or YYYY) plus explicit start and end dates.
"""
import calendar
import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from qbreports.services.sheet_reader import RawSheet, header_text

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReportPeriod:
    """Reporting period derived from header text."""

    period: Optional[str] = None
    period_start: Optional[date] = None
    period_end: Optional[date] = None


def quarter_token(year: int, end_month: int) -> str:
    """Quarter token for a range, keyed on the month the range ends in."""
    return f"{year}-Q{math.ceil(end_month / 3)}"


def month_token(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


class PeriodExtractor:
    """
    Service for deriving the reporting period of an export.

    Patterns are tried in priority order: explicit date range, single month,
    month range. The first one that yields a valid range wins.
    """

    DATE_RANGE_PATTERN = re.compile(
        r"(\d{1,2})/(\d{1,2})/(\d{4})\s*-\s*(\d{1,2})/(\d{1,2})/(\d{4})"
    )
    MONTH_YEAR_PATTERN = re.compile(r"\b([A-Za-z]+)\s+(\d{4})\b")
    MONTH_RANGE_PATTERN = re.compile(r"\b([A-Za-z]+)\s*-\s*([A-Za-z]+)\s+(\d{4})\b")
    # Text immediately before a "Month YYYY" match that makes it a range end
    RANGE_PREFIX_PATTERN = re.compile(r"\b([A-Za-z]+)\s*-\s*$")

    MONTH_MAP = {
        "jan": 1, "january": 1,
        "feb": 2, "february": 2,
        "mar": 3, "march": 3,
        "apr": 4, "april": 4,
        "may": 5,
        "jun": 6, "june": 6,
        "jul": 7, "july": 7,
        "aug": 8, "august": 8,
        "sep": 9, "sept": 9, "september": 9,
        "oct": 10, "october": 10,
        "nov": 11, "november": 11,
        "dec": 12, "december": 12,
    }

    def extract(self, rows: RawSheet) -> ReportPeriod:
        """
        Extract the reporting period from the header rows.

        Args:
            rows: Raw rows of the first worksheet.

        Returns:
            ReportPeriod; all fields are None when no pattern matches.
        """
        if not rows:
            return ReportPeriod()

        return self.extract_from_text(header_text(rows))

    def extract_from_text(self, text: str) -> ReportPeriod:
        """Extract the reporting period from already-joined header text."""
        for strategy in (self._from_date_range, self._from_single_month, self._from_month_range):
            result = strategy(text)
            if result is not None:
                logger.debug(
                    "Period extracted",
                    period=result.period,
                    strategy=strategy.__name__,
                )
                return result

        logger.info("No period found in report header")
        return ReportPeriod()

    def parse_month(self, name: str) -> Optional[int]:
        """Resolve a full or abbreviated month name to 1-12."""
        return self.MONTH_MAP.get(name.lower())

    def _from_date_range(self, text: str) -> Optional[ReportPeriod]:
        match = self.DATE_RANGE_PATTERN.search(text)
        if not match:
            return None

        m1, d1, y1, m2, d2, y2 = (int(g) for g in match.groups())
        try:
            start = date(y1, m1, d1)
            end = date(y2, m2, d2)
        except ValueError:
            logger.warning("Invalid date range in header", text=match.group(0))
            return None

        if start > end:
            logger.warning("Reversed date range in header", text=match.group(0))
            return None

        if (start.year, start.month) == (end.year, end.month):
            period = month_token(start.year, start.month)
        else:
            period = quarter_token(start.year, end.month)

        return ReportPeriod(period=period, period_start=start, period_end=end)

    def _from_single_month(self, text: str) -> Optional[ReportPeriod]:
        for match in self.MONTH_YEAR_PATTERN.finditer(text):
            month = self.parse_month(match.group(1))
            if month is None:
                continue
            if self._is_range_end(text, match.start()):
                continue

            year = int(match.group(2))
            return ReportPeriod(
                period=month_token(year, month),
                period_start=date(year, month, 1),
                period_end=last_day_of_month(year, month),
            )
        return None

    def _from_month_range(self, text: str) -> Optional[ReportPeriod]:
        for match in self.MONTH_RANGE_PATTERN.finditer(text):
            start_month = self.parse_month(match.group(1))
            end_month = self.parse_month(match.group(2))
            if start_month is None or end_month is None:
                continue
            if start_month > end_month:
                logger.warning("Reversed month range in header", text=match.group(0))
                continue

            year = int(match.group(3))
            if start_month == 1 and end_month == 12:
                period = str(year)
            else:
                period = quarter_token(year, end_month)

            return ReportPeriod(
                period=period,
                period_start=date(year, start_month, 1),
                period_end=last_day_of_month(year, end_month),
            )
        return None

    def _is_range_end(self, text: str, position: int) -> bool:
        """True when "Month YYYY" at ``position`` closes a "Month - Month" range."""
        prefix = self.RANGE_PREFIX_PATTERN.search(text[:position])
        return prefix is not None and self.parse_month(prefix.group(1)) is not None


def get_period_extractor() -> PeriodExtractor:
    """Get PeriodExtractor instance."""
    return PeriodExtractor()
