"""
Unit tests for PeriodExtractor service.
"""
from datetime import date

import pytest

from qbreports.services.period_extractor import (
    PeriodExtractor,
    ReportPeriod,
    last_day_of_month,
    quarter_token,
)


class TestPeriodExtractor:
    """Tests for PeriodExtractor class."""

    @pytest.fixture
    def extractor(self) -> PeriodExtractor:
        """Create extractor instance."""
        return PeriodExtractor()

    # Explicit date ranges
    def test_date_range_quarter(self, extractor: PeriodExtractor):
        result = extractor.extract([["Profit and Loss"], ["10/01/2025 - 12/31/2025"]])
        assert result.period == "2025-Q4"
        assert result.period_start == date(2025, 10, 1)
        assert result.period_end == date(2025, 12, 31)

    def test_date_range_single_month(self, extractor: PeriodExtractor):
        result = extractor.extract([["1/1/2025 - 1/31/2025"]])
        assert result.period == "2025-01"
        assert result.period_start == date(2025, 1, 1)
        assert result.period_end == date(2025, 1, 31)

    def test_date_range_quarter_uses_end_month(self, extractor: PeriodExtractor):
        result = extractor.extract([["02/01/2025-04/30/2025"]])
        assert result.period == "2025-Q2"

    def test_date_range_takes_priority(self, extractor: PeriodExtractor):
        rows = [["Balance Sheet January 2025"], ["03/01/2025 - 03/31/2025"]]
        assert extractor.extract(rows).period == "2025-03"

    def test_invalid_date_range_falls_through(self, extractor: PeriodExtractor):
        rows = [["13/45/2025 - 14/50/2025"], ["June 2025"]]
        assert extractor.extract(rows).period == "2025-06"

    def test_reversed_date_range_ignored(self, extractor: PeriodExtractor):
        result = extractor.extract([["12/31/2025 - 10/01/2025"]])
        assert result == ReportPeriod()

    # Single month
    def test_single_month(self, extractor: PeriodExtractor):
        result = extractor.extract([["Profit and Loss — January 2025"]])
        assert result.period == "2025-01"
        assert result.period_start == date(2025, 1, 1)
        assert result.period_end == date(2025, 1, 31)

    def test_single_month_leap_february(self, extractor: PeriodExtractor):
        result = extractor.extract([["February 2024"]])
        assert result.period_end == date(2024, 2, 29)

    @pytest.mark.parametrize("name", ["Sep", "sept", "SEPTEMBER"])
    def test_month_abbreviations(self, extractor: PeriodExtractor, name):
        assert extractor.extract([[f"{name} 2025"]]).period == "2025-09"

    def test_non_month_word_skipped(self, extractor: PeriodExtractor):
        result = extractor.extract([["Fiscal 2024"], ["March 2025"]])
        assert result.period == "2025-03"

    # Month ranges
    def test_full_year_range(self, extractor: PeriodExtractor):
        result = extractor.extract([["Profit and Loss"], ["January - December 2025"]])
        assert result.period == "2025"
        assert result.period_start == date(2025, 1, 1)
        assert result.period_end == date(2025, 12, 31)

    def test_partial_range_quarter(self, extractor: PeriodExtractor):
        result = extractor.extract([["Jan - Mar 2025"]])
        assert result.period == "2025-Q1"
        assert result.period_start == date(2025, 1, 1)
        assert result.period_end == date(2025, 3, 31)

    def test_year_to_date_range(self, extractor: PeriodExtractor):
        result = extractor.extract([["January-August 2025"]])
        assert result.period == "2025-Q3"
        assert result.period_end == date(2025, 8, 31)

    # No period
    def test_no_period(self, extractor: PeriodExtractor):
        assert extractor.extract([["Balance Sheet"], ["As of today"]]) == ReportPeriod()

    def test_empty_rows(self, extractor: PeriodExtractor):
        result = extractor.extract([])
        assert result.period is None
        assert result.period_start is None
        assert result.period_end is None

    def test_start_not_after_end(self, extractor: PeriodExtractor):
        for text in ("April 2025", "Feb - Nov 2025", "05/03/2025 - 05/20/2025"):
            result = extractor.extract([[text]])
            assert result.period_start <= result.period_end


class TestHelpers:
    """Tests for period helper functions."""

    @pytest.mark.parametrize("month, quarter", [(1, 1), (3, 1), (4, 2), (9, 3), (10, 4), (12, 4)])
    def test_quarter_token(self, month, quarter):
        assert quarter_token(2025, month) == f"2025-Q{quarter}"

    def test_last_day_of_month(self):
        assert last_day_of_month(2025, 4) == date(2025, 4, 30)
        assert last_day_of_month(2025, 12) == date(2025, 12, 31)

    def test_parse_month_unknown(self):
        assert PeriodExtractor().parse_month("Loss") is None
