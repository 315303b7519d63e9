"""
Numeric normalizer for QuickBooks report cells.

QuickBooks exports amounts in several shapes depending on the export path:
- Plain numbers from native workbook cells: 1234.5
- Formatted text from CSV exports: $1,234.50
- Accounting negatives: (1,234.50)

Every shape collapses to a finite float; anything unparseable becomes 0.0.
"""
import math
import re
from typing import Any, Optional

import structlog

logger = structlog.get_logger(__name__)


class NumericNormalizer:
    """
    Converts raw report cells into floats.

    Rules:
    - Native numbers pass through (NaN and infinities become 0.0)
    - Currency symbols, thousands separators and whitespace are stripped
    - A value containing "(" is an accounting negative
    - The leading numeric prefix is parsed; no prefix means 0.0
    """

    STRIP_PATTERN = re.compile(r"[$,\s]")
    PARENTHESES_PATTERN = re.compile(r"[()]")
    LEADING_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

    def normalize(self, value: Any) -> float:
        """
        Normalize a single cell value.

        Args:
            value: Raw cell value (str, int, float or None).

        Returns:
            Finite float; 0.0 for empty or unparseable input.
        """
        # bool is an int subclass but never an amount
        if isinstance(value, bool):
            return 0.0

        if isinstance(value, (int, float)):
            return float(value) if math.isfinite(value) else 0.0

        if not value:
            return 0.0

        text = str(value)
        cleaned = self.STRIP_PATTERN.sub("", text)
        cleaned = self.PARENTHESES_PATTERN.sub("", cleaned)

        if "(" in text:
            cleaned = "-" + cleaned

        match = self.LEADING_NUMBER_PATTERN.match(cleaned)
        if not match:
            logger.debug("Non-numeric cell treated as zero", value=text)
            return 0.0

        number = float(match.group(0))
        return number if math.isfinite(number) else 0.0

    def normalize_batch(self, values: list) -> list[float]:
        """Normalize multiple cell values."""
        return [self.normalize(v) for v in values]


# Singleton instance
_normalizer_instance: Optional[NumericNormalizer] = None


def get_numeric_normalizer() -> NumericNormalizer:
    """Get singleton NumericNormalizer instance."""
    global _normalizer_instance
    if _normalizer_instance is None:
        _normalizer_instance = NumericNormalizer()
    return _normalizer_instance


def clean_numeric(value: Any) -> float:
    """Normalize a cell value with the shared normalizer."""
    return get_numeric_normalizer().normalize(value)
