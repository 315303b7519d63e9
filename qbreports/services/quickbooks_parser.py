"""
QuickBooks report parser.

Entry point for turning an uploaded QuickBooks export into a normalized
ParseResult. Ties together the sheet reader, report type detection, period
extraction and the report-specific row parsers.

Supported report parsers:
- Profit and Loss
- Profit and Loss by Class
- Balance Sheet
- A/R Aging Summary
- Sales by Product/Service Summary
- Expenses by Vendor Summary

Profit and Loss by Location, Statement of Cash Flows, A/P Aging Summary and
Payroll Summary are detected but have no parser yet.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

import structlog

from qbreports.exceptions import ParserNotImplementedError, ReportTypeUndetectableError
from qbreports.schemas.reports import ReportModel, ReportType
from qbreports.services.period_extractor import PeriodExtractor, get_period_extractor
from qbreports.services.report_detector import detect_report_type
from qbreports.services.report_parsers import find_data_start_row, get_report_parser
from qbreports.services.sheet_reader import RawSheet, SheetReader, get_sheet_reader

logger = structlog.get_logger(__name__)


@dataclass
class ParseResult:
    """
    Normalized output of one report parse.

    ``skipped_rows`` counts data rows dropped for lacking a label; it is kept
    for diagnostics and is not part of the stored ``to_dict()`` shape.
    """

    type: ReportType
    period: Optional[str]
    period_start: Optional[date]
    period_end: Optional[date]
    parsed: List[ReportModel] = field(default_factory=list)
    summary: Optional[ReportModel] = None
    skipped_rows: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape stored on financial imports."""
        return {
            "type": self.type.value,
            "period": self.period,
            "periodStart": self.period_start.isoformat() if self.period_start else None,
            "periodEnd": self.period_end.isoformat() if self.period_end else None,
            "parsed": [row.to_dict() for row in self.parsed],
            "summary": self.summary.to_dict() if self.summary else {},
        }


def resolve_report_type(
    rows: RawSheet,
    report_type: Optional[Union[ReportType, str]] = None,
) -> ReportType:
    """
    Resolve the report type from an explicit value or by detection.

    Raises:
        ParserNotImplementedError: Explicit value names no known report type.
        ReportTypeUndetectableError: No explicit value and detection failed.
    """
    if isinstance(report_type, ReportType):
        return report_type

    if report_type:
        try:
            return ReportType(report_type.strip().lower())
        except ValueError:
            raise ParserNotImplementedError(report_type)

    detected = detect_report_type(rows)
    if detected is None:
        raise ReportTypeUndetectableError()
    return detected


class QuickBooksReportParser:
    """
    Service for parsing QuickBooks report exports.

    Stateless: each call reads, classifies and parses one file end to end and
    either returns a complete ParseResult or raises a named error.
    """

    def __init__(
        self,
        sheet_reader: Optional[SheetReader] = None,
        period_extractor: Optional[PeriodExtractor] = None,
    ):
        self.sheet_reader = sheet_reader or get_sheet_reader()
        self.period_extractor = period_extractor or get_period_extractor()

    def parse(
        self,
        file_bytes: bytes,
        mime_type: str,
        report_type: Optional[Union[ReportType, str]] = None,
    ) -> ParseResult:
        """
        Parse an uploaded report.

        Args:
            file_bytes: Raw file content (xlsx workbook or CSV).
            mime_type: Declared MIME type; selects the reader.
            report_type: Optional explicit report type overriding detection.

        Returns:
            ParseResult with type, period, typed rows and summary.

        Raises:
            UnsupportedMimeTypeError: MIME type is neither spreadsheet nor CSV.
            WorkbookReadError: The file could not be read.
            ReportTypeUndetectableError: No type given and none detected.
            ParserNotImplementedError: Resolved type has no row parser.
        """
        logger.info("Parsing QuickBooks report", mime_type=mime_type, size=len(file_bytes))

        rows = self.sheet_reader.read(file_bytes, mime_type)
        logger.debug("Rows extracted", rows=len(rows))

        resolved = resolve_report_type(rows, report_type)
        logger.info(
            "Report type resolved",
            report_type=resolved.value,
            source="override" if report_type else "detected",
        )

        period = self.period_extractor.extract(rows)

        parser = get_report_parser(resolved)
        if parser is None:
            raise ParserNotImplementedError(resolved.value)

        data_start = find_data_start_row(rows)
        section = parser.parse(rows, data_start)

        logger.info(
            "Report parsed",
            report_type=resolved.value,
            period=period.period,
            data_start=data_start,
            rows=len(section.parsed),
            skipped_rows=section.skipped_rows,
        )

        return ParseResult(
            type=resolved,
            period=period.period,
            period_start=period.period_start,
            period_end=period.period_end,
            parsed=section.parsed,
            summary=section.summary,
            skipped_rows=section.skipped_rows,
        )


# Singleton instance
_parser_instance: Optional[QuickBooksReportParser] = None


def get_quickbooks_parser() -> QuickBooksReportParser:
    """Get singleton QuickBooksReportParser instance."""
    global _parser_instance
    if _parser_instance is None:
        _parser_instance = QuickBooksReportParser()
    return _parser_instance


def parse_quickbooks_report(
    file_bytes: bytes,
    mime_type: str,
    report_type: Optional[Union[ReportType, str]] = None,
) -> ParseResult:
    """Parse a QuickBooks export with the shared parser."""
    return get_quickbooks_parser().parse(file_bytes, mime_type, report_type)
