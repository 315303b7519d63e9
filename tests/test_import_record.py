"""
Unit tests for the financial import record builder.
"""
import warnings
from datetime import date, datetime, timezone

import pytest

from qbreports.exceptions import FileTooLargeError, UnsupportedMimeTypeError
from qbreports.schemas.reports import ProfitLossRow, ProfitLossSummary, ReportType
from qbreports.services.import_record import (
    build_import_record,
    is_parseable,
    is_supported_upload_type,
    storage_object_path,
    validate_upload,
)
from qbreports.services.quickbooks_parser import ParseResult

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def result() -> ParseResult:
    return ParseResult(
        type=ReportType.PROFIT_LOSS,
        period="2025-01",
        period_start=date(2025, 1, 1),
        period_end=date(2025, 1, 31),
        parsed=[ProfitLossRow(account="Sales Income", amount=1000.0, category="income")],
        summary=ProfitLossSummary(total_income=1000.0, gross_profit=1000.0, gross_margin_pct=100.0,
                                  net_income=1000.0),
    )


class TestBuildImportRecord:
    """Tests for build_import_record."""

    def test_record_shape(self, result: ParseResult):
        record = build_import_record(result, "pl.xlsx", XLSX_MIME, 2048, storage_path="financial/x.xlsx")

        assert record["type"] == "profit_loss"
        assert record["period"] == "2025-01"
        assert record["period_start"] == "2025-01-01"
        assert record["period_end"] == "2025-01-31"
        assert record["source"] == "quickbooks"
        assert record["file_metadata"] == {
            "filename": "pl.xlsx",
            "size": 2048,
            "mimeType": XLSX_MIME,
            "storagePath": "financial/x.xlsx",
        }
        assert record["parsed"] == [{"account": "Sales Income", "amount": 1000.0, "category": "income"}]
        assert record["summary"]["totalIncome"] == 1000.0

    def test_caller_period_wins(self, result: ParseResult):
        record = build_import_record(result, "pl.xlsx", XLSX_MIME, 1, period="2024-12")
        assert record["period"] == "2024-12"

    def test_current_month_fallback_uses_utc_clock(self, result: ParseResult):
        result.period = None
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            record = build_import_record(result, "pl.csv", "text/csv", 1)
        assert record["period"] == datetime.now(timezone.utc).strftime("%Y-%m")

    def test_current_month_fallback(self, result: ParseResult):
        result.period = None
        record = build_import_record(result, "pl.csv", "text/csv", 1, today=datetime(2025, 7, 4))
        assert record["period"] == "2025-07"

    def test_no_storage_path(self, result: ParseResult):
        record = build_import_record(result, "pl.csv", "text/csv", 1)
        assert record["file_metadata"]["storagePath"] is None


class TestUploadChecks:
    """Tests for upload validation helpers."""

    @pytest.mark.parametrize(
        "mime, supported, parseable",
        [
            (XLSX_MIME, True, True),
            ("application/vnd.ms-excel", True, True),
            ("text/csv", True, True),
            ("application/pdf", True, False),
            ("image/png", False, False),
        ],
    )
    def test_type_checks(self, mime, supported, parseable):
        assert is_supported_upload_type(mime) is supported
        assert is_parseable(mime) is parseable

    def test_validate_upload_accepts(self):
        validate_upload("text/csv", 1024)

    def test_validate_upload_rejects_pdf(self):
        with pytest.raises(UnsupportedMimeTypeError):
            validate_upload("application/pdf", 1024)

    def test_validate_upload_size(self, monkeypatch):
        monkeypatch.setenv("QBR_MAX_UPLOAD_SIZE_MB", "1")
        with pytest.raises(FileTooLargeError) as exc_info:
            validate_upload("text/csv", 2 * 1024 * 1024)
        assert exc_info.value.details["max_size"] == 1024 * 1024


class TestStorageObjectPath:
    """Tests for storage_object_path."""

    def test_default_clock(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            path = storage_object_path("profit_loss", "pl.csv")
        assert path.startswith("financial/profit_loss/")
        assert path.endswith("_pl.csv")

    def test_path(self):
        now = datetime(2025, 2, 3, 14, 5, 9, 123456)
        assert storage_object_path("balance_sheet", "bs.xlsx", now) == (
            "financial/balance_sheet/2025-02-03_14-05-09-123_bs.xlsx"
        )
