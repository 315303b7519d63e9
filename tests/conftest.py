"""
Pytest configuration and fixtures.
"""
import csv
import io
from typing import Any, Callable, List

import pytest
from openpyxl import Workbook

from qbreports.config import get_settings


def build_csv(rows: List[List[Any]]) -> bytes:
    """Serialize rows to CSV bytes the way QuickBooks exports them."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    return buffer.getvalue().encode("utf-8")


def build_xlsx(rows: List[List[Any]]) -> bytes:
    """Write rows into the first sheet of a new workbook."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_csv() -> Callable[[List[List[Any]]], bytes]:
    return build_csv


@pytest.fixture
def make_xlsx() -> Callable[[List[List[Any]]], bytes]:
    return build_xlsx


@pytest.fixture
def profit_loss_rows() -> List[List[Any]]:
    """Profit and Loss export with the usual five header rows."""
    return [
        ["Profit and Loss — January 2025"],
        ["Acme Propane & Fuel"],
        [None],
        [None],
        ["Account", "Total"],
        ["Sales Income", "1000"],
        ["Cost of Goods Sold", "400"],
        ["Rent Expense", "200"],
        ["Net Income", "400"],
    ]


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Re-read settings for every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
