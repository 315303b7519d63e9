"""Schemas package."""
from qbreports.schemas.reports import ReportModel, ReportType

__all__ = ["ReportModel", "ReportType"]
