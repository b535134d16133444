"""Reporting domain package."""

from zoointake.reporting.report_writer import ReportWriter

__all__ = [
    "ReportWriter",
]
