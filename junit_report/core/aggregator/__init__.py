"""Aggregator module - builds table rows and pass/fail totals."""

from .aggregator import aggregate
from .models import ReportRow, ReportSummary, Status

__all__ = [
    "aggregate",
    "ReportRow",
    "ReportSummary",
    "Status",
]
