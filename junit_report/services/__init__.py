"""Services package.

Exposes stateless service classes and shared result types used by
the CLI and the MCP handlers.
"""

# Base utilities
from .base import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)

# Services
from .report_loader import ReportLoader
from .reporting import ReportService

__all__ = [
    # Base
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    # Services
    "ReportLoader",
    "ReportService",
]


def create_report_service(loader: ReportLoader | None = None) -> ReportService:
    """Factory for ReportService (optionally inject a ReportLoader)."""

    return ReportService(loader=loader)
