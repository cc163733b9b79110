"""
Service Layer Base - Core utilities for service operations.

This module provides:
- ServiceResult: A generic result wrapper (success/failure)
- ServiceError: Structured error information
- ErrorCode: Standard error codes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

# Generic type for result data
T = TypeVar("T")


class ErrorCode(str, Enum):
    """
    Standard error codes for service operations.

    Using string enum for easy serialization.
    """
    # Input validation
    MISSING_INPUT = "missing_input"

    # Input errors
    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    FILE_TOO_LARGE = "file_too_large"
    READ_ERROR = "read_error"

    # Format errors
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class ServiceError:
    """
    Structured error information.

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable error message
        details: Optional additional context
    """
    code: ErrorCode
    message: str
    details: dict | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Generic result wrapper for service operations.

    Either success with data, or failure with error. Never both.

    Usage:
        result = ReportService().summarize(file_path="report.xml")
        if result.success:
            process(result.data)
        else:
            handle_error(result.error)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            data=None,
            error=ServiceError(code=code, message=message, details=details)
        )

    def map(self, func) -> ServiceResult:
        """
        Transform the data if successful.

        Args:
            func: Function to apply to data

        Returns:
            New ServiceResult with transformed data, or same error
        """
        if self.success and self.data is not None:
            return ServiceResult.ok(func(self.data))
        return self
