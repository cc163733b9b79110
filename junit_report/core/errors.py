"""Exceptions raised by the report pipeline.

Two kinds only:
- InputError: a stream or file could not be opened, read or created
- FormatError: the bytes are not a report document we understand

Both keep the underlying exception as ``cause`` and are always raised
with ``raise ... from cause`` so tracebacks show the underlying failure.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for fatal report generation errors."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class InputError(ReportError):
    """Input could not be opened or read, or output could not be created."""


class FormatError(ReportError):
    """Input is not a well-formed report document."""


class ReadError(InputError):
    """The report byte stream could not be fully read."""


class ParseError(FormatError):
    """The report bytes do not decode into the expected XML shape."""
