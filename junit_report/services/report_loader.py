"""
Report Loader Service - Loads a JUnit XML report from a file or a string.

Wraps the parser so that every failure comes back as a ServiceResult
with an ErrorCode instead of an exception.
"""

from __future__ import annotations

import errno
import logging
from pathlib import Path

from ..constants import MAX_REPORT_SIZE
from ..core import FormatError, InputError, TestDocument, load_report, parse_report
from .base import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class ReportLoader:
    """
    Loads report documents from a file path or direct XML input.

    Stateless: configuration is passed to __init__, input to load().
    """

    def __init__(self, max_size: int = MAX_REPORT_SIZE):
        self._max_size = max_size

    def load(
        self,
        file_path: str | None = None,
        xml: str | bytes | None = None
    ) -> ServiceResult[TestDocument]:
        """
        Load a report from ``file_path`` or ``xml``.

        ``file_path`` wins when both are given.
        """
        if file_path:
            return self._load_from_file(file_path)
        elif xml is not None:
            return self._load_from_string(xml)
        else:
            return ServiceResult.fail(
                ErrorCode.MISSING_INPUT,
                "Please provide either 'file_path' or 'xml'"
            )

    def _load_from_file(self, file_path: str) -> ServiceResult[TestDocument]:
        path = Path(file_path)

        if path.is_file() and path.stat().st_size > self._max_size:
            return self._too_large(path.stat().st_size)

        try:
            document = load_report(path)
        except InputError as e:
            return ServiceResult.fail(
                _input_error_code(e),
                str(e),
                details={"path": file_path, "cause": repr(e.cause)}
            )
        except FormatError as e:
            return ServiceResult.fail(
                ErrorCode.PARSE_ERROR,
                str(e),
                details={"path": file_path, "cause": repr(e.cause)}
            )

        logger.info(f"Loaded report {file_path}: {len(document.suites)} suites")
        return ServiceResult.ok(document)

    def _load_from_string(self, xml: str | bytes) -> ServiceResult[TestDocument]:
        if len(xml) > self._max_size:
            return self._too_large(len(xml))

        try:
            document = parse_report(xml)
        except FormatError as e:
            return ServiceResult.fail(
                ErrorCode.PARSE_ERROR,
                str(e),
                details={"cause": repr(e.cause)}
            )

        return ServiceResult.ok(document)

    def _too_large(self, size: int) -> ServiceResult[TestDocument]:
        return ServiceResult.fail(
            ErrorCode.FILE_TOO_LARGE,
            f"Report too large: {size:,} bytes (max: {self._max_size:,})",
            details={"size": size, "max_size": self._max_size}
        )


def _input_error_code(error: InputError) -> ErrorCode:
    if isinstance(error.cause, OSError):
        if error.cause.errno == errno.ENOENT:
            return ErrorCode.FILE_NOT_FOUND
        if error.cause.errno in (errno.EACCES, errno.EPERM):
            return ErrorCode.PERMISSION_DENIED
    return ErrorCode.READ_ERROR
