"""
Shared constants used across the project.
"""

from typing import Final

# Input
DEFAULT_REPORT_FILE: Final[str] = "chainsaw-report.xml"
MAX_REPORT_SIZE: Final[int] = 50_000_000  # 50MB

# XML schema
ROOT_ELEMENT: Final[str] = "testsuites"
SUITE_ELEMENT: Final[str] = "testsuite"
CASE_ELEMENT: Final[str] = "testcase"
FAILURE_ELEMENT: Final[str] = "failure"

# Status labels (rendered as GitHub emoji shortcodes)
PASSED_LABEL: Final[str] = ":white_check_mark: Passed"
FAILED_LABEL: Final[str] = ":x: Failed"

# Markdown layout
REPORT_TITLE: Final[str] = "E2E report"
FAILURE_TITLE: Final[str] = "Report generation failed :skull:"
BADGE_URL: Final[str] = "https://img.shields.io/badge/tests-{passed}_passed%2C_{failed}_failed-{color}"
BADGE_COLOR_OK: Final[str] = "green"
BADGE_COLOR_FAILED: Final[str] = "red"
TABLE_HEADERS: Final[tuple[str, ...]] = ("Test Suite", "Test Case", "Time (s)", "Status")
TABLE_DELIMITER: Final[str] = "|"
TABLE_SEPARATOR_CELL: Final[str] = ""
