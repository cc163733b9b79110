"""Render a ReportSummary (or a fatal error) as markdown."""

from __future__ import annotations

from typing import TextIO

from ...constants import (
    BADGE_COLOR_FAILED,
    BADGE_COLOR_OK,
    BADGE_URL,
    FAILED_LABEL,
    FAILURE_TITLE,
    PASSED_LABEL,
    REPORT_TITLE,
    TABLE_DELIMITER,
    TABLE_HEADERS,
    TABLE_SEPARATOR_CELL,
)
from ..aggregator import ReportRow, ReportSummary


def render_report(summary: ReportSummary) -> str:
    """
    Format a summary as a markdown document.

    Layout:
        ## E2E report <status>
        Started at `<timestamp>` took `<time>`

        ![](<badge>)

        header|row
        |||  (one empty cell per column)
        one row per test case, failures first

    Rendering is deterministic: the summary is never modified and rows
    with the same status keep their aggregation order.
    """
    lines = [
        f"## {REPORT_TITLE} {PASSED_LABEL if summary.success else FAILED_LABEL}",
        f"Started at `{summary.timestamp}` took `{summary.time}`",
        "",
        f"![]({_badge_url(summary)})",
        "",
        _table_line(TABLE_HEADERS),
        _table_line([TABLE_SEPARATOR_CELL] * len(TABLE_HEADERS)),
    ]

    for row in sorted(summary.rows, key=lambda r: r.status.rank):
        lines.append(_table_line(_row_cells(row)))

    return "\n".join(lines) + "\n"


def render_failure(error: object) -> str:
    """Format a fatal error as a heading plus a fenced log block."""
    return f"## {FAILURE_TITLE}\n\n```log\n{error}\n```\n"


def write_report(summary: ReportSummary, sink: TextIO) -> None:
    """Write the rendered report to ``sink``; write errors propagate."""
    sink.write(render_report(summary))


def write_failure(error: object, sink: TextIO) -> None:
    sink.write(render_failure(error))


def _badge_url(summary: ReportSummary) -> str:
    return BADGE_URL.format(
        passed=summary.passed,
        failed=summary.failed,
        color=BADGE_COLOR_OK if summary.success else BADGE_COLOR_FAILED,
    )


def _row_cells(row: ReportRow) -> list[str]:
    return [row.suite, row.case, f"`{row.time}`", row.status.label]


def _table_line(cells) -> str:
    return TABLE_DELIMITER.join(cells)
