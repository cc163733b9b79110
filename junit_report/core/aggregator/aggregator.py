"""Flatten a TestDocument into report rows and pass/fail totals."""

from __future__ import annotations

from ..parser import TestDocument
from .models import ReportRow, ReportSummary, Status


def aggregate(document: TestDocument) -> ReportSummary:
    """
    Build a ReportSummary from a parsed document.

    Rows follow document order: suites in order, cases within each suite
    in order. Empty suites and empty documents are fine.
    """
    rows = tuple(
        ReportRow(
            suite=suite.name,
            case=case.name,
            time=case.time,
            status=Status.of(case.failed),
        )
        for suite in document.suites
        for case in suite.cases
    )

    return ReportSummary(
        time=document.time,
        timestamp=document.timestamp,
        rows=rows,
        passed=sum(1 for r in rows if r.status is Status.PASSED),
        failed=sum(1 for r in rows if r.status is Status.FAILED),
    )
