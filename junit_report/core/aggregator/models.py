"""Data models for the aggregated report."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ...constants import FAILED_LABEL, PASSED_LABEL


class Status(Enum):
    """
    Outcome of a single test case.

    Each member carries its display label and a sort rank. Rows are
    grouped by rank when rendered, so failures come first.
    """
    FAILED = (FAILED_LABEL, 0)
    PASSED = (PASSED_LABEL, 1)

    def __init__(self, label: str, rank: int):
        self.label = label
        self.rank = rank

    @classmethod
    def of(cls, failed: bool) -> Status:
        return cls.FAILED if failed else cls.PASSED


@dataclass(frozen=True)
class ReportRow:
    """One table row, derived from one test case."""
    suite: str
    case: str
    time: str
    status: Status


@dataclass(frozen=True)
class ReportSummary:
    """Aggregated result for a whole report document."""
    time: str
    timestamp: str
    rows: tuple[ReportRow, ...] = field(default_factory=tuple)
    passed: int = 0
    failed: int = 0

    @property
    def success(self) -> bool:
        """True iff no row failed (an empty report counts as success)."""
        return self.failed == 0

    @property
    def total(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "time": self.time,
            "timestamp": self.timestamp,
            "summary": {
                "total": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "success": self.success,
            },
            "rows": [
                {
                    "suite": r.suite,
                    "case": r.case,
                    "time": r.time,
                    "status": r.status.name.lower(),
                }
                for r in self.rows
            ],
        }
