"""Data models for a parsed JUnit report."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TestCase:
    """A single executed test.

    ``failed`` reflects presence of a ``<failure>`` element; name and time
    are plain attributes and default to an empty string when missing.
    """
    __test__ = False  # not a pytest test class

    name: str = ""
    time: str = ""
    failed: bool = False


@dataclass(frozen=True)
class TestSuite:
    """A named group of test cases."""
    __test__ = False

    name: str = ""
    cases: tuple[TestCase, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TestDocument:
    """Root of a report: overall timing plus the suites in document order."""
    __test__ = False

    time: str = ""
    timestamp: str = ""
    suites: tuple[TestSuite, ...] = field(default_factory=tuple)

    @property
    def total_cases(self) -> int:
        return sum(len(suite.cases) for suite in self.suites)
