"""
JUnit Report

Turns a JUnit-style XML test report into a markdown summary
for CI status comments. Parse, Aggregate, Render.
"""

__version__ = "0.1.0"

# Public API
from .core import (
    ReportSummary,
    TestDocument,
    aggregate,
    load_report,
    parse_report,
    render_report,
)

__all__ = [
    "__version__",
    # Parser
    "parse_report",
    "load_report",
    "TestDocument",
    # Aggregator
    "aggregate",
    "ReportSummary",
    # Renderer
    "render_report",
]
