"""Core pipeline: parse -> aggregate -> render."""

from .aggregator import ReportRow, ReportSummary, Status, aggregate
from .errors import FormatError, InputError, ParseError, ReadError, ReportError
from .parser import TestCase, TestDocument, TestSuite, load_report, parse_report, read_report
from .renderer import render_failure, render_report, write_failure, write_report

__all__ = [
    # Parser
    "parse_report",
    "read_report",
    "load_report",
    "TestDocument",
    "TestSuite",
    "TestCase",
    # Aggregator
    "aggregate",
    "ReportRow",
    "ReportSummary",
    "Status",
    # Renderer
    "render_report",
    "render_failure",
    "write_report",
    "write_failure",
    # Errors
    "ReportError",
    "InputError",
    "FormatError",
    "ReadError",
    "ParseError",
]
