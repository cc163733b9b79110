"""Parser module - decodes JUnit XML into a typed document tree."""

from .models import TestCase, TestDocument, TestSuite
from .parser import load_report, parse_report, read_report

__all__ = [
    "parse_report",
    "read_report",
    "load_report",
    "TestDocument",
    "TestSuite",
    "TestCase",
]
