"""Decode a JUnit XML report into a TestDocument."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from ...constants import CASE_ELEMENT, FAILURE_ELEMENT, ROOT_ELEMENT, SUITE_ELEMENT
from ..errors import InputError, ParseError, ReadError
from .models import TestCase, TestDocument, TestSuite


def parse_report(data: bytes | str) -> TestDocument:
    """
    Parse an in-memory XML report.

    The root must be a ``<testsuites>`` element. Suites, cases and failure
    markers are matched as direct children; anything else is ignored.

    Args:
        data: Raw XML document

    Returns:
        Parsed TestDocument

    Raises:
        ParseError: If the content is not well-formed or has the wrong root
    """
    try:
        root = ET.fromstring(data)
    except (ET.ParseError, LookupError, ValueError) as e:
        # LookupError: unknown encoding; ValueError: unsupported multi-byte encoding
        raise ParseError("failed to unmarshal XML", e) from e

    if _local_name(root) != ROOT_ELEMENT:
        cause = ValueError(
            f"expected element type <{ROOT_ELEMENT}> but have <{_local_name(root)}>"
        )
        raise ParseError("failed to unmarshal XML", cause) from cause

    return TestDocument(
        time=root.get("time", ""),
        timestamp=root.get("timestamp", ""),
        suites=tuple(_parse_suite(el) for el in _children(root, SUITE_ELEMENT)),
    )


def read_report(stream: BinaryIO) -> TestDocument:
    """
    Read a whole byte stream and parse it.

    Raises:
        ReadError: If the stream cannot be fully read
        ParseError: If the content is not a valid report
    """
    try:
        data = stream.read()
    except OSError as e:
        raise ReadError("failed to read report file", e) from e

    return parse_report(data)


def load_report(path: str | os.PathLike[str]) -> TestDocument:
    """Open a report file, parse it and close it again on every path."""
    try:
        stream = open(Path(path), "rb")
    except OSError as e:
        raise InputError("failed to open report file", e) from e

    with stream:
        return read_report(stream)


def _local_name(element: ET.Element) -> str:
    """Tag without its ``{namespace}`` prefix."""
    return element.tag.rpartition("}")[2]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child) == name]


def _parse_suite(element: ET.Element) -> TestSuite:
    return TestSuite(
        name=element.get("name", ""),
        cases=tuple(_parse_case(el) for el in _children(element, CASE_ELEMENT)),
    )


def _parse_case(element: ET.Element) -> TestCase:
    return TestCase(
        name=element.get("name", ""),
        time=element.get("time", ""),
        failed=bool(_children(element, FAILURE_ELEMENT)),
    )
