"""
Command line entry point.

    junit-report -file chainsaw-report.xml -output report.md

Writes the markdown report to stdout unless an output file is given.
Exit code is 0 whenever a report was produced (even if tests failed)
and 1 when the report could not be generated at all.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from .constants import DEFAULT_REPORT_FILE
from .core import InputError, write_failure
from .services import create_report_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="junit-report",
        description="Render a JUnit XML test report as a markdown summary",
    )
    parser.add_argument(
        "-file", "--file",
        dest="file",
        default=DEFAULT_REPORT_FILE,
        help=f"Path to the XML report (default: {DEFAULT_REPORT_FILE})",
    )
    parser.add_argument(
        "-output", "--output",
        dest="output",
        default="",
        help="Output file (defaults to stdout)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, generate the report and return the exit code."""
    logging.basicConfig(level=logging.WARNING)
    args = build_parser().parse_args(argv)

    if not args.output:
        return run(args.file, sys.stdout)

    try:
        sink = open(args.output, "w", encoding="utf-8")
    except OSError as e:
        logger.error(InputError("failed to open output file", e))
        return 1

    with sink:
        return run(args.file, sink)


def run(report_path: str, sink: TextIO) -> int:
    """Generate the report for ``report_path`` into ``sink``."""
    result = create_report_service().generate(file_path=report_path)

    if not result.success:
        write_failure(result.error.message, sink)
        return 1

    sink.write(result.data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
