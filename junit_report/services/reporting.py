"""Report service.

Runs the whole pipeline (load, aggregate, render) and returns the
result in a ServiceResult.
"""

from __future__ import annotations

import logging

from ..core import ReportSummary, aggregate, render_report
from .base import ServiceResult
from .report_loader import ReportLoader

logger = logging.getLogger(__name__)


class ReportService:
    """Turn a JUnit XML report into a ReportSummary or markdown text."""

    def __init__(self, loader: ReportLoader | None = None):
        self._loader = loader or ReportLoader()

    def summarize(
        self,
        file_path: str | None = None,
        xml: str | bytes | None = None
    ) -> ServiceResult[ReportSummary]:
        """Load the report and aggregate it."""

        loaded = self._loader.load(file_path=file_path, xml=xml)
        if not loaded.success:
            logger.warning(f"Report generation failed: {loaded.error.message}")
            return loaded

        summary = aggregate(loaded.data)
        logger.info(
            f"Aggregated {summary.total} test cases: "
            f"{summary.passed} passed, {summary.failed} failed"
        )
        return ServiceResult.ok(summary)

    def generate(
        self,
        file_path: str | None = None,
        xml: str | bytes | None = None
    ) -> ServiceResult[str]:
        """Load, aggregate and render the report as markdown."""

        return self.summarize(file_path=file_path, xml=xml).map(render_report)
