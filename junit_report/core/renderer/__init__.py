"""Renderer module - formats aggregated results as markdown."""

from .markdown import render_failure, render_report, write_failure, write_report

__all__ = [
    "render_report",
    "render_failure",
    "write_report",
    "write_failure",
]
