"""MCP handler for the junit_to_markdown tool (delegates to ReportService)."""

from __future__ import annotations

import json

from mcp.types import TextContent, Tool

from ...core import render_failure, render_report
from ...services import ServiceResult, create_report_service

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="junit_to_markdown",
    description=(
        "Convert a JUnit XML test report into a markdown summary with a "
        "pass/fail badge and a table of test cases, ready to post as a "
        "pull request comment. Use format 'json' for the raw totals and rows."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Path to the JUnit XML report"
            },
            "xml": {
                "type": "string",
                "description": "JUnit XML content (alternative to file_path)"
            },
            "format": {
                "type": "string",
                "enum": ["markdown", "json"],
                "description": "Output format (default: markdown)"
            }
        }
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Render the report from 'file_path' or 'xml' as markdown or JSON."""
    service = create_report_service()

    result = service.summarize(
        file_path=arguments.get("file_path"),
        xml=arguments.get("xml")
    )

    if arguments.get("format") == "json":
        return _json_response(result)

    if not result.success:
        return [TextContent(type="text", text=render_failure(result.error.message))]

    return [TextContent(type="text", text=render_report(result.data))]


# =============================================================================
# Helpers
# =============================================================================

def _json_response(result: ServiceResult) -> list[TextContent]:
    """Summary as JSON, or the structured error on failure."""
    if not result.success:
        response = {"error": result.error.to_dict()}
    else:
        response = result.data.to_dict()

    return [TextContent(type="text", text=json.dumps(response, indent=2))]
