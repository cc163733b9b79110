"""Registry for core MCP tool definitions and handlers."""

from .junit_to_markdown import (
    TOOL_DEFINITION as JUNIT_TO_MARKDOWN_TOOL,
    handle as handle_junit_to_markdown,
)

# All Core tool definitions
TOOLS = [
    JUNIT_TO_MARKDOWN_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "junit_to_markdown": handle_junit_to_markdown,
}


__all__ = [
    "TOOLS",
    "JUNIT_TO_MARKDOWN_TOOL",
    "HANDLERS",
    "handle_junit_to_markdown",
]
