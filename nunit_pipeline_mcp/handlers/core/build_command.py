"""MCP handler for the build_nunit_command tool (compiles without running)."""

from __future__ import annotations

import json

from mcp.types import TextContent, Tool

from ...services import ExecutionService, ServiceResult
from .run_nunit import OPTIONS_SCHEMA

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="build_nunit_command",
    description=(
        "Build the nunit3-console command line for the given assemblies and "
        "options without running it. Returns the resolved executable path, "
        "the argument list and the quoted command line."
    ),
    inputSchema=OPTIONS_SCHEMA
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Compile the command for 'arguments' and return it as JSON."""
    service = ExecutionService()

    result = service.build_command(arguments)

    if not result.success:
        return _error_response(result)

    return [TextContent(type="text", text=json.dumps(result.data, indent=2))]


# =============================================================================
# Helpers
# =============================================================================

def _error_response(result: ServiceResult) -> list[TextContent]:
    """Create error response from failed ServiceResult."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
