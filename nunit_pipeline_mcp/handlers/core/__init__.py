"""Registry for core MCP tool definitions and handlers."""

# Tool definitions and handlers
from .build_command import (
    TOOL_DEFINITION as BUILD_NUNIT_COMMAND_TOOL,
    handle as handle_build_nunit_command,
)

from .run_nunit import (
    TOOL_DEFINITION as RUN_NUNIT_TOOL,
    handle as handle_run_nunit,
)


# All Core tool definitions
TOOLS = [
    RUN_NUNIT_TOOL,
    BUILD_NUNIT_COMMAND_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "run_nunit": handle_run_nunit,
    "build_nunit_command": handle_build_nunit_command,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "RUN_NUNIT_TOOL",
    "BUILD_NUNIT_COMMAND_TOOL",
    # Handlers
    "HANDLERS",
    "handle_run_nunit",
    "handle_build_nunit_command",
]
