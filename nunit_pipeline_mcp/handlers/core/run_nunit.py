"""
Run NUnit Tool - Execute NUnit 3 test assemblies with nunit3-console.

This tool:
1. Takes the assemblies and console options
2. Resolves nunit3-console (tool_path, NUNIT3_TOOL_PATH, or the install default)
3. Streams the console output into the server log while it runs
4. Reports the exit status and captured output

Uses ExecutionService for business logic.
"""

from __future__ import annotations

from mcp.types import TextContent, Tool

from ...constants import STDOUT_TAIL_LINES
from ...core.runner import ToolRunResult
from ...services import ExecutionService, ServiceResult

# =============================================================================
# Input Schema
# =============================================================================

_VALUE_OPTIONS = {
    "test_names": "Comma-separated names of tests to run (--test)",
    "test_list": "File containing a list of tests to run (--testlist)",
    "where": "Test selection expression, e.g. \"cat == Smoke\" (--where)",
    "config": "Project configuration to load (--config)",
    "process": "Process model: InProcess, Separate or Multiple (--process)",
    "agents": "Maximum number of test agents run at once (--agents)",
    "domain": "AppDomain isolation: None, Single or Multiple (--domain)",
    "framework": "Framework version to run against (--framework)",
    "timeout": "Default test case timeout in milliseconds (--timeout)",
    "seed": "Random seed used to generate test cases (--seed)",
    "workers": "Number of worker threads (--workers)",
    "output_directory": "Directory for output files (--work)",
    "output_path": "File to receive test text output (--output)",
    "error_output_path": "File to receive test error output (--err)",
    "result_spec": "Output spec for saving test results (--result)",
    "explore_spec": "List tests instead of running them, optional output spec (--explore)",
    "labels": "Write test case names to the output: Off, On or All (--labels)",
    "trace": "Internal trace level: Off, Error, Warning, Info, Verbose (--trace)",
}

_BOOLEAN_OPTIONS = {
    "force_32bit": "Run tests in a 32-bit process on a 64-bit OS (--x86)",
    "dispose_runners": "Dispose each test runner after it finishes (--dispose-runners)",
    "stop_on_error": "Stop the run on the first failure (--stoponerror)",
    "debug": "Break into the debugger before running tests (--debug)",
    "no_result": "Do not save any test results (--noresult)",
    "shadow_copy": "Shadow-copy loaded assemblies (--shadowcopy)",
    "team_city": "Emit TeamCity service messages (--teamcity)",
    "no_header": "Suppress the program header (--noheader)",
    "verbose": "Display additional information while running (--verbose)",
}

OPTIONS_SCHEMA = {
    "type": "object",
    "properties": {
        "assemblies": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Test assembly or project paths, passed first in order"
        },
        **{
            name: {"type": ["string", "number"], "description": description}
            for name, description in _VALUE_OPTIONS.items()
        },
        **{
            name: {"type": "boolean", "description": description}
            for name, description in _BOOLEAN_OPTIONS.items()
        },
        "tool_path": {
            "type": "string",
            "description": "Directory containing nunit3-console (default: NUNIT3_TOOL_PATH or the install location)"
        },
        "working_directory": {
            "type": "string",
            "description": "Directory to run in (default: the server's current directory)"
        },
        "execution_timeout": {
            "type": "number",
            "description": "Kill nunit3-console after this many seconds"
        },
        "environment": {
            "type": "object",
            "additionalProperties": {"type": "string"},
            "description": "Extra environment variables for nunit3-console"
        },
    },
    "required": ["assemblies"]
}

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="run_nunit",
    description=(
        "Execute NUnit 3 tests with nunit3-console. Takes test assemblies, "
        "selection filters and console options, runs the console runner, "
        "and returns pass/fail status with the captured output."
    ),
    inputSchema=OPTIONS_SCHEMA
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """
    Handle run_nunit tool call.

    Args:
        arguments: Tool arguments (assemblies plus console options)

    Returns:
        List with single TextContent containing the run report
    """
    service = ExecutionService()

    result = await service.run(arguments)

    if not result.success:
        return _error_response(result)

    return [TextContent(
        type="text",
        text=format_run_result(result.data)
    )]


# =============================================================================
# Response Formatting
# =============================================================================

def format_run_result(run_result: ToolRunResult) -> str:
    """Format a finished nunit3-console run as readable text."""
    lines = [
        "NUNIT EXECUTION RESULTS",
        "=" * 50,
        "",
        "✅ nunit3-console succeeded" if run_result.success else "❌ nunit3-console failed",
        "",
        "Summary:",
        f"  • Exit code: {run_result.exit_code}",
        f"  • Duration:  {run_result.duration:.1f}s",
        f"  • Command:   {run_result.command_line}",
    ]

    if run_result.working_directory:
        lines.append(f"  • Directory: {run_result.working_directory}")

    if run_result.stderr_lines:
        lines.append("")
        lines.append("Errors:")
        lines.extend(f"  {line}" for line in run_result.stderr_lines)

    if run_result.stdout_lines:
        tail = run_result.stdout_lines[-STDOUT_TAIL_LINES:]
        skipped = len(run_result.stdout_lines) - len(tail)
        lines.append("")
        lines.append("Output:" if not skipped else f"Output (last {len(tail)} lines, {skipped} omitted):")
        lines.extend(f"  {line}" for line in tail)

    return "\n".join(lines)


# =============================================================================
# Helpers
# =============================================================================

def _error_response(result: ServiceResult) -> list[TextContent]:
    """Create error response from failed ServiceResult, with any captured output."""
    lines = [f"Error: {result.error.message}"]
    details = result.error.details or {}

    if details.get("stderr"):
        lines.append("")
        lines.append("Errors:")
        lines.extend(f"  {line}" for line in details["stderr"])

    if details.get("stdout"):
        tail = details["stdout"][-STDOUT_TAIL_LINES:]
        skipped = len(details["stdout"]) - len(tail)
        lines.append("")
        lines.append("Output:" if not skipped else f"Output (last {len(tail)} lines, {skipped} omitted):")
        lines.extend(f"  {line}" for line in tail)

    return [TextContent(type="text", text="\n".join(lines))]
