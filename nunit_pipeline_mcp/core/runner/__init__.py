"""NUnit runner module - builds the nunit3-console command line and runs it."""

from .command import BOOLEAN_SWITCHES, VALUE_SWITCHES, compile_arguments, format_command_line
from .executor import NUnit3Runner, run_nunit
from .locator import default_install_root, default_tool_directory, make_tool_name, resolve_tool_path
from .models import NUnit3Options, RunStatus, ToolRunResult, parse_timeout
from .process import ProcessRunner, log_output, spawn_process

__all__ = [
    # Models
    "NUnit3Options",
    "ToolRunResult",
    "RunStatus",
    "parse_timeout",
    # Command compiler
    "compile_arguments",
    "format_command_line",
    "VALUE_SWITCHES",
    "BOOLEAN_SWITCHES",
    # Tool locator
    "resolve_tool_path",
    "make_tool_name",
    "default_install_root",
    "default_tool_directory",
    # Process runner
    "ProcessRunner",
    "spawn_process",
    "log_output",
    # Orchestration
    "NUnit3Runner",
    "run_nunit",
]
