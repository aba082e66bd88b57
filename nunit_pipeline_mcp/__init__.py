"""
NUnit Pipeline MCP Server

Run NUnit 3 test assemblies through nunit3-console from MCP tools.
"""

__version__ = "0.1.0"

from .core import NUnit3Options, ToolRunResult, compile_arguments, resolve_tool_path, run_nunit

__all__ = [
    "__version__",
    "NUnit3Options",
    "ToolRunResult",
    "compile_arguments",
    "resolve_tool_path",
    "run_nunit",
]
