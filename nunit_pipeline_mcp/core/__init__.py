"""Core domain logic for the NUnit pipeline."""


from .runner import (
    NUnit3Options,
    NUnit3Runner,
    ProcessRunner,
    ToolRunResult,
    compile_arguments,
    resolve_tool_path,
    run_nunit,
)

__all__ = [
    "NUnit3Options",
    "NUnit3Runner",
    "ProcessRunner",
    "ToolRunResult",
    "compile_arguments",
    "resolve_tool_path",
    "run_nunit",
]
