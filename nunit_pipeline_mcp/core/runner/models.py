"""Data models for the NUnit console runner."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Literal

RunStatus = Literal["succeeded", "failed", "launch_failed", "timed_out"]

OptionValue = str | int | float | None


@dataclass
class NUnit3Options:
    """
    Everything needed for one nunit3-console run.

    Fields are freely readable and writable. Nothing here is cross-checked:
    bad combinations are left for nunit3-console to reject.
    """
    assemblies: list[str] = field(default_factory=list)

    # Value options, emitted as "--switch value" when non-blank
    test_names: OptionValue = None
    test_list: OptionValue = None
    where: OptionValue = None
    config: OptionValue = None
    process: OptionValue = None
    agents: OptionValue = None
    domain: OptionValue = None
    framework: OptionValue = None
    timeout: OptionValue = None
    seed: OptionValue = None
    workers: OptionValue = None
    output_directory: OptionValue = None
    output_path: OptionValue = None
    error_output_path: OptionValue = None
    result_spec: OptionValue = None
    explore_spec: OptionValue = None
    labels: OptionValue = None
    trace: OptionValue = None

    # Boolean options, emitted as a bare "--switch" when True
    force_32bit: bool = False
    dispose_runners: bool = False
    stop_on_error: bool = False
    debug: bool = False
    no_result: bool = False
    shadow_copy: bool = False
    team_city: bool = False
    no_header: bool = False
    verbose: bool = False

    # Launch settings (not part of the command line)
    tool_path: str | None = None
    working_directory: str | None = None
    execution_timeout: float | None = None
    environment: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NUnit3Options:
        """
        Build options from JSON-like input (e.g. MCP tool arguments).

        Only types are coerced; unknown keys are ignored and None values
        leave the default in place.

        Raises:
            ValueError: If a value has the wrong type.
        """
        options = cls()

        for name in _FIELD_NAMES:
            value = data.get(name)
            if value is None:
                continue

            if name == "assemblies":
                value = _coerce_assemblies(value)
            elif name == "environment":
                value = _coerce_environment(value)
            elif name == "execution_timeout":
                value = parse_timeout(value)
            elif name in BOOLEAN_FIELDS:
                if not isinstance(value, bool):
                    raise ValueError(f"'{name}' must be a boolean, got {type(value).__name__}")
            elif name in ("tool_path", "working_directory"):
                if not isinstance(value, str):
                    raise ValueError(f"'{name}' must be a string")
            elif isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise ValueError(f"'{name}' must be a string or number")

            setattr(options, name, value)

        return options


_FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(NUnit3Options))

BOOLEAN_FIELDS: frozenset[str] = frozenset(
    f.name for f in fields(NUnit3Options) if f.default is False
)


def _coerce_assemblies(value: Any) -> list[str]:
    if isinstance(value, (str, os.PathLike)):
        return [os.fspath(value)]
    if isinstance(value, (list, tuple)):
        assemblies = []
        for item in value:
            if not isinstance(item, (str, os.PathLike)):
                raise ValueError("'assemblies' must contain only paths")
            assemblies.append(os.fspath(item))
        return assemblies
    raise ValueError("'assemblies' must be a path or a list of paths")


def _coerce_environment(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ValueError("'environment' must be an object of name/value pairs")
    return {str(k): str(v) for k, v in value.items()}


def parse_timeout(value: Any) -> float:
    """Parse a process timeout in seconds; must be finite and positive."""
    if isinstance(value, bool):
        raise ValueError("'execution_timeout' must be a number of seconds")
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ValueError("'execution_timeout' must be a number of seconds") from None
    if not math.isfinite(seconds) or seconds <= 0:
        raise ValueError("'execution_timeout' must be a positive, finite number of seconds")
    return seconds


@dataclass
class ToolRunResult:
    """Outcome of one external tool invocation."""
    executable: str
    arguments: list[str]
    status: RunStatus
    exit_code: int | None = None
    working_directory: str | None = None
    stdout_lines: list[str] = field(default_factory=list)
    stderr_lines: list[str] = field(default_factory=list)
    duration: float = 0.0
    error_message: str | None = None
    tool_missing: bool = False

    @property
    def success(self) -> bool:
        return self.status == "succeeded"

    @property
    def failed(self) -> bool:
        return not self.success

    @property
    def command_line(self) -> str:
        from .command import format_command_line
        return format_command_line(self.executable, self.arguments)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "status": self.status,
            "exit_code": self.exit_code,
            "command_line": self.command_line,
            "working_directory": self.working_directory,
            "duration": round(self.duration, 3),
            "stdout": self.stdout_lines,
            "stderr": self.stderr_lines,
            "error_message": self.error_message,
        }
