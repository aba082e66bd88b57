"""Compile NUnit3Options into an nunit3-console argument list."""

from __future__ import annotations

import shlex
import subprocess
import sys
from collections.abc import Sequence
from typing import Final

from ...constants import SWITCH_PREFIX
from .models import NUnit3Options

# (field, switch) pairs in emission order
VALUE_SWITCHES: Final[tuple[tuple[str, str], ...]] = (
    ("test_names", "test"),
    ("test_list", "testlist"),
    ("where", "where"),
    ("config", "config"),
    ("process", "process"),
    ("agents", "agents"),
    ("domain", "domain"),
    ("framework", "framework"),
    ("timeout", "timeout"),
    ("seed", "seed"),
    ("workers", "workers"),
    ("output_directory", "work"),
    ("output_path", "output"),
    ("error_output_path", "err"),
    ("result_spec", "result"),
    ("explore_spec", "explore"),
    ("labels", "labels"),
    ("trace", "trace"),
)

BOOLEAN_SWITCHES: Final[tuple[tuple[str, str], ...]] = (
    ("force_32bit", "x86"),
    ("dispose_runners", "dispose-runners"),
    ("stop_on_error", "stoponerror"),
    ("debug", "debug"),
    ("no_result", "noresult"),
    ("shadow_copy", "shadowcopy"),
    ("team_city", "teamcity"),
    ("no_header", "noheader"),
    ("verbose", "verbose"),
)


def compile_arguments(options: NUnit3Options) -> list[str]:
    """
    Map options to the ordered argument list for nunit3-console.

    Assemblies come first, then value switches, then boolean switches,
    each group in table order. Every list item is one argv entry, so
    values are never split or re-quoted by a shell.
    """
    arguments = [
        str(assembly)
        for assembly in options.assemblies or ()
        if assembly is not None and str(assembly).strip()
    ]

    for name, switch in VALUE_SWITCHES:
        value = getattr(options, name)
        if value is None:
            continue
        text = str(value)
        if not text.strip():
            continue
        arguments.extend([SWITCH_PREFIX + switch, text])

    for name, switch in BOOLEAN_SWITCHES:
        if getattr(options, name) is True:
            arguments.append(SWITCH_PREFIX + switch)

    return arguments


def format_command_line(
    executable: str,
    arguments: Sequence[str],
    platform: str | None = None
) -> str:
    """Render a command for logs, quoted the way the target platform parses it."""
    platform = platform or sys.platform
    tokens = [executable, *arguments]

    if platform == "win32":
        return subprocess.list2cmdline(tokens)
    return shlex.join(tokens)
