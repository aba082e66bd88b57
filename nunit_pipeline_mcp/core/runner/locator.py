"""Work out where nunit3-console lives, without touching the filesystem.

Whether the computed path exists is only discovered when the process is
launched.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import sys
from collections.abc import Mapping

from ...constants import (
    DEFAULT_NUNIT_DIRECTORY,
    POSIX_PROGRAM_ROOT,
    TOOL_NAME,
    WINDOWS_PROGRAM_FILES,
)


def _is_windows(platform: str | None) -> bool:
    return (platform or sys.platform) == "win32"


def _pathmod(platform: str | None):
    return ntpath if _is_windows(platform) else posixpath


def make_tool_name(name: str = TOOL_NAME, platform: str | None = None) -> str:
    """Append the executable suffix the platform requires."""
    if _is_windows(platform) and not name.lower().endswith(".exe"):
        return f"{name}.exe"
    return name


def default_install_root(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None
) -> str:
    """Return the platform's installed-programs root."""
    if _is_windows(platform):
        environ = os.environ if environ is None else environ
        return environ.get("ProgramFiles") or WINDOWS_PROGRAM_FILES
    return POSIX_PROGRAM_ROOT


def default_tool_directory(
    install_root: str | None = None,
    platform: str | None = None
) -> str:
    """Default directory of the console runner under the install root."""
    root = install_root or default_install_root(platform)
    return _pathmod(platform).join(root, *DEFAULT_NUNIT_DIRECTORY)


def resolve_tool_path(
    tool_path: str | None = None,
    *,
    install_root: str | None = None,
    platform: str | None = None
) -> str:
    """
    Compute the full path of the nunit3-console executable.

    Args:
        tool_path: Directory override; used verbatim (trimmed) when non-blank
        install_root: Replaces the platform's installed-programs root
        platform: A sys.platform value; defaults to the running platform

    Returns:
        Candidate path to the executable. It may not exist.
    """
    directory = tool_path.strip() if tool_path else ""
    if not directory:
        directory = default_tool_directory(install_root, platform)

    return _pathmod(platform).join(directory, make_tool_name(platform=platform))
