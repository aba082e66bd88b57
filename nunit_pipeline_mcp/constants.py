"""
Shared constants used across the project.
"""

from typing import Final

# Executable name without the platform suffix
TOOL_NAME: Final[str] = "nunit3-console"

# Install-relative directory of the console runner, joined under the
# platform's installed-programs root
DEFAULT_NUNIT_DIRECTORY: Final[tuple[str, ...]] = ("NUnit.org", "bin")

# Installed-programs roots
WINDOWS_PROGRAM_FILES: Final[str] = r"C:\Program Files"
POSIX_PROGRAM_ROOT: Final[str] = "/opt"

SWITCH_PREFIX: Final[str] = "--"

# Environment overrides
ENV_TOOL_PATH: Final[str] = "NUNIT3_TOOL_PATH"
ENV_EXECUTION_TIMEOUT: Final[str] = "NUNIT3_EXECUTION_TIMEOUT"
ENV_LOG_LEVEL: Final[str] = "NUNIT_PIPELINE_LOG_LEVEL"

# Process handling
TERMINATE_GRACE_SECONDS: Final[float] = 5.0
STREAM_LIMIT_BYTES: Final[int] = 1024 * 1024  # 1MB per line
OUTPUT_ENCODING: Final[str] = "utf-8"

# Response formatting
STDOUT_TAIL_LINES: Final[int] = 40
