"""Shared fixtures: a stand-in nunit3-console script."""

import json
import os
import stat
import sys
from pathlib import Path

import pytest

from nunit_pipeline_mcp.core.runner import make_tool_name

FAKE_CONSOLE = '''#!{python}
import json
import os
import sys

print("NUnit Console Runner (fake)", flush=True)
print("ARGS " + json.dumps(sys.argv[1:]), flush=True)
print("CWD " + os.getcwd(), flush=True)
print("ENV " + os.environ.get("FAKE_NUNIT_MARKER", ""), flush=True)
exit_code = int(os.environ.get("FAKE_NUNIT_EXIT", "0"))
if exit_code:
    sys.stderr.write("Test Run Failed\\n")
    sys.stderr.flush()
sys.exit(exit_code)
'''


@pytest.fixture
def fake_nunit(tmp_path: Path) -> Path:
    """Directory holding an executable fake nunit3-console."""
    if sys.platform == "win32":
        pytest.skip("fake console script needs a POSIX shebang")
    if " " in sys.executable:
        pytest.skip("interpreter path is not usable in a shebang")

    tool_dir = tmp_path / "nunit-bin"
    tool_dir.mkdir()
    script = tool_dir / make_tool_name()
    script.write_text(FAKE_CONSOLE.format(python=sys.executable), encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool_dir


def parse_fake_args(stdout_lines: list[str]) -> list[str]:
    """Pull the argument list echoed by the fake console."""
    for line in stdout_lines:
        if line.startswith("ARGS "):
            return json.loads(line[len("ARGS "):])
    raise AssertionError(f"no ARGS line in {stdout_lines!r}")


def parse_fake_cwd(stdout_lines: list[str]) -> str:
    for line in stdout_lines:
        if line.startswith("CWD "):
            return os.path.realpath(line[len("CWD "):])
    raise AssertionError(f"no CWD line in {stdout_lines!r}")
