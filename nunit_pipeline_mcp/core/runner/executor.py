"""Run nunit3-console for a set of NUnit3Options and return the outcome."""

from __future__ import annotations

import logging

from .command import compile_arguments, format_command_line
from .locator import resolve_tool_path
from .models import NUnit3Options, ToolRunResult
from .process import ProcessRunner

logger = logging.getLogger(__name__)


class NUnit3Runner:
    """Resolve the console runner, compile its arguments, and launch it once."""

    def __init__(
        self,
        options: NUnit3Options,
        process_runner: ProcessRunner | None = None
    ):
        self.options = options
        self.process_runner = process_runner or ProcessRunner()

    def resolve_tool(self) -> str:
        """Full path of nunit3-console; existence is checked at launch."""
        return resolve_tool_path(self.options.tool_path)

    def build_arguments(self) -> list[str]:
        return compile_arguments(self.options)

    def resolve_working_directory(self) -> str | None:
        """Configured directory, or None to run in the current one."""
        directory = self.options.working_directory
        if directory and directory.strip():
            return directory
        return None

    def command_line(self) -> str:
        return format_command_line(self.resolve_tool(), self.build_arguments())

    async def run(self) -> ToolRunResult:
        """Launch nunit3-console and wait for it to exit."""
        executable = self.resolve_tool()
        arguments = self.build_arguments()
        working_directory = self.resolve_working_directory()

        logger.debug("Command line: %s", format_command_line(executable, arguments))
        if not self.options.assemblies:
            logger.warning("No assemblies given; leaving it to nunit3-console to report")

        result = await self.process_runner.execute(
            executable,
            arguments,
            working_directory=working_directory,
            timeout=self.options.execution_timeout,
            env=self.options.environment or None,
        )

        if result.success:
            logger.info("nunit3-console finished in %.1fs", result.duration)
        return result


async def run_nunit(options: NUnit3Options) -> ToolRunResult:
    """Convenience wrapper that runs tests via NUnit3Runner."""
    runner = NUnit3Runner(options)
    return await runner.run()
