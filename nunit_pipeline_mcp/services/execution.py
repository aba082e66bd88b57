"""NUnit execution service.

Turns tool arguments into NUnit3Options, runs nunit3-console, and maps
launch problems onto ServiceResult errors.
"""


from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from ..constants import ENV_EXECUTION_TIMEOUT, ENV_TOOL_PATH
from ..core.runner import NUnit3Options, NUnit3Runner, ProcessRunner, ToolRunResult, parse_timeout
from .base import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class ExecutionService:
    """Build and run nunit3-console commands."""

    def __init__(
        self,
        process_runner: ProcessRunner | None = None,
        environ: Mapping[str, str] | None = None
    ):
        self._process_runner = process_runner
        self._environ = os.environ if environ is None else environ

    def load_options(
        self,
        arguments: Mapping[str, Any] | NUnit3Options
    ) -> ServiceResult[NUnit3Options]:
        """
        Coerce arguments into options and fill gaps from the environment.

        An NUnit3Options instance passed in is never modified; environment
        defaults are applied to a copy.
        """

        if isinstance(arguments, NUnit3Options):
            options = arguments
        else:
            try:
                options = NUnit3Options.from_dict(arguments or {})
            except ValueError as e:
                return ServiceResult.fail(ErrorCode.VALIDATION_ERROR, str(e))

        defaults: dict[str, Any] = {}

        if not (options.tool_path and options.tool_path.strip()):
            env_tool_path = self._environ.get(ENV_TOOL_PATH) or None
            if env_tool_path != options.tool_path:
                defaults["tool_path"] = env_tool_path

        if options.execution_timeout is None and self._environ.get(ENV_EXECUTION_TIMEOUT):
            raw = self._environ[ENV_EXECUTION_TIMEOUT]
            try:
                defaults["execution_timeout"] = parse_timeout(raw)
            except ValueError:
                return ServiceResult.fail(
                    ErrorCode.VALIDATION_ERROR,
                    f"{ENV_EXECUTION_TIMEOUT} must be a positive number of seconds, got {raw!r}"
                )

        if defaults:
            options = replace(options, **defaults)

        return ServiceResult.ok(options)

    def build_command(
        self,
        arguments: Mapping[str, Any] | NUnit3Options
    ) -> ServiceResult[dict]:
        """Resolve and compile the command without launching anything."""

        loaded = self.load_options(arguments)
        if not loaded.success:
            return ServiceResult.fail(loaded.error.code, loaded.error.message)

        runner = NUnit3Runner(loaded.data)
        return ServiceResult.ok({
            "executable": runner.resolve_tool(),
            "arguments": runner.build_arguments(),
            "command_line": runner.command_line(),
            "working_directory": runner.resolve_working_directory(),
        })

    async def run(
        self,
        arguments: Mapping[str, Any] | NUnit3Options
    ) -> ServiceResult[ToolRunResult]:
        """
        Run nunit3-console.

        A process that ran to completion is a successful call whatever its
        exit code; check ``data.success`` for the test outcome.
        """

        loaded = self.load_options(arguments)
        if not loaded.success:
            return ServiceResult.fail(loaded.error.code, loaded.error.message)

        runner = NUnit3Runner(loaded.data, self._process_runner)

        try:
            run_result = await runner.run()
        except Exception as e:
            logger.exception("nunit3-console run failed")
            return ServiceResult.fail(
                ErrorCode.EXECUTION_ERROR,
                f"Test execution failed: {e}"
            )

        if run_result.status == "launch_failed":
            code = ErrorCode.TOOL_NOT_FOUND if run_result.tool_missing else ErrorCode.LAUNCH_ERROR
            return ServiceResult.fail(
                code,
                run_result.error_message or "Could not launch nunit3-console",
                details={
                    "executable": run_result.executable,
                    "working_directory": run_result.working_directory,
                }
            )

        if run_result.status == "timed_out":
            return ServiceResult.fail(
                ErrorCode.TIMEOUT_ERROR,
                run_result.error_message or "nunit3-console timed out",
                details={
                    "command_line": run_result.command_line,
                    "stdout": run_result.stdout_lines,
                    "stderr": run_result.stderr_lines,
                }
            )

        return ServiceResult.ok(run_result)

    async def run_and_summarize(
        self,
        arguments: Mapping[str, Any] | NUnit3Options
    ) -> ServiceResult[dict]:
        """Run nunit3-console and return a JSON-serializable summary."""

        result = await self.run(arguments)

        if not result.success:
            return ServiceResult.fail(
                result.error.code,
                result.error.message,
                result.error.details
            )

        return ServiceResult.ok(result.data.to_dict())
