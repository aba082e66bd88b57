"""Launch an external tool, stream its output, and always clean it up."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from collections.abc import AsyncIterator, Callable, Mapping, Sequence
from contextlib import asynccontextmanager

from ...constants import OUTPUT_ENCODING, STREAM_LIMIT_BYTES, TERMINATE_GRACE_SECONDS
from .models import ToolRunResult

logger = logging.getLogger(__name__)

# Called with ("stdout" | "stderr", line) for every line as it arrives
OutputCallback = Callable[[str, str], None]


def log_output(stream: str, line: str) -> None:
    """Default output sink: stdout at INFO, stderr at WARNING."""
    if stream == "stderr":
        logger.warning(line)
    else:
        logger.info(line)


@asynccontextmanager
async def spawn_process(
    executable: str,
    arguments: Sequence[str],
    working_directory: str | None = None,
    env: Mapping[str, str] | None = None
) -> AsyncIterator[asyncio.subprocess.Process]:
    """
    Start a process with piped output and terminate it on the way out.

    Whatever ends the block (normal exit, an exception, a timeout or task
    cancellation), a process that is still running is terminated and
    reaped before control leaves.

    Raises:
        OSError: If the process cannot be started (FileNotFoundError when
            the executable or working directory is missing).
    """
    process = await asyncio.create_subprocess_exec(
        executable,
        *arguments,
        cwd=working_directory,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env=dict(env) if env is not None else None,
        limit=STREAM_LIMIT_BYTES,
    )
    logger.debug("Started pid %s: %s", process.pid, executable)

    try:
        yield process
    finally:
        if process.returncode is None:
            await _terminate(process)


async def _terminate(process: asyncio.subprocess.Process) -> None:
    """SIGTERM, then SIGKILL after the grace period."""
    logger.warning("Terminating pid %s", process.pid)
    try:
        process.terminate()
    except ProcessLookupError:
        return

    try:
        await asyncio.wait_for(process.wait(), timeout=TERMINATE_GRACE_SECONDS)
    except asyncio.TimeoutError:
        logger.warning("pid %s ignored SIGTERM, killing", process.pid)
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()


class ProcessRunner:
    """Run one external command to completion and collect its output."""

    def __init__(self, on_output: OutputCallback | None = None):
        self.on_output = on_output or log_output

    async def execute(
        self,
        executable: str,
        arguments: Sequence[str],
        working_directory: str | None = None,
        timeout: float | None = None,
        env: Mapping[str, str] | None = None
    ) -> ToolRunResult:
        """
        Run the command and wait for it to exit.

        Exit code 0 means success, anything else is a failed run. Launch
        problems and timeouts are reported in the result, not raised.
        Cancelling the awaiting task kills the process and re-raises.
        """
        result = ToolRunResult(
            executable=executable,
            arguments=list(arguments),
            status="failed",
            working_directory=working_directory,
        )
        merged_env = {**os.environ, **env} if env else None
        start = time.monotonic()

        try:
            async with spawn_process(
                executable, result.arguments, working_directory, merged_env
            ) as process:
                try:
                    await asyncio.wait_for(
                        self._communicate(process, result),
                        timeout=timeout
                    )
                except asyncio.TimeoutError:
                    result.status = "timed_out"
                    result.error_message = f"Process did not exit within {timeout}s and was killed"
                    logger.error("%s timed out after %ss", executable, timeout)
                    return result

        except FileNotFoundError as e:
            result.status = "launch_failed"
            if working_directory and e.filename == working_directory:
                result.error_message = f"Working directory not found: {working_directory}"
            else:
                result.tool_missing = True
                result.error_message = f"Tool not found: {executable}"
            logger.error(result.error_message)
            return result

        except OSError as e:
            result.status = "launch_failed"
            result.error_message = f"Cannot launch {executable}: {e}"
            logger.error(result.error_message)
            return result

        finally:
            result.duration = time.monotonic() - start

        if result.exit_code == 0:
            result.status = "succeeded"
        else:
            result.status = "failed"
            logger.error("%s exited with code %s", executable, result.exit_code)

        return result

    async def _communicate(
        self,
        process: asyncio.subprocess.Process,
        result: ToolRunResult
    ) -> None:
        """Pump both pipes until EOF, then collect the exit code."""
        pumps = [
            asyncio.ensure_future(self._pump(process.stdout, "stdout", result.stdout_lines)),
            asyncio.ensure_future(self._pump(process.stderr, "stderr", result.stderr_lines)),
        ]
        try:
            await asyncio.gather(*pumps)
        finally:
            # A failed pump must not leave its sibling reading a dead pipe
            for pump in pumps:
                pump.cancel()
            await asyncio.gather(*pumps, return_exceptions=True)
        result.exit_code = await process.wait()

    async def _pump(
        self,
        reader: asyncio.StreamReader,
        stream: str,
        lines: list[str]
    ) -> None:
        while True:
            raw = await _read_line(reader)
            if not raw:
                break
            line = raw.decode(OUTPUT_ENCODING, errors="replace").rstrip("\r\n")
            lines.append(line)
            self.on_output(stream, line)


async def _read_line(reader: asyncio.StreamReader) -> bytes:
    """
    Read one line of any length, including a final unterminated one.

    Lines longer than the stream buffer limit are collected in chunks
    instead of failing. Returns b"" at EOF.
    """
    chunks = []
    while True:
        try:
            chunks.append(await reader.readuntil(b"\n"))
            break
        except asyncio.IncompleteReadError as e:
            chunks.append(e.partial)
            break
        except asyncio.LimitOverrunError as e:
            chunks.append(await reader.read(e.consumed))
    return b"".join(chunks)
