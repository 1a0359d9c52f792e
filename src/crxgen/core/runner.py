"""Async child-process runner."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from crxgen.contracts.exceptions import CommandError

logger = logging.getLogger(__name__)


@dataclass
class CompletedProcess:
    """Result of a child-process invocation."""

    returncode: int
    stdout: str
    stderr: str


class CommandRunner:
    """Runs shell command lines as child processes."""

    async def run(self, command_line: str, *, cwd: Path | None = None) -> CompletedProcess:
        """Execute *command_line* through the shell inside *cwd*.

        Raises:
            CommandError: If the process cannot be spawned or exits non-zero.
        """
        logger.debug("Running: %s (cwd=%s)", command_line, cwd)
        try:
            proc = await asyncio.create_subprocess_shell(
                command_line,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(cwd) if cwd is not None else None,
            )
        except OSError as exc:
            raise CommandError(f"failed to execute '{command_line}': {exc}") from exc

        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CompletedProcess(
            returncode=proc.returncode or 0,
            stdout=stdout_bytes.decode(errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode(errors="replace") if stderr_bytes else "",
        )
        if result.returncode != 0:
            message = f"command failed with exit code {result.returncode}: {command_line}"
            details = result.stderr.strip()
            if details:
                message = f"{message}\n{details}"
            raise CommandError(message, returncode=result.returncode, stderr=result.stderr)
        return result
