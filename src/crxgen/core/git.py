"""Async wrapper around the ``git`` CLI."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from crxgen.contracts.exceptions import CloneError

logger = logging.getLogger(__name__)


class GitClient:
    """Clones repositories by shelling out to ``git``.

    The destination must not exist yet or must be an empty directory.
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    async def clone(self, remote_url: str, dest_dir: Path) -> None:
        """Clone *remote_url* into *dest_dir*.

        Raises:
            CloneError: If git cannot be executed or the clone fails.
        """
        cmd = [self._executable, "clone", "--quiet", remote_url, str(dest_dir)]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CloneError(f"Failed to execute git: {exc}") from exc

        _, stderr = await proc.communicate()
        if proc.returncode != 0:
            message = f"git clone failed for {remote_url}"
            details = stderr.decode(errors="replace").strip()
            if details:
                message = f"{message}: {details}"
            raise CloneError(message)
