"""Filesystem removal helpers."""

from __future__ import annotations

import asyncio
import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from crxgen.contracts.exceptions import CleanupError

logger = logging.getLogger(__name__)


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


async def remove_path(path: Path) -> None:
    """Remove a file or directory tree; an absent *path* counts as removed."""
    logger.debug("Removing %s", path)
    try:
        await asyncio.to_thread(_remove, path)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise CleanupError(f"failed to remove {path}: {exc}") from exc


async def remove_paths(paths: Iterable[Path]) -> None:
    """Remove all *paths* concurrently and wait for every removal to settle.

    The first :class:`CleanupError` is re-raised once all removals finished.
    """
    results = await asyncio.gather(*(remove_path(path) for path in paths), return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
