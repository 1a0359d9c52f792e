"""Progress reporting protocol for the generation workflow.

The generator emits phase lifecycle events; consumers (e.g. the CLI's Rich
spinner) implement ``GenerationProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class GenerationProgress(ABC):
    """Observer interface for generation and install progress events."""

    @abstractmethod
    def phase_start(self, phase: str, description: str) -> None:
        """A phase is starting; *description* is shown while it runs."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str, message: str | None = None) -> None:
        """The *phase* has finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* was interrupted by *error*."""
        ...  # pragma: no cover


class NullGenerationProgress(GenerationProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, description: str) -> None:
        pass

    def phase_done(self, phase: str, message: str | None = None) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
