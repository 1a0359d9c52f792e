"""Rich-based generation progress display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from crxgen.contracts.progress import GenerationProgress


class RichGenerationProgress(GenerationProgress):
    """Terminal spinner powered by Rich, one line per phase.

    Use as a context manager so the live display is properly started/stopped::

        with RichGenerationProgress() as progress:
            await ProjectGenerator(metadata, progress=progress).generate(name, features)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_ids: dict[str, RichTaskID] = {}

    # -- context manager --------------------------------------------------

    def __enter__(self) -> RichGenerationProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    # -- GenerationProgress implementation --------------------------------

    def phase_start(self, phase: str, description: str) -> None:
        self._task_ids[phase] = self._progress.add_task(description, total=None)

    def phase_done(self, phase: str, message: str | None = None) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        if message:
            self._progress.update(task_id, description=message)
        self._progress.update(task_id, total=1, completed=1)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, description=f"[red]✗[/red] {phase} failed")
        self._progress.stop_task(task_id)
