"""Terminal progress indicator used while processing and resolving lists.

The indicator only provides human feedback: a single overwritten line
with a spinner, the current message and the elapsed time.
"""

from abc import ABC, abstractmethod

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn


class ProgressIndicator(ABC):
    """Start / update / end interface for progress feedback."""

    @abstractmethod
    def start(self) -> None:
        """Begin overwriting the current line."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Replace the displayed message."""

    @abstractmethod
    def end(self) -> None:
        """Stop overwriting and clear the line."""


class NullProgress(ProgressIndicator):
    """Indicator that displays nothing, for headless runs and tests."""

    def start(self) -> None:
        pass

    def update(self, message: str) -> None:
        pass

    def end(self) -> None:
        pass


class RichProgress(ProgressIndicator):
    """Spinner line rendered with Rich.

    Nested start() calls are counted so a dispatcher can start the
    indicator on every recursion level without flicker.
    """

    def __init__(self, console: Console) -> None:
        self._console = console
        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self._depth = 0

    def start(self) -> None:
        self._depth += 1
        if self._progress is not None:
            return
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}", markup=False),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task = self._progress.add_task("", total=None)

    def update(self, message: str) -> None:
        if self._progress is None or self._task is None:
            return
        self._progress.update(self._task, description=message)

    def end(self) -> None:
        self._depth = max(self._depth - 1, 0)
        if self._depth or self._progress is None:
            return
        self._progress.stop()
        self._progress = None
        self._task = None
