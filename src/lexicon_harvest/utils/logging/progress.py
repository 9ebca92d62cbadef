# ABOUTME: Rich progress display fed by harvest progress events
# ABOUTME: Replaces an in-place console counter with a progress bar and per-word status line

from typing import Any

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from lexicon_harvest.core.models import ProgressEvent, ProgressKind

STATUS_ICONS = {
    ProgressKind.RESOLVED: "✅",
    ProgressKind.SKIPPED: "⏭️",
    ProgressKind.FAILED: "❌",
}


class HarvestProgressReporter:
    """Progress callback rendering harvest events with Rich."""

    def __init__(self, console: Console | None = None, description: str = "📚 Buscando palabras"):
        self.console = console or Console()
        self.description = description
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )
        self.task_id: Any = None
        self.counts = {kind: 0 for kind in STATUS_ICONS}

    def __enter__(self):
        self.progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.progress.stop()

    def summary(self) -> str:
        """Per-status tallies, e.g. "✅ 3 ⏭️ 1 ❌ 0"."""
        return " ".join(f"{STATUS_ICONS[kind]} {count}" for kind, count in self.counts.items())

    def __call__(self, event: ProgressEvent) -> None:
        if event.kind == ProgressKind.STARTED:
            self.task_id = self.progress.add_task(self.description, total=event.total)
            return

        if self.task_id is None:
            self.task_id = self.progress.add_task(self.description, total=event.total or None)

        if event.kind == ProgressKind.FINISHED:
            self.progress.update(
                self.task_id, completed=event.total, description=f"🏁 {self.description} {self.summary()}"
            )
            return

        self.counts[event.kind] += 1
        icon = STATUS_ICONS[event.kind]
        self.progress.update(
            self.task_id,
            completed=event.index,
            description=f"{self.description} {icon} {event.word}",
        )
