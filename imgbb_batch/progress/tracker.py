"""Progress display with Rich."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from imgbb_batch.models.upload import BatchResult, UploadOutcome, UploadSuccess


@final
class ProgressTracker:
    """Reports batch upload progress and per-file outcomes to the console."""

    def __init__(self, console: Console | None = None, show_bar: bool = True) -> None:
        """Initialize the progress tracker.

        Args:
            console: Rich console instance. If None, creates a new one.
            show_bar: Render a live progress bar while uploading
        """
        self.console = console or Console()
        self.show_bar = show_bar

    def display_progress(self, current: int, total: int, filename: str) -> None:
        """Show which file is about to be uploaded.

        Args:
            current: 1-based index of the file
            total: Number of files in the batch
            filename: Name of the file
        """
        # Halves round up: 1 of 8 is 13%
        percentage = int(current / total * 100 + 0.5) if total else 100
        self.console.print(
            f"[cyan]Progress:[/cyan] {current}/{total} ({percentage}%) - {escape(filename)}",
            highlight=False,
        )

    def display_outcome(self, outcome: UploadOutcome) -> None:
        """Show the result of one upload.

        Args:
            outcome: Outcome of the upload that just finished
        """
        if isinstance(outcome, UploadSuccess):
            self.console.print(
                f"[green]✓[/green] Successfully uploaded: {escape(outcome.filename)}",
                highlight=False,
            )
            self.console.print(f"  URL: {outcome.url}", markup=False, highlight=False)
        else:
            self.console.print(
                f"[red]✗[/red] Failed to upload: {escape(outcome.filename)}",
                highlight=False,
            )
            self.console.print(f"  Error: {outcome.error_message}", markup=False, highlight=False)
        self.console.print()

    @contextmanager
    def track_uploads(self, total_files: int) -> Iterator[UploadProgressContext]:
        """Context manager for tracking overall upload progress.

        Args:
            total_files: Total number of files to upload

        Yields:
            Context for advancing the progress bar
        """
        if not self.show_bar:
            yield UploadProgressContext(None, None)
            return

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Uploading images...", total=total_files)
            yield UploadProgressContext(progress, task_id)

    def display_summary_table(self, result: BatchResult) -> None:
        """Display per-file results as a table.

        Args:
            result: Result of the batch run
        """
        table = Table(title="Upload Results")
        table.add_column("#", style="dim", justify="right")
        table.add_column("File", style="cyan")
        table.add_column("Status")
        table.add_column("URL / Error")

        for index, outcome in enumerate(result.outcomes, 1):
            if isinstance(outcome, UploadSuccess):
                table.add_row(str(index), escape(outcome.filename), "[green]uploaded[/green]", escape(outcome.url))
            else:
                table.add_row(str(index), escape(outcome.filename), "[red]failed[/red]", escape(outcome.error_message))

        self.console.print(table)

    def display_warning(self, message: str) -> None:
        """Display a warning message."""
        self.console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


@final
class UploadProgressContext:
    """Context for advancing the upload progress bar."""

    def __init__(self, progress: Progress | None, task_id: TaskID | None) -> None:
        """Initialize the context.

        Args:
            progress: Rich Progress instance, or None when no bar is shown
            task_id: Task ID for the progress bar
        """
        self.progress = progress
        self.task_id = task_id

    def set_description(self, description: str) -> None:
        """Set the progress description.

        Args:
            description: New description for the progress bar
        """
        if self.progress is not None and self.task_id is not None:
            self.progress.update(self.task_id, description=description)

    def advance(self, steps: int = 1) -> None:
        """Advance the upload progress.

        Args:
            steps: Number of files to advance
        """
        if self.progress is not None and self.task_id is not None:
            self.progress.update(self.task_id, advance=steps)
