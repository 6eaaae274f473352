"""Tests for console progress reporting."""

from __future__ import annotations

import pytest
from helpers import console_output
from rich.console import Console
from rich.progress import Progress

from imgbb_batch.progress.tracker import ProgressTracker, UploadProgressContext


class TestDisplayProgress:
    """Tests for the per-file progress line."""

    @pytest.mark.parametrize(
        ("current", "total", "expected"),
        [(1, 8, "13%"), (3, 8, "38%"), (1, 3, "33%"), (2, 3, "67%"), (4, 4, "100%")],
    )
    def test_percentage_rounds_halves_up(
        self, tracker: ProgressTracker, console: Console, current: int, total: int, expected: str
    ) -> None:
        """Test that the percentage rounds .5 upwards."""
        tracker.display_progress(current, total, "x.png")

        assert f"Progress: {current}/{total} ({expected}) - x.png" in console_output(console)


class TestUploadProgressContext:
    """Tests for advancing the progress bar."""

    def test_without_bar_is_a_no_op(self) -> None:
        """Test that a context without a bar accepts updates."""
        context = UploadProgressContext(None, None)

        context.set_description("Uploading a.png...")
        context.advance()

    def test_advances_task(self, console: Console) -> None:
        """Test that updates reach the Rich task."""
        progress = Progress(console=console)
        task_id = progress.add_task("Uploading images...", total=3)
        context = UploadProgressContext(progress, task_id)

        context.set_description("Uploading b.png...")
        context.advance(2)

        task = progress.tasks[0]
        assert task.completed == 2
        assert task.description == "Uploading b.png..."
