"""Summaries and the persisted JSON results file."""

from __future__ import annotations

import json
import time
from collections.abc import Callable
from pathlib import Path
from typing import final

from rich.console import Console

from imgbb_batch.exceptions import PersistenceError
from imgbb_batch.models.upload import BatchReport, BatchResult, ReportEntry

ReportSink = Callable[[str], None]


def summarize(result: BatchResult) -> BatchReport:
    """
    Keep only the successful uploads, in their original order.

    Failed uploads are counted on the console but never written to the
    results file.

    Args:
        result: Result of a batch run

    Returns:
        BatchReport: One entry per successful upload
    """
    report: BatchReport = []
    for outcome in result.successes:
        if not outcome.url:
            continue
        entry: ReportEntry = {
            "filename": outcome.filename,
            "url": outcome.url,
            "deleteUrl": outcome.delete_url,
        }
        report.append(entry)
    return report


def serialize_report(report: BatchReport) -> str:
    """Render the report as pretty-printed JSON."""
    return json.dumps(report, indent=2, ensure_ascii=False)


def results_filename() -> str:
    """Name of the results file, unique per run by millisecond timestamp."""
    return f"upload_results_{int(time.time() * 1000)}.json"


@final
class ResultReporter:
    """Writes the results file and prints the end-of-run summary."""

    def __init__(self, output_dir: Path | None = None, console: Console | None = None) -> None:
        """Initialize the reporter.

        Args:
            output_dir: Folder that receives the results file
            console: Rich console instance. If None, creates a new one.
        """
        self.output_dir: Path = output_dir or Path(".")
        self.console = console or Console()

    def persist(self, report: BatchReport, sink: ReportSink | None = None) -> Path | None:
        """Write the serialized report.

        Args:
            report: Successful uploads to save
            sink: Callable receiving the JSON text. Defaults to a new
                timestamped file in ``output_dir``.

        Returns:
            Path of the written file, or None when a custom sink was used

        Raises:
            PersistenceError: If the report cannot be written
        """
        content = serialize_report(report)

        if sink is not None:
            try:
                sink(content)
            except OSError as e:
                raise PersistenceError(None, f"Failed to write upload results: {e}") from e
            return None

        output_file = self.output_dir / results_filename()
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with output_file.open("x", encoding="utf-8") as f:
                _ = f.write(content)
        except OSError as e:
            raise PersistenceError(
                output_file, f"Failed to write upload results to {output_file}: {e}"
            ) from e

        return output_file

    def display(self, result: BatchResult, saved_to: Path | None = None) -> None:
        """Print the end-of-run counts followed by the JSON report.

        Args:
            result: Result of the batch run
            saved_to: Where the results file was written, if it was
        """
        report = summarize(result)
        title = "Batch Upload Cancelled" if result.cancelled else "Batch Upload Complete!"

        self.console.print("=" * 22)
        self.console.print(f"[bold green]{title}[/bold green]")
        self.console.print("=" * 22)
        self.console.print(f"[blue]Total files processed:[/blue] {result.total}")
        self.console.print(f"[green]Successful uploads:[/green] {result.succeeded}")
        self.console.print(f"[red]Failed uploads:[/red] {result.failed}")
        if saved_to is not None:
            self.console.print(f"[yellow]Results saved to:[/yellow] {saved_to}", highlight=False)

        self.console.print("\n[bold]JSON Output:[/bold]")
        self.console.print(serialize_report(report), markup=False, highlight=False, soft_wrap=True)
