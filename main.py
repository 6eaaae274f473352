#!/usr/bin/env python3
"""
ImgBB Batch Uploader

A command-line tool for uploading every image in a folder to ImgBB.
Uploads run one at a time; a failed file is reported and skipped, and the
links of all successful uploads are saved to a timestamped JSON file.

Usage:
    uv run main.py [folder_path]
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from imgbb_batch.config import API_KEY_ENV_VAR, DEFAULT_SOURCE_DIR, UploaderConfig, load_config
from imgbb_batch.exceptions import ConfigurationError, DirectoryError, PersistenceError
from imgbb_batch.models.upload import BatchResult
from imgbb_batch.parsers.image_collector import SUPPORTED_IMAGE_EXTENSIONS, collect_image_files
from imgbb_batch.processors.batch_uploader import BatchUploader
from imgbb_batch.progress.tracker import ProgressTracker
from imgbb_batch.reports.reporter import ResultReporter, summarize
from imgbb_batch.uploaders.imgbb import ImgBBUploader

# Initialize Rich console for output
console = Console()

SUPPORTED_FORMATS_TEXT = ", ".join(SUPPORTED_IMAGE_EXTENSIONS)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Upload every image in a folder to ImgBB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment Variables:
  {API_KEY_ENV_VAR}  Your ImgBB API key (required, may be set in a .env file)

Examples:
  uv run main.py ./my-images
  uv run main.py /home/user/photos --output-dir results

Supported formats: {SUPPORTED_FORMATS_TEXT}
        """
    )

    _ = parser.add_argument(
        "folder_path",
        nargs="?",
        type=Path,
        default=DEFAULT_SOURCE_DIR,
        help=f"Path to folder containing images (default: {DEFAULT_SOURCE_DIR})"
    )

    _ = parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Folder for the upload results JSON file (default: current directory)"
    )

    _ = parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each upload before counting it as failed (default: 60)"
    )

    _ = parser.add_argument(
        "--expiration",
        type=int,
        default=None,
        help="Delete uploaded images automatically after this many seconds (60-15552000)"
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and list the images that would be uploaded without uploading"
    )

    _ = parser.add_argument(
        "--test",
        action="store_true",
        help="Check that the API key is accepted and exit"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show a results table and full tracebacks"
    )

    return parser.parse_args(argv)


def report_results(
    reporter: ResultReporter,
    result: BatchResult,
    config: UploaderConfig,
) -> bool:
    """Persist the successful uploads and print the summary.

    The summary is printed even when the results file cannot be written.

    Returns:
        bool: True if the results file was written
    """
    try:
        saved_to = reporter.persist(summarize(result))
    except PersistenceError as e:
        reporter.display(result)
        console.print(f"\n[red]Error: {escape(str(e))}[/red]")
        console.print("Check that the output directory exists and is writable, or pass --output-dir.")
        if config.verbose:
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        return False

    reporter.display(result, saved_to=saved_to)
    return True


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the batch uploader."""
    args = parse_arguments(argv)

    console.print("[bold blue]ImgBB Batch Uploader[/bold blue]")
    console.print("======================")

    # Validate environment setup
    try:
        config = load_config(
            source_dir=args.folder_path,
            output_dir=args.output_dir,
            timeout=args.timeout,
            expiration=args.expiration,
            verbose=args.verbose,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if config.verbose:
        console.print("[dim]Verbose mode enabled[/dim]")

    uploader = ImgBBUploader.from_config(config)

    # Handle test mode
    if args.test:
        console.print("[blue]Testing API connection...[/blue]")
        if uploader.test_connection():
            console.print("[green]✓ API key accepted![/green]")
            return
        console.print("[red]✗ Connection test failed![/red]")
        sys.exit(1)

    console.print(f"Scanning folder: {config.source_dir}", highlight=False)
    try:
        image_files = collect_image_files(config.source_dir)
    except DirectoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("Pass an existing folder: uv run main.py /path/to/images")
        sys.exit(1)

    if not image_files:
        console.print("[yellow]No image files found in the specified folder[/yellow]")
        console.print(f"Supported formats: {SUPPORTED_FORMATS_TEXT}", highlight=False)
        return

    console.print(f"[green]Found {len(image_files)} image file(s)[/green]")

    if args.dry_run:
        console.print("[yellow]DRY RUN MODE - No uploads will be performed[/yellow]")
        for image_path in image_files:
            console.print(f"  - {image_path.name}", highlight=False)
        return

    console.print("Starting batch upload...\n")

    tracker = ProgressTracker(console, show_bar=console.is_terminal)
    batch = BatchUploader(uploader, tracker)
    reporter = ResultReporter(config.output_dir, console)

    try:
        result = batch.run(image_files)
    except KeyboardInterrupt:
        console.print("\n[yellow]Upload interrupted by user. Saving completed uploads...[/yellow]")
        _ = report_results(reporter, batch.partial_result(), config)
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Fatal error: {escape(str(e))}[/red]")
        if config.verbose:
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        sys.exit(1)

    if config.verbose:
        tracker.display_summary_table(result)

    if not report_results(reporter, result, config):
        sys.exit(1)


if __name__ == "__main__":
    main()
