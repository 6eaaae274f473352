"""Sequential batch upload orchestration."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import final

from rich.markup import escape

from imgbb_batch.models.upload import BatchResult, UploadFailure, UploadOutcome
from imgbb_batch.progress.tracker import ProgressTracker
from imgbb_batch.uploaders.imgbb import ImageUploader


@final
class BatchUploader:
    """Uploads a list of images one at a time, in order.

    A failed upload is recorded and the batch moves on to the next file;
    only cancellation stops the loop early, and only between files.
    """

    def __init__(
        self,
        uploader: ImageUploader,
        tracker: ProgressTracker | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Initialize the batch uploader.

        Args:
            uploader: Client used for each single-file upload
            tracker: Progress tracker for console output
            cancel_event: Event that, once set, stops the batch before the next file
        """
        self.uploader = uploader
        self.tracker = tracker or ProgressTracker()
        self.cancel_event = cancel_event or threading.Event()

        # Live state so partial results survive an interrupted run
        self.files: list[Path] = []
        self.position = 0
        self.outcomes: list[UploadOutcome] = []

    def cancel(self) -> None:
        """Request that the batch stop before starting the next file."""
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def partial_result(self) -> BatchResult:
        """Snapshot of the outcomes recorded so far."""
        return BatchResult(outcomes=list(self.outcomes), cancelled=self.position < len(self.files))

    def run(self, files: list[Path]) -> BatchResult:
        """Upload every file and collect one outcome per file.

        Args:
            files: Image paths in the order they should be uploaded

        Returns:
            BatchResult with outcomes in the same order as ``files``
        """
        self.files = list(files)
        self.position = 0
        self.outcomes = []
        total = len(self.files)

        with self.tracker.track_uploads(total) as progress:
            while self.position < total:
                if self.cancelled:
                    self.tracker.display_warning(
                        f"Upload cancelled after {self.position} of {total} file(s)"
                    )
                    return self.partial_result()

                image_path = self.files[self.position]
                progress.set_description(f"Uploading {escape(image_path.name)}...")
                self.tracker.display_progress(self.position + 1, total, image_path.name)

                outcome = self._upload_one(image_path)
                self.outcomes.append(outcome)
                self.position += 1

                self.tracker.display_outcome(outcome)
                progress.advance()

        return BatchResult(outcomes=list(self.outcomes))

    def _upload_one(self, image_path: Path) -> UploadOutcome:
        """Upload a single file, turning any stray exception into a failure."""
        try:
            return self.uploader.upload_image(image_path)
        except Exception as e:
            return UploadFailure(filename=image_path.name, error_message=str(e) or type(e).__name__)
