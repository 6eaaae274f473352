"""Helper classes and functions for tests."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from imgbb_batch.models.upload import UploadOutcome, UploadSuccess


class FakeUploader:
    """Uploader double that answers from a filename -> outcome table.

    A value that is an exception instance is raised instead of returned.
    """

    def __init__(self, answers: dict[str, UploadOutcome | BaseException] | None = None) -> None:
        self.answers = answers or {}
        self.calls: list[Path] = []

    def upload_image(self, image_path: Path) -> UploadOutcome:
        self.calls.append(image_path)
        answer = self.answers.get(image_path.name)
        if isinstance(answer, BaseException):
            raise answer
        if answer is None:
            return UploadSuccess(
                filename=image_path.name,
                url=f"https://i.ibb.co/{image_path.stem}/{image_path.name}",
                delete_url=f"https://ibb.co/{image_path.stem}/delete",
            )
        return answer


def console_output(console: Console) -> str:
    """Return everything printed to a capture console."""
    return console.file.getvalue()  # type: ignore[attr-defined]
