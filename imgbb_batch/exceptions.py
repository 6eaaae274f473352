"""Exception hierarchy for the ImgBB batch uploader."""

from __future__ import annotations

from pathlib import Path


class BatchUploadError(Exception):
    """Base exception for all batch uploader errors."""

    pass


class ConfigurationError(BatchUploadError):
    """Raised when required configuration (such as the API key) is missing."""

    pass


class DirectoryError(BatchUploadError):
    """Raised when the source folder cannot be listed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class UploadError(BatchUploadError):
    """Raised when a single image upload fails.

    Never escapes the batch loop; it is turned into an ``UploadFailure``.
    For HTTP errors, ``status_code`` and the API's own ``error_code`` are kept.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code


class PersistenceError(BatchUploadError):
    """Raised when the results file cannot be written."""

    def __init__(self, path: Path | None, message: str) -> None:
        super().__init__(message)
        self.path = path
