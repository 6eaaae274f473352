"""Batch uploader for sending a folder of images to ImgBB."""

from .exceptions import (
    BatchUploadError,
    ConfigurationError,
    DirectoryError,
    PersistenceError,
    UploadError,
)

__version__ = "0.1.0"

__all__ = [
    "BatchUploadError",
    "ConfigurationError",
    "DirectoryError",
    "PersistenceError",
    "UploadError",
    "__version__",
]
