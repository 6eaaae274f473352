"""Data models for the ImgBB batch uploader."""

from .upload import (
    BatchReport,
    BatchResult,
    ReportEntry,
    UploadFailure,
    UploadOutcome,
    UploadSuccess,
)

__all__ = [
    "BatchReport",
    "BatchResult",
    "ReportEntry",
    "UploadFailure",
    "UploadOutcome",
    "UploadSuccess",
]
