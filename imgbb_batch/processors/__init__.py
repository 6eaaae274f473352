"""Batch upload orchestration."""

from .batch_uploader import BatchUploader

__all__ = ["BatchUploader"]
