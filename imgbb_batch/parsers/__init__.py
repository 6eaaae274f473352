"""Folder scanning and image filtering utilities."""

from .image_collector import (
    SUPPORTED_IMAGE_EXTENSIONS,
    collect_image_files,
    is_image_file,
)

__all__ = ["SUPPORTED_IMAGE_EXTENSIONS", "collect_image_files", "is_image_file"]
