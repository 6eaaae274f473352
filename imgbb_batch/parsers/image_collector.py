"""Image file collection utilities."""

from __future__ import annotations

import os
from pathlib import Path

from imgbb_batch.exceptions import DirectoryError

# Supported image file extensions (SVG is left out, ImgBB mishandles it)
SUPPORTED_IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp')


def is_image_file(filename: str) -> bool:
    """Check whether a filename has a supported image extension."""
    _, ext = os.path.splitext(filename)
    return ext.lower() in SUPPORTED_IMAGE_EXTENSIONS


def collect_image_files(folder_path: Path) -> list[Path]:
    """
    Collect the image files directly inside a folder.

    Files are returned in directory-listing order; subfolders are not
    descended into.

    Args:
        folder_path: Path to the folder to scan

    Returns:
        list[Path]: Image file paths, empty if the folder holds no images

    Raises:
        DirectoryError: If the folder is missing or cannot be listed
    """
    try:
        if not folder_path.exists():
            raise DirectoryError(
                folder_path,
                f'Folder "{folder_path}" does not exist or is not accessible',
            )
        if not folder_path.is_dir():
            raise DirectoryError(folder_path, f'Path "{folder_path}" is not a directory')

        image_files: list[Path] = []
        for file_path in folder_path.iterdir():
            # is_file() follows symlinks, so links to folders are skipped too
            if file_path.is_file() and is_image_file(file_path.name):
                image_files.append(file_path)
    except OSError as e:
        raise DirectoryError(
            folder_path, f'Failed to read directory "{folder_path}": {e}'
        ) from e

    return image_files
