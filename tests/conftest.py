"""Pytest fixtures for imgbb_batch tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from imgbb_batch.progress.tracker import ProgressTracker


@pytest.fixture
def console() -> Console:
    """Create a Rich console that writes plain text to a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def tracker(console: Console) -> ProgressTracker:
    """Create a progress tracker without a live progress bar."""
    return ProgressTracker(console, show_bar=False)


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Create a folder with a mix of images and other files."""
    folder = tmp_path / "images"
    folder.mkdir()
    for name in ("a.PNG", "b.txt", "c.svg", "d.jpeg"):
        (folder / name).write_bytes(b"fake image data")
    return folder


@pytest.fixture
def three_files(tmp_path: Path) -> list[Path]:
    """Create three image files in upload order."""
    paths = []
    for name in ("one.jpg", "two.png", "three.gif"):
        path = tmp_path / name
        path.write_bytes(b"GIF89a")
        paths.append(path)
    return paths


@pytest.fixture
def api_key_env(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set the ImgBB API key in the environment."""
    monkeypatch.setenv("IMGBB_API_KEY", "test-key")
    return "test-key"
