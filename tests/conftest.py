"""Shared pytest fixtures for svgicons tests."""

import tempfile
from pathlib import Path

import pytest

from svgicons.disks import DiskManager, LocalDisk
from svgicons.factory import IconFactory
from svgicons.filesystem import Filesystem


def _write_svg(root: Path, relative: str, content: str) -> Path:
    """Write an SVG file under root, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ui_dir(temp_dir):
    """An icon directory with a flat icon and a nested one."""
    root = temp_dir / "ui"
    _write_svg(root, "arrow.svg", "  <svg>A</svg>\n")
    _write_svg(root, "arrows/left.svg", "<svg>L</svg>")
    return root


@pytest.fixture
def brand_dir(temp_dir):
    """A directory used as the root of the "brand" disk."""
    root = temp_dir / "brand"
    _write_svg(root, "logo.svg", "<svg>logo</svg>\n")
    _write_svg(root, "social/github.svg", "<svg>gh</svg>")
    return root


@pytest.fixture
def disks(brand_dir):
    """A DiskManager with the "brand" disk registered."""
    return DiskManager({"brand": LocalDisk(brand_dir)})


@pytest.fixture
def factory(disks):
    """An empty factory with a default class."""
    return IconFactory(Filesystem(), disks, default_class="icon")


@pytest.fixture
def write_svg():
    """Helper to write SVG files: write_svg(root, "a/b.svg", "<svg/>")."""
    return _write_svg
