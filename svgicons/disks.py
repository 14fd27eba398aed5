"""Named storage disks for disk-backed icon sets.

A disk is a flat namespace of relative paths (``arrows/left.svg``). Two
implementations ship with the package:
- LocalDisk: a directory on the local machine
- PackageDisk: data files bundled inside an installed Python package

Usage:
    disks = DiskManager()
    disks.register("brand", LocalDisk("~/icons/brand"))
    disks.disk("brand").get("logo.svg")
"""

from abc import ABC, abstractmethod
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Union

from svgicons.exceptions import UnknownDisk


class Disk(ABC):
    """Base class for storage disks."""

    @abstractmethod
    def all_files(self) -> list[str]:
        """Return every file on the disk as a ``/``-separated relative path."""
        pass

    @abstractmethod
    def get(self, relative_path: str) -> str:
        """Read a file from the disk.

        Raises:
            FileNotFoundError: If no file exists at ``relative_path``
        """
        pass


class LocalDisk(Disk):
    """Disk rooted at a local directory."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).expanduser()

    def all_files(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return [
            file.relative_to(self.root).as_posix()
            for file in sorted(self.root.rglob("*"))
            if file.is_file()
        ]

    def get(self, relative_path: str) -> str:
        file = self.root / relative_path.lstrip("/")
        if not file.resolve().is_relative_to(self.root.resolve()):
            raise FileNotFoundError(f"{relative_path} is outside of {self.root}")
        return file.read_text(encoding="utf-8")

    def __repr__(self) -> str:
        return f"LocalDisk({str(self.root)!r})"


class PackageDisk(Disk):
    """Disk backed by package data, read through importlib.resources.

    Works whether the package is installed normally, editable, or bundled.
    """

    def __init__(self, package: str, subdir: str = ""):
        self.package = package
        self.subdir = subdir

    def _root(self) -> Traversable:
        root = files(self.package)
        for part in filter(None, self.subdir.split("/")):
            root = root.joinpath(part)
        return root

    def all_files(self) -> list[str]:
        found: list[str] = []

        def walk(node: Traversable, prefix: str) -> None:
            for child in sorted(node.iterdir(), key=lambda c: c.name):
                if child.is_dir():
                    walk(child, f"{prefix}{child.name}/")
                elif child.is_file():
                    found.append(f"{prefix}{child.name}")

        root = self._root()
        if root.is_dir():
            walk(root, "")
        return found

    def get(self, relative_path: str) -> str:
        node = self._root()
        for part in filter(None, relative_path.split("/")):
            node = node.joinpath(part)
        if not node.is_file():
            raise FileNotFoundError(
                f"{relative_path} not found in package {self.package}"
            )
        return node.read_text(encoding="utf-8")

    def __repr__(self) -> str:
        return f"PackageDisk({self.package!r}, {self.subdir!r})"


class DiskManager:
    """Maps disk names to Disk instances."""

    def __init__(self, disks: dict[str, Disk] | None = None):
        self.disks: dict[str, Disk] = dict(disks or {})

    def register(self, name: str, disk: Disk) -> "DiskManager":
        self.disks[name] = disk
        return self

    def disk(self, name: str) -> Disk:
        """Get a disk by name.

        Raises:
            UnknownDisk: If no disk was registered under ``name``
        """
        try:
            return self.disks[name]
        except KeyError:
            raise UnknownDisk(name) from None

    def names(self) -> list[str]:
        return list(self.disks)
