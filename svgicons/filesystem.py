"""Local filesystem access for path-backed icon sets."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class IconFile:
    """A file found while walking an icon set directory."""

    directory: str  # Parent directory, as found under the set root
    stem: str  # Filename without extension ("arrow.svg" -> "arrow")


class Filesystem:
    """Thin wrapper over pathlib used by the registry.

    Kept as an object so tests (and hosts with virtual filesystems) can
    swap it out.
    """

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def missing(self, path: PathLike) -> bool:
        return not self.exists(path)

    def get(self, path: PathLike) -> str:
        """Read a file as text.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return Path(path).read_text(encoding="utf-8")

    def all_files(self, path: PathLike) -> list[IconFile]:
        """Recursively list files under ``path``, sorted by full path."""
        root = Path(path)
        if not root.is_dir():
            return []
        return [
            IconFile(directory=str(file.parent), stem=file.stem)
            for file in sorted(root.rglob("*"))
            if file.is_file() and not _is_hidden(file.relative_to(root))
        ]


def _is_hidden(relative: Path) -> bool:
    """True for dotfiles and anything inside a dot-directory."""
    return any(part.startswith(".") for part in relative.parts)
