"""Data models for fcmd."""

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path


@dataclass
class Listing:
    """Immediate children of one directory, split by type.

    Unpacks as ``dirs, files = ls(root)``.
    """

    dirs: list[str] = field(default_factory=list)  # Bare subdirectory names
    files: list[str] = field(default_factory=list)  # Bare non-directory names

    def __iter__(self) -> Iterator[list[str]]:
        return iter((self.dirs, self.files))

    def __len__(self) -> int:
        """Total number of listed entries."""
        return len(self.dirs) + len(self.files)


@dataclass
class Tree:
    """Every directory and file found beneath a root.

    Paths are joined onto the root exactly as it was given, so a relative
    root yields relative paths. Unpacks as ``dirs, files = explore(root)``.
    """

    dirs: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def __iter__(self) -> Iterator[list[Path]]:
        return iter((self.dirs, self.files))

    def __len__(self) -> int:
        """Total number of discovered entries."""
        return len(self.dirs) + len(self.files)
