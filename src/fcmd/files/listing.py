"""Directory listing and tree exploration."""

import logging
import os
from pathlib import Path

from fcmd.files.paths import is_hidden
from fcmd.models import Listing
from fcmd.models import Tree

logger = logging.getLogger(__name__)


def ls(
    root: str | Path, *, strict: bool = False, follow_symlinks: bool = False
) -> Listing:
    """List separately the names of directories and files inside root.

    Hidden entries are not listed. Names come back in whatever order the
    directory read yields them.

    Args:
        root: Directory to list
        strict: If True, let read errors propagate instead of returning an
            empty listing
        follow_symlinks: If True, a symlink to a directory is listed as a
            directory. Otherwise it is listed as a file.

    Returns:
        Listing of bare names. Empty if root cannot be read and strict is
        False, so an unreadable directory looks the same as an empty one.

    Raises:
        OSError: Only with strict=True, if root cannot be read (e.g.
            FileNotFoundError, NotADirectoryError, PermissionError)
    """
    dirs: list[str] = []
    files: list[str] = []
    try:
        with os.scandir(root) as entries:
            for entry in entries:
                if is_hidden(entry.name):
                    continue
                if entry.is_dir(follow_symlinks=follow_symlinks):
                    dirs.append(entry.name)
                else:
                    files.append(entry.name)
    except OSError as e:
        if strict:
            raise
        logger.debug("Cannot list %s, treating as empty: %s", root, e)
        return Listing()

    return Listing(dirs=dirs, files=files)


def explore(
    root: str | Path, *, strict: bool = False, follow_symlinks: bool = False
) -> Tree:
    """List separately the paths of all directories and files beneath root.

    Hidden entries are not listed, and hidden directories are not descended
    into. Returned paths are joined onto root as given, so they are relative
    to root whenever root itself is relative.

    Order is depth-first pre-order: a directory's files come before anything
    found in its subdirectories, and each subdirectory is reported right
    before its own contents. Uses an explicit stack, so deep trees do not hit
    the recursion limit.

    Args:
        root: Directory to explore
        strict: If True, the first unreadable directory raises instead of
            contributing nothing
        follow_symlinks: If True, descend into symlinked directories. A
            directory already visited (same device and inode) is reported but
            not descended into again, so symlink cycles terminate.

    Returns:
        Tree of joined paths. Empty if root cannot be read and strict is False.

    Raises:
        OSError: Only with strict=True, if any directory cannot be read
    """
    root = Path(root)
    dirs: list[Path] = []
    files: list[Path] = []
    pending: list[Path] = []
    visited: set[tuple[int, int]] = set()

    if follow_symlinks:
        _mark_visited(root, visited)
    _expand(root, files, pending, strict=strict, follow_symlinks=follow_symlinks)

    while pending:
        directory = pending.pop()
        dirs.append(directory)

        if follow_symlinks and not _mark_visited(directory, visited):
            logger.debug("Skipping already visited directory %s", directory)
            continue

        _expand(
            directory, files, pending, strict=strict, follow_symlinks=follow_symlinks
        )

    return Tree(dirs=dirs, files=files)


def _expand(
    directory: Path,
    files: list[Path],
    pending: list[Path],
    *,
    strict: bool,
    follow_symlinks: bool,
) -> None:
    """List one directory, collect its files and queue its subdirectories."""
    listing = ls(directory, strict=strict, follow_symlinks=follow_symlinks)
    files.extend(directory / name for name in listing.files)
    # Reversed so the first listed subdirectory is popped first
    pending.extend(directory / name for name in reversed(listing.dirs))


def _mark_visited(directory: Path, visited: set[tuple[int, int]]) -> bool:
    """Record a directory's identity.

    Returns:
        False if the directory was visited before. True otherwise, including
        when it cannot be stat'ed (ls then decides how to report it).
    """
    try:
        stat = directory.stat()
    except OSError:
        return True

    identity = (stat.st_dev, stat.st_ino)
    if identity in visited:
        return False
    visited.add(identity)
    return True
