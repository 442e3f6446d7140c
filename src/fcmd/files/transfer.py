"""Copy, write, move and remove operations."""

import logging
import shutil
from pathlib import Path

from fcmd.config import DEFAULT_PERM

logger = logging.getLogger(__name__)


def cp(source: str | Path, target: str | Path, perm: int = DEFAULT_PERM) -> None:
    """Copy the contents of source file to target.

    A nonexistent target is created, otherwise it is truncated. Missing parent
    directories are created, the innermost one with perm (subject to umask).
    Nothing is created if source cannot be opened.

    Args:
        source: File to copy
        target: Destination file path
        perm: Mode for created parent directories

    Raises:
        FileNotFoundError: If source does not exist
        IsADirectoryError: If source or target is a directory
        PermissionError: If source is unreadable or target unwritable
    """
    target = Path(target)
    logger.debug("Copying %s to %s", source, target)

    with open(source, "rb") as source_file:
        target.parent.mkdir(mode=perm, parents=True, exist_ok=True)
        with open(target, "wb") as target_file:
            shutil.copyfileobj(source_file, target_file)


def write_file(
    target: str | Path, data: bytes | str, perm: int = DEFAULT_PERM
) -> None:
    """Write data to target file.

    A nonexistent target is created with mode perm, otherwise it is truncated
    and keeps its mode. Missing parent directories are created, the innermost
    one with perm. Strings are encoded as UTF-8.

    Raises:
        IsADirectoryError: If target is a directory
        PermissionError: If target cannot be written
    """
    target = Path(target)
    if isinstance(data, str):
        data = data.encode("utf-8")
    logger.debug("Writing %d bytes to %s", len(data), target)

    target.parent.mkdir(mode=perm, parents=True, exist_ok=True)
    # touch() applies mode only when it creates the file
    target.touch(mode=perm)
    target.write_bytes(data)


def mv(source: str | Path, target: str | Path) -> None:
    """Rename or move source file or directory to target.

    An existing file at target is replaced. An existing directory at target
    is replaced only if it is empty and source is a directory too.

    Raises:
        FileNotFoundError: If source does not exist
        IsADirectoryError: If target is a directory and source is not
        OSError: If target is a non-empty directory or on another filesystem
    """
    logger.debug("Moving %s to %s", source, target)
    Path(source).replace(target)


def rm(target: str | Path) -> None:
    """Remove target file, or target directory and everything it contains.

    A symlink is removed itself, never its destination. No error is raised if
    target does not exist.

    Raises:
        PermissionError: If target or something inside it cannot be removed
    """
    target = Path(target)
    logger.debug("Removing %s", target)

    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink(missing_ok=True)
