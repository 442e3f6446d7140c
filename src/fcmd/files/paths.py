"""Path checks and working directory changes."""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def is_exist(target: str | Path) -> bool:
    """Check if the target exists.

    Symlinks are followed, so a dangling symlink does not exist.
    """
    return Path(target).exists()


def is_dir(target: str | Path) -> bool:
    """Check if the target is a directory.

    Returns:
        False if the target is unreachable.
    """
    return Path(target).is_dir()


def is_hidden(name: str) -> bool:
    """Check lexically if a name is hidden (Unix convention).

    Args:
        name: Base name of an entry, not a full path
    """
    return name.startswith(".")


def cd(target: str | Path) -> None:
    """Change the current working directory to target.

    This mutates process-wide state: every thread and every relative path
    resolved afterwards is affected. Not safe for concurrent use.

    Raises:
        FileNotFoundError: If target does not exist
        NotADirectoryError: If target is not a directory
    """
    logger.debug("Changing working directory to %s", target)
    os.chdir(target)


@contextmanager
def working_directory(target: str | Path) -> Iterator[Path]:
    """Temporarily change the working directory, restoring it on exit.

    Same process-wide caveat as cd().

    Yields:
        The previous working directory
    """
    previous = Path.cwd()
    cd(target)
    try:
        yield previous
    finally:
        cd(previous)
