"""Symlink operations."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def lns(source: str | Path, target: str | Path) -> None:
    """Create a symbolic link at target pointing to source.

    Source is stored as given, so a relative source is resolved against
    target's parent when the link is followed.

    Raises:
        FileExistsError: If something already exists at target
        FileNotFoundError: If target's parent directory does not exist
    """
    logger.debug("Linking %s -> %s", target, source)
    Path(target).symlink_to(source)


def lnl(target: str | Path) -> Path:
    """Return the destination of the symbolic link at target.

    Raises:
        FileNotFoundError: If target does not exist
        OSError: If target is not a symlink
    """
    return Path(target).readlink()
