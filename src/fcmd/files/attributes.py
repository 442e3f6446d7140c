"""Mode, ownership and timestamp changes.

All three follow symlinks: they change the link's destination, not the link.
"""

import logging
import os
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def chmod(target: str | Path, mode: int) -> None:
    """Change the mode of target to mode.

    Raises:
        FileNotFoundError: If target does not exist
        PermissionError: If the caller does not own target
    """
    logger.debug("Changing mode of %s to %o", target, mode)
    Path(target).chmod(mode)


def chown(target: str | Path, uid: int, gid: int) -> None:
    """Change the numeric uid and gid of target.

    Args:
        target: Path to change
        uid: New owner id, or -1 to leave unchanged
        gid: New group id, or -1 to leave unchanged

    Raises:
        FileNotFoundError: If target does not exist
        PermissionError: If the caller may not give target away
    """
    logger.debug("Changing owner of %s to %d:%d", target, uid, gid)
    os.chown(target, uid, gid)


def chtimes(target: str | Path, atime: datetime, mtime: datetime) -> None:
    """Change the access and modification times of target.

    Raises:
        FileNotFoundError: If target does not exist
    """
    logger.debug(
        "Changing times of %s to atime=%s mtime=%s",
        target,
        atime.isoformat(),
        mtime.isoformat(),
    )
    os.utime(target, times=(atime.timestamp(), mtime.timestamp()))
