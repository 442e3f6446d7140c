"""Filesystem operations for fcmd."""

from fcmd.files.attributes import chmod
from fcmd.files.attributes import chown
from fcmd.files.attributes import chtimes
from fcmd.files.listing import explore
from fcmd.files.listing import ls
from fcmd.files.paths import cd
from fcmd.files.paths import is_dir
from fcmd.files.paths import is_exist
from fcmd.files.paths import is_hidden
from fcmd.files.paths import working_directory
from fcmd.files.symlinks import lnl
from fcmd.files.symlinks import lns
from fcmd.files.transfer import cp
from fcmd.files.transfer import mv
from fcmd.files.transfer import rm
from fcmd.files.transfer import write_file

__all__ = [
    "cd",
    "chmod",
    "chown",
    "chtimes",
    "cp",
    "explore",
    "is_dir",
    "is_exist",
    "is_hidden",
    "lnl",
    "lns",
    "ls",
    "mv",
    "rm",
    "working_directory",
    "write_file",
]
