"""Common file manipulation commands."""

from fcmd.config import DEFAULT_PERM
from fcmd.files import cd
from fcmd.files import chmod
from fcmd.files import chown
from fcmd.files import chtimes
from fcmd.files import cp
from fcmd.files import explore
from fcmd.files import is_dir
from fcmd.files import is_exist
from fcmd.files import is_hidden
from fcmd.files import lnl
from fcmd.files import lns
from fcmd.files import ls
from fcmd.files import mv
from fcmd.files import rm
from fcmd.files import working_directory
from fcmd.files import write_file
from fcmd.models import Listing
from fcmd.models import Tree

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PERM",
    "Listing",
    "Tree",
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
