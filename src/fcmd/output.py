"""Output formatting for fcmd commands."""

from pathlib import Path

import typer

from fcmd.config import DEFAULT_PERM_ENV
from fcmd.config import Settings
from fcmd.models import Listing
from fcmd.models import Tree


def print_listing(listing: Listing) -> None:
    """Print a one-level listing to stdout, directories first.

    Directories get a trailing slash. The summary goes to stderr so the
    entries can be piped.

    Args:
        listing: Listing to print
    """
    for name in listing.dirs:
        typer.echo(f"{name}/")
    for name in listing.files:
        typer.echo(name)

    _print_summary(len(listing.dirs), len(listing.files))


def print_tree(tree: Tree) -> None:
    """Print an explored tree to stdout, directories first.

    Args:
        tree: Tree to print
    """
    for path in tree.dirs:
        typer.echo(f"{path}/")
    for path in tree.files:
        typer.echo(str(path))

    _print_summary(len(tree.dirs), len(tree.files))


def print_settings(
    settings: Settings, path: Path, override: str | None = None
) -> None:
    """Print effective settings and where they are stored.

    Args:
        settings: Settings to print (after environment overrides)
        path: Config file location
        override: Value of the environment override, if one is set
    """
    typer.secho(f"Config file: {path}", fg=typer.colors.BRIGHT_BLACK)
    typer.echo(f"default_perm = {settings.default_perm:o}")
    if override:
        typer.secho(
            f"Note: {DEFAULT_PERM_ENV}={override} overrides the config file",
            fg=typer.colors.YELLOW,
        )


def print_done(message: str) -> None:
    """Print a success line to stdout."""
    typer.secho(f"✓ {message}", fg=typer.colors.GREEN, bold=True)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)


def _print_summary(num_dirs: int, num_files: int) -> None:
    dirs_word = "directory" if num_dirs == 1 else "directories"
    files_word = "file" if num_files == 1 else "files"
    typer.secho(
        f"{num_dirs} {dirs_word}, {num_files} {files_word}",
        fg=typer.colors.BRIGHT_BLACK,
        err=True,
    )
