"""Command-line interface for fcmd."""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from fcmd import __version__
from fcmd import files
from fcmd.config import DEFAULT_PERM_ENV
from fcmd.config import Settings
from fcmd.config import parse_mode
from fcmd.exceptions import FcmdError
from fcmd.output import print_done
from fcmd.output import print_error
from fcmd.output import print_listing
from fcmd.output import print_settings
from fcmd.output import print_tree

app = typer.Typer(help="Common file manipulation commands")

PermOption = Annotated[
    str | None,
    typer.Option(
        "--perm",
        help="Octal mode for created files and directories (default from config)",
    ),
]
StrictOption = Annotated[
    bool, typer.Option("--strict", help="Fail on unreadable directories")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fcmd {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Common file manipulation commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn fcmd and filesystem errors into a message and exit status 1."""
    try:
        yield
    except FcmdError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None
    except PermissionError as e:
        print_error(f"Permission denied: {e}")
        raise typer.Exit(1) from None
    except FileNotFoundError as e:
        print_error(f"Not found: {e}")
        raise typer.Exit(1) from None
    except FileExistsError as e:
        print_error(f"Already exists: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Filesystem error: {e}")
        raise typer.Exit(1) from None


def resolve_perm(perm: str | None) -> int:
    """Parse --perm, falling back to the configured default."""
    if perm is not None:
        return parse_mode(perm)
    return Settings.load().default_perm


@app.command("ls")
def ls_command(
    root: Annotated[Path, typer.Argument(help="Directory to list")] = Path("."),
    strict: StrictOption = False,
) -> None:
    """List directories and files in a directory, skipping hidden ones."""
    with handle_errors():
        print_listing(files.ls(root, strict=strict))


@app.command("explore")
def explore_command(
    root: Annotated[Path, typer.Argument(help="Directory to explore")] = Path("."),
    strict: StrictOption = False,
    follow_symlinks: Annotated[
        bool,
        typer.Option("--follow-symlinks", help="Descend into symlinked directories"),
    ] = False,
) -> None:
    """List all directories and files beneath a directory, skipping hidden ones."""
    with handle_errors():
        print_tree(files.explore(root, strict=strict, follow_symlinks=follow_symlinks))


@app.command("cp")
def cp_command(
    source: Annotated[Path, typer.Argument(help="File to copy")],
    target: Annotated[Path, typer.Argument(help="Destination file")],
    perm: PermOption = None,
) -> None:
    """Copy a file, creating parent directories as needed."""
    with handle_errors():
        files.cp(source, target, perm=resolve_perm(perm))
        print_done(f"Copied {source} to {target}")


@app.command("write")
def write_command(
    target: Annotated[Path, typer.Argument(help="File to write")],
    text: Annotated[str, typer.Argument(help="Content to write")],
    perm: PermOption = None,
) -> None:
    """Write text to a file, creating parent directories as needed."""
    with handle_errors():
        files.write_file(target, text, perm=resolve_perm(perm))
        print_done(f"Wrote {target}")


@app.command("ln")
def ln_command(
    source: Annotated[str, typer.Argument(help="Path the link points to")],
    target: Annotated[Path, typer.Argument(help="Where to create the link")],
) -> None:
    """Create a symbolic link."""
    with handle_errors():
        files.lns(source, target)
        print_done(f"Linked {target} -> {source}")


@app.command("readlink")
def readlink_command(
    target: Annotated[Path, typer.Argument(help="Symbolic link to read")],
) -> None:
    """Print the destination of a symbolic link."""
    with handle_errors():
        typer.echo(str(files.lnl(target)))


@app.command("mv")
def mv_command(
    source: Annotated[Path, typer.Argument(help="File or directory to move")],
    target: Annotated[Path, typer.Argument(help="New name or path")],
) -> None:
    """Rename or move a file or directory."""
    with handle_errors():
        files.mv(source, target)
        print_done(f"Moved {source} to {target}")


@app.command("rm")
def rm_command(
    target: Annotated[Path, typer.Argument(help="File or directory to remove")],
) -> None:
    """Remove a file, or a directory and everything in it."""
    with handle_errors():
        files.rm(target)
        print_done(f"Removed {target}")


@app.command("chmod")
def chmod_command(
    mode: Annotated[str, typer.Argument(help="Octal mode, e.g. 640")],
    target: Annotated[Path, typer.Argument(help="Path to change")],
) -> None:
    """Change the mode of a file or directory."""
    with handle_errors():
        files.chmod(target, parse_mode(mode))
        print_done(f"Changed mode of {target} to {mode}")


@app.command("chown")
def chown_command(
    uid: Annotated[int, typer.Argument(help="New owner id (-1 to keep)")],
    gid: Annotated[int, typer.Argument(help="New group id (-1 to keep)")],
    target: Annotated[Path, typer.Argument(help="Path to change")],
) -> None:
    """Change the owner and group of a file or directory."""
    with handle_errors():
        files.chown(target, uid, gid)
        print_done(f"Changed owner of {target} to {uid}:{gid}")


@app.command("chtimes")
def chtimes_command(
    target: Annotated[Path, typer.Argument(help="Path to change")],
    atime: Annotated[
        datetime | None, typer.Option(help="Access time (default: now)")
    ] = None,
    mtime: Annotated[
        datetime | None, typer.Option(help="Modification time (default: now)")
    ] = None,
) -> None:
    """Change the access and modification times of a file or directory."""
    now = datetime.now()
    with handle_errors():
        files.chtimes(target, atime or now, mtime or now)
        print_done(f"Changed times of {target}")


@app.command("config")
def config_command(
    default_perm: Annotated[
        str | None,
        typer.Option("--default-perm", help="Set the default octal mode and save"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Config file (default: user config dir)"),
    ] = None,
) -> None:
    """Show or change fcmd settings."""
    path = config_path or Settings.default_path()
    with handle_errors():
        settings = Settings.load(path)
        if default_perm is not None:
            settings.default_perm = parse_mode(default_perm)
            settings.save(path)
            # Reload so an environment override is reflected
            settings = Settings.load(path)
        print_settings(settings, path, override=os.environ.get(DEFAULT_PERM_ENV))


def main() -> None:
    """Main entry point for the fcmd CLI."""
    app()


if __name__ == "__main__":
    main()
