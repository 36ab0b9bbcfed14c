"""Command-line interface for fm-engine.

This module exposes every filesystem operation as a subcommand.

Commands:
    - list: List a directory (directories first, case-insensitive order)
    - home / parent: Navigation helpers
    - rename, delete, new-file, new-folder: Single-entry changes
    - copy, move: Tree transfer into a destination directory
    - size: Recursive on-disk size of a directory
    - open, terminal: Hand a path to the OS viewer or a terminal

Failures print ``Error [<kind>]: <message>`` to stderr and exit with status 1.
"""

import json
from datetime import datetime
from typing import Annotated, NoReturn, Optional

import typer

from . import __version__
from .core.exceptions import FMEngineError
from .filesystem import (
    calculate_directory_size,
    copy_entry,
    create_file,
    create_folder,
    delete_entry,
    get_home_directory,
    get_parent_directory,
    list_directory,
    move_entry,
    rename_entry,
)
from .launchers import open_entry, open_in_terminal

app = typer.Typer(
    name="fm-engine",
    help="Filesystem operations for a desktop file manager.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"fm-engine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    FM-Engine: list, rename, delete, copy, move and size local files.
    """
    pass


PathArgument = Annotated[str, typer.Argument(help="Path to operate on")]
DirectoryArgument = Annotated[str, typer.Argument(help="Directory path")]
DestinationArgument = Annotated[
    str, typer.Argument(help="Existing directory to place the result in")
]
NameArgument = Annotated[str, typer.Argument(help="Base name, without directories")]


def _fail(error: FMEngineError) -> NoReturn:
    kind = error.kind.value if error.kind else "Error"
    typer.echo(f"Error [{kind}]: {error}", err=True)
    raise typer.Exit(1)


def format_size(total_bytes: int) -> str:
    """Render a byte count with a binary unit."""
    if total_bytes >= 1024**3:
        return f"{total_bytes / (1024**3):.2f} GB"
    elif total_bytes >= 1024**2:
        return f"{total_bytes / (1024**2):.2f} MB"
    elif total_bytes >= 1024:
        return f"{total_bytes / 1024:.2f} KB"
    return f"{total_bytes} bytes"


@app.command("list")
def list_cmd(
    path: DirectoryArgument,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print entries as a JSON array")
    ] = False,
) -> None:
    """
    List the immediate children of a directory.

    Examples:
        fm-engine list ~/Documents
        fm-engine list /tmp --json
    """
    try:
        entries = list_directory(path)
    except FMEngineError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps([entry.model_dump() for entry in entries], indent=2))
        return

    if not entries:
        typer.echo("Directory is empty.")
        return

    for entry in entries:
        kind = "d" if entry.is_dir else "-"
        stamp = (
            datetime.fromtimestamp(entry.modified).strftime("%Y-%m-%d %H:%M")
            if entry.modified
            else "-"
        )
        size = "" if entry.is_dir else format_size(entry.size)
        typer.echo(f"{kind}  {stamp:16}  {size:>12}  {entry.name}")


@app.command("home")
def home_cmd() -> None:
    """Print the current user's home directory."""
    try:
        typer.echo(get_home_directory())
    except FMEngineError as e:
        _fail(e)


@app.command("parent")
def parent_cmd(path: PathArgument) -> None:
    """Print the parent directory of a path."""
    try:
        typer.echo(get_parent_directory(path))
    except FMEngineError as e:
        _fail(e)


@app.command("rename")
def rename_cmd(path: PathArgument, new_name: NameArgument) -> None:
    """
    Rename an entry within its parent directory.

    Examples:
        fm-engine rename ~/notes.txt notes-old.txt
    """
    try:
        rename_entry(path, new_name)
    except FMEngineError as e:
        _fail(e)
    typer.echo(f"Renamed {path} -> {new_name}")


@app.command("delete")
def delete_cmd(
    path: PathArgument,
    permanent: Annotated[
        bool,
        typer.Option("--permanent", help="Delete irreversibly instead of trashing"),
    ] = False,
) -> None:
    """
    Send an entry to the trash, or delete it permanently.

    Examples:
        fm-engine delete ~/old-build
        fm-engine delete ~/old-build --permanent
    """
    try:
        delete_entry(path, permanent=permanent)
    except FMEngineError as e:
        _fail(e)
    action = "Deleted" if permanent else "Moved to trash"
    typer.echo(f"{action}: {path}")


@app.command("copy")
def copy_cmd(source: PathArgument, destination: DestinationArgument) -> None:
    """
    Copy a file or directory tree into a destination directory.

    Examples:
        fm-engine copy ~/photos /mnt/backup
    """
    try:
        result = copy_entry(source, destination)
    except FMEngineError as e:
        _fail(e)
    typer.echo(result)


@app.command("move")
def move_cmd(source: PathArgument, destination: DestinationArgument) -> None:
    """
    Move a file or directory tree into a destination directory.

    Examples:
        fm-engine move ~/downloads/iso /mnt/archive
    """
    try:
        result = move_entry(source, destination)
    except FMEngineError as e:
        _fail(e)
    typer.echo(result)


@app.command("size")
def size_cmd(path: DirectoryArgument) -> None:
    """
    Calculate the on-disk size of a directory tree.

    Examples:
        fm-engine size ~/projects
    """
    try:
        total_bytes = calculate_directory_size(path)
    except FMEngineError as e:
        _fail(e)

    typer.echo(f"Total size: {total_bytes:,} bytes")
    typer.echo(f"Human readable: {format_size(total_bytes)}")


@app.command("new-file")
def new_file_cmd(directory: DirectoryArgument, name: NameArgument) -> None:
    """Create an empty file."""
    try:
        create_file(directory, name)
    except FMEngineError as e:
        _fail(e)
    typer.echo(f"Created file {name}")


@app.command("new-folder")
def new_folder_cmd(directory: DirectoryArgument, name: NameArgument) -> None:
    """Create an empty folder."""
    try:
        create_folder(directory, name)
    except FMEngineError as e:
        _fail(e)
    typer.echo(f"Created folder {name}")


@app.command("open")
def open_cmd(path: PathArgument) -> None:
    """Open a path with the default application."""
    try:
        open_entry(path)
    except FMEngineError as e:
        _fail(e)


@app.command("terminal")
def terminal_cmd(path: DirectoryArgument) -> None:
    """Open a terminal in a directory."""
    try:
        open_in_terminal(path)
    except FMEngineError as e:
        _fail(e)


if __name__ == "__main__":
    app()
