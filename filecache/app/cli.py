"""Command-line interface for the todo file cache."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import CacheOptions, ensure_config, load_config
from ..errors import FileCacheError
from ..logging_utils import configure_logging
from ..records import FileFormat
from ..store import FileCache
from ..todo import IMPORTANCE_LEVELS, TodoItem

console = Console()

TODO_COLUMNS = [
    ("id", "ID"),
    ("text", "Text"),
    ("importance", "Importance"),
    ("deadline", "Deadline"),
    ("is_done", "Done"),
    ("created_at", "Created"),
]


@dataclass
class CliState:
    cache: FileCache[TodoItem]


app = typer.Typer(help="File Cache — todo list stored as JSON or CSV")


def _format_console_value(value: object) -> str:
    if value is None:
        return "[dim]N/A[/dim]"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, datetime):
        return value.isoformat(timespec="minutes")
    return str(value)


def _render_table(items: Sequence[TodoItem], columns: Sequence[tuple[str, str]]) -> None:
    table = Table(show_header=True, header_style="bold")
    for _, title in columns:
        table.add_column(title)
    for item in items:
        table.add_row(*[_format_console_value(getattr(item, key)) for key, _ in columns])
    console.print(table)


def _parse_deadline(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid deadline: {value}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _fail(exc: Exception) -> typer.Exit:
    print(f"[red]{escape(str(exc))}[/red]")
    return typer.Exit(code=1)


def _load_existing(cache: FileCache[TodoItem]) -> None:
    """Load the current file into *cache*, starting empty if it is missing."""

    try:
        cache.load()
    except FileNotFoundError:
        cache.clear()
    except (FileCacheError, OSError, ValueError) as exc:
        raise _fail(exc) from exc


def _load(cache: FileCache[TodoItem], format: FileFormat | None = None) -> list[TodoItem]:
    try:
        return cache.load(format=format)
    except (FileCacheError, OSError, ValueError) as exc:
        raise _fail(exc) from exc


def _save(cache: FileCache[TodoItem], format: FileFormat | None = None) -> None:
    try:
        cache.save(format=format, strict=True)
    except (FileCacheError, OSError, ValueError) as exc:
        raise _fail(exc) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config.toml (defaults to $FILECACHE_HOME/config.toml).",
    ),
    documents_dir: Optional[Path] = typer.Option(
        None,
        "--documents-dir",
        help="Directory holding the cache files.",
    ),
    file_name: Optional[str] = typer.Option(
        None,
        "--file-name",
        help="Logical file name without extension.",
    ),
    fmt: Optional[FileFormat] = typer.Option(
        None,
        "--format",
        case_sensitive=False,
        help="File format to read and write.",
    ),
    separator: Optional[str] = typer.Option(
        None,
        "--separator",
        help="Field separator for CSV files.",
    ),
) -> None:
    """Application entrypoint that prepares configuration and the cache."""

    cfg_path = ensure_config(config)
    cfg = load_config(cfg_path)
    configure_logging(cfg.log_dir)
    try:
        options: CacheOptions = cfg.cache.merge(file_name, fmt, separator)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    cache = FileCache(
        TodoItem,
        options,
        documents_dir=documents_dir if documents_dir is not None else cfg.documents_dir,
    )
    ctx.obj = CliState(cache=cache)
    if ctx.invoked_subcommand is None:
        print(ctx.get_help())


@app.command()
def version() -> None:
    """Print the CLI version."""

    print(f"filecache {__version__}")


@app.command("list")
def list_items(ctx: typer.Context) -> None:
    """Show the stored todo items."""

    state: CliState = ctx.obj
    _load_existing(state.cache)
    items = state.cache.objects
    if items:
        _render_table(items, TODO_COLUMNS)
    else:
        print("[yellow]No todo items[/yellow]")


@app.command()
def add(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Todo text."),
    importance: str = typer.Option(
        "basic",
        "--importance",
        help=f"One of: {', '.join(IMPORTANCE_LEVELS)}.",
        show_default=True,
    ),
    deadline: Optional[str] = typer.Option(
        None,
        help="Deadline as an ISO-8601 date or timestamp.",
    ),
) -> None:
    """Add a todo item and save the file."""

    state: CliState = ctx.obj
    if importance.lower() not in IMPORTANCE_LEVELS:
        raise typer.BadParameter(f"Importance must be one of {', '.join(IMPORTANCE_LEVELS)}")
    _load_existing(state.cache)
    item = TodoItem(text=text, importance=importance, deadline=_parse_deadline(deadline))
    state.cache.add(item)
    _save(state.cache)
    print(f"[green]Added {item.id}[/green]")


@app.command()
def done(
    ctx: typer.Context,
    item_id: str = typer.Argument(..., metavar="ID", help="Identifier of the item."),
) -> None:
    """Mark a todo item as completed."""

    state: CliState = ctx.obj
    _load_existing(state.cache)
    item = state.cache.get(item_id)
    if item is None:
        print(f"[red]No todo item with id {item_id}[/red]")
        raise typer.Exit(code=1)
    item.is_done = True
    item.modified_at = datetime.now(timezone.utc)
    _save(state.cache)
    print(f"[green]Completed {item_id}[/green]")


@app.command()
def delete(
    ctx: typer.Context,
    item_id: str = typer.Argument(..., metavar="ID", help="Identifier of the item."),
) -> None:
    """Remove a todo item and save the file."""

    state: CliState = ctx.obj
    _load_existing(state.cache)
    existed = item_id in state.cache
    state.cache.delete(item_id)
    _save(state.cache)
    if existed:
        print(f"[green]Deleted {item_id}[/green]")
    else:
        print(f"[yellow]No todo item with id {item_id}[/yellow]")


@app.command()
def convert(
    ctx: typer.Context,
    target: FileFormat = typer.Option(
        ...,
        "--to",
        case_sensitive=False,
        help="Format to write the loaded items in.",
    ),
    source: Optional[FileFormat] = typer.Option(
        None,
        "--from",
        case_sensitive=False,
        help="Format to read (defaults to --format or the configured format).",
    ),
) -> None:
    """Copy the current file into another format under the same name."""

    state: CliState = ctx.obj
    items = _load(state.cache, format=source)
    _save(state.cache, format=target)
    print(f"[green]Wrote {len(items)} items to {state.cache.path_for(format=target)}[/green]")


if __name__ == "__main__":
    sys.exit(app())
