"""Console output for the mcschema CLI.

Two rich consoles are used: ``console`` (stdout) for data such as JSON
Schema and field tables, and ``err_console`` (stderr) for status lines, so
that ``mcschema convert schema.json > out.json`` captures only the schema.

Styling is disabled by ``--no-color`` or the NO_COLOR environment variable.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

_NO_COLOR_ENV = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False, stderr: bool = False) -> Console:
    """Build a console writing to stdout, or to stderr if ``stderr`` is set.

    Args:
        no_color: Disable styling. NO_COLOR in the environment has the
            same effect.
        stderr: Write to stderr instead of stdout.

    Returns:
        Console bound lazily to the current sys.stdout/sys.stderr.
    """
    plain = no_color or _NO_COLOR_ENV
    return Console(force_terminal=False if plain else None, no_color=plain, stderr=stderr)


console = create_console()
err_console = create_console(stderr=True)


def _status(marker: str, message: str, **kwargs: Any) -> None:
    # Messages carry endpoint names and paths; only the marker is markup.
    err_console.print(f"{marker} {escape(message)}", **kwargs)


def success(message: str, **kwargs: Any) -> None:
    """Report a completed step.

    Example:
        >>> success("Schema exported to schemas/posts.schema.json")
        ✓ Schema exported to schemas/posts.schema.json
    """
    _status("[green]✓[/green]", message, **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Report a failure.

    Example:
        >>> error("Invalid JSON: Expecting value (schema.json:1)")
        ✗ Invalid JSON: Expecting value (schema.json:1)
    """
    _status("[red]✗[/red]", message, **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Report something the user may want to change."""
    _status("[yellow]⚠[/yellow]", message, **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an unadorned status line. Square brackets are printed as-is."""
    err_console.print(escape(message), **kwargs)


def print_json(data: dict[str, Any], **kwargs: Any) -> None:
    """Print a JSON document to stdout, keeping non-ASCII text as-is."""
    console.print_json(data=data, **kwargs)


def print_table(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Print rows as a rich table to stdout.

    The title and cells are plain text; brackets in field labels are not
    read as console markup.

    Args:
        title: Table title.
        columns: Column headers.
        rows: Cell values, one sequence per row.
    """
    table = Table(title=Text(title))
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    console.print(table)


def set_no_color(no_color: bool) -> None:
    """Rebuild the module consoles with styling switched on or off."""
    global console, err_console
    console = create_console(no_color=no_color)
    err_console = create_console(no_color=no_color, stderr=True)
