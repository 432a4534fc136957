"""CLI entry point for mcschema.

This module defines the main CLI group. Subcommands are loaded lazily so
that ``mcschema --help`` does not import pydantic models up front.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from typing import Any

import click
import rich_click as rclick

from mcschema_cli import __version__
from mcschema_cli.output import set_no_color

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


# Import paths use the entry point "module:attribute" form
LAZY_COMMANDS: dict[str, str] = {
    "convert": "mcschema_cli.commands.convert:convert",
    "bundle": "mcschema_cli.commands.bundle:bundle",
    "inspect": "mcschema_cli.commands.inspect:inspect_cmd",
}


class LazyGroup(rclick.RichGroup):
    """Rich-click group whose subcommands are imported on first use.

    A command is registered on the group the first time it is looked up,
    so later lookups skip the import machinery.

    Attributes:
        lazy_subcommands: Command name to ``module:attribute`` import path.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = dict(lazy_subcommands or {})

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List eager and lazy command names without importing any command.

        Args:
            ctx: Click context.

        Returns:
            Sorted command names.
        """
        return sorted({*super().list_commands(ctx), *self.lazy_subcommands})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Return a command, importing and registering it on first lookup.

        Args:
            ctx: Click context.
            cmd_name: Name typed on the command line.

        Returns:
            The command, or None if the name is unknown.
        """
        if cmd_name in self.lazy_subcommands and cmd_name not in self.commands:
            self.add_command(self._import_command(cmd_name), cmd_name)
        return super().get_command(ctx, cmd_name)  # type: ignore[arg-type]

    def _import_command(self, cmd_name: str) -> click.Command:
        """Import the command registered under ``cmd_name``.

        Args:
            cmd_name: Key of ``lazy_subcommands``.

        Returns:
            The imported click command.

        Raises:
            TypeError: If the import path does not name a click command.
        """
        module_name, _, attr_name = self.lazy_subcommands[cmd_name].partition(":")
        command = getattr(importlib.import_module(module_name), attr_name)
        if not isinstance(command, click.Command):
            raise TypeError(f"{module_name}:{attr_name} is not a click command")
        return command


def _configure_logging(ctx: click.Context, param: click.Parameter, verbose: bool) -> None:
    """Configure logging from the --verbose flag.

    Args:
        ctx: Click context.
        param: The --verbose option.
        verbose: Log at DEBUG when set, WARNING otherwise.
    """
    from mcschema_core.observability import configure_logging

    configure_logging(log_level="DEBUG" if verbose else "WARNING", add_timestamp=False)


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="mcschema")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log conversion details (unresolved and cyclic custom fields) to stderr.",
    expose_value=False,
    callback=_configure_logging,
)
def cli() -> None:
    """mcschema - microCMS schema to JSON Schema converter.

    Convert `microcms schema pull` output to JSON Schema draft-07 for
    validators, type generators and documentation tools.

    **Getting Started:**

    - `mcschema convert schema.json` - Print the JSON Schema of one API
    - `mcschema bundle microcms-schema.json` - Write one schema per endpoint
    - `mcschema inspect schema.json` - List fields and their kinds
    """
    pass


if __name__ == "__main__":
    cli()
