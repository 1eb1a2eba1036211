# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/cli/main.py

"""
CLI dispatcher.

Each run goes through the same steps, in order and only once:
1. initialize the registry's path-resolution mode
2. register the base commands
3. register aliases from the project's pyproject.toml
4. expand a lone alias argument into its full command line
5. parse the arguments and dispatch to the selected command's executable

Commands are not implemented here. Every base command is a separate
executable script; the dispatcher forwards all remaining arguments to it
and exits with its status.
"""

# Standard library imports
import sys
from typing import Any, Callable, Optional, Sequence

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

# Local imports
from andcli.config.manager import PackageConfig, get_base_description, get_base_version
from andcli.constants import ALIAS_PREFIX, ARGV_PREFIX_LENGTH, CLI_NAME
from andcli.registry import AliasCommand, CommandEntry, Registry
from andcli.registry.aliases import find_alias
from andcli.system.display import display_alias_match, display_error
from andcli.system.exceptions import ExecutableNotFoundError, RegistryError
from andcli.system.logging_setup import setup_logging
from andcli.system.process import run_executable
from andcli.cli.utils import (
    build_default_registry,
    fix_argument_posix_path_conversion,
    handle_registry_error,
)

# Everything after the command name, options included, belongs to the executable
PASSTHROUGH_CONTEXT = {"allow_extra_args": True, "ignore_unknown_options": True}

# ctx.meta key holding the arguments exactly as given after the command name
FORWARDED_ARGS = "andcli.forwarded_args"

COMMANDS_PANEL = "Commands"
ALIASES_PANEL = "Aliases"


class PassthroughCommand(TyperCommand):
    """Command that keeps its raw arguments, `--` included, for forwarding."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        ctx.meta[FORWARDED_ARGS] = list(args)
        return super().parse_args(ctx, args)


def _executable_command(entry: CommandEntry, console: Console) -> Callable[..., None]:
    def run_command(ctx: typer.Context) -> None:
        try:
            exit_code = run_executable(entry.executable_path, ctx.meta.get(FORWARDED_ARGS, ctx.args))
        except ExecutableNotFoundError as e:
            display_error(console, f"Unable to run '{entry.name}': {e}")
            raise typer.Exit(1)
        raise typer.Exit(exit_code)

    return run_command


def _alias_command(alias: AliasCommand, console: Console) -> Callable[..., None]:
    def run_alias(ctx: typer.Context) -> None:
        display_error(
            console,
            f"'{alias.name}' is an alias for '{alias.expansion}' and cannot be combined with other "
            f"arguments. Run '{CLI_NAME} {alias.expansion}' instead."
        )
        raise typer.Exit(1)

    return run_alias


def build_app(
    registry: Registry,
    description: Optional[str] = None,
    version: Optional[str] = None,
    console: Optional[Console] = None
) -> typer.Typer:
    """Render the registry's commands into a typer application.

    Args:
        registry: Populated command registry
        description: Help text for the root command (default: package summary)
        version: Version printed by --version (default: installed version)
        console: Rich console for output

    Returns:
        Typer app whose commands mirror the registry, in registry order
    """
    console = console or Console()
    description = description or get_base_description()
    version = version or get_base_version()

    app = typer.Typer(
        rich_markup_mode="rich",
        no_args_is_help=True,
        add_completion=False,
    )

    def version_callback(value: bool) -> None:
        """Print version and exit."""
        if value:
            console.print(f"{registry.program_name} version {version}")
            raise typer.Exit()

    @app.callback(help=escape(description))
    def main_callback(
        show_version: Optional[bool] = typer.Option(
            None, "--version", callback=version_callback, is_eager=True,
            help="Show version and exit"
        )
    ) -> None:
        pass

    for entry in registry:
        if isinstance(entry, AliasCommand):
            app.command(
                name=entry.name,
                help=f"[magenta]{ALIAS_PREFIX}[/magenta] {escape(entry.expansion)}",
                context_settings=PASSTHROUGH_CONTEXT,
                add_help_option=False,
                rich_help_panel=ALIASES_PANEL,
            )(_alias_command(entry, console))
            continue

        app.command(
            name=entry.name,
            cls=PassthroughCommand,
            help=escape(entry.description),
            context_settings=PASSTHROUGH_CONTEXT,
            add_help_option=False,
            rich_help_panel=COMMANDS_PANEL,
        )(_executable_command(entry, console))

    return app


def parse_with_aliases(
    registry: Registry,
    argv: Optional[Sequence[str]] = None,
    app: Optional[typer.Typer] = None,
    console: Optional[Console] = None
) -> Any:
    """Parse argv (sys.argv style) and dispatch, expanding a lone alias argument first.

    If no aliases are registered, or argv is not exactly one alias token,
    the arguments are parsed unchanged.
    """
    console = console or Console()
    app = app or build_app(registry, console=console)
    raw_args = [sys.executable, *(sys.argv if argv is None else argv)]

    args = registry.expand_if_alias(raw_args)
    if args is None:
        args = raw_args[ARGV_PREFIX_LENGTH:]
    else:
        display_alias_match(console, find_alias(registry, raw_args[-1]))

    return app(args=args, prog_name=registry.program_name)


def main() -> None:
    """Entry point for the and-cli application."""
    setup_logging()
    console = Console()

    try:
        registry = build_default_registry(PackageConfig())
    except RegistryError as e:
        handle_registry_error(console, e)

    argv = fix_argument_posix_path_conversion(sys.argv)
    parse_with_aliases(registry, argv, console=console)


if __name__ == "__main__":  # pragma: no cover
    main()
