# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.17
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/cli/commands/listing.py

"""
List command handler and app, run as the `ls` base command.

Handles: ls
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from andcli.catalog import find_base_command
from andcli.cli.utils import build_default_registry
from andcli.config.manager import PackageConfig
from andcli.registry import Registry
from andcli.system.display import command_list_to_dicts, display_command_list, display_error
from andcli.system.exceptions import RegistryError

DEFAULT_PREFIX = "- [ ] "
DEFAULT_INDENT = 4


def list_commands(
    console: Console,
    registry: Registry,
    prefix: str = DEFAULT_PREFIX,
    indent: int = DEFAULT_INDENT,
    use_color: bool = True,
    include_aliases: bool = True,
    to_json: bool = False
) -> list[dict[str, Any]]:
    """List registered commands.

    Args:
        console: Rich console for output
        registry: Populated command registry
        prefix: Text before every command
        indent: Spaces before alias expansions
        use_color: Colorize output
        include_aliases: Include aliases from project configuration
        to_json: Print JSON instead of the text list

    Returns:
        Listed commands as plain dicts
    """
    entries = [entry for entry in registry if include_aliases or not entry.is_alias]
    result = command_list_to_dicts(entries)

    if to_json:
        console.print_json(json.dumps(result))
    else:
        display_command_list(console, entries, prefix=prefix, indent=indent, use_color=use_color)

    return result


app = typer.Typer(add_completion=False, rich_markup_mode="rich")


@app.command(help=find_base_command("ls").description)
def ls(
    prefix: str = typer.Option(DEFAULT_PREFIX, "--prefix", "-p", help="Prefix to display before each command"),
    indent: int = typer.Option(DEFAULT_INDENT, "--indent", "-i", min=0, help="Number of spaces to indent alias expansions"),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize commands in output"),
    aliases: bool = typer.Option(True, "--aliases/--no-aliases", help="Include aliases from pyproject.toml"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON"),
    project: Optional[str] = typer.Option(None, "--project", help="Directory to read pyproject.toml from (default: current)"),
) -> None:
    console = Console(no_color=not color)
    package_config = PackageConfig(start_path=Path(project) if project else None)
    try:
        registry = build_default_registry(package_config)
    except RegistryError as e:
        display_error(console, str(e))
        raise typer.Exit(1)

    list_commands(
        console, registry,
        prefix=prefix, indent=indent, use_color=color,
        include_aliases=aliases, to_json=to_json
    )
