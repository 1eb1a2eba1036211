# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/system/display.py

# Standard library imports
from typing import Any, Iterable

# Third-party imports
from rich.console import Console
from rich.markup import escape

# Local imports
from andcli.registry.entries import AliasCommand, CommandEntry


def display_error(console: Console, message: str) -> None:
    console.print(f"[red]✗[/red] {escape(message)}")


def display_alias_match(console: Console, alias: AliasCommand) -> None:
    """Tell the user which alias matched and what is being run instead."""
    console.print(
        f"Matched alias '[magenta]{escape(alias.name)}[/magenta]', "
        f"executing '[magenta]{escape(alias.expansion)}[/magenta]'",
        highlight=False
    )


def command_list_to_dicts(entries: Iterable[CommandEntry]) -> list[dict[str, Any]]:
    """Convert registry entries to plain dicts for JSON output."""
    result = []
    for entry in entries:
        item: dict[str, Any] = {
            "command": entry.name,
            "kind": entry.kind,
            "description": entry.definition.description,
        }
        if isinstance(entry, AliasCommand):
            item["expansion"] = entry.expanded_args()
        result.append(item)
    return result


def display_command_list(
    console: Console,
    entries: Iterable[CommandEntry],
    prefix: str = "- [ ] ",
    indent: int = 4,
    use_color: bool = True
) -> None:
    """Print one line per command, with each alias's expansion on an indented line below it.

    Args:
        console: Rich console for output
        entries: Registered commands, already sorted
        prefix: Text printed before every command
        indent: Spaces before an alias's expansion line
        use_color: Colorize command names
    """
    for entry in entries:
        name = escape(entry.name)
        if use_color:
            color = "magenta" if entry.is_alias else "green"
            name = f"[{color}]{name}[/{color}]"
        console.print(f"{escape(prefix)}{name}", highlight=False)

        if isinstance(entry, AliasCommand):
            expansion = escape(entry.expansion)
            if use_color:
                expansion = f"[yellow]{expansion}[/yellow]"
            console.print(f"{' ' * indent}{escape(prefix)}{expansion}", highlight=False)
