# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/registry/aliases.py

"""
Alias expansion for raw process arguments.

Runs before argument parsing. When the only user-supplied argument is a
registered alias, the alias's expansion replaces the argument vector:

    ["python", "and-cli", "testdb"] -> ["dotnet", "--cli", "--", "test", "db", "migrate"]

Aliases are single tokens. Invocations with more than one user argument are
taken to be fully specified commands and are never rewritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from andcli.constants import ARGV_PREFIX_LENGTH

from .entries import AliasCommand

if TYPE_CHECKING:
    from .core import Registry


def find_alias(registry: Registry, token: str) -> Optional[AliasCommand]:
    """Registered alias whose name is exactly token (case-sensitive), or None."""
    for alias in registry.aliases():
        if alias.name == token:
            return alias
    return None


def match_alias(
    registry: Registry,
    raw_args: Sequence[str],
    prefix_length: int = ARGV_PREFIX_LENGTH
) -> Optional[AliasCommand]:
    """Alias matching the single user argument in raw_args, or None."""
    if not registry.aliases():
        return None

    if len(raw_args) != prefix_length + 1:
        return None

    return find_alias(registry, raw_args[-1])


def expand_if_alias(
    registry: Registry,
    raw_args: Sequence[str],
    prefix_length: int = ARGV_PREFIX_LENGTH
) -> Optional[list[str]]:
    """Return the expanded argument vector if raw_args is a single alias token, else None.

    Args:
        registry: Registry to look aliases up in (read only)
        raw_args: Process arguments including the interpreter/entrypoint prefix
        prefix_length: Number of leading entries that are not user arguments
            (2 for ["python", "entry.py", ...], 1 for sys.argv)
    """
    alias = match_alias(registry, raw_args, prefix_length)
    if alias is None:
        return None
    return alias.expanded_args()
