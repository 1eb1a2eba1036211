# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/registry/entries.py

"""
Registered command entries.

A registry entry is one of three kinds:
- BaseCommand: shipped with the CLI, runs an executable resolved by PathResolver
- LocalCommand: registered programmatically by a consuming CLI, runs an
  executable named after that CLI
- AliasCommand: a user shorthand from project configuration that expands to
  a full command + options string before parsing
"""

from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from andcli.catalog import CommandDefinition
from andcli.constants import ALIAS_PREFIX


class _Entry(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = Field(..., description="Command name as registered")
    description: str = Field(default="", description="Help-menu description")

    @property
    def is_alias(self) -> bool:
        return False

    @property
    def key(self) -> str:
        """Case-normalized name used for uniqueness checks."""
        return self.name.lower()

    @property
    def definition(self) -> CommandDefinition:
        return CommandDefinition(command=self.name, description=self.description)


class BaseCommand(_Entry):
    kind: Literal["base"] = "base"
    executable_path: Path = Field(..., description="Executable run when the command is selected")


class LocalCommand(_Entry):
    kind: Literal["local"] = "local"
    executable_path: Path = Field(..., description="Executable run when the command is selected")


class AliasCommand(_Entry):
    """Alias entry. `description` carries the help-menu prefix; `expansion` does not."""
    kind: Literal["alias"] = "alias"
    expansion: str = Field(..., description="Command + options string replacing the alias token")

    @property
    def is_alias(self) -> bool:
        return True

    @property
    def definition(self) -> CommandDefinition:
        return CommandDefinition(command=self.name, description=strip_alias_prefix(self.description))

    def expanded_args(self) -> list[str]:
        """Expansion split on whitespace.

        Tokens are not quoted or escaped, so an alias cannot expand to an
        argument containing whitespace.
        """
        return self.expansion.split()


CommandEntry = Union[BaseCommand, LocalCommand, AliasCommand]


def add_alias_prefix(expansion: str) -> str:
    return f"{ALIAS_PREFIX} {expansion}"


def strip_alias_prefix(description: str) -> str:
    if description.startswith(ALIAS_PREFIX):
        description = description[len(ALIAS_PREFIX):]
    return description.strip()
