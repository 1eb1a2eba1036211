# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/catalog.py

"""
Base command catalog.

The catalog is the immutable table of commands shipped with the CLI. Each
entry names a command and the description shown in the help menu; the
command's executable is located separately (see andcli.registry.paths).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommandDefinition(BaseModel):
    """Name and help-menu description of a command."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    command: str = Field(..., description="Command name, unique case-insensitively")
    description: str = Field(default="", description="Help-menu description")

    def __str__(self) -> str:
        return f"{self.command}: {self.description}"


BASE_COMMAND_DEFINITIONS: tuple[CommandDefinition, ...] = (
    CommandDefinition(
        command="copy",
        description="Copy files and/or directories",
    ),
    CommandDefinition(
        command="deploy",
        description="Deploy various application types",
    ),
    CommandDefinition(
        command="dotnet",
        description="Run various dotnet commands for the project",
    ),
    CommandDefinition(
        command="dotnet-test",
        description="Run various dotnet test runner commands for the project",
    ),
    CommandDefinition(
        command="github",
        description="Commands for interacting with AndcultureCode github resources",
    ),
    CommandDefinition(
        command="health-check",
        description="Send a web request to a given endpoint on an interval to verify the HTTP response code",
    ),
    CommandDefinition(
        command="install",
        description="Collection of commands related to installation and configuration of the and-cli",
    ),
    CommandDefinition(
        command="ls",
        description="Print the commands and aliases available to the CLI",
    ),
    CommandDefinition(
        command="migration",
        description="Run commands to manage Entity Framework migrations",
    ),
    CommandDefinition(
        command="nuget",
        description="Manages publishing of nuget dotnet core projects",
    ),
    CommandDefinition(
        command="restore",
        description="Restores application data assets for various application types",
    ),
    CommandDefinition(
        command="webpack",
        description="Run various webpack commands for the project",
    ),
    CommandDefinition(
        command="webpack-test",
        description="Run various webpack test commands for the project",
    ),
    CommandDefinition(
        command="workspace",
        description="Manage AndcultureCode projects workspace",
    ),
)


def get_base_command_definitions() -> tuple[CommandDefinition, ...]:
    """Return every base command definition, in catalog order."""
    return BASE_COMMAND_DEFINITIONS


def base_command_names() -> list[str]:
    return [definition.command for definition in BASE_COMMAND_DEFINITIONS]


def find_base_command(name: Optional[str]) -> Optional[CommandDefinition]:
    """Find a base command by name (case-insensitive).

    Returns:
        The matching definition, or None for an empty or unknown name
    """
    if not name:
        return None

    lowered = name.lower()
    for definition in BASE_COMMAND_DEFINITIONS:
        if definition.command.lower() == lowered:
            return definition
    return None


def is_base_command(name: Optional[str]) -> bool:
    return find_base_command(name) is not None
