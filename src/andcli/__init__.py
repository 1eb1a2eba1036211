# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/__init__.py

"""
and-cli: a multi-command developer CLI.

A consuming CLI can build on the base commands by creating its own
registry:

    from andcli import CommandDefinition, Registry, parse_with_aliases

    registry = Registry(program_name="my-cli").initialize(True)
    registry.register_all_base().register_aliases_from_config()
    registry.register(CommandDefinition(command="seed", description="Seed the database"))
    parse_with_aliases(registry)
"""

from andcli.catalog import BASE_COMMAND_DEFINITIONS, CommandDefinition, get_base_command_definitions
from andcli.cli.main import build_app, parse_with_aliases
from andcli.config.manager import PackageConfig
from andcli.registry import AliasCommand, BaseCommand, LocalCommand, PathResolver, Registry
from andcli.system.exceptions import (
    AndCliError,
    CommandNotFoundError,
    ConfigError,
    InitializationError,
    InvalidAliasError,
    RegistryError,
)

__all__ = [
    'AliasCommand',
    'AndCliError',
    'BASE_COMMAND_DEFINITIONS',
    'BaseCommand',
    'CommandDefinition',
    'CommandNotFoundError',
    'ConfigError',
    'InitializationError',
    'InvalidAliasError',
    'LocalCommand',
    'PackageConfig',
    'PathResolver',
    'Registry',
    'RegistryError',
    'build_app',
    'get_base_command_definitions',
    'parse_with_aliases',
]
