# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/registry/core.py

"""
Command registry.

The registry is the live table of commands exposed to the argument parser:
base commands from the catalog, aliases from project configuration, and
commands registered by a consuming CLI. It keeps two invariants after every
mutation:
- names are unique, compared case-insensitively
- entries are sorted by name, case-insensitively

A Registry is an ordinary object. The dispatch driver creates one per run
and tests create a fresh one per case. The registry never exits the process;
fatal problems raise RegistryError subclasses for the driver to handle.
"""

import locale
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from loguru import logger

from andcli.catalog import (
    CommandDefinition,
    base_command_names,
    find_base_command,
    get_base_command_definitions,
)
from andcli.config.manager import PackageConfig
from andcli.constants import ARGV_PREFIX_LENGTH, CLI_NAME
from andcli.system.exceptions import CommandNotFoundError, InitializationError, InvalidAliasError

from .aliases import expand_if_alias
from .entries import AliasCommand, BaseCommand, CommandEntry, LocalCommand, add_alias_prefix
from .paths import PathResolver


@dataclass(frozen=True)
class RegistrationConflict:
    """A registration skipped because the name was taken and override was not requested."""
    name: str
    existing: CommandEntry
    rejected: CommandEntry


def _sort_key(entry: CommandEntry) -> str:
    return locale.strxfrm(entry.name.casefold())


class Registry:
    """Registered commands for one CLI run. Mutating methods return self for chaining."""

    def __init__(self, package_config: Optional[PackageConfig] = None, program_name: str = CLI_NAME):
        self.package_config = package_config or PackageConfig()
        self.program_name = program_name
        self.conflicts: list[RegistrationConflict] = []
        self.last_registered: Optional[bool] = None
        self._is_installed_dependency: Optional[bool] = None
        self._entries: tuple[CommandEntry, ...] = ()
        self._index: dict[str, CommandEntry] = {}

    # ---- Queries ----

    @property
    def commands(self) -> tuple[CommandEntry, ...]:
        """Registered entries in sorted order.

        The tuple is replaced on every change, so its identity only changes
        when the registry actually changed.
        """
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def get(self, name: Optional[str]) -> Optional[CommandEntry]:
        """Return a registered command by name (case-insensitive), or None."""
        if not name:
            return None
        return self._index.get(name.lower())

    def get_base_command_definitions(self) -> tuple[CommandDefinition, ...]:
        return get_base_command_definitions()

    def aliases(self) -> list[AliasCommand]:
        return [entry for entry in self._entries if isinstance(entry, AliasCommand)]

    def alias_definitions(self) -> list[CommandDefinition]:
        """Registered aliases as definitions, with the help-menu prefix stripped."""
        return [entry.definition for entry in self.aliases()]

    def expand_if_alias(self, raw_args: Sequence[str], prefix_length: int = ARGV_PREFIX_LENGTH) -> Optional[list[str]]:
        return expand_if_alias(self, raw_args, prefix_length=prefix_length)

    # ---- Initialization ----

    @property
    def is_initialized(self) -> bool:
        return self._is_installed_dependency is not None

    @property
    def is_installed_dependency(self) -> bool:
        """Path-resolution mode. An uninitialized registry resolves as a development checkout."""
        return bool(self._is_installed_dependency)

    @property
    def path_resolver(self) -> PathResolver:
        return PathResolver(self.is_installed_dependency)

    def initialize(self, is_installed_dependency: Optional[bool]) -> "Registry":
        """Set how base command executables are located. Only one call is allowed.

        Raises:
            InitializationError: If called with None or called a second time
        """
        if is_installed_dependency is None:
            raise InitializationError("Registry.initialize() should not be called with a None value.")

        if self._is_installed_dependency is not None:
            raise InitializationError("Registry.initialize() should only be called once during runtime.")

        self._is_installed_dependency = bool(is_installed_dependency)
        logger.debug(f"Command registry initialized (installed dependency: {self._is_installed_dependency})")
        return self

    # ---- Registration ----

    def register(self, definition: CommandDefinition, override_if_registered: bool = False) -> "Registry":
        """Register a command defined by a consuming CLI."""
        entry = LocalCommand(
            name=definition.command,
            description=definition.description,
            executable_path=self.path_resolver.resolve_local(definition.command, self.program_name),
        )
        self._add(entry, override_if_registered)
        return self

    def register_many(
        self,
        definitions: Optional[Iterable[CommandDefinition]],
        override_if_registered: bool = False
    ) -> "Registry":
        if not definitions:
            return self

        for definition in definitions:
            self.register(definition, override_if_registered)
        return self

    def register_base(self, name: Optional[str], override_if_registered: bool = False) -> "Registry":
        """Register a base command by name.

        Raises:
            CommandNotFoundError: If name is empty or not in the catalog
        """
        definition = find_base_command(name)
        if definition is None:
            raise CommandNotFoundError(name, base_command_names())

        entry = BaseCommand(
            name=definition.command,
            description=definition.description,
            executable_path=self.path_resolver.resolve(definition.command),
        )
        self._add(entry, override_if_registered)
        return self

    def register_all_base(self, override_if_registered: bool = False) -> "Registry":
        for definition in get_base_command_definitions():
            self.register_base(definition.command, override_if_registered)
        return self

    def register_alias(self, definition: CommandDefinition, override_if_registered: bool = False) -> "Registry":
        """Register an alias whose description is the command + options string it expands to.

        Example:
            CommandDefinition(command="testdb", description="dotnet --cli -- test db migrate")

        Whether the expansion names a real command is not checked here; an
        unknown command is reported by the parser when the alias is used.

        Raises:
            InvalidAliasError: If the alias name or its expansion is blank
        """
        alias = definition.command
        expansion = definition.description.strip()
        if not alias.strip():
            raise InvalidAliasError("Alias name cannot be blank.", alias=alias)
        if not expansion.split():
            raise InvalidAliasError(f"Alias '{alias}' does not expand to any command.", alias=alias)

        entry = AliasCommand(
            name=alias,
            description=add_alias_prefix(expansion),
            expansion=expansion,
        )
        self._add(entry, override_if_registered)
        return self

    def register_aliases_from_config(self, override_if_registered: bool = False) -> "Registry":
        """Register aliases from [tool.and-cli.aliases] in the nearest pyproject.toml.

        A missing or unreadable config registers nothing. Invalid aliases are
        skipped with a warning so the remaining aliases are still registered.

            [tool.and-cli.aliases]
            testdb = "dotnet --cli -- test db migrate"
        """
        aliases = self.package_config.get_local_and_cli_config_or_default().aliases
        if not aliases:
            return self

        for alias, expansion in aliases.items():
            try:
                self.register_alias(CommandDefinition(command=alias, description=expansion), override_if_registered)
            except InvalidAliasError as e:
                logger.warning(f"Skipping alias from project configuration: {e}")
                self.last_registered = False
        return self

    # ---- Removal ----

    def remove(self, name: Optional[str]) -> "Registry":
        """Remove a command by name (case-insensitive). Unknown names are ignored."""
        if not name or name.lower() not in self._index:
            return self

        key = name.lower()
        del self._index[key]
        self._entries = tuple(entry for entry in self._entries if entry.key != key)
        return self

    def clear(self) -> "Registry":
        self._entries = ()
        self._index = {}
        return self

    # ---- Internals ----

    def _add(self, entry: CommandEntry, override_if_registered: bool) -> bool:
        existing = self._index.get(entry.key)
        if existing is not None and not override_if_registered:
            logger.warning(
                f"Command '{entry.name}' has already been registered and 'override_if_registered' "
                f"is set to False. Skipping this command registration."
            )
            self.conflicts.append(RegistrationConflict(name=entry.name, existing=existing, rejected=entry))
            self.last_registered = False
            return False

        if existing is not None:
            self.remove(existing.name)

        self._index[entry.key] = entry
        self._entries = tuple(sorted(self._entries + (entry,), key=_sort_key))
        self.last_registered = True
        logger.debug(f"Registered {entry.kind} command '{entry.name}'")
        return True
