# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/system/exceptions.py

"""
and-cli exception classes.

Registry errors are raised where they are detected and turned into a
user-facing message and exit status 1 by the dispatch driver only; the
registry itself never exits the process.
"""

from typing import Iterable, Optional


class AndCliError(Exception):
    """Base exception for all and-cli errors."""
    pass


class ConfigError(AndCliError):
    """Raised when project or user configuration cannot be read or validated."""
    pass


# === REGISTRY ERRORS ===

class RegistryError(AndCliError):
    """Base class for command registry errors. Always fatal to the CLI run."""
    pass


class CommandNotFoundError(RegistryError):
    """Raised when a base command name is empty or missing from the catalog."""

    def __init__(self, name: Optional[str], available: Iterable[str]):
        self.name = name
        self.available = list(available)
        available_str = ", ".join(self.available)
        if not name:
            message = f"Command name is required. Available commands are: {available_str}"
        else:
            message = f"The specified command '{name}' was not found. Available commands are: {available_str}"
        super().__init__(message)


class InitializationError(RegistryError):
    """Raised when Registry.initialize() is called with no value or more than once."""
    pass


class InvalidAliasError(RegistryError):
    """Raised when an alias has no name or its expansion contains no tokens."""

    def __init__(self, message: str, alias: Optional[str] = None):
        self.alias = alias
        super().__init__(message)


# === DISPATCH ERRORS ===

class ExecutableNotFoundError(AndCliError):
    """Raised when a selected command's executable does not exist."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
