# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/cli/utils.py

"""
CLI utility functions shared by the dispatcher and the bundled commands.

This module provides standardized functions for:
- Building the registry every entrypoint starts from
- Reporting registry errors and exiting
- Cleaning up raw process arguments before parsing
"""

from typing import NoReturn, Optional, Sequence

from rich.console import Console

from andcli.config.manager import PackageConfig
from andcli.registry import Registry
from andcli.system.display import display_error
from andcli.system.exceptions import RegistryError


def build_default_registry(package_config: Optional[PackageConfig] = None) -> Registry:
    """
    Build the registry used when the CLI runs on its own.

    Initializes the path-resolution mode from the nearest project, then
    registers every base command followed by the project's aliases.

    Args:
        package_config: Project config reader (default: nearest pyproject.toml to cwd)

    Returns:
        Populated registry

    Raises:
        RegistryError: If initialization or base command registration fails
    """
    package_config = package_config or PackageConfig()
    registry = Registry(package_config=package_config)
    registry.initialize(package_config.is_installed_dependency())
    return registry.register_all_base().register_aliases_from_config()


def handle_registry_error(console: Console, error: RegistryError) -> NoReturn:
    """Report a fatal registry error and exit with status 1."""
    display_error(console, str(error))
    raise SystemExit(1)


def fix_argument_posix_path_conversion(argv: Sequence[str]) -> list[str]:
    """
    Undo Git Bash POSIX path conversion on escaped arguments.

    To pass an argument starting with '/', users escape it as '//'; one
    leading slash is removed here.
    """
    return [arg[1:] if arg.startswith("//") else arg for arg in argv]
