# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/registry/paths.py

"""
Executable path resolution for registered commands.

Every base command runs a separate script named `and-cli-<command>.py`.
Where that script lives depends on how the CLI is being run:
- installed dependency: inside the installed andcli package (`<package>/bin/`)
- development checkout: `./src/andcli/bin/`, relative to the checkout root

Resolution is string building only. No file is checked for existence here;
a missing executable is reported by whatever tries to run it.
"""

from pathlib import Path
from typing import Optional

from andcli.constants import BIN, CLI_NAME, EXECUTABLE_EXTENSION, PACKAGE_NAME, SRC

# Directory of the andcli package
PACKAGE_DIR = Path(__file__).resolve().parent.parent


def executable_filename(command_name: str, program_name: str = CLI_NAME) -> str:
    """Return the script filename for a command, e.g. 'and-cli-dotnet.py'."""
    return f"{program_name}-{command_name}{EXECUTABLE_EXTENSION}"


class PathResolver:
    """Computes executable paths for commands in one deployment mode."""

    def __init__(self, is_installed_dependency: bool = False, package_dir: Optional[Path] = None):
        self.is_installed_dependency = is_installed_dependency
        self.package_dir = package_dir or PACKAGE_DIR

    def resolve(self, command_name: str) -> Path:
        """Path to the executable for a base command."""
        filename = executable_filename(command_name)
        if self.is_installed_dependency:
            # e.g. .../site-packages/andcli/bin/and-cli-dotnet.py
            return self.package_dir / BIN / filename

        # e.g. ./src/andcli/bin/and-cli-dotnet.py
        return Path(".") / SRC / PACKAGE_NAME / BIN / filename

    def resolve_local(self, command_name: str, program_name: str) -> Path:
        """Path to the executable for a command registered by a consuming CLI.

        Local commands live next to the consumer's entrypoint, named after
        its program, e.g. ./my-cli-seed.py
        """
        return Path(".") / executable_filename(command_name, program_name)
