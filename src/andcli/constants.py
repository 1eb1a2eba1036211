# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/constants.py

"""Names shared across the CLI so they are not hard-coded in several places."""

from typing import Final

# Name of the CLI; also the prefix of every command executable
CLI_NAME: Final = "and-cli"

# Import package name, used to build development checkout paths
PACKAGE_NAME: Final = "andcli"

SRC: Final = "src"
BIN: Final = "bin"
EXECUTABLE_EXTENSION: Final = ".py"

# Project configuration file searched for aliases and the local binary name
PYPROJECT: Final = "pyproject.toml"

# Help-menu marker placed before an alias's expansion
ALIAS_PREFIX: Final = "(alias)"

# User configuration file (optional)
USER_CFG: Final = "and-cli.yml"

# Interpreter + entrypoint, e.g. ["python", "and-cli.py", ...]
ARGV_PREFIX_LENGTH: Final = 2
