# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/system/process.py

import subprocess
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from andcli.system.exceptions import ExecutableNotFoundError


def build_executable_command(executable_path: Path, args: Sequence[str]) -> list[str]:
    """Command line running a command script with the current interpreter."""
    return [sys.executable, str(executable_path), *args]


def run_executable(executable_path: Path, args: Sequence[str]) -> int:
    """Run a command script in a child process, inheriting stdio.

    Returns:
        The child's exit code

    Raises:
        ExecutableNotFoundError: If the script does not exist
    """
    if not executable_path.is_file():
        raise ExecutableNotFoundError(
            f"'{executable_path}' does not exist",
            path=str(executable_path)
        )

    command = build_executable_command(executable_path, args)
    logger.debug(f"Running: {' '.join(command)}")
    result = subprocess.run(command, check=False)
    logger.debug(f"{executable_path.name} exited with {result.returncode}")
    return result.returncode
