# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from andcli.config.manager import PackageConfig, UserConfig, get_table, load_merged_user_config
from andcli.constants import CLI_NAME
from andcli.system.exceptions import ConfigError


def detect_project_name() -> Optional[str]:
    """Detect current project name from pyproject.toml or directory name.

    Returns:
        Project name or None if not detected
    """
    try:
        local = PackageConfig().get_local() or {}
        name = get_table(local, "project").get("name")
        if name:
            return name
    except ConfigError:
        pass
    cwd = Path.cwd()
    if cwd.name and cwd.name != "/":
        return cwd.name

    return None


def setup_logging(level: Optional[str] = None) -> None:
    """Setup loguru logging for the entire application.

    Configures:
    - Console output: WARNING+ unless the user config or caller says otherwise
    - File output: DEBUG+ if local_log is configured in user config
    """
    logger.remove()

    config_error = None
    try:
        user_config = load_merged_user_config()
    except ConfigError as e:
        user_config = UserConfig()
        config_error = e

    logger.add(
        sys.stderr,
        level=level or user_config.log_level,
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if config_error is not None:
        logger.warning(f"Failed to load user config: {config_error}")

    if not user_config.local_log:
        return

    try:
        log_dir = Path(user_config.local_log)
        log_dir.mkdir(parents=True, exist_ok=True)

        project_name = detect_project_name() or "global"
        log_file = log_dir / f"{CLI_NAME}-{project_name}.log"

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="30 days",
            compression="gz"
        )
        logger.debug(f"File logging enabled: {log_file}")

    except OSError as e:
        # Don't fail the entire application if logging setup fails
        logger.warning(f"Failed to setup file logging: {e}")
