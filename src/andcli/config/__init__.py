# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/config/__init__.py

"""Project (pyproject.toml) and user (and-cli.yml) configuration."""

from .manager import (
    AndCliConfig,
    PackageConfig,
    UserConfig,
    find_project_config_path,
    get_base_description,
    get_base_version,
    get_table,
    load_merged_user_config,
)

__all__ = [
    'AndCliConfig',
    'PackageConfig',
    'UserConfig',
    'find_project_config_path',
    'get_base_description',
    'get_base_version',
    'get_table',
    'load_merged_user_config',
]
