# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/config/manager.py

from __future__ import annotations

import importlib.metadata
import os
import tomllib
from pathlib import Path
from typing import Any, Final, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from andcli.constants import CLI_NAME, PYPROJECT, USER_CFG
from andcli.system.exceptions import ConfigError


# ---- Constants ----

DISTRIBUTION: Final = CLI_NAME
DEVELOPMENT_VERSION: Final = "0.0.0.dev0"
DEFAULT_DESCRIPTION: Final = "and-cli - developer tooling for AndcultureCode projects"

# Section names under [tool.and-cli]
ALIASES_SECTION: Final = "aliases"


# ---- Base package metadata ----

def get_base_version() -> str:
    """Version of the installed and-cli distribution."""
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return DEVELOPMENT_VERSION


def get_base_description() -> str:
    """Summary of the installed and-cli distribution."""
    try:
        summary = importlib.metadata.metadata(DISTRIBUTION).get("Summary")
    except importlib.metadata.PackageNotFoundError:
        return DEFAULT_DESCRIPTION
    return summary or DEFAULT_DESCRIPTION


# ---- Project config ----

class AndCliConfig(BaseModel):
    """The [tool.and-cli] section of a project's pyproject.toml."""
    model_config = ConfigDict(extra='allow')

    aliases: dict[str, str] = Field(default_factory=dict, description="Alias name -> expansion string")

    @field_validator("aliases")
    @classmethod
    def alias_names_not_blank(cls, aliases: dict[str, str]) -> dict[str, str]:
        blank = [name for name in aliases if not name.strip()]
        if blank:
            raise ValueError("alias names cannot be blank")
        return aliases


def find_project_config_path(start: Path | None = None) -> Path:
    """Walk up from start path looking for pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for parent in [current] + list(current.parents):
        candidate = parent / PYPROJECT
        if candidate.is_file():
            return candidate

    raise FileNotFoundError(f"No {PYPROJECT} found in this or any parent directory")


def get_table(data: dict[str, Any], key: str, where: Optional[str] = None) -> dict[str, Any]:
    """Return the TOML table stored under key, or an empty dict when the key is absent.

    Raises:
        ConfigError: If the key holds something other than a table
    """
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"Expected [{where or key}] to be a table, got {type(value).__name__}")
    return value


class PackageConfig:
    """Read-only access to the nearest project's pyproject.toml.

    Nothing is cached: every accessor reads the file again, so the values
    always reflect the file on disk.
    """

    def __init__(self, start_path: Optional[Path] = None):
        self.start_path = start_path

    def find_path(self) -> Optional[Path]:
        try:
            return find_project_config_path(self.start_path)
        except FileNotFoundError:
            return None

    def get_local(self) -> Optional[dict[str, Any]]:
        """Parsed pyproject.toml nearest to the start path, or None if there is none.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML
        """
        config_path = self.find_path()
        if config_path is None:
            return None

        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Unable to read {config_path}: {e}") from e

        logger.debug(f"Loaded project config from {config_path}")
        return data

    def get_local_bin_name(self) -> Optional[str]:
        """First script name declared in [project.scripts], or None.

        Only the first name is returned when several scripts are declared.
        """
        try:
            local = self.get_local() or {}
            scripts = get_table(get_table(local, "project"), "scripts", "project.scripts")
        except ConfigError as e:
            logger.warning(f"Unable to determine local binary name: {e}")
            return None

        if not scripts:
            return None
        return next(iter(scripts))

    def is_installed_dependency(self) -> bool:
        """True unless running from the and-cli checkout itself."""
        return self.get_local_bin_name() != CLI_NAME

    def load_local_and_cli_config(self) -> AndCliConfig:
        """Load [tool.and-cli] from the nearest pyproject.toml.

        Raises:
            ConfigError: If the file or its [tool.and-cli] section is malformed
        """
        local = self.get_local()
        if local is None:
            return AndCliConfig()

        section = get_table(local, "tool").get(CLI_NAME)
        if section is None:
            return AndCliConfig()

        try:
            return AndCliConfig.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid [tool.{CLI_NAME}] section: {e}") from e

    def get_local_and_cli_config_or_default(self) -> AndCliConfig:
        """Like load_local_and_cli_config(), but degrades to the default config on any error."""
        try:
            return self.load_local_and_cli_config()
        except ConfigError as e:
            logger.warning(f"Ignoring project configuration: {e}")
            return AndCliConfig()


# ---- User Config ----

class UserConfig(BaseModel):
    """User configuration; every field is optional."""
    local_log: Optional[Path] = None
    log_level: str = Field(default="WARNING", description="Console log level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so environment variables set by tests apply.
    """
    return (
        Path("/etc/and-cli") / USER_CFG,
        Path.home() / ".config" / "and-cli" / USER_CFG,
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "and-cli" / USER_CFG,
        Path(os.getenv("ANDCLI_CONFIG_HOME", "")) / USER_CFG,
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths, later files winning."""
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        # Unset env vars produce relative paths; skip them
        if not candidate.is_absolute() or not candidate.exists():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"expected a mapping, got {type(data).__name__}")
            merged_data.update(data)
            found_configs.append(str(candidate))
            logger.debug(f"Loaded config from {candidate}")
        except (OSError, yaml.YAMLError, ConfigError) as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    return merged_data


def load_merged_user_config() -> UserConfig:
    """Load and merge user config from all locations (system defaults + user overrides).

    Raises:
        ConfigError: If the merged data does not validate
    """
    merged_data = _load_merged_config_data(_get_user_config_search_paths())
    try:
        return UserConfig.model_validate(merged_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid user config: {e}") from e


# done.
