# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the and-cli test suite.
"""

import io
from pathlib import Path
from typing import Callable

import pytest
from loguru import logger
from rich.console import Console

from andcli.config.manager import PackageConfig
from andcli.registry import Registry


@pytest.fixture
def write_pyproject(tmp_path) -> Callable[..., Path]:
    """Factory writing a pyproject.toml into tmp_path (or a given directory)."""
    def _write(content: str, directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / "pyproject.toml"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        return target
    return _write


@pytest.fixture
def alias_pyproject_text() -> str:
    """Project config declaring a binary and two aliases."""
    return """
[project]
name = "demo-project"
version = "1.0.0"

[project.scripts]
demo-cli = "demo.cli:main"

[tool.and-cli.aliases]
testdb = "dotnet --cli -- test db migrate"
cleanall = "dotnet --clean"
"""


@pytest.fixture
def package_config(tmp_path) -> PackageConfig:
    """Package config rooted at the (initially empty) tmp_path."""
    return PackageConfig(start_path=tmp_path)


@pytest.fixture
def registry(package_config) -> Registry:
    """Fresh, uninitialized registry reading config from tmp_path."""
    return Registry(package_config=package_config)


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def log_warnings(log_records) -> Callable[[], list[str]]:
    """Callable returning the WARNING messages captured so far."""
    return lambda: [record["message"] for record in log_records if record["level"].name == "WARNING"]


@pytest.fixture
def console_output():
    """Rich console writing to a string buffer, wide enough not to wrap."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=300, no_color=True)
    return console, buffer
