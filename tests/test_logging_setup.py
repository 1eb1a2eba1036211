# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_logging_setup.py

from unittest.mock import patch

import pytest
from loguru import logger

from andcli.config.manager import UserConfig
from andcli.system.exceptions import ConfigError
from andcli.system.logging_setup import detect_project_name, setup_logging


@pytest.fixture
def reset_logger():
    """setup_logging() replaces every handler; drop them again afterwards."""
    yield
    logger.remove()


class TestDetectProjectName:
    def test_from_pyproject(self, write_pyproject, tmp_path, monkeypatch):
        write_pyproject("[project]\nname = 'demo-project'\n")
        monkeypatch.chdir(tmp_path)

        assert detect_project_name() == "demo-project"

    def test_falls_back_to_directory_name(self, tmp_path, monkeypatch):
        project_dir = tmp_path / "my-checkout"
        project_dir.mkdir()
        monkeypatch.chdir(project_dir)

        with patch("andcli.system.logging_setup.PackageConfig.get_local", return_value=None):
            assert detect_project_name() == "my-checkout"

    def test_malformed_pyproject_falls_back(self, write_pyproject, tmp_path, monkeypatch):
        project_dir = tmp_path / "broken"
        write_pyproject("[project\n", directory=project_dir)
        monkeypatch.chdir(project_dir)

        assert detect_project_name() == "broken"

    def test_non_table_project_falls_back(self, write_pyproject, tmp_path, monkeypatch):
        project_dir = tmp_path / "odd"
        write_pyproject("project = 1\n", directory=project_dir)
        monkeypatch.chdir(project_dir)

        assert detect_project_name() == "odd"


class TestSetupLogging:
    def test_file_logging_enabled(self, tmp_path, monkeypatch, reset_logger):
        log_dir = tmp_path / "logs"
        monkeypatch.chdir(tmp_path)
        with patch("andcli.system.logging_setup.load_merged_user_config",
                   return_value=UserConfig(local_log=log_dir)), \
             patch("andcli.system.logging_setup.detect_project_name", return_value="demo"):
            setup_logging()
            logger.info("written to file")

        log_file = log_dir / "and-cli-demo.log"
        assert log_file.exists()
        assert "written to file" in log_file.read_text()

    def test_no_file_without_local_log(self, tmp_path, reset_logger):
        with patch("andcli.system.logging_setup.load_merged_user_config", return_value=UserConfig()):
            setup_logging()
            logger.warning("console only")

        assert not any(tmp_path.iterdir())

    def test_global_name_when_project_unknown(self, tmp_path, reset_logger):
        with patch("andcli.system.logging_setup.load_merged_user_config",
                   return_value=UserConfig(local_log=tmp_path)), \
             patch("andcli.system.logging_setup.detect_project_name", return_value=None):
            setup_logging()
            logger.debug("global")

        assert (tmp_path / "and-cli-global.log").exists()

    def test_console_level_from_user_config(self, capsys, reset_logger):
        with patch("andcli.system.logging_setup.load_merged_user_config",
                   return_value=UserConfig(log_level="ERROR")):
            setup_logging()
            logger.warning("hidden")
            logger.error("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_explicit_level_overrides_user_config(self, capsys, reset_logger):
        with patch("andcli.system.logging_setup.load_merged_user_config",
                   return_value=UserConfig(log_level="ERROR")):
            setup_logging(level="DEBUG")
            logger.debug("verbose")

        assert "verbose" in capsys.readouterr().err

    def test_invalid_user_config_warns_and_continues(self, capsys, reset_logger):
        with patch("andcli.system.logging_setup.load_merged_user_config",
                   side_effect=ConfigError("bad value")):
            setup_logging()

        err = capsys.readouterr().err
        assert "Failed to load user config" in err
        assert "bad value" in err

    def test_unwritable_log_dir_warns(self, tmp_path, capsys, reset_logger):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with patch("andcli.system.logging_setup.load_merged_user_config",
                   return_value=UserConfig(local_log=blocker / "logs")):
            setup_logging()

        assert "Failed to setup file logging" in capsys.readouterr().err
