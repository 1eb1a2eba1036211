# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_catalog.py

import pytest
from pydantic import ValidationError

from andcli.catalog import (
    BASE_COMMAND_DEFINITIONS,
    CommandDefinition,
    base_command_names,
    find_base_command,
    get_base_command_definitions,
    is_base_command,
)


EXPECTED_COMMANDS = [
    "copy",
    "deploy",
    "dotnet",
    "dotnet-test",
    "github",
    "health-check",
    "install",
    "ls",
    "migration",
    "nuget",
    "restore",
    "webpack",
    "webpack-test",
    "workspace",
]


class TestCatalog:
    def test_catalog_contents(self):
        assert base_command_names() == EXPECTED_COMMANDS

    def test_names_unique_case_insensitively(self):
        lowered = [name.lower() for name in base_command_names()]
        assert len(lowered) == len(set(lowered))

    def test_every_entry_has_description(self):
        for definition in BASE_COMMAND_DEFINITIONS:
            assert definition.description.strip(), definition.command

    def test_get_base_command_definitions_is_stable(self):
        assert get_base_command_definitions() is BASE_COMMAND_DEFINITIONS
        assert get_base_command_definitions() == get_base_command_definitions()

    def test_definitions_are_immutable(self):
        definition = find_base_command("dotnet")
        with pytest.raises(ValidationError):
            definition.description = "changed"

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            CommandDefinition(command="x", description="y", extra="z")

    def test_str(self):
        assert str(CommandDefinition(command="ls", description="List")) == "ls: List"


class TestFindBaseCommand:
    @pytest.mark.parametrize("name", ["webpack", "WEBPACK", "WebPack"])
    def test_case_insensitive(self, name):
        definition = find_base_command(name)
        assert definition is not None
        assert definition.command == "webpack"

    @pytest.mark.parametrize("name", ["", None, "not-a-real-command", "webpack "])
    def test_not_found(self, name):
        assert find_base_command(name) is None
        assert is_base_command(name) is False

    def test_is_base_command(self):
        assert is_base_command("health-check") is True
