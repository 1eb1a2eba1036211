# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_aliases.py

import pytest

from andcli.catalog import CommandDefinition
from andcli.registry import expand_if_alias
from andcli.registry.aliases import find_alias, match_alias


@pytest.fixture
def alias_registry(registry):
    registry.register_all_base()
    registry.register_alias(CommandDefinition(command="testdb", description="dotnet --cli -- test db migrate"))
    registry.register_alias(CommandDefinition(command="cleanall", description="dotnet --clean"))
    return registry


class TestExpandIfAlias:
    def test_expands_single_alias_argument(self, alias_registry):
        result = expand_if_alias(alias_registry, ["python", "and-cli", "testdb"])
        assert result == ["dotnet", "--cli", "--", "test", "db", "migrate"]

    def test_registry_method_delegates(self, alias_registry):
        assert alias_registry.expand_if_alias(["python", "and-cli", "cleanall"]) == ["dotnet", "--clean"]

    def test_extra_arguments_are_not_expanded(self, alias_registry):
        assert expand_if_alias(alias_registry, ["python", "and-cli", "testdb", "extra"]) is None

    def test_alias_not_in_last_position_is_not_expanded(self, alias_registry):
        assert expand_if_alias(alias_registry, ["python", "and-cli", "dotnet", "testdb"]) is None

    def test_no_user_arguments(self, alias_registry):
        assert expand_if_alias(alias_registry, ["python", "and-cli"]) is None

    def test_non_alias_command(self, alias_registry):
        assert expand_if_alias(alias_registry, ["python", "and-cli", "dotnet"]) is None

    def test_unknown_token(self, alias_registry):
        assert expand_if_alias(alias_registry, ["python", "and-cli", "nope"]) is None

    def test_match_is_case_sensitive(self, alias_registry):
        assert expand_if_alias(alias_registry, ["python", "and-cli", "TESTDB"]) is None

    def test_no_aliases_registered(self, registry):
        registry.register_all_base()
        assert expand_if_alias(registry, ["python", "and-cli", "dotnet"]) is None

    def test_custom_prefix_length(self, alias_registry):
        assert expand_if_alias(alias_registry, ["and-cli", "cleanall"], prefix_length=1) == ["dotnet", "--clean"]

    def test_does_not_mutate_input_or_registry(self, alias_registry):
        raw_args = ["python", "and-cli", "testdb"]
        before = alias_registry.commands

        expand_if_alias(alias_registry, raw_args)

        assert raw_args == ["python", "and-cli", "testdb"]
        assert alias_registry.commands is before


class TestMatchAlias:
    def test_returns_alias_entry(self, alias_registry):
        alias = match_alias(alias_registry, ["python", "and-cli", "testdb"])
        assert alias is not None
        assert alias.name == "testdb"

    def test_find_alias_ignores_other_kinds(self, alias_registry):
        assert find_alias(alias_registry, "dotnet") is None
        assert find_alias(alias_registry, "cleanall").expansion == "dotnet --clean"
