# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/registry/__init__.py

"""Command registry: registered entries, executable paths and alias expansion."""

from .aliases import expand_if_alias
from .core import Registry, RegistrationConflict
from .entries import AliasCommand, BaseCommand, CommandEntry, LocalCommand
from .paths import PathResolver

__all__ = [
    'AliasCommand',
    'BaseCommand',
    'CommandEntry',
    'LocalCommand',
    'PathResolver',
    'Registry',
    'RegistrationConflict',
    'expand_if_alias',
]
