# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/cli/__init__.py

"""Command Line Interface package for and-cli."""

from .main import build_app, main, parse_with_aliases

__all__ = ['build_app', 'main', 'parse_with_aliases']
