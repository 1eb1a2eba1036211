# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.17
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/cli/commands/__init__.py

"""Command handlers for the commands implemented inside the andcli package."""

from . import listing

__all__ = ['listing']
