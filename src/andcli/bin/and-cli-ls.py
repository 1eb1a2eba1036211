#!/usr/bin/env python3
# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.17
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/bin/and-cli-ls.py

"""Executable for `and-cli ls`."""

from andcli.cli.commands.listing import app

if __name__ == "__main__":
    app(prog_name="and-cli ls")
