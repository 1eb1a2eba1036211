# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/system/__init__.py

"""System-level support: exceptions, logging, display and process spawning."""
