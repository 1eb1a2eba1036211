# Author: PB & Claude
# Maintainer: PB
# Original date: 2025.07.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/andcli/__main__.py

from andcli.cli import main

main()
