# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Allows `python -m montepi NUMBER`."""

from montepi.cli.main import main

if __name__ == "__main__":
    main()
