# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Turning a finished run into something a human or a script can read."""
