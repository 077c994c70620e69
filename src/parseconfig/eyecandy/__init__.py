# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>

#
# SPDX-License-Identifier: MIT

"""Eyecandy UI abstractions for the parseconfig CLI.

Rich-based rendering of config stores as panels and lists.
"""

from parseconfig.eyecandy.table_renderer import TableRenderer

__all__ = ["TableRenderer"]
