# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Read and write simple ``param = value`` configuration files with groups."""

from __future__ import annotations

from parseconfig.__about__ import __version__
from parseconfig.errors import AccessError, ConfigError, ParseError, TypeConflictError
from parseconfig.store import ConfigStore, unquote  # re-export

__all__ = [
    "AccessError",
    "ConfigError",
    "ConfigStore",
    "ParseError",
    "TypeConflictError",
    "__version__",
    "unquote",
]
