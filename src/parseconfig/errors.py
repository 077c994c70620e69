# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Exceptions raised by the config store."""

from __future__ import annotations


class ConfigError(Exception):
    """Base exception for config-related errors."""


class AccessError(ConfigError):
    """Raised when a config file is missing or cannot be read."""


class TypeConflictError(ConfigError):
    """Raised when a key would change between scalar and group."""


class ParseError(ConfigError):
    """Raised for input that cannot be parsed.

    Args:
        msg (str): Human readable description
        line_number (int | None): 1-based line number, if known
        line (str | None): Offending line content, if known
    """

    def __init__(self, msg: str, line_number: int | None = None, line: str | None = None):
        super().__init__(msg)
        self.line_number = line_number
        self.line = line
