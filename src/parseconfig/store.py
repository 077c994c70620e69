# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Config store for ``param = value`` files with optional ``[group]`` sections.

The file is read top down. Anything after a ``[group]`` header belongs to that
group until the next header is found. Values wrapped in one matching pair of
quotes are unquoted; nothing else is interpreted.

Keys are normalized to plain strings on every insertion so that lookups do not
depend on how a key was supplied (``str``, ``bytes`` or an ``Enum`` member).
"""

from __future__ import annotations

import copy
import io
import os
import re
import sys
import warnings
from collections.abc import Iterable, Mapping
from dataclasses import InitVar, dataclass, field
from enum import Enum
from pathlib import Path
from typing import IO, Any

from parseconfig.errors import AccessError, ParseError, TypeConflictError
from parseconfig.logging import logger

BOM = "\ufeff"
COMMENT_PREFIX = "#"
QUOTE_CHARS = ('"', "'")

_GROUP_HEADER = re.compile(r"^\[(.+)\]$")


def canonical_key(key: Any) -> str:
    """Return the canonical string form of ``key``."""
    if isinstance(key, Enum):
        return key.name
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


def canonicalize_mapping(value: Mapping[Any, Any]) -> dict[str, Any]:
    """Return a copy of ``value`` with canonical keys at every nesting level.

    Groups only ever hold scalars when read from a file; deeper mappings are
    accepted here for programmatic callers but never produced by the parser.
    """
    return {
        canonical_key(k): canonicalize_mapping(v) if isinstance(v, Mapping) else v
        for k, v in value.items()
    }


def unquote(value: str) -> str:
    """Strip one outer pair of matching quotes from ``value``.

    Values with unbalanced or embedded quotes of the same kind, such as
    ``"a"b"``, are returned unchanged.
    """
    if (
        len(value) >= 2
        and value[0] in QUOTE_CHARS
        and value[-1] == value[0]
        and value[0] not in value[1:-1]
    ):
        return value[1:-1]
    return value


def _format_entry(name: str, value: Any, *, quoted: bool) -> str:
    if quoted:
        return f'{name} = "{value}"\n'
    return f"{name} = {value}\n"


def _conflict_message(key: str) -> str:
    return f"{key} already exists, and is of different type"


@dataclass(eq=False)
class ConfigStore:
    """Two-level key/value view of a config file.

    Args:
        config_file (str | Path | None): File to validate and import right away
        strict (bool): Raise ParseError on malformed lines instead of skipping them

    Raises:
        AccessError: If ``config_file`` is missing or unreadable
        ParseError: If ``strict`` is set and the file has a malformed line
        TypeConflictError: If the file reuses a scalar key as a group name
    """

    config_file: str | Path | None = None
    strict: InitVar[bool] = False
    params: dict[str, Any] = field(default_factory=dict, init=False)
    groups: list[str] = field(default_factory=list, init=False)

    def __post_init__(self, strict: bool) -> None:
        if self.config_file is not None:
            self.validate_config()
            self.import_config(strict=strict)

    @classmethod
    def loads(cls, text: str, *, strict: bool = False) -> ConfigStore:
        """Build a store from config text."""
        store = cls()
        store.read(io.StringIO(text, newline=None), strict=strict)
        return store

    def _resolve_path(self, path: str | Path | None) -> Path:
        resolved = path if path is not None else self.config_file
        if resolved is None:
            msg = "No config file given"
            raise ValueError(msg)
        return Path(resolved)

    def validate_config(self, path: str | Path | None = None) -> None:
        """Ensure the config file exists and is readable by this process.

        The contents are not inspected.
        """
        config_path = self._resolve_path(path)
        if not config_path.exists():
            msg = f"{config_path} does not exist"
            raise AccessError(msg)
        if not config_path.is_file() or not os.access(config_path, os.R_OK):
            msg = f"{config_path} is not readable"
            raise AccessError(msg)

    def import_config(self, path: str | Path | None = None, *, strict: bool = False) -> None:
        """Import the config file into this store.

        Lines applied before an error stay applied.

        Raises:
            AccessError: If the file cannot be opened or read
            ParseError: If the file is not UTF-8, or on a malformed line in strict mode
        """
        config_path = self._resolve_path(path)
        try:
            with open(config_path, encoding="utf-8") as f:
                self.read(f, strict=strict)
        except UnicodeDecodeError as e:
            msg = f"{config_path} is not valid UTF-8: {e}"
            raise ParseError(msg) from e
        except OSError as e:
            msg = f"Failed to read config file {config_path}: {e}"
            raise AccessError(msg) from e
        logger.debug(
            "Imported %s: %d params, %d groups", config_path, len(self.params), len(self.groups)
        )

    def read(self, lines: Iterable[str], *, strict: bool = False) -> None:
        """Parse config lines from any iterable of text, such as an open file."""
        group: str | None = None
        for index, raw in enumerate(lines):
            line = raw.removeprefix(BOM) if index == 0 else raw
            line = line.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue

            if "=" in line:
                param, value = line.split("=", 1)
                param = param.strip()
                if param:
                    value = unquote(value.strip())
                    if group is None:
                        self.add(param, value)
                    else:
                        self.add_to_group(group, param, value)
                    continue
            else:
                match = _GROUP_HEADER.match(line)
                if match:
                    group = match.group(1)
                    self.add(group, {})
                    continue

            if strict:
                msg = f"Malformed line {index + 1}: {line!r}"
                raise ParseError(msg, line_number=index + 1, line=line)
            logger.debug("Ignoring malformed line %d: %r", index + 1, line)

    def add(self, param_name: Any, value: Any) -> None:
        """Add a parameter; a mapping value creates or extends a group.

        Raises:
            TypeConflictError: If the key already holds the other kind of value
        """
        key = canonical_key(param_name)
        if isinstance(value, Mapping):
            new_group = canonicalize_mapping(value)
            if key not in self.params:
                self.params[key] = new_group
            elif isinstance(self.params[key], dict):
                self.params[key].update(new_group)
            else:
                raise TypeConflictError(_conflict_message(key))
            if key not in self.groups:
                self.groups.append(key)
        else:
            if isinstance(self.params.get(key), dict):
                raise TypeConflictError(_conflict_message(key))
            self.params[key] = value

    def add_to_group(self, group: Any, param_name: Any, value: Any) -> None:
        """Add a parameter to a group, creating the group if needed.

        The same parameter name may appear in different groups.
        """
        group_key = canonical_key(group)
        if group_key not in self.groups:
            self.add(group_key, {})
        if isinstance(value, Mapping):
            value = canonicalize_mapping(value)
        self.params[group_key][canonical_key(param_name)] = value

    def get(self, key: Any, default: Any | None = None) -> Any | None:
        """Return the value or group for key if present, else default."""
        return self.params.get(canonical_key(key), default)

    def get_value(self, key: Any) -> Any | None:
        """Return the value for key. Deprecated, use ``get`` or ``store[key]``."""
        warnings.warn(
            "get_value() is deprecated. Use store.get(key) or store[key] instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get(key)

    def __getitem__(self, key: Any) -> Any:
        return self.params[canonical_key(key)]

    def __contains__(self, key: Any) -> bool:
        return canonical_key(key) in self.params

    def keys(self) -> list[str]:
        """Return all parameter and group names."""
        return list(self.params)

    def group_names(self) -> list[str]:
        """Return group names in the order they were first seen."""
        return list(self.groups)

    def write(self, output_stream: IO[str] | None = None, quoted: bool = True) -> None:
        """Write the config to ``output_stream`` (stdout when omitted).

        Plain parameters come first, then each group under its header. Values
        are not escaped, so quotes or newlines inside values do not survive a
        round trip.
        """
        stream = sys.stdout if output_stream is None else output_stream
        for name, value in self.params.items():
            if not isinstance(value, dict):
                stream.write(_format_entry(name, value, quoted=quoted))
        stream.write("\n")

        for group in self.groups:
            stream.write(f"[{group}]\n")
            for name, value in self.params[group].items():
                stream.write(_format_entry(name, value, quoted=quoted))
            stream.write("\n")

    def dumps(self, quoted: bool = True) -> str:
        """Return the config text that ``write`` would produce."""
        buffer = io.StringIO()
        self.write(buffer, quoted=quoted)
        return buffer.getvalue()

    def save(self, path: str | Path | None = None, quoted: bool = True) -> Path:
        """Write the config to disk, creating parent directories as needed."""
        config_path = self._resolve_path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            self.write(f, quoted=quoted)
        logger.debug("Wrote %s", config_path)
        return config_path

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of all parameters and groups."""
        return copy.deepcopy(self.params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return self.params == other.params and self.groups == other.groups

    __hash__ = None  # type: ignore[assignment]
