"""Reading simple ``key = value`` property files."""

from __future__ import annotations

import os
import re
from typing import Union

_INT = re.compile(r"[+-]?[0-9]+")

PathLike = Union[str, "os.PathLike[str]"]


class Properties(dict):
    """Keys mapped to raw string values, with typed accessors."""

    def get_int(self, key: str, default: int = 0) -> int:
        """The value as an integer, 0 if it does not parse, ``default`` if absent."""
        if key not in self:
            return default
        value = self[key]
        return int(value) if _INT.fullmatch(value) else 0

    def get_float(self, key: str, default: float = 0.0) -> float:
        """The value as a float, 0.0 if it does not parse, ``default`` if absent."""
        if key not in self:
            return default
        value = self[key]
        if not value or value != value.strip() or "_" in value:
            return 0.0
        try:
            return float(value)
        except ValueError:
            return 0.0

    def get_string(self, key: str, default: str = "") -> str:
        """The raw value, or ``default`` if absent."""
        return self[key] if key in self else default


def read_properties(file_path: PathLike) -> Properties:
    """Parse a property file; lines whose key starts with ``#`` are skipped.

    Keys are stripped of surrounding whitespace and values of leading
    whitespace. A line without ``=`` maps its key to an empty value.
    """
    props = Properties()
    with open(file_path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            line = line.rstrip("\n").rstrip("\r")
            key, sep, value = line.partition("=")
            key = key.strip()
            if key.startswith("#"):
                continue
            props[key] = value.lstrip() if sep else ""
    return props