"""Segment model for parsed paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Key:
    """Look up ``name`` in a table."""

    name: str


@dataclass(frozen=True, slots=True)
class Index:
    """Look up ``position`` in an array."""

    position: int

    def __post_init__(self) -> None:
        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise TypeError("Index position must be an int")
        if self.position < 0:
            raise ValueError("Index position must be >= 0")


@dataclass(frozen=True, slots=True)
class Append:
    """Append a new element to an array. Only valid as the last segment."""


Segment: TypeAlias = Key | Index | Append
Path: TypeAlias = tuple[Segment, ...]

_SPECIAL_KEY_CHARS = frozenset('[]"\\')


def _needs_quotes(name: str, separator: str) -> bool:
    if not name:
        return True
    return separator in name or any(
        char in _SPECIAL_KEY_CHARS or char.isspace() for char in name
    )


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_path(segments: Path, separator: str = ".") -> str:
    """Render ``segments`` back into path syntax.

    Keys containing the separator, brackets, quotes or whitespace are
    double-quoted so the result tokenizes to the same segments.
    """

    parts: list[str] = []
    for segment in segments:
        match segment:
            case Key(name=name):
                if parts:
                    parts.append(separator)
                parts.append(_quote(name) if _needs_quotes(name, separator) else name)
            case Index(position=position):
                parts.append(f"[{position}]")
            case Append():
                parts.append("[]")
    return "".join(parts)


__all__ = ["Append", "Index", "Key", "Path", "Segment", "format_path"]
