"""Path string tokenizer.

Grammar, with ``.`` standing for the configured separator::

    path    := token ("." token)*
    token   := key bracket* | bracket+      (bracket-only token: first only)
    key     := bare | '"' quoted '"'
    bracket := "[" digits "]" | "[]"

``[]`` (append) may only be the last segment. A token that starts with a
bracket is accepted only at the start of the path; such a path addresses
into a root that is itself an array.
"""

from __future__ import annotations

from functools import lru_cache

from .errors import ParseError
from .segments import Append, Index, Key, Path, Segment

_RESERVED_SEPARATORS = frozenset('[]"\\')
_KEY_STOP_CHARS = frozenset('[]"')


def tokenize(path: str, *, separator: str = ".") -> Path:
    """Split ``path`` into a tuple of segments.

    Raises :class:`~tomlpath.errors.ParseError` for malformed paths.
    """

    if not isinstance(path, str):
        raise TypeError(f"path must be str, got {type(path).__name__}")
    check_separator(separator)
    return _tokenize(path, separator)


def check_separator(separator: str) -> None:
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if separator in _RESERVED_SEPARATORS or separator.isspace():
        raise ValueError(f"separator {separator!r} is reserved by the path syntax")


@lru_cache(maxsize=1024)
def _tokenize(path: str, separator: str) -> Path:
    if not path:
        raise ParseError(path, "empty path")

    segments: list[Segment] = []
    pos = 0
    end = len(path)
    while True:
        if path[pos] == "[":
            if segments:
                raise ParseError(
                    path, "index must follow a key without a separator", offset=pos
                )
        else:
            name, pos = _read_key(path, pos, separator)
            segments.append(Key(name))

        while pos < end and path[pos] == "[":
            segment, pos = _read_bracket(path, pos)
            segments.append(segment)

        if pos == end:
            break
        if path[pos] != separator:
            raise ParseError(path, f"unexpected {path[pos]!r}", offset=pos)
        pos += 1
        if pos == end:
            raise ParseError(path, "trailing separator", offset=pos - 1)

    for segment in segments[:-1]:
        if isinstance(segment, Append):
            raise ParseError(path, "'[]' is only allowed as the last segment")
    return tuple(segments)


def _read_key(path: str, pos: int, separator: str) -> tuple[str, int]:
    if path[pos] == '"':
        return _read_quoted_key(path, pos)

    start = pos
    end = len(path)
    while pos < end and path[pos] != separator and path[pos] not in _KEY_STOP_CHARS:
        pos += 1

    if pos == start:
        if pos < end and path[pos] == separator:
            raise ParseError(path, "empty key", offset=pos)
        if pos < end and path[pos] == "]":
            raise ParseError(path, "unmatched ']'", offset=pos)
        raise ParseError(path, "unexpected '\"'", offset=pos)
    if pos < end and path[pos] == "]":
        raise ParseError(path, "unmatched ']'", offset=pos)
    if pos < end and path[pos] == '"':
        raise ParseError(path, "unexpected '\"'", offset=pos)
    return path[start:pos], pos


def _read_quoted_key(path: str, pos: int) -> tuple[str, int]:
    chars: list[str] = []
    start = pos
    pos += 1
    end = len(path)
    while pos < end:
        char = path[pos]
        if char == '"':
            return "".join(chars), pos + 1
        if char == "\\":
            if pos + 1 < end and path[pos + 1] in '"\\':
                chars.append(path[pos + 1])
                pos += 2
                continue
            raise ParseError(path, "invalid escape in quoted key", offset=pos)
        chars.append(char)
        pos += 1
    raise ParseError(path, "unterminated quoted key", offset=start)


def _read_bracket(path: str, pos: int) -> tuple[Segment, int]:
    close = path.find("]", pos + 1)
    if close == -1:
        raise ParseError(path, "unmatched '['", offset=pos)

    content = path[pos + 1 : close]
    if not content:
        return Append(), close + 1
    if content.isascii() and content.isdigit():
        return Index(int(content)), close + 1
    raise ParseError(path, f"invalid array index {content!r}", offset=pos + 1)


__all__ = ["check_separator", "tokenize"]
