"""Exceptions raised by path parsing, resolution and narrowing."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .values import Kind


class Operation(enum.Enum):
    """Operation that was running when a failure occurred."""

    PARSE = "parse"
    READ = "read"
    READ_MUT = "read_mut"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    SET = "set"
    NARROW = "narrow"


class ErrorKind(enum.Enum):
    PARSE_ERROR = "parse error"
    NOT_FOUND = "not found"
    TYPE_MISMATCH = "type mismatch"
    ALREADY_EXISTS = "already exists"


class PathError(Exception):
    """Base exception for every documented path failure.

    Carries the ``operation`` that failed, the offending ``path`` (the
    sub-path resolved so far, including the failing segment) and the error
    ``kind``. ``position`` is the index of the failing segment, or ``None``
    when the failure is not tied to a segment.
    """

    kind: ErrorKind

    def __init__(
        self,
        operation: Operation,
        path: str,
        detail: str | None = None,
        *,
        position: int | None = None,
    ) -> None:
        self.operation = operation
        self.path = path
        self.detail = detail
        self.position = position
        message = f"{operation.value} failed at {path!r}: {self.kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ParseError(PathError, ValueError):
    kind = ErrorKind.PARSE_ERROR

    def __init__(self, path: str, detail: str, *, offset: int | None = None) -> None:
        self.offset = offset
        super().__init__(Operation.PARSE, path, detail)


class NotFoundError(PathError, LookupError):
    kind = ErrorKind.NOT_FOUND


class TypeMismatchError(PathError, TypeError):
    """Raised when a segment or a narrowing request meets the wrong kind."""

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(
        self,
        operation: Operation,
        path: str,
        expected: Kind,
        actual: Kind,
        *,
        position: int | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            operation,
            path,
            f"expected {expected.display_name}, got {actual.display_name}",
            position=position,
        )


class AlreadyExistsError(PathError):
    kind = ErrorKind.ALREADY_EXISTS


__all__ = [
    "AlreadyExistsError",
    "ErrorKind",
    "NotFoundError",
    "Operation",
    "ParseError",
    "PathError",
    "TypeMismatchError",
]
