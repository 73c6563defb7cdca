"""Public entry point: path-string operations on a caller-owned tree."""

from __future__ import annotations

import datetime
from collections.abc import MutableMapping, MutableSequence
from typing import cast

from .config import DEFAULT_CONFIG, TomlPathConfig
from .errors import NotFoundError, Operation
from .resolver import Resolver, Slot
from .segments import Path
from .tokenizer import tokenize
from .typed import narrow, narrow_items, narrow_values
from .values import Kind, TomlValue


class Document:
    """Wraps a document tree and resolves path strings against it.

    The tree is borrowed, never copied: every mutation is visible through
    the object passed in.
    """

    def __init__(self, tree: TomlValue, config: TomlPathConfig | None = None) -> None:
        self._tree = tree
        self.config = config if config is not None else DEFAULT_CONFIG
        self._resolver = Resolver(
            separator=self.config.separator, trace=self.config.trace
        )

    @property
    def tree(self) -> TomlValue:
        return self._tree

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tree!r})"

    def _segments(self, path: str) -> Path:
        return tokenize(path, separator=self.config.separator)

    def read(self, path: str) -> TomlValue:
        return self._resolver.read(self._tree, self._segments(path))

    def read_opt(self, path: str, default: TomlValue | None = None) -> TomlValue | None:
        """Like :meth:`read`, but return ``default`` when the path is absent.

        Parse errors and type mismatches are still raised.
        """

        try:
            return self.read(path)
        except NotFoundError:
            return default

    def read_mut(self, path: str) -> Slot:
        return self._resolver.read_mut(self._tree, self._segments(path))

    def insert(self, path: str, value: TomlValue) -> None:
        self._resolver.insert(self._tree, self._segments(path), value)

    def update(self, path: str, value: TomlValue) -> TomlValue:
        return self._resolver.update(self._tree, self._segments(path), value)

    def delete(self, path: str) -> TomlValue:
        return self._resolver.delete(self._tree, self._segments(path))

    def set(self, path: str, value: TomlValue) -> TomlValue | None:
        return self._resolver.set(self._tree, self._segments(path), value)


class TypedDocument(Document):
    """Document with accessors that narrow the read value to a kind."""

    def read_as(self, path: str, kind: Kind) -> TomlValue:
        return narrow(self.read(path), kind, path=path, operation=Operation.READ)

    def read_string(self, path: str) -> str:
        return cast(str, self.read_as(path, Kind.STRING))

    def read_int(self, path: str) -> int:
        return cast(int, self.read_as(path, Kind.INTEGER))

    def read_float(self, path: str) -> float:
        return cast(float, self.read_as(path, Kind.FLOAT))

    def read_bool(self, path: str) -> bool:
        return cast(bool, self.read_as(path, Kind.BOOLEAN))

    def read_datetime(self, path: str) -> datetime.datetime | datetime.date | datetime.time:
        return cast(
            datetime.datetime | datetime.date | datetime.time,
            self.read_as(path, Kind.DATETIME),
        )

    def read_array(self, path: str) -> MutableSequence[TomlValue]:
        return cast(MutableSequence[TomlValue], self.read_as(path, Kind.ARRAY))

    def read_table(self, path: str) -> MutableMapping[str, TomlValue]:
        return cast(MutableMapping[str, TomlValue], self.read_as(path, Kind.TABLE))

    def read_array_of(self, path: str, kind: Kind) -> MutableSequence[TomlValue]:
        return narrow_items(self.read(path), kind, path=path, operation=Operation.READ)

    def read_table_of(self, path: str, kind: Kind) -> MutableMapping[str, TomlValue]:
        return narrow_values(
            self.read(path),
            kind,
            path=path,
            separator=self.config.separator,
            operation=Operation.READ,
        )


def open_document(tree: TomlValue, config: TomlPathConfig | None = None) -> Document:
    """Wrap ``tree`` in the document class selected by ``config.typed``."""

    resolved = config if config is not None else DEFAULT_CONFIG
    if resolved.typed:
        return TypedDocument(tree, resolved)
    return Document(tree, resolved)


__all__ = ["Document", "TypedDocument", "open_document"]
