"""Kinds of values that can appear in a document tree."""

from __future__ import annotations

import datetime
import enum
from collections.abc import MutableMapping, MutableSequence
from typing import TypeAlias

TomlScalar: TypeAlias = (
    str | int | float | bool | datetime.datetime | datetime.date | datetime.time
)
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


class Kind(enum.Enum):
    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATETIME = "Datetime"
    ARRAY = "Array"
    TABLE = "Table"

    @property
    def display_name(self) -> str:
        return self.value


def is_table(value: object) -> bool:
    return isinstance(value, MutableMapping)


def is_array(value: object) -> bool:
    return isinstance(value, MutableSequence)


def kind_of(value: object) -> Kind:
    """Return the :class:`Kind` of a tree value.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass, and
    ``datetime`` before ``date`` for the same reason. Raises ``TypeError``
    for objects that are not tree values.
    """

    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return Kind.DATETIME
    if is_table(value):
        return Kind.TABLE
    if is_array(value):
        return Kind.ARRAY
    raise TypeError(f"{type(value).__name__} is not a document value")


def check_value(value: object) -> Kind:
    """Return the kind of ``value`` after checking every nested value.

    Arrays and tables are walked down to their leaves; table keys must be
    strings. Raises ``TypeError`` naming the location of the first value
    that is not a document value.
    """

    kind = kind_of(value)
    stack: list[tuple[object, str]] = [(value, "")]
    while stack:
        current, location = stack.pop()
        if is_table(current):
            for key, item in current.items():  # type: ignore[attr-defined]
                if not isinstance(key, str):
                    raise TypeError(
                        f"table key {key!r} at {location or '<value>'} is not a string"
                    )
                item_location = f"{location}.{key}" if location else key
                _check_item(item, item_location)
                stack.append((item, item_location))
        elif is_array(current):
            for index, item in enumerate(current):  # type: ignore[arg-type]
                item_location = f"{location}[{index}]"
                _check_item(item, item_location)
                stack.append((item, item_location))
    return kind


def _check_item(item: object, location: str) -> None:
    try:
        kind_of(item)
    except TypeError as exc:
        raise TypeError(f"{exc} (at {location})") from exc


__all__ = [
    "Kind",
    "check_value",
    "TomlScalar",
    "TomlTable",
    "TomlValue",
    "is_array",
    "is_table",
    "kind_of",
]
