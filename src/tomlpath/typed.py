"""Narrow resolved values to a requested kind.

These helpers never look into the tree beyond the value they are given;
resolution failures have already been raised before they run.
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence
from typing import cast

from .errors import Operation, TypeMismatchError
from .segments import Key, format_path
from .values import Kind, TomlValue, kind_of


def narrow(
    value: TomlValue,
    kind: Kind,
    *,
    path: str = "",
    operation: Operation = Operation.NARROW,
) -> TomlValue:
    """Return ``value`` unchanged if it is of ``kind``.

    Raises :class:`TypeMismatchError` naming both the expected and the
    actual kind otherwise.
    """

    actual = kind_of(value)
    if actual is not kind:
        raise TypeMismatchError(operation, path, kind, actual)
    return value


def narrow_items(
    value: TomlValue,
    kind: Kind,
    *,
    path: str = "",
    operation: Operation = Operation.NARROW,
) -> MutableSequence[TomlValue]:
    """Narrow an array and each of its elements to ``kind``."""

    array = cast(
        MutableSequence[TomlValue],
        narrow(value, Kind.ARRAY, path=path, operation=operation),
    )
    for index, item in enumerate(array):
        narrow(item, kind, path=f"{path}[{index}]", operation=operation)
    return array


def narrow_values(
    value: TomlValue,
    kind: Kind,
    *,
    path: str = "",
    separator: str = ".",
    operation: Operation = Operation.NARROW,
) -> MutableMapping[str, TomlValue]:
    """Narrow a table and each of its values to ``kind``."""

    table = cast(
        MutableMapping[str, TomlValue],
        narrow(value, Kind.TABLE, path=path, operation=operation),
    )
    for key, item in table.items():
        key_path = format_path((Key(key),), separator)
        item_path = f"{path}{separator}{key_path}" if path else key_path
        narrow(item, kind, path=item_path, operation=operation)
    return table


__all__ = ["narrow", "narrow_items", "narrow_values"]
