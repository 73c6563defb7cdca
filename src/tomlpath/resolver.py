"""Walk and mutate a document tree along a tokenized path.

Every operation applies segments strictly left to right with at most one
descent per segment. Failures are raised as :class:`PathError` subclasses
naming the sub-path up to and including the failing segment.
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence
from dataclasses import dataclass
from typing import cast

from .errors import (
    AlreadyExistsError,
    NotFoundError,
    Operation,
    TypeMismatchError,
)
from .runtime.logging import get_logger
from .segments import Append, Index, Key, Path, Segment, format_path
from .values import Kind, TomlValue, check_value, is_array, is_table, kind_of

Container = MutableMapping[str, TomlValue] | MutableSequence[TomlValue]


@dataclass(frozen=True)
class Slot:
    """A writable location inside a tree: a container plus a key or index.

    Returned by :meth:`Resolver.read_mut`. The slot stays valid until the
    container is structurally changed by someone else.
    """

    container: Container
    accessor: str | int
    path: str

    @property
    def value(self) -> TomlValue:
        return self.container[self.accessor]  # type: ignore[index]

    def replace(self, value: TomlValue) -> TomlValue:
        """Write ``value`` in place and return the previous value."""

        check_value(value)
        previous = self.value
        self.container[self.accessor] = value  # type: ignore[index]
        return previous

    def remove(self) -> TomlValue:
        """Remove the slot from its container and return its value."""

        if isinstance(self.accessor, int):
            return cast(MutableSequence[TomlValue], self.container).pop(self.accessor)
        return cast(MutableMapping[str, TomlValue], self.container).pop(self.accessor)


def _new_container(segment: Segment) -> TomlValue:
    if isinstance(segment, Key):
        return {}
    return []


class Resolver:
    """Executes read/read_mut/insert/update/delete/set against a root value."""

    def __init__(self, *, separator: str = ".", trace: bool = False) -> None:
        self.separator = separator
        self.trace = trace
        self._logger = get_logger()

    def _sub_path(self, segments: Path, position: int) -> str:
        return format_path(segments[: position + 1], self.separator)

    def _log(self, message: str, *args: object) -> None:
        if self.trace:
            self._logger.debug(message, *args)

    def _mismatch(
        self,
        operation: Operation,
        segments: Path,
        position: int,
        expected: Kind,
        node: TomlValue,
    ) -> TypeMismatchError:
        return TypeMismatchError(
            operation,
            self._sub_path(segments, position),
            expected,
            kind_of(node),
            position=position,
        )

    def _not_found(
        self,
        operation: Operation,
        segments: Path,
        position: int,
        detail: str | None = None,
    ) -> NotFoundError:
        return NotFoundError(
            operation, self._sub_path(segments, position), detail, position=position
        )

    def _step(
        self, node: TomlValue, segments: Path, position: int, operation: Operation
    ) -> TomlValue:
        segment = segments[position]
        match segment:
            case Key(name=name):
                if not is_table(node):
                    raise self._mismatch(operation, segments, position, Kind.TABLE, node)
                table = cast(MutableMapping[str, TomlValue], node)
                if name not in table:
                    raise self._not_found(operation, segments, position)
                return table[name]
            case Index(position=index):
                if not is_array(node):
                    raise self._mismatch(operation, segments, position, Kind.ARRAY, node)
                array = cast(MutableSequence[TomlValue], node)
                if index >= len(array):
                    raise self._not_found(
                        operation,
                        segments,
                        position,
                        f"array has {len(array)} element(s)",
                    )
                return array[index]
            case Append():
                if not is_array(node):
                    raise self._mismatch(operation, segments, position, Kind.ARRAY, node)
                raise self._not_found(
                    operation, segments, position, "'[]' addresses no existing element"
                )
        raise TypeError(f"unknown segment {segment!r}")

    def _descend(self, root: TomlValue, segments: Path, operation: Operation) -> TomlValue:
        node = root
        for position in range(len(segments)):
            node = self._step(node, segments, position, operation)
        return node

    def _terminal_slot(
        self, root: TomlValue, segments: Path, operation: Operation
    ) -> Slot:
        if not segments:
            raise ValueError(f"{operation.value} requires a non-empty path")
        parent = self._descend(root, segments[:-1], operation)
        last = len(segments) - 1
        self._step(parent, segments, last, operation)
        terminal = segments[last]
        accessor = terminal.name if isinstance(terminal, Key) else cast(Index, terminal).position
        return Slot(
            container=cast(Container, parent),
            accessor=accessor,
            path=format_path(segments, self.separator),
        )

    def read(
        self, root: TomlValue, segments: Path, operation: Operation = Operation.READ
    ) -> TomlValue:
        value = self._descend(root, segments, operation)
        if self.trace:
            self._logger.debug(
                "%s %s -> %s",
                operation.value,
                format_path(segments, self.separator),
                type(value).__name__,
            )
        return value

    def read_mut(self, root: TomlValue, segments: Path) -> Slot:
        return self._terminal_slot(root, segments, Operation.READ_MUT)

    def _child_or_create(
        self,
        node: TomlValue,
        segments: Path,
        position: int,
        operation: Operation,
    ) -> TomlValue:
        segment = segments[position]
        upcoming = segments[position + 1]
        match segment:
            case Key(name=name):
                if not is_table(node):
                    raise self._mismatch(operation, segments, position, Kind.TABLE, node)
                table = cast(MutableMapping[str, TomlValue], node)
                if name not in table:
                    table[name] = _new_container(upcoming)
                    self._log(
                        "%s created %s at %s",
                        operation.value,
                        kind_of(table[name]).display_name,
                        self._sub_path(segments, position),
                    )
                return table[name]
            case Index(position=index):
                if not is_array(node):
                    raise self._mismatch(operation, segments, position, Kind.ARRAY, node)
                array = cast(MutableSequence[TomlValue], node)
                if index < len(array):
                    return array[index]
                if index > len(array):
                    raise self._not_found(
                        operation,
                        segments,
                        position,
                        f"index is past the end of an array with {len(array)} element(s)",
                    )
                array.append(_new_container(upcoming))
                self._log(
                    "%s created %s at %s",
                    operation.value,
                    kind_of(array[index]).display_name,
                    self._sub_path(segments, position),
                )
                return array[index]
            case Append():
                raise ValueError("'[]' is only valid as the last segment")
        raise TypeError(f"unknown segment {segment!r}")

    def _place(
        self,
        node: TomlValue,
        segments: Path,
        value: TomlValue,
        operation: Operation,
    ) -> None:
        position = len(segments) - 1
        match segments[position]:
            case Key(name=name):
                if not is_table(node):
                    raise self._mismatch(operation, segments, position, Kind.TABLE, node)
                table = cast(MutableMapping[str, TomlValue], node)
                if name in table:
                    raise AlreadyExistsError(
                        operation, self._sub_path(segments, position), position=position
                    )
                table[name] = value
            case Index(position=index):
                if not is_array(node):
                    raise self._mismatch(operation, segments, position, Kind.ARRAY, node)
                array = cast(MutableSequence[TomlValue], node)
                if index < len(array):
                    raise AlreadyExistsError(
                        operation, self._sub_path(segments, position), position=position
                    )
                if index > len(array):
                    raise self._not_found(
                        operation,
                        segments,
                        position,
                        f"index is past the end of an array with {len(array)} element(s)",
                    )
                array.append(value)
            case Append():
                if not is_array(node):
                    raise self._mismatch(operation, segments, position, Kind.ARRAY, node)
                cast(MutableSequence[TomlValue], node).append(value)

    def _insert(
        self,
        root: TomlValue,
        segments: Path,
        value: TomlValue,
        operation: Operation,
    ) -> None:
        if not segments:
            raise ValueError(f"{operation.value} requires a non-empty path")
        check_value(value)
        node = root
        for position in range(len(segments) - 1):
            node = self._child_or_create(node, segments, position, operation)
        self._place(node, segments, value, operation)
        self._log("%s wrote %s", operation.value, format_path(segments, self.separator))

    def insert(self, root: TomlValue, segments: Path, value: TomlValue) -> None:
        """Write ``value`` at a currently empty location.

        Missing intermediate tables/arrays are created and kept even if a
        later segment fails.
        """

        self._insert(root, segments, value, Operation.INSERT)

    def _update(
        self,
        root: TomlValue,
        segments: Path,
        value: TomlValue,
        operation: Operation,
    ) -> TomlValue:
        check_value(value)
        slot = self._terminal_slot(root, segments, operation)
        previous = slot.replace(value)
        self._log("%s replaced %s", operation.value, slot.path)
        return previous

    def update(self, root: TomlValue, segments: Path, value: TomlValue) -> TomlValue:
        """Replace an existing value in place and return the old one."""

        return self._update(root, segments, value, Operation.UPDATE)

    def delete(self, root: TomlValue, segments: Path) -> TomlValue:
        slot = self._terminal_slot(root, segments, Operation.DELETE)
        removed = slot.remove()
        self._log("delete removed %s", slot.path)
        return removed

    def set(self, root: TomlValue, segments: Path, value: TomlValue) -> TomlValue | None:
        """Update when the location exists, insert otherwise.

        Returns the replaced value, or ``None`` when the insert path ran.
        Type mismatches are raised as-is and never trigger the insert.
        """

        try:
            return self._update(root, segments, value, Operation.SET)
        except NotFoundError as exc:
            self._log("set falling back to insert after %s", exc.path)
        self._insert(root, segments, value, Operation.SET)
        return None


DEFAULT_RESOLVER = Resolver()

__all__ = ["DEFAULT_RESOLVER", "Resolver", "Slot"]
