"""Operation AST evaluator."""

from __future__ import annotations

import copy

from ..document import Document
from ..values import TomlValue
from .ast import ChainOp, DeleteOp, InsertOp, Op, ReadOp, SetOp, UpdateOp


def _written_value(op: InsertOp | UpdateOp | SetOp, previous: object) -> TomlValue:
    if not op.from_previous:
        return copy.deepcopy(op.value)
    if previous is None:
        raise ValueError(f"{op.op} {op.path!r} has no previous result to write")
    return copy.deepcopy(previous)  # type: ignore[return-value]


def apply(
    document: Document, op: Op, *, previous: object = None
) -> TomlValue | list[object] | None:
    """Run ``op`` against ``document`` and return its result.

    A chain returns the list of its step results. Each step receives the
    result of the step before it as ``previous`` (the first step receives
    the chain's own ``previous``; a nested chain passes on its last step
    result), which insert/update/set nodes write when
    ``from_previous`` is set. Steps run in order and the first failure is
    raised; steps that already ran stay applied. Written values are
    deep-copied into the tree so neither the node nor an earlier result is
    aliased by the document.
    """

    match op:
        case ReadOp():
            return document.read(op.path)
        case InsertOp():
            document.insert(op.path, _written_value(op, previous))
            return None
        case UpdateOp():
            return document.update(op.path, _written_value(op, previous))
        case SetOp():
            return document.set(op.path, _written_value(op, previous))
        case DeleteOp():
            return document.delete(op.path)
        case ChainOp():
            results: list[object] = []
            for step in op.steps:
                result = apply(document, step, previous=previous)
                results.append(result)
                previous = result[-1] if isinstance(step, ChainOp) else result  # type: ignore[index]
            return results
    raise TypeError(f"unsupported operation node {type(op).__name__}")


__all__ = ["apply"]
