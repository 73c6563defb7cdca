from __future__ import annotations

from ..tokenizer import tokenize
from .ast import ChainOp, Op

_MAX_OP_STEPS = 200
_MAX_OP_DEPTH = 30


def _child_ops(node: Op) -> tuple[Op, ...]:
    if isinstance(node, ChainOp):
        return tuple(node.steps)
    return ()


def validate_op(
    op: Op,
    *,
    max_steps: int = _MAX_OP_STEPS,
    max_depth: int = _MAX_OP_DEPTH,
    separator: str = ".",
) -> None:
    """Check size limits and that every path in ``op`` tokenizes.

    Raises ``ValueError`` when a limit is exceeded and
    :class:`~tomlpath.errors.ParseError` for a malformed path.
    """

    step_count = 0
    stack: list[tuple[Op, int]] = [(op, 1)]
    while stack:
        current, depth = stack.pop()

        if depth > max_depth:
            raise ValueError(f"operation exceeds max depth ({max_depth})")

        if isinstance(current, ChainOp):
            for child in _child_ops(current):
                stack.append((child, depth + 1))
            continue

        step_count += 1
        if step_count > max_steps:
            raise ValueError(f"operation exceeds max step count ({max_steps})")
        tokenize(current.path, separator=separator)


__all__ = ["validate_op"]
