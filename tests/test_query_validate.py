import pytest

from tomlpath import ParseError
from tomlpath.query import ChainOp, DeleteOp, ReadOp, SetOp, validate_op


def test_validate_op_accepts_small_chain() -> None:
    op = ReadOp(path="config.lr") >> SetOp(path="config.seed", value=42)

    validate_op(op, max_steps=10, max_depth=10)


def test_validate_op_rejects_step_limit() -> None:
    op = ReadOp(path="a") >> ReadOp(path="b") >> ReadOp(path="c")

    with pytest.raises(ValueError, match="max step count"):
        validate_op(op, max_steps=2)


def test_validate_op_rejects_depth_limit() -> None:
    op = ChainOp(steps=[ChainOp(steps=[ChainOp(steps=[ReadOp(path="a")])])])

    with pytest.raises(ValueError, match="max depth"):
        validate_op(op, max_depth=3)


def test_validate_op_rejects_malformed_path() -> None:
    op = ReadOp(path="a") >> DeleteOp(path="a..b")

    with pytest.raises(ParseError, match="empty key"):
        validate_op(op)


def test_validate_op_uses_separator() -> None:
    validate_op(ReadOp(path="a/b[0]"), separator="/")
