from .ast import (
    ChainOp,
    DeleteOp,
    InsertOp,
    Op,
    ReadOp,
    SetOp,
    UpdateOp,
    parse_op,
)
from .eval import apply
from .validate import validate_op

__all__ = [
    "ChainOp",
    "DeleteOp",
    "InsertOp",
    "Op",
    "ReadOp",
    "SetOp",
    "UpdateOp",
    "apply",
    "parse_op",
    "validate_op",
]
