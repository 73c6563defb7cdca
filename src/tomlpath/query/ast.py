"""AST models for serializable document operations."""

from __future__ import annotations

from typing import Annotated, Any, Literal, TypeAlias, cast

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from ..values import check_value


class _OpNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def __rshift__(self, other: object) -> Op:
        if not isinstance(other, _OpNode):
            return NotImplemented
        return _merge_chain(self, other)


class _ValueOpNode(_OpNode):
    """Node that writes a value: either its own ``value`` or, with
    ``from_previous``, the result of the step before it in a chain."""

    path: str
    value: Any = None
    from_previous: bool = False

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: Any) -> Any:
        try:
            check_value(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_value(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("from_previous") and data.get("value") is None:
            return {key: item for key, item in data.items() if key != "value"}
        return data

    @model_validator(mode="after")
    def _check_source(self) -> _ValueOpNode:
        if self.from_previous and "value" in self.model_fields_set:
            raise ValueError("value and from_previous are mutually exclusive")
        if not self.from_previous and "value" not in self.model_fields_set:
            raise ValueError("value is required unless from_previous is set")
        return self


class ReadOp(_OpNode):
    op: Literal["read"] = "read"
    path: str


class InsertOp(_ValueOpNode):
    op: Literal["insert"] = "insert"


class UpdateOp(_ValueOpNode):
    op: Literal["update"] = "update"


class SetOp(_ValueOpNode):
    op: Literal["set"] = "set"


class DeleteOp(_OpNode):
    op: Literal["delete"] = "delete"
    path: str


class ChainOp(_OpNode):
    op: Literal["chain"] = "chain"
    steps: list[Op] = Field(min_length=1)


Op: TypeAlias = Annotated[
    ReadOp | InsertOp | UpdateOp | SetOp | DeleteOp | ChainOp,
    Field(discriminator="op"),
]

ChainOp.model_rebuild()

_OP_ADAPTER: TypeAdapter[Op] = TypeAdapter(Op)


def parse_op(data: object) -> Op:
    """Validate a mapping (e.g. decoded JSON) into an operation node."""

    return _OP_ADAPTER.validate_python(data)


def _merge_chain(left: _OpNode, right: _OpNode) -> Op:
    if isinstance(left, ChainOp):
        steps: list[Op] = list(left.steps)
    else:
        steps = [cast("Op", left)]

    if isinstance(right, ChainOp):
        steps.extend(right.steps)
    else:
        steps.append(cast("Op", right))

    return ChainOp(op="chain", steps=steps)


__all__ = [
    "ChainOp",
    "DeleteOp",
    "InsertOp",
    "Op",
    "ReadOp",
    "SetOp",
    "UpdateOp",
    "parse_op",
]
