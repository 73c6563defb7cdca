"""Derive path constants from pydantic models.

Given a model describing a configuration document, produce one constant
per field holding the path string that addresses it, so callers do not
hand-write paths that can drift from the model::

    class Listener(BaseModel):
        port: int

    class Server(BaseModel):
        listener: Listener

    derive_paths(Server, prefix="server")
    # {"LISTENER": "server.listener", "LISTENER_PORT": "server.listener.port"}

The path engine does not import this module.
"""

from __future__ import annotations

import json
import types
from typing import Union, get_args, get_origin

from pydantic import BaseModel

from .segments import Key, Path, format_path
from .tokenizer import tokenize


def _nested_model(annotation: object) -> type[BaseModel] | None:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return _nested_model(members[0])
    return None


def _collect(
    model: type[BaseModel],
    base: Path,
    name_prefix: str,
    separator: str,
    seen: tuple[type[BaseModel], ...],
    out: dict[str, str],
) -> None:
    for field_name, field in model.model_fields.items():
        key = field.alias or field_name
        segments = (*base, Key(key))
        constant = f"{name_prefix}{field_name}".upper()
        if constant in out:
            raise ValueError(f"duplicate path constant {constant!r} in {model.__name__}")
        out[constant] = format_path(segments, separator)

        nested = _nested_model(field.annotation)
        if nested is not None and nested not in seen:
            _collect(nested, segments, f"{constant}_", separator, (*seen, nested), out)


def derive_paths(
    model: type[BaseModel], *, prefix: str = "", separator: str = "."
) -> dict[str, str]:
    """Map upper-case constant names to the path of every field of ``model``.

    Nested models are expanded; a model that contains itself is expanded
    only once. ``prefix`` is a path the whole model lives under.
    """

    base = tokenize(prefix, separator=separator) if prefix else ()
    constants: dict[str, str] = {}
    _collect(model, base, "", separator, (model,), constants)
    return constants


def render_constants(
    model: type[BaseModel], *, prefix: str = "", separator: str = "."
) -> str:
    """Render :func:`derive_paths` output as Python source."""

    lines = [f"# Generated by tomlpath.codegen from {model.__qualname__}."]
    for name, path in derive_paths(model, prefix=prefix, separator=separator).items():
        lines.append(f"{name} = {json.dumps(path)}")
    return "\n".join(lines) + "\n"


__all__ = ["derive_paths", "render_constants"]
