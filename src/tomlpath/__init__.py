"""
tomlpath: read and mutate parsed TOML documents by path string.

This package uses a src-layout. Import the package as `tomlpath`.
"""

from importlib.metadata import version

__version__ = version("tomlpath")

from .config import DEFAULT_CONFIG, TomlPathConfig
from .document import Document, TypedDocument, open_document
from .errors import (
    AlreadyExistsError,
    ErrorKind,
    NotFoundError,
    Operation,
    ParseError,
    PathError,
    TypeMismatchError,
)
from .resolver import Resolver, Slot
from .runtime import configure_logging, get_logger
from .segments import Append, Index, Key, Path, Segment, format_path
from .tokenizer import tokenize
from .typed import narrow, narrow_items, narrow_values
from .values import Kind, TomlValue, check_value, kind_of

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "AlreadyExistsError",
    "Append",
    "Document",
    "ErrorKind",
    "Index",
    "Key",
    "Kind",
    "NotFoundError",
    "Operation",
    "ParseError",
    "Path",
    "PathError",
    "Resolver",
    "Segment",
    "Slot",
    "TomlPathConfig",
    "TomlValue",
    "TypeMismatchError",
    "TypedDocument",
    "configure_logging",
    "format_path",
    "get_logger",
    "check_value",
    "kind_of",
    "narrow",
    "narrow_items",
    "narrow_values",
    "open_document",
    "tokenize",
]
