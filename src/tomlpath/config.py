from __future__ import annotations

import os
from collections.abc import Mapping

import chz

from .tokenizer import check_separator

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ValueError(f"{name} must be a boolean string, got {raw!r}")


@chz.chz
class TomlPathConfig:
    """Capability flags and path syntax options for a document.

    ``typed`` selects the typed extraction accessors, ``trace`` turns on
    DEBUG logging of every resolver step.
    """

    separator: str = "."
    typed: bool = True
    trace: bool = False

    @chz.validate
    def _check_separator(self) -> None:
        check_separator(self.separator)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TomlPathConfig:
        """Build a config from ``TOMLPATH_*`` environment variables."""

        env = os.environ if environ is None else environ
        separator = env.get("TOMLPATH_SEPARATOR", ".")
        typed = env.get("TOMLPATH_TYPED")
        trace = env.get("TOMLPATH_TRACE")
        return cls(
            separator=separator,
            typed=True if typed is None else _parse_bool("TOMLPATH_TYPED", typed),
            trace=False if trace is None else _parse_bool("TOMLPATH_TRACE", trace),
        )


DEFAULT_CONFIG = TomlPathConfig()

__all__ = ["DEFAULT_CONFIG", "TomlPathConfig"]
