import datetime
import tomllib

import pytest

from tomlpath import (
    Document,
    Kind,
    NotFoundError,
    ParseError,
    TomlPathConfig,
    TypedDocument,
    TypeMismatchError,
    open_document,
)

CONFIG_TEXT = """
title = "edge"
released = 1979-05-27T07:32:00Z

[server]
host = "0.0.0.0"
debug = false
timeout = 2.5

[[server.listeners]]
port = 80

[[server.listeners]]
port = 443
tls = true

[env]
HOME = "/root"
SHELL = "/bin/sh"
"""


def _doc() -> TypedDocument:
    document = open_document(tomllib.loads(CONFIG_TEXT))
    assert isinstance(document, TypedDocument)
    return document


def test_document_reads_parsed_config() -> None:
    doc = _doc()

    assert doc.read("server.listeners[1].port") == 443
    assert doc.read_string("server.host") == "0.0.0.0"
    assert doc.read_bool("server.debug") is False
    assert doc.read_float("server.timeout") == 2.5
    assert doc.read_int("server.listeners[0].port") == 80
    assert doc.read_datetime("released") == datetime.datetime(
        1979, 5, 27, 7, 32, tzinfo=datetime.timezone.utc
    )
    assert len(doc.read_array("server.listeners")) == 2
    assert doc.read_table("env") == {"HOME": "/root", "SHELL": "/bin/sh"}
    assert doc.read_table_of("env", Kind.STRING)["SHELL"] == "/bin/sh"


def test_document_scenarios() -> None:
    doc = Document({"a": {"b": [10, 20]}})
    assert doc.read("a.b[0]") == 10
    with pytest.raises(NotFoundError):
        doc.read("a.b[2]")

    doc = Document({"a": {}})
    doc.insert("a.c[]", 5)
    assert doc.tree == {"a": {"c": [5]}}

    typed = TypedDocument({"a": 42})
    with pytest.raises(TypeMismatchError) as excinfo:
        typed.read_string("a")
    assert excinfo.value.expected is Kind.STRING
    assert excinfo.value.actual is Kind.INTEGER


def test_document_mutates_caller_tree() -> None:
    tree: dict = {"a": {"b": 1}}
    doc = Document(tree)

    doc.update("a.b", 2)
    doc.insert("a.c", 3)
    assert doc.delete("a.b") == 2

    assert doc.tree is tree
    assert tree == {"a": {"c": 3}}


def test_insert_then_read_round_trip() -> None:
    doc = _doc()

    for path, value in [
        ("server.name", "api"),
        ("server.listeners[2]", {"port": 8080}),
        ("extra.tags[0]", "blue"),
        ("extra.nested.deep[0].flag", True),
    ]:
        doc.insert(path, value)
        assert doc.read(path) == value


def test_delete_then_read_is_not_found() -> None:
    doc = _doc()

    doc.delete("server.listeners[0]")

    assert doc.read_int("server.listeners[0].port") == 443
    with pytest.raises(NotFoundError):
        doc.read("server.listeners[1]")


def test_set_is_result_idempotent() -> None:
    doc = _doc()

    assert doc.set("server.region", "eu") is None
    assert doc.set("server.region", "eu") == "eu"
    assert doc.read("server.region") == "eu"


def test_read_opt_only_swallows_not_found() -> None:
    doc = _doc()

    assert doc.read_opt("server.missing") is None
    assert doc.read_opt("server.missing", 3) == 3
    assert doc.read_opt("server.host") == "0.0.0.0"
    with pytest.raises(TypeMismatchError):
        doc.read_opt("server.host.x")
    with pytest.raises(ParseError):
        doc.read_opt("server..host")


def test_read_mut_returns_live_slot() -> None:
    doc = _doc()

    slot = doc.read_mut("server.listeners[0].port")
    slot.replace(8000)

    assert doc.read_int("server.listeners[0].port") == 8000
    assert slot.path == "server.listeners[0].port"


def test_read_array_of_checks_every_element() -> None:
    doc = TypedDocument({"ports": [80, 443], "mixed": [1, "x"]})

    assert doc.read_array_of("ports", Kind.INTEGER) == [80, 443]
    with pytest.raises(TypeMismatchError) as excinfo:
        doc.read_array_of("mixed", Kind.INTEGER)
    assert excinfo.value.path == "mixed[1]"


def test_typed_accessor_propagates_resolution_failure() -> None:
    doc = TypedDocument({"a": 1})

    with pytest.raises(NotFoundError):
        doc.read_string("b")


def test_custom_separator_document() -> None:
    doc = Document({"a.b": {"c": 1}}, TomlPathConfig(separator="/"))

    assert doc.read("a.b/c") == 1
    doc.set("a.b/d", 2)
    assert doc.tree == {"a.b": {"c": 1, "d": 2}}


def test_open_document_respects_typed_flag() -> None:
    plain = open_document({}, TomlPathConfig(typed=False))

    assert type(plain) is Document
    assert not hasattr(plain, "read_string")
    assert isinstance(open_document({}), TypedDocument)


def test_root_array_document() -> None:
    doc = Document([{"name": "a"}])

    doc.insert("[]", {"name": "b"})

    assert doc.read("[1].name") == "b"
