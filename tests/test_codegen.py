from __future__ import annotations

from pydantic import BaseModel, Field

from tomlpath import Document
from tomlpath.codegen import derive_paths, render_constants


class Listener(BaseModel):
    port: int
    tls: bool = False


class Server(BaseModel):
    host: str
    listener: Listener
    fallback: Listener | None = None
    log_dir: str = Field(alias="log-dir")


class TreeNode(BaseModel):
    name: str
    child: TreeNode | None = None


def test_derive_paths_expands_nested_models() -> None:
    assert derive_paths(Server) == {
        "HOST": "host",
        "LISTENER": "listener",
        "LISTENER_PORT": "listener.port",
        "LISTENER_TLS": "listener.tls",
        "FALLBACK": "fallback",
        "FALLBACK_PORT": "fallback.port",
        "FALLBACK_TLS": "fallback.tls",
        "LOG_DIR": "log-dir",
    }


def test_derive_paths_with_prefix_and_separator() -> None:
    paths = derive_paths(Listener, prefix="servers[0]")

    assert paths == {"PORT": "servers[0].port", "TLS": "servers[0].tls"}
    assert derive_paths(Listener, prefix="a/b", separator="/")["PORT"] == "a/b/port"


def test_derive_paths_stops_on_recursive_models() -> None:
    assert derive_paths(TreeNode) == {"NAME": "name", "CHILD": "child"}


def test_derived_paths_address_document() -> None:
    paths = derive_paths(Server, prefix="server")
    doc = Document({"server": {"listener": {"port": 80}}})

    assert doc.read(paths["LISTENER_PORT"]) == 80


def test_render_constants_emits_python_assignments() -> None:
    source = render_constants(Listener, prefix="server")

    assert source.splitlines() == [
        "# Generated by tomlpath.codegen from Listener.",
        'PORT = "server.port"',
        'TLS = "server.tls"',
    ]
