import pytest

from tomlpath import Append, Index, Key, ParseError, format_path, tokenize
from tomlpath.errors import ErrorKind, Operation


def test_tokenize_keys_and_indices() -> None:
    """Tokenizer should split keys on the separator and attach bracket indices."""

    assert tokenize("server.listeners[0].port") == (
        Key("server"),
        Key("listeners"),
        Index(0),
        Key("port"),
    )


def test_tokenize_single_key() -> None:
    assert tokenize("example") == (Key("example"),)


def test_tokenize_repeated_brackets_and_append() -> None:
    assert tokenize("matrix[1][20]") == (Key("matrix"), Index(1), Index(20))
    assert tokenize("a.b[0].c[]") == (
        Key("a"),
        Key("b"),
        Index(0),
        Key("c"),
        Append(),
    )


def test_tokenize_is_deterministic() -> None:
    path = "a.b[3].c"

    assert tokenize(path) == tokenize(path)


def test_tokenize_leading_bracket_addresses_root_array() -> None:
    assert tokenize("[2].name") == (Index(2), Key("name"))
    assert tokenize("[]") == (Append(),)


def test_tokenize_quoted_keys() -> None:
    assert tokenize('"a.b".c') == (Key("a.b"), Key("c"))
    assert tokenize('site."google.com"[0]') == (
        Key("site"),
        Key("google.com"),
        Index(0),
    )
    assert tokenize(r'"say \"hi\""') == (Key('say "hi"'),)


def test_tokenize_custom_separator() -> None:
    assert tokenize("a/b.c/d[1]", separator="/") == (
        Key("a"),
        Key("b.c"),
        Key("d"),
        Index(1),
    )


@pytest.mark.parametrize(
    ("path", "message"),
    [
        ("", "empty path"),
        (".", "empty key"),
        (".a", "empty key"),
        ("a.", "trailing separator"),
        ("a..b", "empty key"),
        ("a.[0]", "index must follow a key"),
        ("a[x]", "invalid array index"),
        ("a[-1]", "invalid array index"),
        ("a[0", "unmatched '\\['"),
        ("a]", "unmatched '\\]'"),
        ("a[0]b", "unexpected 'b'"),
        ("a[].b", "only allowed as the last segment"),
        ('"a', "unterminated quoted key"),
        ('a"b', "unexpected"),
    ],
)
def test_tokenize_rejects_malformed_paths(path: str, message: str) -> None:
    with pytest.raises(ParseError, match=message) as excinfo:
        tokenize(path)

    assert excinfo.value.kind is ErrorKind.PARSE_ERROR
    assert excinfo.value.operation is Operation.PARSE
    assert excinfo.value.path == path


def test_tokenize_rejects_bad_separator() -> None:
    with pytest.raises(ValueError, match="single character"):
        tokenize("a.b", separator="::")
    with pytest.raises(ValueError, match="reserved"):
        tokenize("a.b", separator="[")


def test_tokenize_rejects_non_string_path() -> None:
    with pytest.raises(TypeError, match="path must be str"):
        tokenize(3)  # type: ignore[arg-type]


def test_format_path_renders_tokenized_path() -> None:
    for path in ["a", "a.b[0].c", "a.b[]", "[1].x", '"a.b".c', 'x."has space"[2]']:
        assert tokenize(format_path(tokenize(path))) == tokenize(path)

    assert format_path((Key("a"), Index(0), Key("b"))) == "a[0].b"
    assert format_path((Key("a.b"),)) == '"a.b"'
    assert format_path((Key("a"), Key("b")), separator="/") == "a/b"
