import pytest

from tomlpath import DEFAULT_CONFIG, TomlPathConfig


def test_default_config_values() -> None:
    assert DEFAULT_CONFIG.separator == "."
    assert DEFAULT_CONFIG.typed is True
    assert DEFAULT_CONFIG.trace is False


def test_config_rejects_reserved_separator() -> None:
    with pytest.raises(ValueError, match="reserved"):
        TomlPathConfig(separator="[")


def test_config_from_env_reads_flags() -> None:
    config = TomlPathConfig.from_env(
        {
            "TOMLPATH_SEPARATOR": "/",
            "TOMLPATH_TYPED": "off",
            "TOMLPATH_TRACE": "Yes",
        }
    )

    assert config.separator == "/"
    assert config.typed is False
    assert config.trace is True


def test_config_from_env_defaults_when_unset() -> None:
    assert TomlPathConfig.from_env({}) == TomlPathConfig()


def test_config_from_env_rejects_unknown_boolean() -> None:
    with pytest.raises(ValueError, match="TOMLPATH_TRACE must be a boolean string"):
        TomlPathConfig.from_env({"TOMLPATH_TRACE": "maybe"})
