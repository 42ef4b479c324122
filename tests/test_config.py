from __future__ import annotations

import json
from pathlib import Path

import pytest

from wsdlgen.config import PortTypeConfig, load_config, parse_options
from wsdlgen.errors import ConfigurationError


def test_defaults() -> None:
    config = load_config()

    assert config == PortTypeConfig()
    assert config.port_type_name is None
    assert config.strategy == "suffix"
    assert config.strict is False


def test_option_coercion() -> None:
    extra = parse_options(["strict=true", "port-type-name=Users", "fault_suffix=Error", "x=1.5"])

    assert extra == {
        "strict": True,
        "port_type_name": "Users",
        "fault_suffix": "Error",
        "x": 1.5,
    }


@pytest.mark.parametrize("item", ["novalue", "=value"])
def test_invalid_options(item: str) -> None:
    with pytest.raises(ConfigurationError):
        parse_options([item])


def test_precedence_file_then_options_then_overrides(tmp_path: Path) -> None:
    config_file = tmp_path / "porttype.json"
    config_file.write_text(
        json.dumps({"port_type_name": "FromFile", "request_suffix": "In", "strict": True}),
        encoding="utf-8",
    )

    config = load_config(
        config_file,
        ["request_suffix=Call", "port_type_name=FromOption"],
        port_type_name="FromFlag",
        strategy=None,
    )

    assert config.port_type_name == "FromFlag"
    assert config.request_suffix == "Call"
    assert config.strict is True
    assert config.strategy == "suffix"


@pytest.mark.parametrize(
    ("item", "key", "expected"),
    [
        ("port_type_name=007", "port_type_name", "007"),
        ("port_type_name=2024", "port_type_name", "2024"),
        ("port_type_name=True", "port_type_name", "True"),
        ("request_suffix=1e3", "request_suffix", "1e3"),
        ("fault_suffix= Error ", "fault_suffix", "Error"),
    ],
)
def test_string_options_keep_their_text(item: str, key: str, expected: str) -> None:
    assert getattr(load_config(options=[item]), key) == expected


def test_numeric_port_type_name_in_config_file_is_rejected(tmp_path: Path) -> None:
    config_file = tmp_path / "porttype.json"
    config_file.write_text(json.dumps({"port_type_name": 7}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must be a string"):
        load_config(config_file)


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Unknown configuration key"):
        load_config(options=["colour=blue"])


def test_non_boolean_strict_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="strict"):
        load_config(options=["strict=sometimes"])


def test_config_file_must_hold_an_object(tmp_path: Path) -> None:
    config_file = tmp_path / "porttype.json"
    config_file.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="JSON object"):
        load_config(config_file)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read config file"):
        load_config(tmp_path / "absent.json")
