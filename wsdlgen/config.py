from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_REQUEST_SUFFIX = "Request"
DEFAULT_RESPONSE_SUFFIX = "Response"
DEFAULT_FAULT_SUFFIX = "Fault"


@dataclass(frozen=True, slots=True)
class PortTypeConfig:
    port_type_name: str | None = None
    strategy: str = "suffix"
    request_suffix: str = DEFAULT_REQUEST_SUFFIX
    response_suffix: str = DEFAULT_RESPONSE_SUFFIX
    fault_suffix: str = DEFAULT_FAULT_SUFFIX
    strict: bool = False


_CONFIG_KEYS = {f.name for f in fields(PortTypeConfig)}
_STRING_KEYS = ("port_type_name", "strategy", "request_suffix", "response_suffix", "fault_suffix")


def _coerce(raw_value: str) -> object:
    # Best-effort type coercion: bool -> int -> float -> str.
    lowered = raw_value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        return int(raw_value)
    except ValueError:
        try:
            return float(raw_value)
        except ValueError:
            return raw_value


def parse_options(options: list[str] | None) -> dict[str, object]:
    """Parse repeated KEY=VALUE overrides; values of string keys are kept as written."""
    extra: dict[str, object] = {}
    for item in options or []:
        if "=" not in item:
            raise ConfigurationError(f"Invalid option value '{item}'. Expected KEY=VALUE.")
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigurationError(f"Invalid option value '{item}': empty key.")
        key = key.replace("-", "_")
        raw_value = raw_value.strip()
        extra[key] = raw_value if key in _STRING_KEYS else _coerce(raw_value)
    return extra


def load_config(
    config_path: Path | str | None = None,
    options: list[str] | None = None,
    **overrides: object,
) -> PortTypeConfig:
    """
    Build a PortTypeConfig from (in increasing precedence) a JSON config
    file, KEY=VALUE options and keyword overrides. ``None`` overrides are
    ignored so that unset CLI flags do not mask the config file.
    """
    values: dict[str, object] = {}

    if config_path:
        config_file = Path(config_path)
        try:
            payload = json.loads(config_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot read config file {config_file}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a JSON object.")
        values.update(payload)

    values.update(parse_options(options))
    values.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(values) - _CONFIG_KEYS)
    if unknown:
        supported = ", ".join(sorted(_CONFIG_KEYS))
        raise ConfigurationError(
            f"Unknown configuration key(s): {', '.join(unknown)}. Supported keys: {supported}"
        )

    config = replace(PortTypeConfig(), **values)
    if not config.strategy:
        raise ConfigurationError("'strategy' must name a registered strategy")
    if not isinstance(config.strict, bool):
        raise ConfigurationError(f"'strict' must be a boolean, got {config.strict!r}")
    for key in _STRING_KEYS:
        value = getattr(config, key)
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"'{key}' must be a string, got {value!r}")
    return config
