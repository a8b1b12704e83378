from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load the YAML config (default ``config/laptop_stats.yml``)
- Validate it against ``config_schema.json``
- Apply defaults for every omitted key
"""

__all__ = [
    "ConfigError",
    "CurrencyConfig",
    "StatsConfig",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "SCHEMA_PATH",
    "load_config",
    "resolve_config_path",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/laptop_stats.yml")
CONFIG_ENV_VAR = "LAPTOP_STATS_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CurrencyConfig:
    symbol: str = "₹"
    grouping: str = "indian"  # indian | western


@dataclass(frozen=True)
class StatsConfig:
    source_directory: str = "./data"
    encoding: str = "utf-8-sig"
    currency: CurrencyConfig = field(default_factory=CurrencyConfig)
    top_companies: int = 10


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or the data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_config_path(explicit: str | None = None) -> tuple[Path, bool]:
    """Pick the config path: explicit option, then environment, then default.

    Returns the path and whether it was explicitly requested (a missing
    explicit path is an error, a missing default path is not).
    """
    if explicit:
        return Path(explicit), True
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return DEFAULT_CONFIG_PATH, False


def load_config(path: Path | None = None, *, required: bool = True) -> StatsConfig:
    if path is None or not path.exists():
        if required:
            raise ConfigError(f"config file not found: {path}")
        return StatsConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    encoding = data.get("encoding", "utf-8-sig")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e

    currency_raw = data.get("currency", {})
    currency = CurrencyConfig(
        symbol=currency_raw.get("symbol", "₹"),
        grouping=currency_raw.get("grouping", "indian"),
    )
    return StatsConfig(
        source_directory=data.get("source_directory", "./data"),
        encoding=encoding,
        currency=currency,
        top_companies=data.get("report", {}).get("top_companies", 10),
    )
