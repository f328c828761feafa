"""YAML config loader with environment variable overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weathercaster.config.defaults import (
    ENV_API_HOST,
    ENV_API_KEY,
    ENV_LOCATION,
    ENV_UNITS,
)
from weathercaster.config.schema import WeathercasterConfig
from weathercaster.errors import ConfigError


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> WeathercasterConfig:
    """Load and validate config from an optional YAML file.

    Non-empty environment variables take precedence over the file, so a
    location or unit system can be set per shell without editing YAML.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ConfigError(
                f"{path}: expected a mapping at the top level, got {type(raw).__name__}"
            )

    _apply_env_overrides(raw, os.environ if environ is None else environ)
    return WeathercasterConfig(**raw)


def _apply_env_overrides(raw: dict[str, Any], environ: Mapping[str, str]) -> None:
    if environ.get(ENV_API_KEY):
        raw["api_key"] = environ[ENV_API_KEY]
    if environ.get(ENV_LOCATION):
        raw["location"] = environ[ENV_LOCATION]
    if environ.get(ENV_UNITS):
        raw["units"] = environ[ENV_UNITS]
    api = raw.get("api") or {}
    if environ.get(ENV_API_HOST) and isinstance(api, dict):
        raw["api"] = {**api, "host": environ[ENV_API_HOST]}
