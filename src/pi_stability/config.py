"""Configuration models and helpers for the Π stability dashboard."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/Junwon03/pi-calculator-junwon2/main/output/pi_data.json"
)

TimeRange = Literal["1D", "1W", "1M", "1Y", "MAX"]


class DataConfig(BaseModel):
    """Dataset location and fetch behavior; a local ``path`` wins over ``url``."""

    model_config = ConfigDict(extra="forbid")

    url: str = DEFAULT_DATA_URL
    path: str | None = None
    timeout_seconds: float | None = None


class DisplayConfig(BaseModel):
    """Presentation defaults for cards and charts."""

    model_config = ConfigDict(extra="forbid")

    default_time_range: TimeRange = "1M"
    change_lookback: int = Field(default=30, ge=1)
    card_price_threshold: float = 10_000.0
    tooltip_price_threshold: float = 1_000.0
    theme: str = "plotly_dark"


class AppConfig(BaseModel):
    """Top-level package configuration."""

    model_config = ConfigDict(extra="forbid")

    data: DataConfig = Field(default_factory=DataConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load raw YAML config into a dictionary."""
    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML configuration must decode to a mapping object.")
    return data


def build_config(config_path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> AppConfig:
    """Build application config with precedence: overrides > YAML > defaults."""
    merged: dict[str, Any] = {}
    if config_path is not None:
        merged.update(load_yaml_config(config_path))
    if overrides:
        merged = deep_merge(merged, overrides)
    return AppConfig.model_validate(merged)


def merge_config(config: AppConfig, overrides: dict[str, Any]) -> AppConfig:
    """Return a new config with nested overrides applied on top of ``config``."""
    merged = deep_merge(config.model_dump(), _drop_none(overrides))
    return AppConfig.model_validate(merged)


def deep_merge(base: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    """Merge nested dictionaries recursively."""
    out = dict(base)
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def _drop_none(patch: dict[str, Any]) -> dict[str, Any]:
    # CLI options left unset arrive as None and must not clobber YAML values.
    out: dict[str, Any] = {}
    for key, value in patch.items():
        if isinstance(value, dict):
            out[key] = _drop_none(value)
        elif value is not None:
            out[key] = value
    return out
