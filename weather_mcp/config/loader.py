"""YAML config loader."""

from pathlib import Path

import yaml

from weather_mcp.config.defaults import DEFAULT_CITIES
from weather_mcp.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or when the YAML lists no cities, DEFAULT_CITIES is injected.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path), encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    if "cities" not in raw or not raw["cities"]:
        raw["cities"] = [c.model_dump() for c in DEFAULT_CITIES]

    return AppConfig(**raw)


def city_table(config: AppConfig) -> dict[str, str]:
    """Map each configured display name to its provider identifier."""
    return {c.name: c.provider_id for c in config.cities}
