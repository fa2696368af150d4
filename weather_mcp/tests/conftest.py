"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest
import yaml

from weather_mcp.config.defaults import DEFAULT_CITIES
from weather_mcp.config.schema import AppConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def beijing_envelope() -> dict:
    """A successful Meizu envelope for Beijing, freshly loaded per test."""
    with open(FIXTURE_DIR / "meizu_beijing.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def today() -> date:
    """The 'today' the Beijing fixture is built around."""
    return date(2026, 10, 17)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig(cities=DEFAULT_CITIES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "server": {"log_level": "DEBUG"},
        "provider": {"endpoint": "https://test-meizu.example.com/listWeather", "timeout_seconds": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path
