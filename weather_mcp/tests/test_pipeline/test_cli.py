"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from weather_mcp.cli import main

ENDPOINT = "https://test-meizu.example.com/listWeather"


def _config(tmp_path: Path) -> str:
    path = tmp_path / "test.yaml"
    path.write_text(f"provider:\n  endpoint: {ENDPOINT}\n", encoding="utf-8")
    return str(path)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_cities(self, capsys):
        assert main(["cities"]) == 0
        out = capsys.readouterr().out
        assert "北京\t101010100" in out
        assert "郑州\t101180101" in out

    def test_config_show(self, tmp_path: Path, capsys):
        assert main(["--config", _config(tmp_path), "config", "show"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["provider"]["endpoint"] == ENDPOINT
        assert data["provider"]["timeout_seconds"] == 10.0

    def test_query_unsupported_city(self, tmp_path: Path, capsys):
        assert main(["--config", _config(tmp_path), "query", "forecast", "广州"]) == 0
        assert "暂不支持" in capsys.readouterr().out

    @respx.mock
    def test_query_hourly(self, tmp_path: Path, capsys, beijing_envelope: dict):
        respx.get(ENDPOINT).mock(return_value=httpx.Response(200, json=beijing_envelope))
        assert main(["--config", _config(tmp_path), "query", "hourly", "北京"]) == 0
        assert "北京未来逐3小时天气预报" in capsys.readouterr().out

    @respx.mock
    def test_query_upstream_error(self, tmp_path: Path, capsys):
        respx.get(ENDPOINT).mock(return_value=httpx.Response(503))
        assert main(["--config", _config(tmp_path), "query", "current", "北京"]) == 1
        assert "503" in capsys.readouterr().out
