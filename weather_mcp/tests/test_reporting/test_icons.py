"""Tests for condition and life-index icon lookup."""

import pytest

from weather_mcp.reporting.icons import (
    DEFAULT_INDEX_ICON,
    DEFAULT_WEATHER_ICON,
    life_index_icon,
    weather_icon,
)


class TestWeatherIcon:
    @pytest.mark.parametrize(
        "condition,icon",
        [
            ("晴", "☀️"),
            ("小雨", "🌧️"),
            ("中雪", "❄️"),
            ("大雾", "🌫️"),
            ("霾", "🌫️"),
            ("雷电", "⛈️"),
            ("多云", DEFAULT_WEATHER_ICON),
            ("阴", DEFAULT_WEATHER_ICON),
        ],
    )
    def test_single_rule(self, condition: str, icon: str):
        assert weather_icon(condition) == icon

    def test_first_match_wins(self):
        # rain is checked before thunder
        assert weather_icon("雷阵雨") == "🌧️"
        assert weather_icon("晴转雨") == "☀️"
        assert weather_icon("雨夹雪") == "🌧️"


class TestLifeIndexIcon:
    def test_known_codes(self):
        assert life_index_icon("ct") == "👕"
        assert life_index_icon("gm") == "🤧"
        assert life_index_icon("uv") == "☀️"

    def test_unknown_code(self):
        assert life_index_icon("ls") == DEFAULT_INDEX_ICON
        assert life_index_icon("") == DEFAULT_INDEX_ICON
