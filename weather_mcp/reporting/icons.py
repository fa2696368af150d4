"""Emoji lookup tables for weather conditions and life indexes."""

from weather_mcp.models.weather import LifeCategory

DEFAULT_WEATHER_ICON = "☁️"
DEFAULT_INDEX_ICON = "ℹ️"

# Evaluated in order, first substring hit wins, so 雷阵雨 resolves to rain.
WEATHER_ICON_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("晴",), "☀️"),
    (("雨",), "🌧️"),
    (("雪",), "❄️"),
    (("雾", "霾"), "🌫️"),
    (("雷",), "⛈️"),
)

LIFE_INDEX_ICONS: dict[str, str] = {
    LifeCategory.CLOTHING: "👕",
    LifeCategory.MAKEUP: "💄",
    LifeCategory.COLD_RISK: "🤧",
    LifeCategory.CAR_WASH: "🚗",
    LifeCategory.EXERCISE: "🏃",
    LifeCategory.UV: "☀️",
}


def weather_icon(condition: str) -> str:
    for needles, icon in WEATHER_ICON_RULES:
        if any(n in condition for n in needles):
            return icon
    return DEFAULT_WEATHER_ICON


def life_index_icon(code: str) -> str:
    return LIFE_INDEX_ICONS.get(code, DEFAULT_INDEX_ICON)
