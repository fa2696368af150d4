"""Default city table with Meizu provider identifiers."""

from weather_mcp.config.schema import CityConfig

DEFAULT_CITIES: list[CityConfig] = [
    CityConfig(name="北京", provider_id="101010100"),
    CityConfig(name="上海", provider_id="101020100"),
    CityConfig(name="武汉", provider_id="101200101"),
    CityConfig(name="郑州", provider_id="101180101"),
]
