"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

MEIZU_ENDPOINT = "http://aider.meizu.com/app/weather/listWeather"


class CityConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(min_length=1)
    provider_id: str

    @field_validator("provider_id")
    @classmethod
    def _numeric_id(cls, v: str) -> str:
        if not v.isdigit():
            raise ValueError(f"provider_id must be numeric, got {v!r}")
        return v


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "weather-mcp"
    version: str = "1.0.0"
    log_level: str = "INFO"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    endpoint: str = MEIZU_ENDPOINT
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = "weather-mcp/1.0.0"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    server: ServerConfig = ServerConfig()
    provider: ProviderConfig = ProviderConfig()
    cities: list[CityConfig] = []

    @field_validator("cities")
    @classmethod
    def _unique_names(cls, cities: list[CityConfig]) -> list[CityConfig]:
        seen: set[str] = set()
        for city in cities:
            if city.name in seen:
                raise ValueError(f"duplicate city name: {city.name}")
            seen.add(city.name)
        return cities
