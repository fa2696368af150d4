"""Static city name to provider identifier lookup."""

from collections.abc import Mapping
from types import MappingProxyType

from weather_mcp.config.loader import city_table
from weather_mcp.config.schema import AppConfig
from weather_mcp.models.errors import UnsupportedCity


class CityResolver:
    def __init__(self, table: Mapping[str, str]):
        self._table = MappingProxyType(dict(table))

    @classmethod
    def from_config(cls, config: AppConfig) -> "CityResolver":
        return cls(city_table(config))

    @property
    def supported(self) -> list[str]:
        return list(self._table)

    def resolve(self, name: str) -> str:
        """Return the provider id for an exact display-name match.

        Raises UnsupportedCity carrying every supported name on a miss.
        """
        try:
            return self._table[name]
        except KeyError:
            raise UnsupportedCity(name, self.supported) from None
