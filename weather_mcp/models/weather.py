"""Normalized weather data models, built fresh for every request."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum


class LifeCategory(StrEnum):
    CLOTHING = "ct"
    MAKEUP = "pp"
    COLD_RISK = "gm"
    CAR_WASH = "xc"
    EXERCISE = "yd"
    UV = "uv"


@dataclass(frozen=True)
class AirQuality:
    aqi: str
    quality: str
    pm25: str
    pm10: str


@dataclass(frozen=True)
class RealtimeSnapshot:
    time: str
    temp: str
    feels_like: str
    weather: str
    humidity: str
    wind_direction: str
    wind_scale: str


@dataclass(frozen=True)
class DayForecast:
    date: str  # YYYY-MM-DD as sent by the provider
    week: str
    weather: str
    temp_day: str
    temp_night: str
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class IntervalForecast:
    start: datetime
    end: datetime
    weather: str
    temp_min: str
    temp_max: str
    precipitation: str | None = None


@dataclass(frozen=True)
class LifeIndex:
    code: str
    name: str
    level: str
    content: str


@dataclass(frozen=True)
class CurrentReport:
    city: str
    province: str
    realtime: RealtimeSnapshot
    today: DayForecast
    air: AirQuality | None = None
    indexes: list[LifeIndex] = field(default_factory=list)


@dataclass(frozen=True)
class DatedForecast:
    day: date
    forecast: DayForecast


@dataclass(frozen=True)
class DailyReport:
    city: str
    days: list[DatedForecast]
    indexes: list[LifeIndex] = field(default_factory=list)


@dataclass(frozen=True)
class IntervalReport:
    city: str
    intervals: list[IntervalForecast]
