"""Normalizer: turns a validated Meizu envelope into report-ready models.

Each report kind has its own extraction mode. All of them read only the
first data block of the envelope.
"""

import logging
from datetime import date, datetime

from weather_mcp.models.errors import NoDataAvailable, UpstreamDataError
from weather_mcp.models.weather import (
    AirQuality,
    CurrentReport,
    DailyReport,
    DatedForecast,
    DayForecast,
    IntervalForecast,
    IntervalReport,
    LifeIndex,
    RealtimeSnapshot,
)

logger = logging.getLogger(__name__)


def first_block(envelope: dict) -> dict:
    blocks = envelope.get("value") or []
    if not blocks or not isinstance(blocks[0], dict):
        raise UpstreamDataError("获取天气数据失败: 未知错误")
    return blocks[0]


def normalize_current(envelope: dict, today: date) -> CurrentReport:
    """Realtime snapshot plus today's forecast entry.

    When no entry is dated today the first entry is used whatever its date.
    """
    block = first_block(envelope)
    raw_realtime = block.get("realtime")
    if not isinstance(raw_realtime, dict):
        raise UpstreamDataError("获取天气数据失败: 缺少实时天气数据")

    realtime = RealtimeSnapshot(
        time=_require(raw_realtime, "time", "realtime"),
        temp=_require(raw_realtime, "temp", "realtime"),
        feels_like=_require(raw_realtime, "sendibleTemp", "realtime"),
        weather=_require(raw_realtime, "weather", "realtime"),
        humidity=_require(raw_realtime, "sD", "realtime"),
        wind_direction=_require(raw_realtime, "wD", "realtime"),
        wind_scale=_require(raw_realtime, "wS", "realtime"),
    )

    days = _day_forecasts(block)
    today_str = today.isoformat()
    selected = next((d for d in days if d.date == today_str), None)
    if selected is None:
        logger.warning(
            "No forecast entry dated %s for %s, using first entry (%s)",
            today_str, block.get("city"), days[0].date,
        )
        selected = days[0]

    return CurrentReport(
        city=_require(block, "city", "value"),
        province=str(block.get("provinceName") or ""),
        realtime=realtime,
        today=selected,
        air=_air_quality(block),
        indexes=_life_indexes(block),
    )


def normalize_daily(envelope: dict, today: date) -> DailyReport:
    """Forecast days sorted by date, keeping only today and later."""
    block = first_block(envelope)
    dated: list[DatedForecast] = []
    for forecast in _day_forecasts(block):
        day = _parse_date(forecast.date)
        if day is None:
            logger.warning("Dropping forecast with unparseable date %r", forecast.date)
            continue
        dated.append(DatedForecast(day=day, forecast=forecast))

    # stable: equal dates keep provider order
    dated.sort(key=lambda d: d.day)
    retained = [d for d in dated if d.day >= today]

    return DailyReport(
        city=_require(block, "city", "value"),
        days=retained,
        indexes=_life_indexes(block),
    )


def normalize_hourly(envelope: dict) -> IntervalReport:
    """3-hour intervals, verbatim order. Raises NoDataAvailable when absent."""
    block = first_block(envelope)
    details = block.get("weatherDetailsInfo") or {}
    raw_intervals = details.get("weather3HoursDetailsInfos") or []
    if not raw_intervals:
        raise NoDataAvailable("no 3-hour interval forecast in payload")

    intervals = []
    for raw in raw_intervals:
        intervals.append(
            IntervalForecast(
                start=_parse_timestamp(_require(raw, "startTime", "interval")),
                end=_parse_timestamp(_require(raw, "endTime", "interval")),
                weather=_require(raw, "weather", "interval"),
                temp_min=_require(raw, "lowerestTemperature", "interval"),
                temp_max=_require(raw, "highestTemperature", "interval"),
                precipitation=_precipitation(raw.get("precipitation")),
            )
        )
    return IntervalReport(city=_require(block, "city", "value"), intervals=intervals)


def _day_forecasts(block: dict) -> list[DayForecast]:
    raw_days = block.get("weathers")
    if not isinstance(raw_days, list) or not raw_days:
        raise UpstreamDataError("获取天气数据失败: 缺少天气预报数据")
    return [
        DayForecast(
            date=_require(raw, "date", "weathers"),
            week=str(raw.get("week") or ""),
            weather=_require(raw, "weather", "weathers"),
            temp_day=_require(raw, "temp_day_c", "weathers"),
            temp_night=_require(raw, "temp_night_c", "weathers"),
            sunrise=_require(raw, "sun_rise_time", "weathers"),
            sunset=_require(raw, "sun_down_time", "weathers"),
        )
        for raw in raw_days
    ]


def _air_quality(block: dict) -> AirQuality | None:
    raw = block.get("pm25")
    if not isinstance(raw, dict) or not raw:
        return None
    if raw.get("aqi") in (None, "") or not raw.get("quality"):
        logger.warning("Ignoring incomplete air quality section: %s", raw)
        return None
    return AirQuality(
        aqi=str(raw["aqi"]),
        quality=str(raw["quality"]),
        pm25=str(raw.get("pm25", "")),
        pm10=str(raw.get("pm10", "")),
    )


def _life_indexes(block: dict) -> list[LifeIndex]:
    indexes = []
    for raw in block.get("indexes") or []:
        if not isinstance(raw, dict) or not raw.get("content"):
            logger.warning("Skipping malformed life index: %s", raw)
            continue
        indexes.append(
            LifeIndex(
                code=str(raw.get("abbreviation") or ""),
                name=str(raw.get("name") or ""),
                level=str(raw.get("level") or ""),
                content=str(raw["content"]),
            )
        )
    return indexes


def _precipitation(value: object) -> str | None:
    """Missing, empty and numeric zero all mean no precipitation."""
    if value in (None, "") or (isinstance(value, (int, float)) and not value):
        return None
    return str(value)


def _require(raw: object, key: str, section: str) -> str:
    if not isinstance(raw, dict) or raw.get(key) is None:
        raise UpstreamDataError(f"获取天气数据失败: {section} 缺少字段 {key}")
    return str(raw[key])


def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value[:10])
    except (ValueError, TypeError):
        return None


def _parse_timestamp(value: str) -> datetime:
    """Parse provider timestamps like '2026-10-17 08:00:00' (ISO accepted too)."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise UpstreamDataError(f"获取天气数据失败: 无法解析时间 {value}") from e
