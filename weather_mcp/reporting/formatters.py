"""Plain-text report formatters, one per report kind."""

import random

from weather_mcp.models.weather import CurrentReport, DailyReport, IntervalReport
from weather_mcp.reporting.icons import life_index_icon, weather_icon


def format_current(r: CurrentReport) -> str:
    rt = r.realtime
    lines = [
        f"📍 {r.city}（{r.province}）实时天气",
        f"🕒 {rt.time}",
        "",
        f"🌡️ 当前温度: {rt.temp}°C (体感温度: {rt.feels_like}°C)",
        f"☁️ 天气状况: {rt.weather}",
        f"💧 湿度: {rt.humidity}%",
        f"🌬️ 风向风力: {rt.wind_direction} {rt.wind_scale}",
        "",
        f"📅 今日温度: {r.today.temp_day}°C / {r.today.temp_night}°C",
        f"🌞 日出/日落: {r.today.sunrise} / {r.today.sunset}",
        "",
    ]
    if r.air is not None:
        lines += [
            f"🌫️ 空气质量: {r.air.quality} (AQI: {r.air.aqi})",
            f"💨 PM2.5: {r.air.pm25}, PM10: {r.air.pm10}",
            "",
        ]
    if r.indexes:
        lines.append("🔍 生活指数参考:")
        for idx in r.indexes:
            lines.append(
                f"{life_index_icon(idx.code)} {idx.name}({idx.level}): {idx.content}"
            )
    return "\n".join(lines).rstrip()


def format_daily(r: DailyReport, rng: random.Random | None = None) -> str:
    """Multi-day forecast. Ends with one randomly drawn life-index tip."""
    rng = rng or random.Random()
    lines = [f"📅 {r.city}未来天气预报:", ""]
    for i, d in enumerate(r.days):
        f = d.forecast
        label = "今天" if i == 0 else f"{d.day.month}月{d.day.day}日 {f.week}"
        lines += [
            f"📆 {label}:",
            f"{weather_icon(f.weather)} {f.weather}",
            f"🌡️ {f.temp_day}°C / {f.temp_night}°C",
            f"🌞 {f.sunrise} - {f.sunset}",
            "",
        ]
    if r.indexes:
        tip = rng.choice(r.indexes)
        lines.append(f"💡 今日小贴士: {tip.content}")
    return "\n".join(lines).rstrip()


def format_hourly(r: IntervalReport) -> str:
    lines = [f"⏱️ {r.city}未来逐3小时天气预报:", ""]
    for it in r.intervals:
        lines += [
            f"🕒 {it.start.hour}:00-{it.end.hour}:00:",
            f"{weather_icon(it.weather)} {it.weather}",
            f"🌡️ {it.temp_min}°C - {it.temp_max}°C",
        ]
        if it.precipitation and it.precipitation != "0":
            lines.append(f"💧 降水量: {it.precipitation}mm")
        lines.append("")
    return "\n".join(lines).rstrip()
