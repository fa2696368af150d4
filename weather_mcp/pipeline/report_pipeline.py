"""Report pipeline: resolve city, fetch, normalize, format.

All three tools share this single path; a ReportSpec supplies the parts
that differ per report kind.
"""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from weather_mcp.ingest.city_resolver import CityResolver
from weather_mcp.ingest.meizu_client import MeizuClient
from weather_mcp.ingest.normalizer import (
    normalize_current,
    normalize_daily,
    normalize_hourly,
)
from weather_mcp.models.common import ReportKind, local_today
from weather_mcp.models.errors import NoDataAvailable, UnsupportedCity, UpstreamError
from weather_mcp.reporting.formatters import format_current, format_daily, format_hourly

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResponse:
    text: str
    is_error: bool = False


@dataclass(frozen=True)
class ReportSpec:
    kind: ReportKind
    tool_name: str
    description: str
    city_hint: str
    subject: str
    error_prefix: str
    no_data_template: str
    render: Callable[[dict, date, random.Random], str]


def _render_current(envelope: dict, today: date, rng: random.Random) -> str:
    return format_current(normalize_current(envelope, today))


def _render_daily(envelope: dict, today: date, rng: random.Random) -> str:
    return format_daily(normalize_daily(envelope, today), rng)


def _render_hourly(envelope: dict, today: date, rng: random.Random) -> str:
    return format_hourly(normalize_hourly(envelope))


REPORTS: dict[ReportKind, ReportSpec] = {
    ReportKind.CURRENT: ReportSpec(
        kind=ReportKind.CURRENT,
        tool_name="query_weather",
        description="查询城市实时天气、今日温度、空气质量和生活指数",
        city_hint="要查询天气的城市名称，如北京、上海、广州等",
        subject="天气信息",
        error_prefix="查询天气时出错",
        no_data_template="暂无{city}的实时天气数据",
        render=_render_current,
    ),
    ReportKind.DAILY: ReportSpec(
        kind=ReportKind.DAILY,
        tool_name="query_forecast",
        description="查询城市未来几天的天气预报",
        city_hint="要查询天气预报的城市名称",
        subject="天气预报",
        error_prefix="查询天气预报时出错",
        no_data_template="暂无{city}的天气预报数据",
        render=_render_daily,
    ),
    ReportKind.HOURLY: ReportSpec(
        kind=ReportKind.HOURLY,
        tool_name="query_hourly_forecast",
        description="查询城市未来逐3小时的精细天气预报",
        city_hint="要查询精细天气预报的城市名称",
        subject="精细天气预报",
        error_prefix="查询精细天气预报时出错",
        no_data_template="暂无{city}未来几小时的精细天气预报数据",
        render=_render_hourly,
    ),
}

REPORTS_BY_TOOL: dict[str, ReportSpec] = {s.tool_name: s for s in REPORTS.values()}


def unsupported_message(spec: ReportSpec, err: UnsupportedCity) -> str:
    cities = "、".join(err.supported)
    return f'暂不支持查询"{err.city}"的{spec.subject}。目前支持的城市有：{cities}'


class ReportPipeline:
    def __init__(
        self,
        resolver: CityResolver,
        client: MeizuClient,
        today: Callable[[], date] = local_today,
        rng_factory: Callable[[], random.Random] = random.Random,
    ):
        self.resolver = resolver
        self.client = client
        self.today = today
        self.rng_factory = rng_factory

    async def run(self, kind: ReportKind | str, city: str) -> ToolResponse:
        """Run one operation end to end. Never raises."""
        spec = REPORTS[ReportKind(kind)]

        try:
            provider_id = self.resolver.resolve(city)
        except UnsupportedCity as e:
            logger.info("%s: unsupported city %r", spec.tool_name, city)
            return ToolResponse(unsupported_message(spec, e))

        try:
            envelope = await self.client.fetch(provider_id)
            text = spec.render(envelope, self.today(), self.rng_factory())
        except NoDataAvailable:
            logger.info("%s: no data for %s", spec.tool_name, city)
            return ToolResponse(spec.no_data_template.format(city=city))
        except UpstreamError as e:
            logger.error("%s failed for %s: %s", spec.tool_name, city, e)
            return ToolResponse(f"{spec.error_prefix}: {e}", is_error=True)
        except Exception as e:
            logger.exception("%s crashed for %s", spec.tool_name, city)
            return ToolResponse(f"{spec.error_prefix}: {e}", is_error=True)

        return ToolResponse(text)
