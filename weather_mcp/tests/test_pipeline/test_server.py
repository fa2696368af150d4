"""Tests for the MCP tool bindings."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from mcp.server import Server
from mcp.types import CallToolResult

from weather_mcp.config.schema import AppConfig
from weather_mcp.ingest.city_resolver import CityResolver
from weather_mcp.ingest.meizu_client import MeizuClient
from weather_mcp.pipeline.report_pipeline import REPORTS, ReportPipeline, ToolResponse
from weather_mcp.server import build_server, dispatch, to_call_tool_result, tool_definition


@pytest.fixture
def pipeline(default_config: AppConfig, beijing_envelope: dict, today: date) -> ReportPipeline:
    client = MagicMock(spec=MeizuClient)
    client.fetch = AsyncMock(return_value=beijing_envelope)
    return ReportPipeline(CityResolver.from_config(default_config), client, today=lambda: today)


class TestToolDefinitions:
    def test_three_tools_with_city_schema(self):
        tools = [tool_definition(spec) for spec in REPORTS.values()]
        assert [t.name for t in tools] == ["query_weather", "query_forecast", "query_hourly_forecast"]
        for t in tools:
            assert t.inputSchema["required"] == ["city"]
            assert t.inputSchema["properties"]["city"]["type"] == "string"

    def test_build_server(self, default_config: AppConfig, pipeline: ReportPipeline):
        server = build_server(default_config, pipeline)
        assert isinstance(server, Server)
        assert server.name == "weather-mcp"


class TestCallToolResult:
    def test_success_flag(self):
        result = to_call_tool_result(ToolResponse("ok"))
        assert isinstance(result, CallToolResult)
        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "ok"

    def test_error_flag(self):
        result = to_call_tool_result(ToolResponse("bad", is_error=True))
        assert result.isError is True


class TestDispatch:
    def test_query_weather(self, pipeline: ReportPipeline):
        result = asyncio.run(dispatch(pipeline, "query_weather", {"city": "北京"}))
        assert result.isError is False
        assert result.content[0].text.startswith("📍 北京")

    def test_unsupported_city(self, pipeline: ReportPipeline):
        result = asyncio.run(dispatch(pipeline, "query_hourly_forecast", {"city": "纽约"}))
        assert result.isError is False
        assert "精细天气预报" in result.content[0].text

    def test_unknown_tool(self, pipeline: ReportPipeline):
        result = asyncio.run(dispatch(pipeline, "query_tides", {"city": "北京"}))
        assert result.isError is True
        assert "query_tides" in result.content[0].text

    def test_missing_city(self, pipeline: ReportPipeline):
        result = asyncio.run(dispatch(pipeline, "query_forecast", {}))
        assert result.isError is True
