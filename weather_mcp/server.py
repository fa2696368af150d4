"""MCP stdio server exposing the weather report tools."""

import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from weather_mcp.config.schema import AppConfig
from weather_mcp.ingest.city_resolver import CityResolver
from weather_mcp.ingest.meizu_client import MeizuClient
from weather_mcp.pipeline.report_pipeline import (
    REPORTS,
    REPORTS_BY_TOOL,
    ReportPipeline,
    ReportSpec,
    ToolResponse,
)

logger = logging.getLogger(__name__)


def tool_definition(spec: ReportSpec) -> Tool:
    return Tool(
        name=spec.tool_name,
        description=spec.description,
        inputSchema={
            "type": "object",
            "properties": {
                "city": {"type": "string", "description": spec.city_hint},
            },
            "required": ["city"],
        },
    )


def to_call_tool_result(resp: ToolResponse) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=resp.text)],
        isError=resp.is_error,
    )


def build_pipeline(config: AppConfig) -> ReportPipeline:
    return ReportPipeline(
        resolver=CityResolver.from_config(config),
        client=MeizuClient.from_config(config.provider),
    )


def build_server(config: AppConfig, pipeline: ReportPipeline | None = None) -> Server:
    pipeline = pipeline or build_pipeline(config)
    server = Server(config.server.name, version=config.server.version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [tool_definition(spec) for spec in REPORTS.values()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> CallToolResult:
        return await dispatch(pipeline, name, arguments)

    return server


async def dispatch(pipeline: ReportPipeline, name: str, arguments: dict | None) -> CallToolResult:
    """Route one tool call to the pipeline."""
    spec = REPORTS_BY_TOOL.get(name)
    if spec is None:
        logger.warning("Unknown tool requested: %s", name)
        return to_call_tool_result(ToolResponse(f"Unknown tool: {name}", is_error=True))

    city = (arguments or {}).get("city")
    if not isinstance(city, str):
        return to_call_tool_result(
            ToolResponse(f"{spec.error_prefix}: 参数 city 必须是字符串", is_error=True)
        )

    resp = await pipeline.run(spec.kind, city)
    return to_call_tool_result(resp)


async def serve_stdio(config: AppConfig) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    server = build_server(config)
    logger.info("Starting %s %s on stdio", config.server.name, config.server.version)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP server ready, waiting for requests")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
