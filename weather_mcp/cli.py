"""CLI entry point for the weather MCP server."""

import argparse
import asyncio
import logging

from weather_mcp.config.loader import load_config
from weather_mcp.models.common import ReportKind
from weather_mcp.server import build_pipeline, serve_stdio

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weather-mcp",
        description="City weather reports over MCP, backed by the Meizu weather API",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--log-level", default=None, help="Override server.log_level")

    sub = parser.add_subparsers(dest="command")

    # serve
    sub.add_parser("serve", help="Run the MCP server on stdio")

    # query
    query_p = sub.add_parser("query", help="Run one report and print it")
    query_p.add_argument("kind", choices=[k.value for k in ReportKind])
    query_p.add_argument("city", help="City display name, e.g. 北京")

    # cities
    sub.add_parser("cities", help="List supported cities")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=(args.log_level or config.server.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(config)
    elif args.command == "query":
        return _cmd_query(config, args)
    elif args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config) -> int:
    try:
        asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        return 0
    except Exception:
        logger.exception("Failed to start MCP server")
        return 1
    return 0


def _cmd_query(config, args) -> int:
    pipeline = build_pipeline(config)
    resp = asyncio.run(pipeline.run(args.kind, args.city))
    print(resp.text)
    return 1 if resp.is_error else 0


def _cmd_cities(config) -> int:
    for c in config.cities:
        print(f"{c.name}\t{c.provider_id}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
