#!/usr/bin/env python3
"""
Entry point for the CHUK Intervals MCP Server.

Serves the interval tools over stdio or http, or with --list-intervals
prints the named interval catalog (library plus project entries) and exits
without starting a server. Use it to check a project catalog before serving it.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path
from typing import get_args

from chuk_mcp_intervals.catalog import IntervalCatalog
from chuk_mcp_intervals.constants import CATALOG_DIR_ENV, Transport

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Intervals MCP Server")
    parser.add_argument(
        "--transport",
        choices=list(get_args(Transport)),
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--catalog-dir",
        type=Path,
        default=None,
        help=f"Project catalog directory (default: ${CATALOG_DIR_ENV} or ./intervals)",
    )
    parser.add_argument(
        "--list-intervals",
        action="store_true",
        help="Print the named interval catalog and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def list_intervals(catalog: IntervalCatalog) -> list[str]:
    """One line per named interval: name, notation, half steps and aliases."""
    lines = []
    for entry in catalog.list_intervals():
        line = f"{entry.name:<20} {entry.notation:<5} {entry.interval.half_steps:>3}"
        if entry.aliases:
            line += f"  ({', '.join(entry.aliases)})"
        lines.append(line)
    return lines


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.catalog_dir is not None:
        os.environ[CATALOG_DIR_ENV] = str(args.catalog_dir)

    if args.list_intervals:
        project_path = Path(os.environ.get(CATALOG_DIR_ENV, Path.cwd() / "intervals"))
        for line in list_intervals(IntervalCatalog(project_path=project_path)):
            print(line)
        return

    # The server reads the catalog directory when it is imported
    from chuk_mcp_intervals.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Intervals MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Intervals MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
