"""
Catalog tools - MCP tools for named interval discovery.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_intervals.catalog import IntervalCatalog
from chuk_mcp_intervals.tools.intervals import interval_summary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_catalog_tools(mcp: ChukMCPServer, catalog: IntervalCatalog) -> dict[str, Any]:
    """
    Register named interval tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The interval catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_named_intervals() -> str:
        """
        List named intervals.

        Returns all entries from the library and project catalogs.

        Returns:
            JSON string with list of named intervals

        Example:
            music_list_named_intervals()
        """
        try:
            entries = catalog.list_intervals()

            return json.dumps(
                {
                    "status": "success",
                    "intervals": [
                        {
                            "name": entry.name,
                            "notation": entry.notation,
                            "aliases": entry.aliases,
                            "description": entry.description,
                        }
                        for entry in entries
                    ],
                    "count": len(entries),
                }
            )
        except Exception as e:
            logger.exception("Failed to list named intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_named_intervals"] = music_list_named_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def music_lookup_interval(name: str) -> str:
        """
        Look up an interval by name, alias or shorthand.

        Args:
            name: Catalog name ('tritone'), alias ('half step') or shorthand ('M3')

        Returns:
            JSON string with the interval and its catalog entry, if any

        Example:
            music_lookup_interval(name="whole tone")
        """
        try:
            entry = catalog.get(name)
            interval = entry.interval if entry else catalog.resolve(name)

            return json.dumps(
                {
                    "status": "success",
                    "query": name,
                    "name": entry.name if entry else None,
                    "description": entry.description if entry else None,
                    "interval": interval_summary(interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to look up interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_lookup_interval"] = music_lookup_interval

    return tools
