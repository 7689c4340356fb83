#!/usr/bin/env python3
"""
Async Interval MCP Server using chuk-mcp-server

This server provides MCP tools for working with musical intervals as
spelled, quality-aware values rather than raw semitone counts.

The server provides tools for:
- Describing, adding, subtracting and inverting intervals
- Naming the interval spanned by a number of half steps
- Transposing spelled notes and measuring between them
- Looking up named intervals from the library and project catalogs
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_intervals.catalog import IntervalCatalog
from chuk_mcp_intervals.constants import CATALOG_DIR_ENV
from chuk_mcp_intervals.tools import (
    register_catalog_tools,
    register_interval_tools,
    register_note_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-intervals")

# Paths - project catalog from the environment, else ./intervals
BASE_PATH = Path.cwd()
INTERVALS_DIR = Path(os.environ.get(CATALOG_DIR_ENV, BASE_PATH / "intervals"))
CATALOG_LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create catalog
interval_catalog = IntervalCatalog(
    library_path=CATALOG_LIBRARY_PATH,
    project_path=INTERVALS_DIR,
)

# Register all tools
interval_tools = register_interval_tools(mcp)
note_tools = register_note_tools(mcp)
catalog_tools = register_catalog_tools(mcp, interval_catalog)

# Export tool functions for direct access
music_describe_interval = interval_tools["music_describe_interval"]
music_add_intervals = interval_tools["music_add_intervals"]
music_subtract_intervals = interval_tools["music_subtract_intervals"]
music_invert_interval = interval_tools["music_invert_interval"]
music_interval_from_half_steps = interval_tools["music_interval_from_half_steps"]

music_transpose_note = note_tools["music_transpose_note"]
music_interval_between_notes = note_tools["music_interval_between_notes"]

music_list_named_intervals = catalog_tools["music_list_named_intervals"]
music_lookup_interval = catalog_tools["music_lookup_interval"]

logger.info("CHUK Intervals MCP Server initialized")
logger.info(f"  Catalog library: {CATALOG_LIBRARY_PATH}")
logger.info(f"  Project catalog: {INTERVALS_DIR}")
