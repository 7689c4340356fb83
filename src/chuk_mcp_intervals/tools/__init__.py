"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Interval description and arithmetic
- notes - Note transposition and measurement
- catalog - Named interval discovery
"""

from chuk_mcp_intervals.tools.catalog import register_catalog_tools
from chuk_mcp_intervals.tools.intervals import register_interval_tools
from chuk_mcp_intervals.tools.notes import register_note_tools

__all__ = [
    "register_catalog_tools",
    "register_interval_tools",
    "register_note_tools",
]
