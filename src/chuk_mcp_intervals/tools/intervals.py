"""
Interval tools - MCP tools for interval arithmetic.

Tools for describing intervals, adding and subtracting them, inverting them,
and naming the interval spanned by a number of half steps.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_intervals.constants import OCTAVE_HALF_STEPS, TritoneQuality
from chuk_mcp_intervals.core import (
    Interval,
    SignedInterval,
    SimpleInterval,
    parse_signed_interval,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def interval_summary(signed: SignedInterval) -> dict[str, Any]:
    """Plain-dict view of a signed interval for tool responses."""
    interval = signed.interval
    return {
        "notation": str(signed),
        "direction": "descending" if signed.is_negative() else "ascending",
        "quality": str(interval.quality),
        "number": interval.number.value,
        "simple": str(interval.base),
        "additional_octaves": interval.additional_octaves,
        "half_steps": signed.half_steps,
        "perfectability": interval.perfectability.value,
    }


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval arithmetic tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_interval(interval: str) -> str:
        """
        Describe an interval written in shorthand.

        Args:
            interval: Shorthand like 'M3', 'P12' or '-m6'

        Returns:
            JSON string with quality, number, octaves and half steps

        Example:
            music_describe_interval(interval="A4")
        """
        try:
            signed = parse_signed_interval(interval)
            base = signed.interval.base

            return json.dumps(
                {
                    "status": "success",
                    "interval": interval_summary(signed),
                    "inversion": str(base.inversion()),
                    "circle_of_fifths_index": base.circle_of_fifths_index,
                }
            )
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_interval"] = music_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_add_intervals(first: str, second: str) -> str:
        """
        Add two intervals.

        Intervals may be signed; a descending interval moves down.

        Args:
            first: Shorthand for the first interval (e.g. 'M3')
            second: Shorthand for the second interval (e.g. '-P5')

        Returns:
            JSON string with the sum

        Example:
            music_add_intervals(first="M3", second="m3")
        """
        try:
            result = parse_signed_interval(first) + parse_signed_interval(second)

            return json.dumps(
                {
                    "status": "success",
                    "first": first,
                    "second": second,
                    "result": interval_summary(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_add_intervals"] = music_add_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def music_subtract_intervals(first: str, second: str) -> str:
        """
        Subtract the second interval from the first.

        The result is signed: subtracting a larger interval gives a
        descending one.

        Args:
            first: Shorthand for the interval to subtract from
            second: Shorthand for the interval to subtract

        Returns:
            JSON string with the difference

        Example:
            music_subtract_intervals(first="P8", second="M6")
        """
        try:
            result = parse_signed_interval(first) - parse_signed_interval(second)

            return json.dumps(
                {
                    "status": "success",
                    "first": first,
                    "second": second,
                    "result": interval_summary(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to subtract intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_subtract_intervals"] = music_subtract_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def music_invert_interval(interval: str) -> str:
        """
        Invert an interval within the octave.

        Compound intervals are reduced to their simple part first, so the
        inversion of a major tenth is a minor sixth.

        Args:
            interval: Shorthand like 'M3' or 'P11'

        Returns:
            JSON string with the inversion

        Example:
            music_invert_interval(interval="M3")
        """
        try:
            base = parse_signed_interval(interval).interval.base
            inversion = base.inversion()

            return json.dumps(
                {
                    "status": "success",
                    "interval": interval,
                    "simple": str(base),
                    "inversion": str(inversion),
                    "half_steps": inversion.half_steps,
                }
            )
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_invert_interval"] = music_invert_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_interval_from_half_steps(half_steps: int, tritone: str | None = None) -> str:
        """
        Name the simplest interval spanning a number of half steps.

        Negative half steps give a descending interval. Six half steps (plus
        any octaves) is ambiguous: pass tritone="augmented" for an augmented
        fourth or tritone="diminished" for a diminished fifth; without it
        both candidates are returned.

        Args:
            half_steps: Signed number of half steps
            tritone: Optional tritone spelling ("augmented" or "diminished")

        Returns:
            JSON string with the interval, or the tritone candidates

        Example:
            music_interval_from_half_steps(half_steps=7)
        """
        try:
            sign = -1 if half_steps < 0 else 1
            octaves, remainder = divmod(abs(half_steps), OCTAVE_HALF_STEPS)

            if tritone is None:
                base = SimpleInterval.try_simplest_with_half_steps(remainder)
                if base is None:
                    spellings = [
                        SimpleInterval.simplest_with_half_steps(remainder, t)
                        for t in TritoneQuality
                    ]
                    candidates = [
                        SignedInterval(Interval(spelled, octaves), sign) for spelled in spellings
                    ]
                    return json.dumps(
                        {
                            "status": "success",
                            "half_steps": half_steps,
                            "ambiguous": True,
                            "candidates": [interval_summary(c) for c in candidates],
                        }
                    )
            else:
                base = SimpleInterval.simplest_with_half_steps(remainder, TritoneQuality(tritone))

            result = SignedInterval(Interval(base, octaves), sign)
            return json.dumps(
                {
                    "status": "success",
                    "half_steps": half_steps,
                    "ambiguous": False,
                    "interval": interval_summary(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to name interval from half steps")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_interval_from_half_steps"] = music_interval_from_half_steps

    return tools
