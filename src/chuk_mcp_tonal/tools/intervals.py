"""
Interval tools - MCP tools for interval arithmetic.

Tools for describing, stacking, subtracting and inverting intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonal.core import (
    TonalError,
    TonalInterval,
    add_intervals,
    invert_interval,
    parse_interval,
    subtract_intervals,
)
from chuk_mcp_tonal.models import IntervalModel

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _describe(interval: TonalInterval) -> dict[str, Any]:
    return IntervalModel.from_interval(interval).model_dump(mode="json")


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_describe_interval(interval: str) -> str:
        """
        Describe an interval given in shorthand.

        Shorthand is a quality letter (d, m, M, P, A) and a compound interval
        number, with a leading '-' for descending intervals.

        Args:
            interval: Interval shorthand (e.g., 'A4', '-m3', 'P8', 'M10')

        Returns:
            JSON string with quality, number, octave and direction

        Example:
            tonal_describe_interval(interval="A4")
        """
        try:
            ti = parse_interval(interval)
            return json.dumps({"status": "success", "interval": _describe(ti)})
        except TonalError as e:
            logger.debug("Rejected interval %r: %s", interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_describe_interval"] = tonal_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_add_intervals(first: str, second: str) -> str:
        """
        Stack two intervals.

        Args:
            first: Interval shorthand (e.g., 'M3')
            second: Interval shorthand (e.g., 'm3')

        Returns:
            JSON string with the combined interval

        Example:
            tonal_add_intervals(first="M3", second="m3")
        """
        try:
            result = add_intervals(parse_interval(first), parse_interval(second))
            return json.dumps({"status": "success", "interval": _describe(result)})
        except TonalError as e:
            logger.debug("Rejected interval sum %r + %r: %s", first, second, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_add_intervals"] = tonal_add_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_subtract_intervals(first: str, second: str) -> str:
        """
        Get the difference of two intervals (second minus first).

        Args:
            first: Interval to subtract (e.g., 'm3')
            second: Interval to subtract from (e.g., 'm7')

        Returns:
            JSON string with the difference

        Example:
            tonal_subtract_intervals(first="m3", second="m7")
        """
        try:
            result = subtract_intervals(parse_interval(first), parse_interval(second))
            return json.dumps({"status": "success", "interval": _describe(result)})
        except TonalError as e:
            logger.debug("Rejected interval difference %r - %r: %s", second, first, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to subtract intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_subtract_intervals"] = tonal_subtract_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_invert_interval(interval: str) -> str:
        """
        Reverse the direction of an interval.

        Args:
            interval: Interval shorthand (e.g., 'P5')

        Returns:
            JSON string with the inverted interval

        Example:
            tonal_invert_interval(interval="P5")
        """
        try:
            result = invert_interval(parse_interval(interval))
            return json.dumps({"status": "success", "interval": _describe(result)})
        except TonalError as e:
            logger.debug("Rejected interval inversion %r: %s", interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_invert_interval"] = tonal_invert_interval

    return tools
