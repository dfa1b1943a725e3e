#!/usr/bin/env python3
"""
Async Tonal MCP Server using chuk-mcp-server

This server provides MCP tools for spelled pitch and interval arithmetic.
Pitches keep their spelling (D# is not Eb) and intervals keep their quality
(an augmented fourth is not a diminished fifth).

The server provides tools for:
- Describing pitches and intervals
- Transposing pitches by intervals
- Measuring the interval between two pitches
- Stacking, subtracting and inverting intervals
- Converting pitches to note numbers
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tonal.tools import register_interval_tools, register_pitch_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tonal")

# Register all tools
pitch_tools = register_pitch_tools(mcp)
interval_tools = register_interval_tools(mcp)

# Export tool functions for direct access
tonal_describe_pitch = pitch_tools["tonal_describe_pitch"]
tonal_transpose = pitch_tools["tonal_transpose"]
tonal_pitch_interval = pitch_tools["tonal_pitch_interval"]
tonal_note_number = pitch_tools["tonal_note_number"]

tonal_describe_interval = interval_tools["tonal_describe_interval"]
tonal_add_intervals = interval_tools["tonal_add_intervals"]
tonal_subtract_intervals = interval_tools["tonal_subtract_intervals"]
tonal_invert_interval = interval_tools["tonal_invert_interval"]

logger.info("CHUK Tonal MCP Server initialized")
logger.info(f"  Pitch tools: {', '.join(sorted(pitch_tools))}")
logger.info(f"  Interval tools: {', '.join(sorted(interval_tools))}")
