"""
MCP tool implementations.

Tools are organized by domain:
- pitches - Describing, transposing and measuring spelled pitches
- intervals - Describing, stacking, subtracting and inverting intervals
"""

from chuk_mcp_tonal.tools.intervals import register_interval_tools
from chuk_mcp_tonal.tools.pitches import register_pitch_tools

__all__ = [
    "register_interval_tools",
    "register_pitch_tools",
]
