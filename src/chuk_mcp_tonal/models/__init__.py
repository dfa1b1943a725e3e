"""
Pydantic models for the tonal system.

This module provides:
- PitchModel: JSON description of a spelled pitch
- IntervalModel: JSON description of a directed interval
"""

from chuk_mcp_tonal.models.tonal import IntervalModel, PitchModel

__all__ = [
    "IntervalModel",
    "PitchModel",
]
