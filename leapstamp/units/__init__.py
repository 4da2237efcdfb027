"""Temporal units.

This module provides:
    - ZoneOffset: signed hour/minute displacement from UTC
    - ZONE_OFFSET_ZERO: the +00:00 offset
"""

from __future__ import annotations

from leapstamp.units.offset import ZONE_OFFSET_ZERO, ZoneOffset

__all__: list[str] = [
    "ZoneOffset",
    "ZONE_OFFSET_ZERO",
]
