"""Timestamp formatting and parsing.

This module provides functions for converting timestamps to and from
RFC 3339 text:
    - parse_rfc3339: Parse text, leap seconds allowed.
    - parse_rfc3339_no_leap_seconds: Parse text, leap seconds rejected.
    - format_rfc3339: Format a Timestamp from its local fields.
"""

from __future__ import annotations

from leapstamp.format.rfc3339 import (
    format_rfc3339,
    parse_rfc3339,
    parse_rfc3339_no_leap_seconds,
)

__all__: list[str] = [
    "parse_rfc3339",
    "parse_rfc3339_no_leap_seconds",
    "format_rfc3339",
]
