"""Timestamp comparison operations.

Timestamp defines == as full equivalence and no ordering operators. The
functions here are the explicit forms:

Comparison Operations (from leapstamp.arithmetic.comparisons):
    - temporally_equal: Same instant, any offset
    - fully_equal: Same instant and same offset state
    - compare: Return -1, 0, or 1 in temporal order
"""

from __future__ import annotations

from leapstamp.arithmetic.comparisons import (
    compare,
    fully_equal,
    temporally_equal,
)

__all__ = [
    "temporally_equal",
    "fully_equal",
    "compare",
]
