"""Normalization helpers.

Centralizes defensive parsing of feed fields.
"""

from __future__ import annotations

import math
import re
from typing import Any

# Plain ASCII decimal; rejects underscores, non-ASCII digits and padding
# that ``float()`` would otherwise accept.
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def safe_float(value: Any) -> float | None:
    """Parse *value* as a finite decimal float, ``None`` otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str) and _DECIMAL_RE.fullmatch(value):
        result = float(value)
    else:
        return None
    if not math.isfinite(result):
        return None
    return result
