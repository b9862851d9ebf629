from __future__ import annotations

import re
from typing import Optional

from ..core.constants import DEFAULT_TIME_PART

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def time_part(timestamp: str) -> str:
    """Return the portion after the first space of 'YYYY-MM-DD HH:MM:SS'."""
    parts = timestamp.split(" ")
    if len(parts) < 2:
        return DEFAULT_TIME_PART
    return parts[1]


def parse_hour(timestamp: str) -> Optional[int]:
    """Hour of day from a log timestamp, or None when it cannot be read.

    Only the leading integer before the first colon counts, so "08" and
    "8h" both give 8 while "" or "xx" give None.
    """
    hour_token = time_part(timestamp).split(":")[0]
    match = _LEADING_INT.match(hour_token)
    if not match:
        return None
    return int(match.group(1))
