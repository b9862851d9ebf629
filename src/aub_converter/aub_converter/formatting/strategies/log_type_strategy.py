from __future__ import annotations

from ...core.constants import LOG_TYPE_COLUMN_INDEX, LOG_TYPE_MIN_FIELDS
from ...core.enums import Direction
from ...records.model import Record
from .base import DirectionStrategy, extras_token


class LogTypeColumnStrategy(DirectionStrategy):
    """Eight-column layout: log type read from raw field 5, I -> 0, O -> 1.

    No time-of-day fallback; any other value writes 0.
    """

    min_fields = LOG_TYPE_MIN_FIELDS

    def decide(self, record: Record) -> Direction:
        token = extras_token(record, LOG_TYPE_COLUMN_INDEX)
        if token == "O":
            return Direction.ONE
        return Direction.ZERO
