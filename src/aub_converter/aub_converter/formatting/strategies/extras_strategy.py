from __future__ import annotations

import logging

from ...common.datetime_utils import parse_hour
from ...core.constants import EXTRAS_LOG_TYPE_INDEX, MIN_FIELDS, NOON_HOUR
from ...core.enums import Direction
from ...records.model import Record
from .base import DirectionStrategy, extras_token

logger = logging.getLogger(__name__)


class TimeOfDayStrategy(DirectionStrategy):
    """Before noon writes 0, noon onwards writes 1. Unreadable hours write 0."""

    min_fields = MIN_FIELDS

    def decide(self, record: Record) -> Direction:
        try:
            hour = parse_hour(record.timestamp)
        except Exception:
            logger.debug("Line %d: unreadable timestamp %r", record.line_number, record.timestamp)
            return Direction.ZERO

        if hour is not None and hour >= NOON_HOUR:
            return Direction.ONE
        return Direction.ZERO


class ExtrasLogTypeStrategy(DirectionStrategy):
    """Explicit I/O token at extras[4] first (I -> 1, O -> 0), then time of day."""

    min_fields = MIN_FIELDS

    def __init__(self, *, fallback: DirectionStrategy | None = None):
        self._fallback = fallback or TimeOfDayStrategy()

    def decide(self, record: Record) -> Direction:
        token = extras_token(record, EXTRAS_LOG_TYPE_INDEX)
        if token == "I":
            return Direction.ONE
        if token == "O":
            return Direction.ZERO
        return self._fallback.decide(record)
