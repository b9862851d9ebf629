from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.constants import AUB_COLUMN_3, AUB_COLUMN_5, AUB_COLUMN_6, FIELD_SEPARATOR, LINE_SEPARATOR
from ..records.model import Record
from .strategies.base import DirectionStrategy
from .strategies.extras_strategy import ExtrasLogTypeStrategy

logger = logging.getLogger(__name__)


class AubFormatter:
    """Render records as AUB lines: id, timestamp, 1, direction, 1, 0."""

    def __init__(self, strategy: Optional[DirectionStrategy] = None):
        self._strategy = strategy or ExtrasLogTypeStrategy()

    @property
    def strategy(self) -> DirectionStrategy:
        return self._strategy

    def format_line(self, record: Record) -> str:
        direction = self._strategy.decide(record)
        return FIELD_SEPARATOR.join(
            [
                record.employee_id,
                record.timestamp,
                AUB_COLUMN_3,
                direction.value,
                AUB_COLUMN_5,
                AUB_COLUMN_6,
            ]
        )

    def format(self, records: Iterable[Record]) -> str:
        lines = [self.format_line(r) for r in records]
        logger.debug("Formatted %d AUB lines", len(lines))
        return LINE_SEPARATOR.join(lines).rstrip()


def format_records(records: Iterable[Record]) -> str:
    """AUB text for ``records`` using the default direction strategy."""
    return AubFormatter().format(records)
