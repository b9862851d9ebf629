from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import MIN_FIELDS
from ...core.enums import Direction
from ...records.model import Record


class DirectionStrategy(ABC):
    """Strategy Pattern: encapsulate how a record's direction flag is decided."""

    #: Minimum raw fields a line needs for this strategy to read it.
    min_fields: int = MIN_FIELDS

    @abstractmethod
    def decide(self, record: Record) -> Direction:
        raise NotImplementedError


def extras_token(record: Record, index: int) -> str:
    """Normalized extras value at ``index``, or "" when absent."""
    if index < len(record.extras):
        return (record.extras[index] or "").strip().upper()
    return ""
