from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Bit written to the 4th AUB column.

    The time-of-day rule writes ZERO for clock-in (before noon) and ONE for
    clock-out. Explicit log-type tokens map onto these bits per layout.
    """

    ZERO = "0"
    ONE = "1"


class DirectionMode(str, Enum):
    """How the direction flag is derived from a record."""

    EXTRAS = "extras"
    LOG_TYPE = "log_type"


class SkipReason(str, Enum):
    """Why an input line did not become a record."""

    TOO_FEW_FIELDS = "TOO_FEW_FIELDS"
