from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import SkipReason


@dataclass(frozen=True)
class Record:
    """One parsed line of the biometric log."""

    employee_id: str
    timestamp: str
    extras: tuple[str, ...] = ()
    line_number: int = 0


@dataclass(frozen=True)
class SkippedLine:
    """Input line dropped by the parser, kept for the conversion report."""

    line_number: int
    reason: SkipReason
    field_count: int
    raw: str


@dataclass(frozen=True)
class ParseResult:
    records: list[Record] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
