from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import DirectionMode
from ..records.model import SkippedLine


@dataclass(frozen=True)
class ConversionResult:
    """Output of one upload -> convert run."""

    text: str
    records: int
    skipped: list[SkippedLine] = field(default_factory=list)
    direction_mode: DirectionMode = DirectionMode.EXTRAS

    @property
    def is_empty(self) -> bool:
        return not self.text

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def to_dict(self) -> dict:
        return {
            "output": self.text,
            "records": self.records,
            "direction_mode": self.direction_mode.value,
            "skipped": [
                {
                    "line_number": s.line_number,
                    "reason": s.reason.value,
                    "field_count": s.field_count,
                    "raw": s.raw,
                }
                for s in self.skipped
            ],
        }


@dataclass(frozen=True)
class DownloadFile:
    content: bytes
    filename: str
    mimetype: str
