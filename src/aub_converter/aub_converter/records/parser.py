from __future__ import annotations

import logging

from ..core.constants import FIELD_SEPARATOR, LINE_SEPARATOR, MIN_FIELDS
from ..core.enums import SkipReason
from .model import ParseResult, Record, SkippedLine

logger = logging.getLogger(__name__)


class AttendanceLogParser:
    """Split raw biometric log text into records.

    Fields are positional: [0] employee id, [1] "YYYY-MM-DD HH:MM:SS",
    [2:] extras kept verbatim. Lines with fewer than ``min_fields`` fields
    are not errors; they are collected in ``ParseResult.skipped``.
    """

    def __init__(self, *, min_fields: int = MIN_FIELDS):
        if min_fields < 2:
            raise ValueError("min_fields must be at least 2")
        self._min_fields = int(min_fields)

    @property
    def min_fields(self) -> int:
        return self._min_fields

    def parse(self, content: str) -> ParseResult:
        stripped = content.strip()
        if not stripped:
            return ParseResult()

        # Line numbers refer to the upload as received
        leading = content[: len(content) - len(content.lstrip())]
        offset = leading.count(LINE_SEPARATOR)

        records: list[Record] = []
        skipped: list[SkippedLine] = []

        for index, line in enumerate(stripped.split(LINE_SEPARATOR), start=1):
            if not line.strip():
                continue

            line_number = index + offset
            parts = [p.strip() for p in line.split(FIELD_SEPARATOR)]

            if len(parts) < self._min_fields:
                skipped.append(
                    SkippedLine(
                        line_number=line_number,
                        reason=SkipReason.TOO_FEW_FIELDS,
                        field_count=len(parts),
                        raw=line.rstrip("\r"),
                    )
                )
                continue

            records.append(
                Record(
                    employee_id=parts[0],
                    timestamp=parts[1],
                    extras=tuple(parts[2:]),
                    line_number=line_number,
                )
            )

        logger.debug("Parsed %d records, skipped %d lines", len(records), len(skipped))
        return ParseResult(records=records, skipped=skipped)


def parse(content: str) -> list[Record]:
    """Records of ``content`` using the default two-field layout."""
    return AttendanceLogParser().parse(content).records
