from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .conversion.service import ConversionService
from .core.constants import DOWNLOAD_FILENAME
from .core.enums import DirectionMode
from .formatting.factory import DirectionStrategyFactory
from .formatting.formatter import AubFormatter
from .records.parser import AttendanceLogParser


@dataclass(frozen=True)
class Container:
    parser: AttendanceLogParser
    formatter: AubFormatter
    conversion_service: ConversionService


def build_container(
    *,
    direction_mode: DirectionMode | str = DirectionMode.EXTRAS,
    allowed_extensions: Optional[Iterable[str]] = None,
    download_filename: str = DOWNLOAD_FILENAME,
) -> Container:
    factory = DirectionStrategyFactory()
    mode = factory.resolve_mode(direction_mode)
    strategy = factory.for_mode(mode)

    # Parser must accept every line the strategy can read
    parser = AttendanceLogParser(min_fields=strategy.min_fields)
    formatter = AubFormatter(strategy)
    conversion_service = ConversionService(
        parser,
        formatter,
        direction_mode=mode,
        allowed_extensions=allowed_extensions,
        download_filename=download_filename,
    )

    return Container(
        parser=parser,
        formatter=formatter,
        conversion_service=conversion_service,
    )
