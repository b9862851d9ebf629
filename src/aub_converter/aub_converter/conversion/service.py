from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.validators import require_extension, require_non_empty
from ..core.constants import DEFAULT_ALLOWED_EXTENSIONS, DOWNLOAD_FILENAME, DOWNLOAD_MIMETYPE
from ..core.enums import DirectionMode
from ..core.exceptions import UnreadableFileError, ValidationError
from ..formatting.formatter import AubFormatter
from ..records.parser import AttendanceLogParser
from .model import ConversionResult, DownloadFile

logger = logging.getLogger(__name__)


class ConversionService:
    """Upload -> parse -> format -> download, without any web concerns."""

    def __init__(
        self,
        parser: AttendanceLogParser,
        formatter: AubFormatter,
        *,
        direction_mode: DirectionMode = DirectionMode.EXTRAS,
        allowed_extensions: Optional[Iterable[str]] = None,
        download_filename: str = DOWNLOAD_FILENAME,
    ):
        self._parser = parser
        self._formatter = formatter
        self._direction_mode = DirectionMode(direction_mode)
        self._allowed_extensions = frozenset(
            DEFAULT_ALLOWED_EXTENSIONS if allowed_extensions is None else allowed_extensions
        )
        self._download_filename = download_filename

    @property
    def direction_mode(self) -> DirectionMode:
        return self._direction_mode

    @property
    def allowed_extensions(self) -> frozenset[str]:
        return self._allowed_extensions

    def read_upload(self, filename: Optional[str], data: bytes) -> str:
        filename = require_non_empty(filename, "Please select a file first")
        require_extension(filename, self._allowed_extensions)

        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning("Could not decode upload %s: %s", filename, e)
            raise UnreadableFileError("Error processing file. The file could not be read as text.") from e

    def convert(self, content: str) -> ConversionResult:
        parsed = self._parser.parse(content)
        text = self._formatter.format(parsed.records)

        logger.info(
            "Converted %d records to AUB format (skipped=%d, mode=%s)",
            len(parsed.records),
            len(parsed.skipped),
            self._direction_mode.value,
        )
        for s in parsed.skipped:
            logger.debug("Skipped line %d: %s (%d fields)", s.line_number, s.reason.value, s.field_count)

        return ConversionResult(
            text=text,
            records=len(parsed.records),
            skipped=list(parsed.skipped),
            direction_mode=self._direction_mode,
        )

    def convert_upload(self, filename: Optional[str], data: bytes) -> ConversionResult:
        return self.convert(self.read_upload(filename, data))

    def build_download(self, text: Optional[str]) -> DownloadFile:
        if not text or not text.strip():
            raise ValidationError("No converted data to download")
        # Form posts normalize line breaks to CRLF
        text = text.replace("\r\n", "\n")
        return DownloadFile(
            content=text.encode("utf-8"),
            filename=self._download_filename,
            mimetype=DOWNLOAD_MIMETYPE,
        )
