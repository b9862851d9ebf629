from __future__ import annotations

from pathlib import PurePath
from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_extension(filename: str, allowed: Iterable[str]) -> str:
    allowed = {ext.lower() for ext in allowed}
    suffix = PurePath(filename).suffix.lower()
    if allowed and suffix not in allowed:
        raise ValidationError(f"Unsupported file type '{suffix or filename}'. Allowed: {', '.join(sorted(allowed))}")
    return filename
