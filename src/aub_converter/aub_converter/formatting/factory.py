from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DirectionMode
from ..core.exceptions import ConfigurationError
from .strategies.base import DirectionStrategy
from .strategies.extras_strategy import ExtrasLogTypeStrategy
from .strategies.log_type_strategy import LogTypeColumnStrategy


@dataclass
class DirectionStrategyFactory:
    """Factory Pattern: choose the direction strategy configured for the deployment."""

    @staticmethod
    def resolve_mode(mode: DirectionMode | str) -> DirectionMode:
        if isinstance(mode, DirectionMode):
            return mode
        try:
            return DirectionMode(str(mode).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in DirectionMode)
            raise ConfigurationError(f"Unknown direction mode '{mode}'. Expected one of: {allowed}")

    def for_mode(self, mode: DirectionMode | str) -> DirectionStrategy:
        if self.resolve_mode(mode) == DirectionMode.LOG_TYPE:
            return LogTypeColumnStrategy()
        return ExtrasLogTypeStrategy()
