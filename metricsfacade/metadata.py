"""Metadata describing where and at what verbosity a metric event occurred."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["Level", "Metadata"]


class Level(enum.Enum):
    """Verbosity level of a metric event."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


@dataclass(frozen=True)
class Metadata:
    """Target, level and optional module path of a metric event."""

    target: str
    level: Level = Level.INFO
    module_path: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.level, Level):
            raise TypeError("level must be a Level")