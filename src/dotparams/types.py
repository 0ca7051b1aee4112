"""Value types shared by the flattener, the loader and the Config facade."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from dotparams.errors import ParamsError

__all__ = [
    "DiagnosticLevel",
    "Diagnostic",
    "FlattenResult",
    "LoadResult",
    "ValueKind",
]


class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic, mapped onto stdlib logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    DiagnosticLevel.DEBUG: logging.DEBUG,
    DiagnosticLevel.INFO: logging.INFO,
    DiagnosticLevel.WARNING: logging.WARNING,
    DiagnosticLevel.ERROR: logging.ERROR,
}


class ValueKind(str, Enum):
    """Value shapes the typed getters can ask for."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class Diagnostic:
    """One observation made while loading or flattening.

    Attributes:
        level: How severe the observation is.
        code: One of the ErrorCodes constants.
        message: Human readable description.
        source: Key path, file or directory the diagnostic is about.
    """

    level: DiagnosticLevel
    code: str
    message: str
    source: str | None = None

    @classmethod
    def from_error(cls, error: ParamsError, level: DiagnosticLevel, source: str | None = None) -> Diagnostic:
        """Build a diagnostic from a recovered error."""
        return cls(level=level, code=error.code, message=error.message, source=source)

    def log(self, logger: logging.Logger, context: Any = None) -> None:
        """Emit this diagnostic on ``logger`` at its own level."""
        if context is None:
            logger.log(self.level.log_level, "%s", self.message)
        else:
            logger.log(self.level.log_level, "%s (%s)", self.message, context)


@dataclass
class FlattenResult:
    """Flat path -> leaf entries produced from one document, plus diagnostics."""

    entries: dict[str, Any] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def merge(self, other: FlattenResult) -> None:
        """Merge another result into this one. Entries in ``other`` win on collision."""
        self.entries.update(other.entries)
        self.diagnostics.extend(other.diagnostics)


@dataclass
class LoadResult(FlattenResult):
    """Everything collected from a source path."""

    files_loaded: list[Path] = field(default_factory=list)

    def merge(self, other: FlattenResult) -> None:
        super().merge(other)
        if isinstance(other, LoadResult):
            self.files_loaded.extend(other.files_loaded)
