"""Traversal options for the source loader."""

from __future__ import annotations

import codecs
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["LoaderSettings", "coerce_settings"]


class LoaderSettings(BaseModel):
    """Options controlling how a source directory is walked.

    Attributes:
        suffixes: Only read files with one of these suffixes. ``None`` reads every file.
        max_depth: Deepest directory level to walk; the source directory is level 1.
        follow_symlinks: Walk into symlinked directories and read symlinked files.
        skip_hidden: Skip entries whose name starts with a dot.
        sort_entries: Visit directory entries in name order instead of filesystem order.
        encoding: Text encoding used to read files.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    suffixes: tuple[str, ...] | None = None
    max_depth: int = Field(default=32, ge=1)
    follow_symlinks: bool = False
    skip_hidden: bool = False
    sort_entries: bool = False
    encoding: str = "utf-8"

    @field_validator("suffixes")
    @classmethod
    def _normalize_suffixes(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if v is None:
            return None
        normalized = []
        for suffix in v:
            suffix = suffix.strip().lower()
            if not suffix:
                raise ValueError("Suffixes must not be empty")
            normalized.append(suffix if suffix.startswith(".") else f".{suffix}")
        return tuple(normalized)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    def accepts_suffix(self, suffix: str) -> bool:
        """Whether a file with this suffix should be read."""
        return self.suffixes is None or suffix.lower() in self.suffixes


def coerce_settings(settings: LoaderSettings | dict[str, Any] | None) -> LoaderSettings:
    """Accept a LoaderSettings, a plain dict of options, or None for defaults."""
    if settings is None:
        return LoaderSettings()
    if isinstance(settings, LoaderSettings):
        return settings
    return LoaderSettings.model_validate(settings)
