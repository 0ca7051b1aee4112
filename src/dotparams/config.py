"""Config facade: dot-path access to parameters loaded from YAML sources."""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from dotparams.errors import KeyNotFoundError, TypeMismatchError
from dotparams.flatten import flatten
from dotparams.loader import load_source
from dotparams.settings import LoaderSettings
from dotparams.types import Diagnostic, ValueKind

__all__ = ["Config"]

logger = logging.getLogger(__name__)


class Config:
    """Read-only collection of parameters keyed by dot-delimited paths.

    Given ``settings.yaml``::

        user:
          name: John
          age: 39
          children: [Huey, Dewey, Louie]

    the parameters are reachable as::

        config = Config("settings.yaml")
        config.get_string("user.name")        # "John"
        config.get_int("user.age")            # 39
        config.get_sequence("user.children")  # ["Huey", "Dewey", "Louie"]

    The source may also be a directory, in which case every file below it
    is loaded (see :func:`dotparams.loader.load_source`).
    """

    def __init__(
        self,
        source: str | os.PathLike[str],
        settings: LoaderSettings | dict[str, Any] | None = None,
    ) -> None:
        result = load_source(source, settings)
        self._source: Path | None = Path(source)
        self._collection: dict[str, Any] = result.entries
        self._diagnostics: tuple[Diagnostic, ...] = tuple(result.diagnostics)

    @classmethod
    def from_document(cls, document: Any) -> Config:
        """Build a Config from an already deserialized document."""
        flat = flatten(document)
        for diagnostic in flat.diagnostics:
            diagnostic.log(logger)
        config = cls.__new__(cls)
        config._source = None
        config._collection = flat.entries
        config._diagnostics = tuple(flat.diagnostics)
        return config

    @property
    def source(self) -> Path | None:
        """The path the parameters were loaded from, or None for in-memory documents."""
        return self._source

    @property
    def collection(self) -> Mapping[str, Any]:
        """Read-only view of every path -> leaf entry."""
        return MappingProxyType(self._collection)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Problems recovered from while loading."""
        return self._diagnostics

    def __contains__(self, path: object) -> bool:
        return path in self._collection

    def __len__(self) -> int:
        return len(self._collection)

    def __repr__(self) -> str:
        return f"Config(source={self._source!r}, parameters={len(self._collection)})"

    def paths(self) -> list[str]:
        """All known paths in sorted order."""
        return sorted(self._collection)

    def exists(self, path: str) -> bool:
        """Whether a parameter is stored at ``path``."""
        return path in self._collection

    def get(self, path: str) -> Any:
        """Return a copy of the value stored at ``path``.

        Raises:
            KeyNotFoundError: If nothing is stored at ``path``.
        """
        if path not in self._collection:
            raise KeyNotFoundError(path)
        return copy.deepcopy(self._collection[path])

    def get_string(self, path: str) -> str:
        value = self.get(path)
        if not isinstance(value, str):
            raise _mismatch(path, ValueKind.STRING, value)
        return value

    def get_bool(self, path: str) -> bool:
        value = self.get(path)
        if not isinstance(value, bool):
            raise _mismatch(path, ValueKind.BOOLEAN, value)
        return value

    def get_int(self, path: str) -> int:
        """Return the integer at ``path``. Floats are never narrowed."""
        value = self.get(path)
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(path, ValueKind.INTEGER, value)
        return value

    get_number = get_int

    def get_float(self, path: str) -> float:
        """Return the number at ``path`` as a float. Integers are widened."""
        value = self.get(path)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(path, ValueKind.FLOAT, value)
        return float(value)

    def get_sequence(self, path: str) -> list[Any]:
        value = self.get(path)
        if not isinstance(value, list):
            raise _mismatch(path, ValueKind.SEQUENCE, value)
        return value


def _mismatch(path: str, expected: ValueKind, value: Any) -> TypeMismatchError:
    return TypeMismatchError(path=path, expected=expected.value, actual=type(value).__name__)
