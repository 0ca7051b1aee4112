"""Flatten nested YAML documents into dot-delimited path -> leaf entries."""

from __future__ import annotations

from typing import Any

from dotparams.errors import InvalidKeyError, ParamsError, UnsupportedKeyError
from dotparams.types import Diagnostic, DiagnosticLevel, FlattenResult

__all__ = ["SEPARATOR", "flatten", "join_path", "normalize_key"]

SEPARATOR = "."


def normalize_key(key: Any, separator: str = SEPARATOR) -> str:
    """Convert a mapping key into a path segment.

    String keys are used as-is and integer keys become their decimal text.

    Raises:
        UnsupportedKeyError: If the key is not a string or an integer. ``bool``
            keys are rejected even though ``bool`` subclasses ``int``.
        InvalidKeyError: If the segment is empty or contains the separator.
    """
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise UnsupportedKeyError(key)
    segment = key if isinstance(key, str) else str(key)
    if not segment or separator in segment:
        raise InvalidKeyError(segment, separator=separator)
    return segment


def join_path(prefix: str, segment: str, separator: str = SEPARATOR) -> str:
    """Append a segment to a path prefix. An empty prefix yields the bare segment."""
    return f"{prefix}{separator}{segment}" if prefix else segment


def flatten(tree: Any, separator: str = SEPARATOR) -> FlattenResult:
    """Flatten a deserialized document into path -> leaf entries.

    Only mappings are walked. Every non-mapping value (scalars, ``None`` and
    whole sequences) is stored as a single leaf under the path of keys that
    leads to it. A document whose top level is not a mapping yields no
    entries. The input is never mutated and nothing is logged; rejected keys
    come back as diagnostics for the caller to report.

    Example::

        flatten({"a": {"b": {"c": 1}, "d": 2}}).entries
        # {"a.b.c": 1, "a.d": 2}
    """
    if not isinstance(tree, dict):
        return FlattenResult()
    return _flatten_mapping(tree, prefix="", separator=separator)


def _flatten_mapping(mapping: dict[Any, Any], prefix: str, separator: str) -> FlattenResult:
    result = FlattenResult()
    for key, value in mapping.items():
        try:
            segment = normalize_key(key, separator)
        except ParamsError as e:
            result.diagnostics.append(
                Diagnostic.from_error(e, DiagnosticLevel.WARNING, source=join_path(prefix, str(key), separator))
            )
            continue

        path = join_path(prefix, segment, separator)
        if isinstance(value, dict):
            result.merge(_flatten_mapping(value, prefix=path, separator=separator))
        else:
            result.entries[path] = value
    return result
