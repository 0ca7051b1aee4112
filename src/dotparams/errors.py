"""Error hierarchy for the dotparams package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ParamsError",
    "SourceNotFoundError",
    "DirectoryReadError",
    "DocumentReadError",
    "DocumentParseError",
    "InvalidKeyError",
    "UnsupportedKeyError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "ErrorCodes",
]


class ParamsError(Exception):
    """Base error for all dotparams errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class SourceNotFoundError(ParamsError):
    """Raised when the source path given to the loader does not exist."""

    def __init__(self, source: str, **kwargs: Any) -> None:
        super().__init__(
            code="SOURCE_NOT_FOUND",
            message=f"Source path {source} not found.",
            details={"source": source},
            **kwargs,
        )

    @property
    def source(self) -> str:
        return self.details["source"]


class DirectoryReadError(ParamsError):
    """Raised when a directory cannot be enumerated."""

    def __init__(self, directory: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DIRECTORY_READ_ERROR",
            message=f"Cannot read directory {directory}: {reason}",
            details={"directory": directory, "reason": reason},
            **kwargs,
        )


class DocumentReadError(ParamsError):
    """Raised when a file cannot be read as text."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DOCUMENT_READ_ERROR",
            message=f"Cannot read file {file_path}: {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )


class DocumentParseError(ParamsError):
    """Raised when a file's contents are not a valid YAML document."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DOCUMENT_PARSE_ERROR",
            message=f"Invalid YAML in {file_path}: {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )


class InvalidKeyError(ParamsError):
    """Raised when a mapping key is empty or contains the path separator."""

    def __init__(self, key: str, separator: str = ".", **kwargs: Any) -> None:
        if key:
            reason = f"'{separator}' is not allowed in key names"
        else:
            reason = "empty key names are not allowed"
        super().__init__(
            code="INVALID_KEY",
            message=f"Parameter \"{key}\" is skipped: {reason}.",
            details={"key": key, "separator": separator},
            **kwargs,
        )


class UnsupportedKeyError(ParamsError):
    """Raised when a mapping key is neither a string nor an integer."""

    def __init__(self, key: Any, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_KEY",
            message=f"Parameter {key!r} is skipped: keys must be strings or integers, got {type(key).__name__}.",
            details={"key": key, "key_type": type(key).__name__},
            **kwargs,
        )


class KeyNotFoundError(ParamsError, KeyError):
    """Raised when a queried path is not in the collection."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"Key \"{path}\" not found.",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path that was looked up."""
        return self.details["path"]


class TypeMismatchError(ParamsError, TypeError):
    """Raised when a stored leaf does not have the shape a typed getter asked for."""

    def __init__(self, path: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_MISMATCH",
            message=f"Value \"{path}\" is not {expected} (found {actual}).",
            details={"path": path, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path whose value was requested."""
        return self.details["path"]

    @property
    def expected(self) -> str:
        """The name of the requested value kind."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """The Python type name of the stored value."""
        return self.details["actual"]


class ErrorCodes:
    """All dotparams error codes as constants.

    Example:
        if diagnostic.code == ErrorCodes.INVALID_KEY:
            report_bad_key(diagnostic.source)
    """

    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    DIRECTORY_READ_ERROR = "DIRECTORY_READ_ERROR"
    DOCUMENT_READ_ERROR = "DOCUMENT_READ_ERROR"
    DOCUMENT_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"
    INVALID_KEY = "INVALID_KEY"
    UNSUPPORTED_KEY = "UNSUPPORTED_KEY"
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"
    SYMLINK_CYCLE = "SYMLINK_CYCLE"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    TYPE_MISMATCH = "TYPE_MISMATCH"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
