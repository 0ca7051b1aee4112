"""dotparams - flat dot-path access to parameters defined in YAML files."""

from __future__ import annotations

# Facade
from dotparams.config import Config

# Loading and flattening
from dotparams.flatten import SEPARATOR, flatten
from dotparams.loader import load_source
from dotparams.settings import LoaderSettings

# Value types
from dotparams.types import Diagnostic, DiagnosticLevel, FlattenResult, LoadResult, ValueKind

# Errors
from dotparams.errors import (
    DirectoryReadError,
    DocumentParseError,
    DocumentReadError,
    ErrorCodes,
    InvalidKeyError,
    KeyNotFoundError,
    ParamsError,
    SourceNotFoundError,
    TypeMismatchError,
    UnsupportedKeyError,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "Config",
    # Loading and flattening
    "SEPARATOR",
    "flatten",
    "load_source",
    "LoaderSettings",
    # Value types
    "Diagnostic",
    "DiagnosticLevel",
    "FlattenResult",
    "LoadResult",
    "ValueKind",
    # Errors
    "ErrorCodes",
    "ParamsError",
    "SourceNotFoundError",
    "DirectoryReadError",
    "DocumentReadError",
    "DocumentParseError",
    "InvalidKeyError",
    "UnsupportedKeyError",
    "KeyNotFoundError",
    "TypeMismatchError",
]
