"""Source loader: reads a YAML file or a directory tree of them into flat entries."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from dotparams.errors import (
    DirectoryReadError,
    DocumentParseError,
    DocumentReadError,
    ErrorCodes,
    SourceNotFoundError,
)
from dotparams.flatten import flatten
from dotparams.settings import LoaderSettings, coerce_settings
from dotparams.types import Diagnostic, DiagnosticLevel, LoadResult

logger = logging.getLogger(__name__)

__all__ = ["load_source", "read_document"]


def load_source(
    source: str | os.PathLike[str],
    settings: LoaderSettings | dict[str, Any] | None = None,
) -> LoadResult:
    """Load every parameter found under ``source``.

    ``source`` may be a single file or a directory, which is walked
    recursively. Problems with individual files or directories are logged and
    recorded in ``LoadResult.diagnostics``; they never abort the load. A
    missing source yields an empty result.

    When two files define the same path, the file visited later wins. Visit
    order is the filesystem's unless ``settings.sort_entries`` is set.
    """
    settings = coerce_settings(settings)
    source_path = Path(source)
    logger.info("Start parameters generation for %s", source_path)

    result = LoadResult()
    if not source_path.exists():
        error = SourceNotFoundError(str(source_path))
        _report(result, Diagnostic.from_error(error, DiagnosticLevel.ERROR, str(source_path)))
    elif source_path.is_dir():
        visited = {source_path.resolve()}
        result.merge(_walk_directory(source_path, settings, depth=1, visited=visited))
    else:
        result.merge(_load_file(source_path, settings))

    count = len(result.entries)
    if count == 0:
        logger.info("Result: No parameters have been parsed")
    elif count == 1:
        logger.info("Result: 1 parameter has been parsed")
    else:
        logger.info("Result: %d parameters have been parsed", count)
    logger.info("End parameters generation")
    return result


def read_document(path: Path, encoding: str = "utf-8") -> Any:
    """Read and deserialize one YAML file.

    Raises:
        DocumentReadError: If the file cannot be read or decoded.
        DocumentParseError: If the contents are not valid YAML.
    """
    try:
        content = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(file_path=str(path), reason=str(e), cause=e) from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DocumentParseError(file_path=str(path), reason=str(e), cause=e) from e


def _report(result: LoadResult, diagnostic: Diagnostic) -> None:
    result.diagnostics.append(diagnostic)
    diagnostic.log(logger)


def _load_file(path: Path, settings: LoaderSettings) -> LoadResult:
    logger.debug("Reading file %s...", path)
    result = LoadResult()
    try:
        document = read_document(path, encoding=settings.encoding)
    except (DocumentReadError, DocumentParseError) as e:
        _report(result, Diagnostic.from_error(e, DiagnosticLevel.WARNING, str(path)))
        return result

    flat = flatten(document)
    for diagnostic in flat.diagnostics:
        diagnostic.log(logger, context=path)
    result.merge(flat)
    result.files_loaded.append(path)
    return result


def _walk_directory(directory: Path, settings: LoaderSettings, depth: int, visited: set[Path]) -> LoadResult:
    result = LoadResult()
    if depth > settings.max_depth:
        _report(
            result,
            Diagnostic(
                level=DiagnosticLevel.INFO,
                code=ErrorCodes.MAX_DEPTH_EXCEEDED,
                message=f"Max depth {settings.max_depth} exceeded at {directory}, skipping",
                source=str(directory),
            ),
        )
        return result

    logger.debug("Reading folder %s...", directory)
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        error = DirectoryReadError(directory=str(directory), reason=str(e), cause=e)
        _report(result, Diagnostic.from_error(error, DiagnosticLevel.WARNING, str(directory)))
        return result

    if settings.sort_entries:
        entries.sort(key=lambda entry: entry.name)

    for entry in entries:
        if settings.skip_hidden and entry.name.startswith("."):
            continue

        try:
            is_symlink = entry.is_symlink()
            is_dir = entry.is_dir(follow_symlinks=settings.follow_symlinks)
            is_file = entry.is_file(follow_symlinks=settings.follow_symlinks)
        except OSError as e:
            error = DirectoryReadError(directory=entry.path, reason=str(e), cause=e)
            _report(result, Diagnostic.from_error(error, DiagnosticLevel.WARNING, entry.path))
            continue

        entry_path = Path(entry.path)
        if is_dir:
            real = entry_path.resolve()
            if real in visited:
                _report(
                    result,
                    Diagnostic(
                        level=DiagnosticLevel.WARNING,
                        code=ErrorCodes.SYMLINK_CYCLE,
                        message=f"Symlink cycle detected at {entry_path} -> {real}, skipping",
                        source=str(entry_path),
                    ),
                )
                continue
            logger.debug("%s is dir", entry_path)
            result.merge(_walk_directory(entry_path, settings, depth + 1, visited | {real}))
        elif is_file:
            if not settings.accepts_suffix(entry_path.suffix):
                logger.debug("%s skipped, suffix not accepted", entry_path)
                continue
            logger.debug("%s is file", entry_path)
            result.merge(_load_file(entry_path, settings))
        elif is_symlink:
            logger.debug("%s skipped, symlinks are not followed", entry_path)

    return result
