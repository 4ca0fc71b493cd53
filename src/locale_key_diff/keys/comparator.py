"""Comparison of one default-locale translation file with its counterpart."""

import json
import os
from typing import Any, Dict, Iterable, List, Set, Tuple

import structlog

from ..errors import FileReadError, ParseError
from .extractor import extract_key_paths
from .models import DiscoveredFile, FileReport, KeyPair

logger = structlog.get_logger(__name__)


def compare_file_path(default_file: DiscoveredFile, compare_locale_path: str) -> str:
    """Normalized path of the comparison-locale file mirroring ``default_file``."""
    return os.path.normpath(
        os.path.join(compare_locale_path, default_file.subfolder, default_file.file_name)
    )


def load_translation_file(path: str) -> Dict[str, Any]:
    """Read a UTF-8 JSON translation file.

    Raises:
        FileReadError: If the file cannot be read
        ParseError: If the content is not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"'{path}' is not valid UTF-8: {e.reason}", path=path, previous_error=e) from e
    except OSError as e:
        raise FileReadError(f"Cannot read '{path}': {e.strerror or e}", path=path, previous_error=e) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Invalid JSON in '{path}': {e.msg} (line {e.lineno}, column {e.colno})",
            path=path,
            line=e.lineno,
            column=e.colno,
            previous_error=e,
        ) from e
    except RecursionError as e:
        raise ParseError(f"JSON in '{path}' is nested too deeply", path=path, previous_error=e) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"'{path}' must contain a JSON object, got {type(data).__name__}",
            path=path,
        )
    return data


def load_key_paths(path: str, prefix: str) -> Set[str]:
    """Key paths of the translation file at ``path``, qualified with ``prefix``.

    Raises:
        FileReadError: If the file cannot be read
        ParseError: If the content is not a JSON object or is nested too deeply
    """
    translations = load_translation_file(path)
    try:
        return extract_key_paths(prefix, translations)
    except RecursionError as e:
        raise ParseError(f"Translations in '{path}' are nested too deeply", path=path, previous_error=e) from e


def relative_key_pairs(prefix: str, keys: Iterable[str]) -> Tuple[KeyPair, ...]:
    """Pair each full key with the key as written inside its file."""
    cut = len(prefix) + 1 if prefix else 0
    return tuple(KeyPair(full_key=key, file_key=key[cut:]) for key in keys)


def compare_files(
    default_file: DiscoveredFile,
    compare_locale_path: str,
    default_locale: str,
    compare_locale: str,
) -> FileReport:
    """Diff the keys of ``default_file`` against its comparison-locale mirror.

    A default file that cannot be loaded produces a report with only that
    error. A comparison file that cannot be loaded is recorded and treated
    as empty, so every default key is reported as missing.
    """
    default_path = os.path.normpath(default_file.full_path)
    compare_path = compare_file_path(default_file, compare_locale_path)
    prefix = default_file.key_prefix
    errors: List[str] = []

    try:
        default_keys = load_key_paths(default_path, prefix)
    except (FileReadError, ParseError) as e:
        logger.warning("Default translation file unusable", file=default_path, error=e.message)
        return FileReport(
            default_locale=default_locale,
            compare_locale=compare_locale,
            errors=(str(e),),
        )

    try:
        compare_keys = load_key_paths(compare_path, prefix)
    except (FileReadError, ParseError) as e:
        logger.warning("Comparison translation file unusable", file=compare_path, error=e.message)
        errors.append(str(e))
        compare_keys = set()

    report = FileReport(
        default_locale=default_locale,
        compare_locale=compare_locale,
        keys_to_add=relative_key_pairs(prefix, default_keys - compare_keys),
        keys_to_remove=relative_key_pairs(prefix, compare_keys - default_keys),
        errors=tuple(errors),
    )

    logger.debug(
        "Compared translation file",
        file=compare_path,
        keys_to_add=len(report.keys_to_add),
        keys_to_remove=len(report.keys_to_remove),
    )
    return report
