"""Comparison of every shared folder for one or more comparison locales."""

import os
from typing import Iterable, Optional, Sequence

import structlog

from ..errors import DirectoryAccessError, ErrorContextManager
from .comparator import compare_file_path, compare_files
from .discovery import discover_translation_files
from .models import ComparisonReports, LocaleReportMap, SharedFolderSpec

logger = structlog.get_logger(__name__)


def join_paths(*parts: str) -> str:
    """Concatenate path segments, ignoring empty ones.

    Later segments are appended even when they start with a separator, so a
    base directory always prefixes the shared path.
    """
    segments = [part for part in parts if part]
    if not segments:
        return os.curdir
    head, *rest = segments
    return os.path.normpath(os.path.join(head, *(part.lstrip("/\\") for part in rest)))


def compare_locale(
    shared_folders: Sequence[SharedFolderSpec],
    default_base_dir: str,
    compare_base_dir: str,
    default_locale: str,
    compare_locale: str,
    error_context: Optional[ErrorContextManager] = None,
) -> LocaleReportMap:
    """Build the report map for one comparison locale.

    A shared folder whose default-locale root cannot be listed is logged,
    recorded in ``error_context`` when given, and skipped. Reports are keyed
    by normalized comparison-file path; a later root mapping to the same
    path replaces the earlier report.
    """
    reports: LocaleReportMap = {}

    for spec in shared_folders:
        default_locale_root = join_paths(default_base_dir, spec.shared_path, default_locale)
        compare_locale_root = join_paths(compare_base_dir, spec.shared_path, compare_locale)

        logger.debug("Processing shared folder", shared_path=spec.shared_path, locale=compare_locale)

        try:
            default_files = discover_translation_files(default_locale_root, spec.key_prefix_override)
        except DirectoryAccessError as e:
            logger.error(
                "Skipping shared folder",
                shared_path=spec.shared_path,
                locale=compare_locale,
                error=e.message,
            )
            if error_context is not None:
                error_context.record_error(
                    e, {"shared_path": spec.shared_path, "compare_locale": compare_locale}
                )
            continue

        for default_file in default_files:
            compare_path = compare_file_path(default_file, compare_locale_root)
            if compare_path in reports:
                logger.warning("Overwriting report for duplicate path", file=compare_path)
            reports[compare_path] = compare_files(
                default_file, compare_locale_root, default_locale, compare_locale
            )

    return reports


def compare_all_locales(
    shared_folders: Sequence[SharedFolderSpec],
    default_base_dir: str,
    compare_base_dir: str,
    default_locale: str,
    compare_locales: Iterable[str],
    error_context: Optional[ErrorContextManager] = None,
) -> ComparisonReports:
    """Run :func:`compare_locale` for each comparison locale, in order."""
    comparison_reports: ComparisonReports = {}
    for locale in compare_locales:
        comparison_reports[locale] = compare_locale(
            shared_folders,
            default_base_dir,
            compare_base_dir,
            default_locale,
            locale,
            error_context=error_context,
        )
        logger.info("Compared locale", locale=locale, files=len(comparison_reports[locale]))
    return comparison_reports
