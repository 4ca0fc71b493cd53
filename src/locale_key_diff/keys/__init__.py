"""Translation key discovery and diffing."""

from .comparator import compare_files, load_translation_file
from .discovery import TRANSLATION_FILE_NAME, discover_translation_files
from .extractor import NodeKind, classify, extract_key_paths
from .models import (
    ComparisonReports,
    DiscoveredFile,
    FileReport,
    KeyPair,
    LocaleReportMap,
    SharedFolderSpec,
)
from .orchestrator import compare_all_locales, compare_locale

__all__ = [
    "ComparisonReports",
    "DiscoveredFile",
    "FileReport",
    "KeyPair",
    "LocaleReportMap",
    "NodeKind",
    "SharedFolderSpec",
    "TRANSLATION_FILE_NAME",
    "classify",
    "compare_all_locales",
    "compare_files",
    "compare_locale",
    "discover_translation_files",
    "extract_key_paths",
    "load_translation_file",
]
