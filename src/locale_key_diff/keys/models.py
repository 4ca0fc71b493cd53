"""Data model shared by discovery, comparison and reporting."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class SharedFolderSpec:
    """A namespace root present under every locale, with an optional key prefix."""

    shared_path: str
    key_prefix_override: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: Sequence[Any]) -> "SharedFolderSpec":
        """Build from a configuration entry like ``["locales"]`` or ``["pkg", "ns"]``."""
        override = entry[1] if len(entry) > 1 else None
        return cls(shared_path=entry[0], key_prefix_override=override or None)


@dataclass(frozen=True)
class DiscoveredFile:
    """A translation file found under a locale root."""

    full_path: str
    file_name: str
    directory: str
    key_prefix: str
    subfolder: str


@dataclass(frozen=True)
class KeyPair:
    """A key expressed both fully qualified and relative to its file."""

    full_key: str
    file_key: str

    def as_list(self) -> List[str]:
        return [self.full_key, self.file_key]


@dataclass(frozen=True)
class FileReport:
    """Result of comparing one default-locale file with its counterpart."""

    default_locale: str
    compare_locale: str
    keys_to_add: Tuple[KeyPair, ...] = ()
    keys_to_remove: Tuple[KeyPair, ...] = ()
    errors: Tuple[str, ...] = field(default=())

    @property
    def failed(self) -> bool:
        return bool(self.errors or self.keys_to_add or self.keys_to_remove)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "defaultLocale": self.default_locale,
            "compareLocale": self.compare_locale,
            "keysToAdd": [pair.as_list() for pair in sorted(self.keys_to_add, key=_pair_sort_key)],
            "keysToRemove": [pair.as_list() for pair in sorted(self.keys_to_remove, key=_pair_sort_key)],
            "errors": list(self.errors),
        }


def _pair_sort_key(pair: KeyPair) -> Tuple[str, str]:
    return (pair.full_key, pair.file_key)


# normalized comparison-file path -> report
LocaleReportMap = Dict[str, FileReport]

# comparison locale -> its report map
ComparisonReports = Dict[str, LocaleReportMap]
