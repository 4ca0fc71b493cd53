"""Discovery of translation files under a locale root."""

import os
from pathlib import Path
from typing import List, Optional

import structlog

from ..errors import DirectoryAccessError
from .models import DiscoveredFile

logger = structlog.get_logger(__name__)

TRANSLATION_FILE_NAME = "translation.json"


def discover_translation_files(
    root_dir: str,
    initial_prefix: Optional[str] = "",
    file_name: str = TRANSLATION_FILE_NAME,
) -> List[DiscoveredFile]:
    """Walk ``root_dir`` and describe every translation file below it.

    Each subdirectory name is appended to the key prefix, so
    ``<root>/common/buttons/translation.json`` gets the prefix
    ``common.buttons``. A non-empty ``initial_prefix`` is prepended.
    Hidden entries (leading ``.``) are skipped.

    Raises:
        DirectoryAccessError: If the root or a directory below it cannot be listed
    """
    return _walk(str(root_dir), initial_prefix or "", str(root_dir), file_name)


def _walk(directory: str, prefix: str, root: str, file_name: str) -> List[DiscoveredFile]:
    try:
        entries = sorted(Path(directory).iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise DirectoryAccessError(
            f"Cannot list directory '{directory}': {e.strerror or e}",
            path=directory,
            previous_error=e,
        ) from e

    found: List[DiscoveredFile] = []
    for entry in entries:
        name = entry.name
        if not name or name.startswith("."):
            continue

        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            raise DirectoryAccessError(
                f"Cannot stat '{entry}': {e.strerror or e}",
                path=str(entry),
                previous_error=e,
            ) from e

        if is_dir:
            child_prefix = f"{prefix}.{name}" if prefix else name
            found.extend(_walk(str(entry), child_prefix, root, file_name))
        elif is_file and name == file_name:
            subfolder = os.path.relpath(directory, root)
            found.append(
                DiscoveredFile(
                    full_path=str(entry),
                    file_name=name,
                    directory=directory,
                    key_prefix=prefix,
                    subfolder="" if subfolder == os.curdir else subfolder,
                )
            )

    logger.debug("Scanned directory", directory=directory, found=len(found))
    return found
