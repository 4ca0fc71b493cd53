"""
Pytest configuration and fixtures for locale_key_diff tests.
"""

import json
import pytest
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_json(temp_dir: Path) -> Callable[..., Path]:
    """Write a JSON document under the temporary directory."""
    def _write(relative_path: str, data: Any) -> Path:
        path = temp_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def locale_tree(write_json) -> Callable[[Dict[str, Any]], None]:
    """Create translation files from a mapping of relative path to content."""
    def _build(files: Dict[str, Any]) -> None:
        for relative_path, data in files.items():
            write_json(relative_path, data)
    return _build


@pytest.fixture
def as_pairs() -> Callable[..., set]:
    """Key pairs of a report as an unordered set of tuples."""
    def _pairs(report_pairs) -> set:
        return {(pair.full_key, pair.file_key) for pair in report_pairs}
    return _pairs
