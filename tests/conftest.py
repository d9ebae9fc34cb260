"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def write_json(path: Path, data: Any) -> None:
    """Write ``data`` as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


@pytest.fixture
def license_text() -> Callable[[str], str]:
    """Return a loader for the license texts in tests/fixtures/licenses."""

    def _load(identifier: str) -> str:
        return (FIXTURES / "licenses" / f"{identifier}.txt").read_text(
            encoding="utf-8"
        )

    return _load


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create an empty npm project root and return its path."""
    write_json(tmp_path / "package.json", {"name": "app", "version": "1.0.0"})
    return tmp_path


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating package directories under tmp_path."""

    def _make(
        relpath: str,
        manifest: Optional[dict[str, Any]] = None,
        license_text: Optional[str] = None,
        license_file: str = "LICENSE",
    ) -> Path:
        path = tmp_path / relpath
        path.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            write_json(path / "package.json", manifest)
        if license_text is not None:
            (path / license_file).write_text(license_text, encoding="utf-8")
        return path

    return _make


@pytest.fixture(name="write_json")
def write_json_fixture() -> Callable[[Path, Any], None]:
    """Return the JSON writing helper."""
    return write_json
