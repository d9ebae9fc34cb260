"""Tests for the npm lock file scanner."""

from pathlib import Path

import pytest

from check_licenses.manifest import ManifestError
from check_licenses.models import DependencySpec
from check_licenses.scanners.package_lock import PackageLockScanner


class TestPackageLockScanner:
    """Test suite for PackageLockScanner."""

    @pytest.fixture
    def lock_v3(self, project: Path, make_package, write_json) -> Path:
        make_package("node_modules/a", {"name": "a", "version": "1.0.0"})
        make_package("node_modules/@scope/b", {"name": "@scope/b", "version": "2.0.0"})
        make_package(
            "node_modules/a/node_modules/c", {"name": "c", "version": "3.0.0"}
        )
        make_package("node_modules/dev-only", {"name": "dev-only", "version": "1.0.0"})
        make_package("packages/local", {"name": "local", "version": "0.1.0"})
        write_json(
            project / "package-lock.json",
            {
                "name": "app",
                "lockfileVersion": 3,
                "packages": {
                    "": {"name": "app", "version": "1.0.0"},
                    "node_modules/a": {"version": "1.0.0"},
                    "node_modules/@scope/b": {"version": "2.0.0"},
                    "node_modules/a/node_modules/c": {"version": "3.0.0"},
                    "node_modules/dev-only": {"version": "1.0.0", "dev": True},
                    "node_modules/fsevents": {"version": "2.3.2", "optional": True},
                    "node_modules/local": {"resolved": "packages/local", "link": True},
                    "packages/local": {"name": "local", "version": "0.1.0"},
                },
            },
        )
        return project

    def test_can_handle(self, lock_v3: Path):
        assert PackageLockScanner.can_handle(lock_v3)

    def test_cannot_handle_without_lock(self, project: Path):
        assert not PackageLockScanner.can_handle(project)

    def test_source_name(self, lock_v3: Path):
        assert PackageLockScanner(lock_v3).source_name == "package-lock.json"

    def test_scan_packages_map(self, lock_v3: Path):
        specs = PackageLockScanner(lock_v3).scan()

        assert specs == [
            DependencySpec("a", "1.0.0", lock_v3 / "node_modules/a"),
            DependencySpec("@scope/b", "2.0.0", lock_v3 / "node_modules/@scope/b"),
            DependencySpec("c", "3.0.0", lock_v3 / "node_modules/a/node_modules/c"),
            DependencySpec("fsevents", "2.3.2", None, missing=True),
            DependencySpec("local", "", lock_v3 / "packages/local"),
        ]

    def test_scan_v1_dependencies(self, project: Path, make_package, write_json):
        make_package("node_modules/a", {"name": "a", "version": "1.0.0"})
        make_package(
            "node_modules/a/node_modules/b", {"name": "b", "version": "2.0.0"}
        )
        write_json(
            project / "package-lock.json",
            {
                "lockfileVersion": 1,
                "dependencies": {
                    "a": {
                        "version": "1.0.0",
                        "dependencies": {"b": {"version": "2.0.0"}},
                    },
                    "jest": {"version": "29.0.0", "dev": True},
                    "gone": {"version": "0.1.0", "optional": True},
                },
            },
        )

        specs = PackageLockScanner(project).scan()

        assert [spec.id for spec in specs] == ["a@1.0.0", "b@2.0.0", "gone@0.1.0"]
        assert specs[1].path == project / "node_modules/a/node_modules/b"
        assert specs[2].missing is True

    def test_shrinkwrap_is_preferred(self, project: Path, make_package, write_json):
        make_package("node_modules/a", {"name": "a", "version": "1.0.0"})
        write_json(
            project / "package-lock.json",
            {"lockfileVersion": 3, "packages": {}},
        )
        write_json(
            project / "npm-shrinkwrap.json",
            {"lockfileVersion": 3, "packages": {"node_modules/a": {"version": "1.0.0"}}},
        )

        scanner = PackageLockScanner(project)

        assert scanner.source_name == "npm-shrinkwrap.json"
        assert [spec.id for spec in scanner.scan()] == ["a@1.0.0"]

    def test_invalid_lock_file(self, project: Path):
        (project / "package-lock.json").write_text("{", encoding="utf-8")

        with pytest.raises(ManifestError):
            PackageLockScanner(project).scan()

    def test_no_lock_file(self, project: Path):
        with pytest.raises(FileNotFoundError):
            PackageLockScanner(project).scan()
