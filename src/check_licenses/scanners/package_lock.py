"""Scanner for npm lock files.

This module parses ``package-lock.json`` (or ``npm-shrinkwrap.json``) to
enumerate the installed production dependencies of a project. Both the
flat ``packages`` map of lockfileVersion 2/3 and the nested
``dependencies`` tree of lockfileVersion 1 are supported.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from check_licenses.manifest import MANIFEST_NAME, read_manifest
from check_licenses.models import DependencySpec
from check_licenses.scanners.base import BaseScanner

logger = logging.getLogger(__name__)

# npm uses the shrinkwrap file over package-lock.json when both exist
LOCK_FILES = ("npm-shrinkwrap.json", "package-lock.json")

NODE_MODULES = "node_modules/"


def _find_lock_file(root: Path) -> Optional[Path]:
    for filename in LOCK_FILES:
        path = root / filename
        if path.is_file():
            return path
    return None


class PackageLockScanner(BaseScanner):
    """Scanner for npm lock files.

    Dev dependencies and extraneous packages are skipped. Packages listed
    in the lock file but absent from disk (typically optional dependencies
    for another platform) are reported as missing.
    """

    def scan(self) -> list[DependencySpec]:
        """Scan the lock file and extract the installed dependencies.

        Returns:
            List of DependencySpec objects in lock file order.

        Raises:
            FileNotFoundError: If the project has no lock file.
            ManifestError: If the lock file is not valid JSON.
        """
        lock_path = _find_lock_file(self.root)
        if lock_path is None:
            raise FileNotFoundError(f"No lock file found in {self.root}")

        data = read_manifest(lock_path)

        packages = data.get("packages")
        if isinstance(packages, dict):
            specs = self._scan_packages(packages)
        else:
            specs = []
            self._scan_dependencies(data.get("dependencies") or {}, self.root, specs)

        logger.debug("Found %d dependencies in %s", len(specs), lock_path.name)
        return specs

    def _scan_packages(self, packages: dict[str, Any]) -> list[DependencySpec]:
        specs: list[DependencySpec] = []
        for key, entry in packages.items():
            if NODE_MODULES not in key or not isinstance(entry, dict):
                continue
            if entry.get("dev") or entry.get("extraneous"):
                continue

            name = entry.get("name") or key.rpartition(NODE_MODULES)[2]
            path = self.root / key
            if entry.get("link") and entry.get("resolved"):
                path = self.root / entry["resolved"]

            specs.append(self._spec(name, entry.get("version", ""), path))
        return specs

    def _scan_dependencies(
        self, dependencies: dict[str, Any], base: Path, specs: list[DependencySpec]
    ) -> None:
        for name, entry in dependencies.items():
            if not isinstance(entry, dict) or entry.get("dev"):
                continue
            path = base / "node_modules" / name
            specs.append(self._spec(name, entry.get("version", ""), path))
            self._scan_dependencies(entry.get("dependencies") or {}, path, specs)

    def _spec(self, name: str, version: Any, path: Path) -> DependencySpec:
        installed = (path / MANIFEST_NAME).is_file()
        return DependencySpec(
            name=name,
            version=version if isinstance(version, str) else "",
            path=path if installed else None,
            missing=not installed,
        )

    @classmethod
    def can_handle(cls, root: Path) -> bool:
        """Check if the project has an npm lock file.

        Args:
            root: Project root directory.

        Returns:
            True if package-lock.json or npm-shrinkwrap.json exists.
        """
        return _find_lock_file(root) is not None

    @property
    def source_name(self) -> str:
        lock_path = _find_lock_file(self.root)
        return lock_path.name if lock_path else "package-lock.json"
