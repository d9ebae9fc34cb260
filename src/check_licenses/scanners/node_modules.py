"""Scanner walking ``node_modules`` when no lock file is available.

Dependencies are resolved the way Node resolves ``require()``: a package
named ``name`` requested from directory ``dir`` is looked up in
``dir/node_modules/name``, then in the ``node_modules`` of each parent
directory up to the project root.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Any, Optional

from check_licenses.manifest import MANIFEST_NAME, ManifestError, read_manifest
from check_licenses.models import DependencySpec
from check_licenses.scanners.base import BaseScanner

logger = logging.getLogger(__name__)

PRODUCTION_FIELDS = ("dependencies", "optionalDependencies")


def _dependency_names(manifest: dict[str, Any]) -> list[str]:
    names: list[str] = []
    for field in PRODUCTION_FIELDS:
        deps = manifest.get(field)
        if isinstance(deps, dict):
            names.extend(name for name in deps if name not in names)
    return names


class NodeModulesScanner(BaseScanner):
    """Scanner resolving the production dependency tree from disk.

    Every install directory is reported once, even when required by many
    packages. Names that cannot be resolved anywhere are reported once as
    missing.
    """

    def scan(self) -> list[DependencySpec]:
        """Walk the dependency tree starting from the root manifest.

        Returns:
            List of DependencySpec objects sorted by id.

        Raises:
            ManifestError: If the root package.json cannot be read.
        """
        manifest = self.manifest or read_manifest(self.root / MANIFEST_NAME)

        found: dict[Path, DependencySpec] = {}
        missing: dict[str, DependencySpec] = {}
        queue = deque((name, self.root) for name in _dependency_names(manifest))

        while queue:
            name, requester = queue.popleft()
            path = self._locate(name, requester)
            if path is None:
                if name not in missing:
                    logger.debug("Dependency %s is not installed", name)
                    missing[name] = DependencySpec(name=name, missing=True)
                continue
            if path in found:
                continue

            try:
                package = read_manifest(path / MANIFEST_NAME)
            except ManifestError as e:
                logger.debug("Cannot read manifest of %s: %s", name, e)
                package = {}

            version = package.get("version")
            found[path] = DependencySpec(
                name=name,
                version=version if isinstance(version, str) else "",
                path=path,
            )
            queue.extend((dep, path) for dep in _dependency_names(package))

        specs = [*found.values(), *missing.values()]
        return sorted(specs, key=lambda spec: (spec.id, str(spec.path or "")))

    def _locate(self, name: str, requester: Path) -> Optional[Path]:
        directory = requester
        while True:
            candidate = directory / "node_modules" / name
            if candidate.is_dir():
                return candidate
            if directory == self.root or directory.parent == directory:
                return None
            directory = directory.parent

    @classmethod
    def can_handle(cls, root: Path) -> bool:
        """Return True; walking node_modules is the fallback for any project."""
        return True

    @property
    def source_name(self) -> str:
        return "node_modules"
