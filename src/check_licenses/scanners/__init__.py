"""Dependency scanners for npm projects.

This module provides scanners for enumerating the production dependencies
installed in a project, from its lock file or from ``node_modules``.
"""

from pathlib import Path

from check_licenses.manifest import MANIFEST_NAME, ManifestError, read_manifest
from check_licenses.scanners.base import BaseScanner
from check_licenses.scanners.node_modules import NodeModulesScanner
from check_licenses.scanners.package_lock import PackageLockScanner

__all__ = [
    "BaseScanner",
    "NodeModulesScanner",
    "PackageLockScanner",
    "get_scanner",
]

# Registry of available scanners in priority order
_SCANNERS: list[type[BaseScanner]] = [
    PackageLockScanner,
    NodeModulesScanner,
]


def get_scanner(root: Path) -> BaseScanner:
    """Get the appropriate scanner for a project directory.

    Args:
        root: Project root directory.

    Returns:
        Scanner instance configured for the project.

    Raises:
        ManifestError: If the directory has no readable package.json.
        ValueError: If no scanner can handle the project.
    """
    try:
        manifest = read_manifest(root / MANIFEST_NAME)
    except ManifestError as e:
        raise ManifestError(
            f"No valid {MANIFEST_NAME} found in {root}. "
            f"Run this command from the root of your project."
        ) from e

    for scanner_cls in _SCANNERS:
        if scanner_cls.can_handle(root):
            return scanner_cls(root, manifest)

    raise ValueError(f"No scanner available for '{root}'")
