"""Base interface for dependency scanners.

Scanners enumerate the production dependencies installed in a project,
from a lock file or by walking ``node_modules`` directly.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from check_licenses.models import DependencySpec


class BaseScanner(ABC):
    """Abstract base class for dependency scanners.

    Attributes:
        root: Project root directory (the one holding package.json).
        manifest: Parsed root package.json, if already read.
    """

    def __init__(self, root: Path, manifest: Optional[dict[str, Any]] = None) -> None:
        """Initialize the scanner.

        Args:
            root: Project root directory.
            manifest: Optional parsed root manifest.
        """
        self.root = root
        self.manifest = manifest or {}

    @abstractmethod
    def scan(self) -> list[DependencySpec]:
        """Enumerate the installed production dependencies.

        Returns:
            List of DependencySpec objects, one per installed package.
            Dependencies that are declared but not installed are included
            with ``missing=True``.

        Raises:
            ManifestError: If a lock file cannot be parsed.
        """
        ...

    @classmethod
    @abstractmethod
    def can_handle(cls, root: Path) -> bool:
        """Check if this scanner can enumerate the given project.

        Args:
            root: Project root directory.

        Returns:
            True if this scanner can process the project, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source type.

        Returns:
            Name like "package-lock.json" or "node_modules".
        """
        ...
