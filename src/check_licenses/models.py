"""Core data models for check_licenses.

This module defines the data structures shared by the scanners, resolvers
and reporters: the dependency specification produced by a scan, the
per-package license record, license signatures, and the shapes a declared
license can take in a package manifest.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

MISSING = "missing"


@dataclass(frozen=True)
class DependencySpec:
    """Immutable specification of an installed dependency.

    Produced by a scanner for every production dependency found in the
    project. Frozen for hashability.

    Attributes:
        name: Package name (e.g., "left-pad" or "@scope/pkg").
        version: Version string, empty when it could not be determined.
        path: Install directory, or None if the package is not installed.
        missing: True when no resolvable install path or manifest exists.
    """

    name: str
    version: str = ""
    path: Optional[Path] = None
    missing: bool = False

    @property
    def id(self) -> str:
        """Return the display identifier, ``name@version``."""
        return f"{self.name}@{self.version}" if self.version else self.name


@dataclass
class PackageRecord:
    """License information gathered for a single package.

    Attributes:
        name: Package name, taken from the manifest when available.
        version: Package version, taken from the manifest when available.
        path: Install directory of the package.
        missing: True when no manifest could be read for the package.
        declared_licenses: Normalized identifiers from the manifest.
        file_licenses: Identifiers detected from a license file.
    """

    name: str
    version: str = ""
    path: Optional[Path] = None
    missing: bool = False
    declared_licenses: list[str] = field(default_factory=list)
    file_licenses: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        """Return the display identifier, ``name@version``."""
        return f"{self.name}@{self.version}" if self.version else self.name

    @property
    def all_licenses(self) -> list[str]:
        """Return the sorted, deduplicated union of every detected license.

        A package flagged as missing always reports only the ``missing``
        token, whatever else was detected for it.

        Returns:
            Sorted list of license identifiers.
        """
        if self.missing:
            return [MISSING]
        return sorted(set(self.declared_licenses) | set(self.file_licenses))

    @classmethod
    def missing_from(cls, spec: DependencySpec) -> "PackageRecord":
        """Build a record for a package whose manifest is unavailable."""
        return cls(
            name=spec.name,
            version=spec.version,
            path=spec.path,
            missing=True,
        )


@dataclass(frozen=True)
class LicenseSignature:
    """A license identifier and the patterns recognizing its text.

    Attributes:
        identifier: Canonical identifier reported on a match (e.g., "MIT").
        patterns: Compiled expressions that must all be found in the text.
    """

    identifier: str
    patterns: tuple[re.Pattern, ...]

    def matches(self, text: str) -> bool:
        return all(pattern.search(text) for pattern in self.patterns)


@dataclass(frozen=True)
class AbsentLicense:
    """Manifest declares no usable license."""


@dataclass(frozen=True)
class SingleLicense:
    """A bare license string such as ``"MIT"`` or ``"(MIT OR ISC)"``."""

    value: str


@dataclass(frozen=True)
class StructuredLicense:
    """A license object such as ``{"type": "MIT", "url": "..."}``."""

    type: str


@dataclass(frozen=True)
class LicenseSequence:
    """An ordered list of license strings and/or license objects."""

    items: tuple[Union[SingleLicense, StructuredLicense], ...] = ()


DeclaredLicense = Union[
    AbsentLicense, SingleLicense, StructuredLicense, LicenseSequence
]
