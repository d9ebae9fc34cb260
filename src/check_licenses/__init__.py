"""Check Licenses - License summary of npm production dependencies.

This package scans the dependencies installed in an npm project, determines
their declared and file-detected licenses, and reports them per package or
as a per-license summary.
"""

__version__ = "0.1.0"

from check_licenses.models import (
    DependencySpec,
    LicenseSignature,
    PackageRecord,
)

__all__ = [
    "__version__",
    "DependencySpec",
    "LicenseSignature",
    "PackageRecord",
]
