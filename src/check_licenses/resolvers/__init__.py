"""License resolvers for installed packages.

This module provides resolvers for determining license identifiers from a
package's manifest and from the license file shipped with it.
"""

from check_licenses.resolvers.base import BaseResolver
from check_licenses.resolvers.declared import (
    DeclaredLicenseResolver,
    normalize_license,
    parse_declared,
)
from check_licenses.resolvers.license_file import LicenseFileResolver
from check_licenses.resolvers.package import PackageResolver

__all__ = [
    "BaseResolver",
    "DeclaredLicenseResolver",
    "LicenseFileResolver",
    "PackageResolver",
    "normalize_license",
    "parse_declared",
]
