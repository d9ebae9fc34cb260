"""Resolver for the license declared in a package manifest.

A manifest can declare its license in many shapes: a bare string, an SPDX
expression, an object with a ``type`` field, or a list of either, under
the ``license`` or the legacy ``licenses`` key. This module converts all of
them into a flat list of identifiers.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any, Optional, Union

from check_licenses.models import (
    AbsentLicense,
    DeclaredLicense,
    LicenseSequence,
    SingleLicense,
    StructuredLicense,
)

logger = logging.getLogger(__name__)

# "MIT OR ISC", "Apache-2.0 AND MIT"
EXPRESSION_SEPARATOR = re.compile(r"\W+(?:OR|AND)\W+", re.IGNORECASE | re.ASCII)


def _parse_item(value: Any) -> Optional[Union[SingleLicense, StructuredLicense]]:
    if isinstance(value, str):
        return SingleLicense(value) if value else None
    if isinstance(value, dict):
        license_type = value.get("type")
        if isinstance(license_type, str) and license_type:
            return StructuredLicense(license_type)
    return None


def parse_declared(manifest: dict[str, Any]) -> DeclaredLicense:
    """Classify the license field of a manifest.

    Args:
        manifest: Parsed package.json contents.

    Returns:
        The declared license as one of the DeclaredLicense variants.
    """
    value = manifest.get("licenses") or manifest.get("license")
    if not value:
        return AbsentLicense()

    if isinstance(value, list):
        items = (_parse_item(item) for item in value if item)
        return LicenseSequence(tuple(item for item in items if item is not None))

    item = _parse_item(value)
    if item is None:
        logger.debug("Ignoring unrecognized license field: %r", value)
        return AbsentLicense()
    return item


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _expression(declared: DeclaredLicense) -> str:
    if isinstance(declared, SingleLicense):
        return declared.value
    if isinstance(declared, StructuredLicense):
        return declared.type
    if isinstance(declared, LicenseSequence):
        parts = (
            item.type if isinstance(item, StructuredLicense) else item.value
            for item in declared.items
        )
        return " OR ".join(part for part in parts if part)
    return ""


def normalize_license(declared: DeclaredLicense) -> list[str]:
    """Flatten a declared license into a list of identifiers.

    Lists are joined into a single ``OR`` expression, parentheses are
    dropped, and the expression is split on ``OR``/``AND``. The logical
    structure of the expression is not preserved.

    Examples:
        "(MIT OR ISC)" -> ["MIT", "ISC"]
        [{"type": "MIT"}, "Apache-2.0"] -> ["MIT", "Apache-2.0"]

    Args:
        declared: License declaration from parse_declared.

    Returns:
        Identifiers in order of first appearance, without duplicates.
    """
    expression = _expression(declared).replace("(", "").replace(")", "")
    return _unique(token for token in EXPRESSION_SEPARATOR.split(expression) if token)


class DeclaredLicenseResolver:
    """Resolver for the license declared in an already-read ``package.json``.

    PackageResolver reads each manifest once and shares it between the
    record fields and this resolver.
    """

    def from_manifest(self, manifest: dict[str, Any]) -> list[str]:
        """Return the normalized identifiers declared by an already-read manifest."""
        return normalize_license(parse_declared(manifest))

