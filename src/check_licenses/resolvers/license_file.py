"""Resolver that detects a license from the license file of a package.

Looks for a file such as ``LICENSE``, ``LICENSE.md`` or ``licence.txt`` at
the root of the package directory and matches its text against the known
license signatures. This is a best-effort heuristic: anything that cannot
be found, read or recognized simply yields no license.
"""

import asyncio
import logging
import re
from pathlib import Path
from typing import Optional

from check_licenses.models import DependencySpec
from check_licenses.resolvers.base import BaseResolver
from check_licenses.signatures import match_signature

logger = logging.getLogger(__name__)

LICENSE_FILE_PATTERN = re.compile(r"licen[sc]e", re.IGNORECASE)


def find_license_file(directory: Path) -> Optional[Path]:
    """Find the first license file at the top level of a directory.

    Args:
        directory: Package directory to search.

    Returns:
        Path of the first regular file (sorted by name) whose name
        contains "license" or "licence", or None.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return None

    for entry in entries:
        if LICENSE_FILE_PATTERN.search(entry.name) and entry.is_file():
            return entry
    return None


def detect_license(directory: Path) -> list[str]:
    """Detect the license of a package from its license file.

    Args:
        directory: Package directory to search.

    Returns:
        A single-element list with the detected identifier, or an empty
        list if no license file exists, it cannot be read, or its text
        matches no known signature. Bytes that are not valid UTF-8 are
        replaced rather than rejected.
    """
    license_file = find_license_file(directory)
    if license_file is None:
        return []

    try:
        text = license_file.read_bytes().decode("utf-8-sig", errors="replace")
    except OSError as e:
        logger.debug("Ignoring unreadable license file %s: %s", license_file, e)
        return []

    identifier = match_signature(text)
    if identifier is None:
        logger.debug("No known license matches %s", license_file)
        return []
    return [identifier]


class LicenseFileResolver(BaseResolver):
    """Resolver detecting licenses from files in the package directory."""

    @property
    def name(self) -> str:
        return "license-file"

    async def resolve(self, spec: DependencySpec) -> list[str]:
        if spec.path is None:
            return []
        return await asyncio.to_thread(detect_license, spec.path)
