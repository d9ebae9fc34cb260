"""Package resolver combining the manifest and license-file resolvers.

For each installed dependency the manifest is read (for the display name,
version and declared license) while the package directory is scanned for
a license file. Packages are processed concurrently and independently; a
failure in one package never affects the others.
"""

import asyncio
import logging
from typing import Optional

from check_licenses.manifest import MANIFEST_NAME, ManifestError, read_manifest
from check_licenses.models import DependencySpec, PackageRecord
from check_licenses.resolvers.declared import DeclaredLicenseResolver
from check_licenses.resolvers.license_file import LicenseFileResolver

logger = logging.getLogger(__name__)


class PackageResolver:
    """Builds a PackageRecord for every dependency found by a scanner.

    Attributes:
        declared_resolver: Resolver normalizing the manifest license field.
        file_resolver: Resolver detecting licenses from license files.
    """

    def __init__(
        self,
        declared_resolver: Optional[DeclaredLicenseResolver] = None,
        file_resolver: Optional[LicenseFileResolver] = None,
    ) -> None:
        """Initialize PackageResolver with optional custom resolvers.

        Args:
            declared_resolver: Optional custom DeclaredLicenseResolver.
            file_resolver: Optional custom LicenseFileResolver.
        """
        self.declared_resolver = declared_resolver or DeclaredLicenseResolver()
        self.file_resolver = file_resolver or LicenseFileResolver()

    async def resolve(self, spec: DependencySpec) -> PackageRecord:
        """Resolve the licenses of a single dependency.

        Missing dependencies, and dependencies whose manifest cannot be
        read, produce a record flagged as missing.

        Args:
            spec: Dependency to resolve.

        Returns:
            The PackageRecord for the dependency.
        """
        if spec.missing or spec.path is None:
            return PackageRecord.missing_from(spec)

        manifest_result, file_licenses = await asyncio.gather(
            asyncio.to_thread(read_manifest, spec.path / MANIFEST_NAME),
            self.file_resolver.resolve(spec),
            return_exceptions=True,
        )

        if isinstance(manifest_result, ManifestError):
            logger.debug("Treating %s as missing: %s", spec.id, manifest_result)
            return PackageRecord.missing_from(spec)
        if isinstance(manifest_result, BaseException):
            raise manifest_result
        if isinstance(file_licenses, BaseException):
            logger.debug(
                "License file detection failed for %s: %s", spec.id, file_licenses
            )
            file_licenses = []

        name = manifest_result.get("name")
        version = manifest_result.get("version")
        return PackageRecord(
            name=name if isinstance(name, str) and name else spec.name,
            version=version if isinstance(version, str) and version else spec.version,
            path=spec.path,
            declared_licenses=self.declared_resolver.from_manifest(manifest_result),
            file_licenses=file_licenses,
        )

    async def resolve_batch(self, specs: list[DependencySpec]) -> list[PackageRecord]:
        """Resolve multiple dependencies concurrently.

        Uses asyncio.gather so that all packages are processed in parallel,
        with exception handling so that one failing package only degrades
        that package to missing.

        Args:
            specs: Dependencies to resolve.

        Returns:
            One PackageRecord per spec, in the same order as ``specs``.
        """
        logger.info("Starting batch resolution of %d packages", len(specs))

        results = await asyncio.gather(
            *(self.resolve(spec) for spec in specs), return_exceptions=True
        )

        records: list[PackageRecord] = []
        for spec, result in zip(specs, results):
            if isinstance(result, Exception):
                logger.error("Exception resolving %s: %s", spec.id, result)
                records.append(PackageRecord.missing_from(spec))
            elif isinstance(result, BaseException):
                raise result
            else:
                records.append(result)

        missing = sum(1 for record in records if record.missing)
        logger.info(
            "Batch resolution complete: %d packages, %d missing", len(records), missing
        )
        return records
