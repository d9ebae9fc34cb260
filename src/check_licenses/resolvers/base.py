"""Base interface for license resolvers.

Resolvers determine license identifiers for an installed package from one
source of information, such as the manifest or a license file.
"""

from abc import ABC, abstractmethod

from check_licenses.models import DependencySpec


class BaseResolver(ABC):
    """Abstract base class for license resolvers.

    Resolvers report an empty list when no license can be determined.
    They are async so that many packages can be resolved concurrently.
    """

    @abstractmethod
    async def resolve(self, spec: DependencySpec) -> list[str]:
        """Resolve license identifiers for a package.

        Args:
            spec: Dependency to resolve. Its path must be set.

        Returns:
            Ordered, deduplicated list of license identifiers.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging.

        Returns:
            Name like "manifest" or "license-file".
        """
        ...
