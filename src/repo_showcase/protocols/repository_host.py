"""Repository host protocol.

Defines the two upstream calls the pipeline makes: listing a user's public
repositories and fetching one repository's manifest file.
"""

from typing import Protocol, runtime_checkable

from repo_showcase.entities import ManifestDocument, RepositorySummary


@runtime_checkable
class RepositoryHost(Protocol):
    """Protocol for source hosting backends."""

    async def list_repositories(self, username: str) -> list[RepositorySummary]:
        """List a user's public repositories in upstream order.

        Entries that cannot be decoded are left out.

        Raises:
            UpstreamError: If the listing request fails
        """
        ...

    async def fetch_manifest(
        self,
        username: str,
        repository: RepositorySummary,
    ) -> ManifestDocument | None:
        """Fetch the manifest from the repository's default branch.

        Returns:
            The decoded manifest, or None when the file is not served
            (any non-success status, 404 included)

        Raises:
            ManifestFetchError: On transport failure
            DecodeError: If the file is not a valid manifest
        """
        ...
