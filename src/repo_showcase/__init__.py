"""Repo Showcase - cached GitHub repository cards for portfolio sites.

For a GitHub user, lists public repositories whose default branch holds a
``project.json`` manifest with a banner or demo link, and returns them as
display cards. Both the card list and each manifest are cached in Redis.

Layers:
    - protocols: Interface contracts (CacheStore, RepositoryHost, ErrorReporter)
    - repositories: Data access implementations (Redis, GitHub)
    - services: Business logic (the enrichment pipeline)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (wire contracts)
    - entities: Domain models (internal)

For HTTP API:
    ```python
    from repo_showcase.api.app import app
    ```
"""

from repo_showcase.config import get_redis_client, settings
from repo_showcase.entities import CardListing, DisplayCard, ManifestDocument, RepositorySummary
from repo_showcase.errors import (
    CacheStoreError,
    DecodeError,
    ManifestFetchError,
    ShowcaseError,
    UpstreamError,
)
from repo_showcase.handlers import RepoHandler
from repo_showcase.protocols import CacheStore, ErrorReporter, RepositoryHost
from repo_showcase.repositories import GitHubClient, RedisCacheRepository
from repo_showcase.services import RepoCardService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "ErrorReporter",
    "RepositoryHost",
    # Services (business logic)
    "RepoCardService",
    # Handlers (HTTP)
    "RepoHandler",
    # Repositories (data access)
    "GitHubClient",
    "RedisCacheRepository",
    # Entities (domain models)
    "CardListing",
    "DisplayCard",
    "ManifestDocument",
    "RepositorySummary",
    # Errors
    "ShowcaseError",
    "UpstreamError",
    "CacheStoreError",
    "DecodeError",
    "ManifestFetchError",
]
