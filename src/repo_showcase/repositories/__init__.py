"""Repository layer for data access.

This layer hides external dependencies (Redis, the GitHub API) behind
the protocol interfaces in ``repo_showcase.protocols``.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from repo_showcase.protocols import CacheStore, RepositoryHost

from .github_client import GitHubClient
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "RepositoryHost",
    "GitHubClient",
    "RedisCacheRepository",
]
