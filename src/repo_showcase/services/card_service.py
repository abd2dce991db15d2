"""Repository card service for core business logic.

This service runs the two-tier cache-aside enrichment pipeline:

1. List cache: ``repos_<username>`` holds the finished card list.
2. Upstream listing of the user's public repositories.
3. Per repository: manifest cache, else manifest fetch, then the
   qualifying filter and card construction.

Cache failures and per-repository failures are reported and absorbed;
only the upstream listing can fail a request.
"""

import asyncio

from repo_showcase.cache_keys import manifest_cache_key, repos_cache_key
from repo_showcase.config import settings
from repo_showcase.entities import CardListing, DisplayCard, ManifestDocument, RepositorySummary
from repo_showcase.errors import DecodeError, ManifestFetchError
from repo_showcase.observability import LoguruErrorReporter
from repo_showcase.protocols import CacheStore, ErrorReporter, RepositoryHost
from repo_showcase.serialization import (
    decode_cards,
    decode_manifest,
    encode_cards,
    encode_manifest,
)

DEFAULT_DESCRIPTION = "No description available"
DEFAULT_BANNER = "https://via.placeholder.com/600x200?text=No+Banner"
DEFAULT_DEMO_LINK = ""


def build_card(repository: RepositorySummary, manifest: ManifestDocument) -> DisplayCard:
    """Combine a repository and its manifest into a display card."""
    return DisplayCard(
        name=repository.name,
        html_url=repository.html_url,
        description=repository.description or DEFAULT_DESCRIPTION,
        banner=manifest.banner or DEFAULT_BANNER,
        demo_link=manifest.demo_link or DEFAULT_DEMO_LINK,
    )


class RepoCardService:
    """Core enrichment pipeline.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: Redis in production, in-memory in tests
    - RepositoryHost: the GitHub API
    - ErrorReporter: where recovered failures go

    Example:
        ```python
        service = RepoCardService.create(
            cache=RedisCacheRepository.create(),
            host=GitHubClient.create(),
        )
        listing = await service.get_cards("octocat")
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        host: RepositoryHost,
        error_reporter: ErrorReporter | None = None,
        repos_ttl: int | None = None,
        manifest_ttl: int | None = None,
        concurrency: int | None = None,
    ) -> None:
        """Initialize the card service.

        Args:
            cache: Key-value store for both cache tiers (required).
            host: Repository hosting backend (required).
            error_reporter: Sink for recovered failures. Defaults to loguru.
            repos_ttl: TTL of the card list cache in seconds. Defaults to settings.
            manifest_ttl: TTL of the manifest cache in seconds. Defaults to settings.
            concurrency: Maximum concurrent manifest lookups. Defaults to settings.
        """
        self._cache = cache
        self._host = host
        self._reporter = error_reporter or LoguruErrorReporter()
        self._repos_ttl = repos_ttl if repos_ttl is not None else settings.repos_cache_ttl
        self._manifest_ttl = manifest_ttl if manifest_ttl is not None else settings.manifest_cache_ttl
        self._concurrency = concurrency if concurrency is not None else settings.enrichment_concurrency

        if self._concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self._concurrency}")
        if self._repos_ttl <= 0 or self._manifest_ttl <= 0:
            raise ValueError("cache TTLs must be positive")

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        host: RepositoryHost,
        error_reporter: ErrorReporter | None = None,
    ) -> "RepoCardService":
        """Factory method to create RepoCardService with settings defaults.

        Args:
            cache: Key-value store for both cache tiers (required).
            host: Repository hosting backend (required).
            error_reporter: Sink for recovered failures. If None, uses loguru.

        Returns:
            Configured RepoCardService instance
        """
        return cls(cache=cache, host=host, error_reporter=error_reporter)

    async def get_cards(self, username: str) -> CardListing:
        """Return the display cards for a user.

        Business logic:
        1. Serve the cached list if there is one
        2. List the user's repositories upstream
        3. Enrich every repository concurrently and drop the ones that
           do not qualify
        4. Cache the result

        Args:
            username: GitHub login (non-empty)

        Returns:
            CardListing with the cards and whether they came from cache

        Raises:
            UpstreamError: If the repository listing fails
        """
        cache_key = repos_cache_key(username)

        cached = await self._read_cached_cards(cache_key)
        if cached is not None:
            return CardListing(cards=cached, cache_hit=True)

        repositories = await self._host.list_repositories(username)

        if not repositories:
            # Sentinel so users without repositories don't hit upstream every request
            await self._write_quietly(cache_key, [], self._repos_ttl)
            return CardListing(cards=[], cache_hit=False)

        cards = await self._enrich_all(username, repositories)

        await self._write_quietly(cache_key, encode_cards(cards), self._repos_ttl)
        return CardListing(cards=cards, cache_hit=False)

    async def _enrich_all(
        self,
        username: str,
        repositories: list[RepositorySummary],
    ) -> list[DisplayCard]:
        """Enrich repositories with bounded concurrency, keeping upstream order."""
        semaphore = asyncio.Semaphore(self._concurrency)

        async def bounded(repository: RepositorySummary) -> DisplayCard | None:
            async with semaphore:
                return await self._enrich(username, repository)

        results = await asyncio.gather(*(bounded(repo) for repo in repositories))
        return [card for card in results if card is not None]

    async def _enrich(self, username: str, repository: RepositorySummary) -> DisplayCard | None:
        """Build the card for one repository, or None if it is excluded."""
        try:
            manifest = await self._load_manifest(username, repository)
        except Exception as e:
            self._reporter.report("enrich_repository", e, username=username, repository=repository.name)
            return None
        if manifest is None:
            return None
        return build_card(repository, manifest)

    async def _load_manifest(
        self,
        username: str,
        repository: RepositorySummary,
    ) -> ManifestDocument | None:
        """Return a qualifying manifest from cache or upstream, else None."""
        cache_key = manifest_cache_key(username, repository.name)

        try:
            cached = await self._cache.get_json(cache_key)
            if cached:
                manifest = decode_manifest(cached)
                if manifest.is_qualifying:
                    return manifest
        except Exception as e:  # any store failure counts as a miss
            self._reporter.report("cache_read", e, key=cache_key)

        try:
            manifest = await self._host.fetch_manifest(username, repository)
        except (ManifestFetchError, DecodeError) as e:
            self._reporter.report("manifest_fetch", e, username=username, repository=repository.name)
            return None

        if manifest is None or not manifest.is_qualifying:
            return None

        await self._write_quietly(cache_key, encode_manifest(manifest), self._manifest_ttl)
        return manifest

    async def _read_cached_cards(self, cache_key: str) -> list[DisplayCard] | None:
        """Return the cached card list, or None on a miss or any read failure."""
        try:
            cached = await self._cache.get_json(cache_key)
            if cached is None:
                return None
            return decode_cards(cached)
        except Exception as e:  # any store failure counts as a miss
            self._reporter.report("cache_read", e, key=cache_key)
            return None

    async def _write_quietly(self, cache_key: str, value: object, ttl: int) -> None:
        """Write to the cache, reporting instead of raising on failure."""
        try:
            await self._cache.put_json(cache_key, value, ttl)
        except Exception as e:
            self._reporter.report("cache_write", e, key=cache_key, ttl=ttl)

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache store (for testing)."""
        return self._cache

    @property
    def host(self) -> RepositoryHost:
        """Get the underlying repository host (for testing)."""
        return self._host
