"""GitHub implementation of RepositoryHost.

Uses the REST API to list a user's public repositories and the raw content
host to read each repository's manifest file from its default branch.

Requests identify themselves with a fixed User-Agent. When a token is
configured, API requests also carry ``Authorization: token <token>``;
without one they run unauthenticated and are subject to GitHub's lower
rate limit.
"""

from urllib.parse import quote

import httpx
from loguru import logger

from repo_showcase.config import settings
from repo_showcase.entities import ManifestDocument, RepositorySummary
from repo_showcase.errors import DecodeError, ManifestFetchError, UpstreamError
from repo_showcase.protocols import ErrorReporter
from repo_showcase.serialization import decode_manifest_text, decode_repository


def _segment(value: str) -> str:
    return quote(value, safe="")


class GitHubClient:
    """GitHub implementation of the RepositoryHost protocol.

    This class satisfies the RepositoryHost protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GitHubClient.create(token="ghp_...")
        repos = await client.list_repositories("octocat")
        manifest = await client.fetch_manifest("octocat", repos[0])
        await client.close()
        ```
    """

    def __init__(
        self,
        api_url: str | None = None,
        raw_url: str | None = None,
        token: str | None = None,
        user_agent: str | None = None,
        per_page: int | None = None,
        manifest_filename: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            api_url: REST API base URL. Defaults to settings.github_api_url.
            raw_url: Raw content base URL. Defaults to settings.github_raw_url.
            token: API token. Defaults to settings.github_token.
            user_agent: User-Agent header value. Defaults to settings.
            per_page: Page size of the repository listing. Defaults to settings.
            manifest_filename: Manifest path in each repository. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            http_client: Preconfigured client, mainly for tests. Created lazily if None.
            error_reporter: Receives listing entries that fail to decode.
        """
        self._api_url = (api_url or settings.github_api_url).rstrip("/")
        self._raw_url = (raw_url or settings.github_raw_url).rstrip("/")
        self._token = token if token is not None else settings.github_token
        self._user_agent = user_agent or settings.github_user_agent
        self._per_page = per_page or settings.github_per_page
        self._manifest_filename = manifest_filename or settings.manifest_filename
        self._timeout = timeout or settings.http_timeout
        self._client = http_client
        self._reporter = error_reporter

    @classmethod
    def create(
        cls,
        token: str | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> "GitHubClient":
        """Factory method to create GitHubClient with defaults.

        Args:
            token: API token. If None, uses settings.
            error_reporter: Receives listing entries that fail to decode.

        Returns:
            Configured GitHubClient
        """
        return cls(token=token, error_reporter=error_reporter)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @property
    def is_authenticated(self) -> bool:
        """Whether API requests carry a token."""
        return bool(self._token)

    def _api_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    def manifest_url(self, username: str, repository: RepositorySummary) -> str:
        """Raw content URL of a repository's manifest file."""
        return "/".join(
            [
                self._raw_url,
                _segment(username),
                _segment(repository.name),
                quote(repository.default_branch, safe="/"),
                self._manifest_filename,
            ]
        )

    async def list_repositories(self, username: str) -> list[RepositorySummary]:
        """List a user's public repositories.

        Args:
            username: GitHub login

        Returns:
            Decodable repositories in upstream order

        Raises:
            UpstreamError: On transport failure, non-success status or an
                unexpected response body
        """
        url = f"{self._api_url}/users/{_segment(username)}/repos"
        params = {"type": "public", "per_page": self._per_page}

        try:
            response = await self.client.get(url, params=params, headers=self._api_headers())
        except httpx.HTTPError as e:
            raise UpstreamError(f"Server error: failed to reach GitHub API ({e})") from e

        if not response.is_success:
            raise UpstreamError(
                f"GitHub API error: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("GitHub API error: invalid JSON response", status_code=502) from e

        if not isinstance(data, list):
            raise UpstreamError("GitHub API error: unexpected response format", status_code=502)

        repositories = []
        for index, entry in enumerate(data):
            try:
                repositories.append(decode_repository(entry))
            except DecodeError as e:
                if self._reporter is not None:
                    self._reporter.report("decode_repository", e, username=username, index=index)
        return repositories

    async def fetch_manifest(
        self,
        username: str,
        repository: RepositorySummary,
    ) -> ManifestDocument | None:
        """Fetch a repository's manifest from its default branch.

        Args:
            username: Repository owner
            repository: The repository to read

        Returns:
            The decoded manifest, or None if the file is not served

        Raises:
            ManifestFetchError: On transport failure
            DecodeError: If the body is not a valid manifest
        """
        url = self.manifest_url(username, repository)

        try:
            response = await self.client.get(url, headers={"User-Agent": self._user_agent})
        except httpx.HTTPError as e:
            raise ManifestFetchError(f"Fetching {url} failed: {e}") from e

        if not response.is_success:
            logger.debug("No manifest for {}/{} (HTTP {})", username, repository.name, response.status_code)
            return None

        return decode_manifest_text(response.content)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
