"""Shared fakes and fixtures."""

import copy
import json
from typing import Any

import httpx
import pytest

from repo_showcase.errors import CacheStoreError
from repo_showcase.repositories import GitHubClient
from repo_showcase.services import RepoCardService

API_URL = "https://api.github.com"
RAW_URL = "https://raw.githubusercontent.com"


def repo_entry(name: str, description: str | None = None, branch: str = "main") -> dict[str, Any]:
    """A listing entry shaped like the GitHub API's."""
    return {
        "id": sum(map(ord, name)),
        "name": name,
        "full_name": f"alice/{name}",
        "html_url": f"https://github.com/alice/{name}",
        "description": description,
        "default_branch": branch,
        "fork": False,
    }


class FakeGitHub:
    """Routes requests for the API and raw content hosts.

    ``repos[user]`` and ``manifests[(user, repo)]`` hold what to serve: a
    JSON-able value, a str body, an httpx.Response, or an exception to raise.
    Anything unset is a 404.
    """

    def __init__(self) -> None:
        self.repos: dict[str, Any] = {}
        self.manifests: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def _serve(self, value: Any) -> httpx.Response:
        if isinstance(value, Exception):
            raise value
        if isinstance(value, httpx.Response):
            return value
        if isinstance(value, str):
            return httpx.Response(200, text=value)
        return httpx.Response(200, json=value)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if request.url.host == "api.github.com":
            user = parts[1]
            if user not in self.repos:
                return httpx.Response(404, json={"message": "Not Found"})
            return self._serve(self.repos[user])

        if request.url.host == "raw.githubusercontent.com":
            user, repo = parts[0], parts[1]
            if (user, repo) not in self.manifests:
                return httpx.Response(404, text="404: Not Found")
            return self._serve(self.manifests[(user, repo)])

        return httpx.Response(500)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


class InMemoryCacheStore:
    """CacheStore fake that round-trips values through JSON."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.ttls: dict[str, int] = {}
        self.writes: list[str] = []
        self.fail_reads = False
        self.fail_writes = False

    async def get_json(self, key: str) -> Any | None:
        if self.fail_reads:
            raise CacheStoreError("store unavailable")
        return copy.deepcopy(self.data.get(key))

    async def put_json(self, key: str, value: Any, ttl: int) -> None:
        self.writes.append(key)
        if self.fail_writes:
            raise CacheStoreError("store unavailable")
        self.data[key] = json.loads(json.dumps(value))
        self.ttls[key] = ttl


class RecordingReporter:
    """ErrorReporter fake that keeps every report."""

    def __init__(self) -> None:
        self.reports: list[tuple[str, BaseException, dict[str, Any]]] = []

    def report(self, operation: str, error: BaseException, **context: Any) -> None:
        self.reports.append((operation, error, context))

    @property
    def operations(self) -> list[str]:
        return [operation for operation, _, _ in self.reports]


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def cache_store():
    return InMemoryCacheStore()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def github_client(fake_github, reporter):
    """GitHubClient talking to FakeGitHub, without a token."""
    return GitHubClient(
        api_url=API_URL,
        raw_url=RAW_URL,
        token="",
        user_agent="repo-showcase-tests",
        per_page=100,
        manifest_filename="project.json",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake_github.handler)),
        error_reporter=reporter,
    )


@pytest.fixture
def card_service(cache_store, github_client, reporter):
    return RepoCardService(
        cache=cache_store,
        host=github_client,
        error_reporter=reporter,
        repos_ttl=300,
        manifest_ttl=3600,
        concurrency=4,
    )
