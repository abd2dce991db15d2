"""
Tests for the repository card API.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import repo_entry
from repo_showcase.api.app import create_app
from repo_showcase.handlers import RepoHandler


@pytest.fixture
def client(card_service):
    """Test client whose handler talks to the fake GitHub and cache."""
    app = create_app(use_lifespan=False)
    app.state.repo_handler = RepoHandler(card_service=card_service)
    return TestClient(app)


def test_list_repos_miss_then_hit(client, fake_github):
    fake_github.repos["alice"] = [repo_entry("site"), repo_entry("tool")]
    fake_github.manifests[("alice", "site")] = {"banner": "https://x/b.png"}

    first = client.get("/api/repos/alice")
    second = client.get("/api/repos/alice")

    assert first.status_code == 200
    assert first.headers["content-type"] == "application/json"
    assert first.headers["access-control-allow-origin"] == "*"
    assert first.headers["x-cache-status"] == "MISS"
    assert first.json() == [
        {
            "name": "site",
            "html_url": "https://github.com/alice/site",
            "description": "No description available",
            "banner": "https://x/b.png",
            "demoLink": "",
        }
    ]
    assert second.headers["x-cache-status"] == "HIT"
    assert second.json() == first.json()


def test_trailing_slash_accepted(client, fake_github):
    fake_github.repos["alice"] = []

    response = client.get("/api/repos/alice/")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("path", ["/api/repos", "/api/repos/", "/api/repos/%20"])
def test_missing_username_is_400(client, fake_github, path):
    response = client.get(path)

    assert response.status_code == 400
    assert response.json() == {"error": "Username is required"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert fake_github.requests == []


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/"),
        ("GET", "/api/users/alice"),
        ("GET", "/api/repos/alice/extra"),
        ("POST", "/api/repos/alice"),
        ("DELETE", "/api/repos/alice"),
    ],
)
def test_other_routes_are_404(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


def test_upstream_status_mirrored(client, cache_store):
    response = client.get("/api/repos/ghost")

    assert response.status_code == 404
    assert response.json() == {"error": "GitHub API error: Not Found"}
    assert cache_store.writes == []


def test_network_failure_is_500(client, fake_github):
    fake_github.repos["alice"] = httpx.ConnectError("connection refused")

    response = client.get("/api/repos/alice")

    assert response.status_code == 500
    assert response.json()["error"].startswith("Server error")


def test_rate_limited_listing_keeps_upstream_message(client, fake_github):
    fake_github.repos["alice"] = httpx.Response(403, json={"message": "API rate limit exceeded"})

    response = client.get("/api/repos/alice")

    assert response.status_code == 403
    assert response.json() == {"error": "GitHub API error: Forbidden"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_username_with_surrounding_space_not_rewritten(client, fake_github, cache_store):
    fake_github.repos[" alice"] = []

    response = client.get("/api/repos/%20alice")

    assert response.status_code == 200
    assert cache_store.writes == ["repos_ alice"]
    assert fake_github.requests[0].url.path == "/users/ alice/repos"


@pytest.mark.parametrize("path", ["/api/repos/alice", "/api/unknown"])
def test_preflight_is_404(client, path):
    response = client.options(
        path,
        headers={"Origin": "https://portfolio.example", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}
