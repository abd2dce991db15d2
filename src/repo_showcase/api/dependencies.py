"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from repo_showcase.config import settings
from repo_showcase.handlers import RepoHandler
from repo_showcase.observability import LoguruErrorReporter, configure_logging, log_event
from repo_showcase.repositories import GitHubClient, RedisCacheRepository
from repo_showcase.services import RepoCardService


def get_handler(request: Request) -> RepoHandler:
    """Dependency injection for RepoHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "repo_handler", None)
    if handler is None:
        raise RuntimeError("RepoHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Cache repository and GitHub client (data access)
    2. Service (business logic) - stored in app.state.card_service
    3. Handler (HTTP endpoints) - stored in app.state.repo_handler

    Cleanup:
        Closes the HTTP and Redis clients and removes services from app.state
    """
    configure_logging(settings.log_level, serialize=settings.log_json)

    reporter = LoguruErrorReporter()
    cache = RedisCacheRepository.create()
    host = GitHubClient.create(error_reporter=reporter)

    card_service = RepoCardService.create(cache=cache, host=host, error_reporter=reporter)
    repo_handler = RepoHandler(card_service=card_service)

    # Store in app.state (FastAPI pattern)
    app.state.card_service = card_service
    app.state.repo_handler = repo_handler
    app.state.cache = cache
    app.state.host = host

    log_event(
        "api_starting",
        redis_url=settings.redis_url,
        github_authenticated=host.is_authenticated,
        redis_healthy=await cache.health_check(),
    )

    yield

    await host.close()
    await cache.close()

    del app.state.repo_handler
    del app.state.card_service
    del app.state.cache
    del app.state.host
    log_event("api_stopping")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[RepoHandler, Depends(get_handler)]