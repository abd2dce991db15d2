from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from repo_showcase.api.dependencies import HandlerDep, lifespan
from repo_showcase.config import settings
from repo_showcase.dto import ErrorResponse
from repo_showcase.errors import UpstreamError
from repo_showcase.handlers import JSON_HEADERS

NOT_FOUND_MESSAGE = "Endpoint not found"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": ...}``.

    Unknown paths and unsupported methods are both reported as 404.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        status_code, message = status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE
    else:
        status_code, message = exc.status_code, str(exc.detail)

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=JSON_HEADERS,
    )


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Render a failed repository listing with the mirrored upstream status."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
        headers=JSON_HEADERS,
    )


async def list_repos(username: str, handler: HandlerDep) -> JSONResponse:
    """List the display cards of a GitHub user's opted-in repositories."""
    return await handler.list_repos(username)


async def missing_username() -> JSONResponse:
    """Reject requests without a username segment."""
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Username is required",
    )


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Build the FastAPI application.

    Args:
        use_lifespan: Wire Redis and GitHub on startup. Tests pass False and
            put their own handler on ``app.state.repo_handler``.
    """
    app = FastAPI(
        title="Repo Showcase API",
        description="Cached GitHub repository cards enriched from project.json manifests",
        version="0.1.0",
        lifespan=lifespan if use_lifespan else None,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UpstreamError, upstream_error_handler)  # type: ignore[arg-type]

    for path in ("/api/repos/{username}", "/api/repos/{username}/"):
        app.add_api_route(path, list_repos, methods=["GET"])
    for path in ("/api/repos", "/api/repos/"):
        app.add_api_route(path, missing_username, methods=["GET"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "repo_showcase.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
