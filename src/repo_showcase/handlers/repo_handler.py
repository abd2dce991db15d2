"""HTTP handlers for repository card requests.

Handlers convert between service results and HTTP responses.
They handle HTTP concerns like status codes, headers and error mapping.
"""

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from loguru import logger

from repo_showcase.errors import UpstreamError
from repo_showcase.serialization import encode_cards
from repo_showcase.services import RepoCardService

JSON_HEADERS = {"Access-Control-Allow-Origin": "*"}


class RepoHandler:
    """HTTP handlers for repository card requests.

    This handler delegates business logic to RepoCardService
    and handles HTTP-specific concerns like:
    - Validating the username path segment
    - Converting entities to the response format
    - Setting the cache status and CORS headers
    - Mapping unexpected failures to error responses
    """

    def __init__(self, card_service: RepoCardService) -> None:
        """Initialize the repository handler.

        Args:
            card_service: The card service for business logic (required).
        """
        self._cards = card_service

    async def list_repos(self, username: str) -> JSONResponse:
        """Handle GET /api/repos/{username} requests.

        Args:
            username: The path segment naming the GitHub user

        Returns:
            JSONResponse with the card array and X-Cache-Status header

        Raises:
            HTTPException: 400 for a blank username, 500 for anything unexpected
            UpstreamError: If the repository listing fails; the app renders
                it with the upstream status
        """
        if not username.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username is required",
            )

        try:
            listing = await self._cards.get_cards(username)
        except UpstreamError as e:
            logger.warning("Listing repositories for {} failed: {}", username, e.message)
            raise
        except Exception as e:
            logger.exception("Server error for username {}", username)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Server error: {e}",
            ) from e

        return JSONResponse(
            content=encode_cards(listing.cards),
            headers={**JSON_HEADERS, "X-Cache-Status": listing.cache_status},
        )
