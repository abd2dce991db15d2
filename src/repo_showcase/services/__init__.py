"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .card_service import RepoCardService, build_card

__all__ = [
    "RepoCardService",
    "build_card",
]
