"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .card_listing import CardListing
from .display_card import DisplayCard
from .manifest import ManifestDocument
from .repository_summary import RepositorySummary

__all__ = ["CardListing", "DisplayCard", "ManifestDocument", "RepositorySummary"]
