"""Card listing domain entity."""

from dataclasses import dataclass, field

from .display_card import DisplayCard


@dataclass(frozen=True)
class CardListing:
    """Result of one pipeline run for a username.

    Attributes:
        cards: Display cards in upstream order
        cache_hit: True when served from the list cache
    """

    cards: list[DisplayCard] = field(default_factory=list)
    cache_hit: bool = False

    @property
    def cache_status(self) -> str:
        """Value for the ``X-Cache-Status`` header."""
        return "HIT" if self.cache_hit else "MISS"
