"""Display card domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayCard:
    """UI-ready record for one qualifying repository.

    All fields are filled; defaults are applied when the card is built.
    """

    name: str
    html_url: str
    description: str
    banner: str
    demo_link: str
