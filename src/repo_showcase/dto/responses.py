"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from repo_showcase.entities import DisplayCard


class DisplayCardItem(BaseModel):
    """A repository card as returned to clients and stored in the list cache."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Repository name")
    html_url: str = Field(..., description="Repository URL on GitHub")
    description: str = Field(..., description="Repository description or a placeholder")
    banner: str = Field(..., description="Banner image URL or a placeholder image")
    demo_link: str = Field("", alias="demoLink", description="Live demo URL, may be empty")

    @classmethod
    def from_entity(cls, card: DisplayCard) -> "DisplayCardItem":
        return cls(
            name=card.name,
            html_url=card.html_url,
            description=card.description,
            banner=card.banner,
            demo_link=card.demo_link,
        )

    def to_entity(self) -> DisplayCard:
        return DisplayCard(
            name=self.name,
            html_url=self.html_url,
            description=self.description,
            banner=self.banner,
            demo_link=self.demo_link,
        )


class ErrorResponse(BaseModel):
    """Body of every non-200 response."""

    error: str = Field(..., description="Human-readable error message")
