"""Repository summary domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepositorySummary:
    """A public repository as listed by the hosting API.

    Attributes:
        name: Repository name, unique per owner
        html_url: Browser URL of the repository
        default_branch: Branch the manifest is read from
        description: Free-text description, if the owner set one
    """

    name: str
    html_url: str
    default_branch: str
    description: str | None = None
