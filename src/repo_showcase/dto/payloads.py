"""Upstream payload DTOs.

Only the fields the proxy reads are declared; everything else GitHub sends
is ignored. String fields are strict, so a number where a URL is expected
fails validation instead of being coerced.
"""

from pydantic import BaseModel, ConfigDict, Field


class RepositoryPayload(BaseModel):
    """One element of ``GET /users/{username}/repos``."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field(..., min_length=1)
    html_url: str
    default_branch: str = Field(..., min_length=1)
    description: str | None = None


class ManifestPayload(BaseModel):
    """A repository's ``project.json``."""

    model_config = ConfigDict(extra="ignore", strict=True, populate_by_name=True)

    banner: str | None = None
    demo_link: str | None = Field(None, alias="demoLink")
