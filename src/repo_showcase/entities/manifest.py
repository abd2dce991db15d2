"""Manifest document domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ManifestDocument:
    """Contents of a repository's ``project.json``.

    Attributes:
        banner: URL of the banner image
        demo_link: URL of a live demo
    """

    banner: str | None = None
    demo_link: str | None = None

    @property
    def is_qualifying(self) -> bool:
        """A repository opts into display with a non-empty banner or demo link."""
        return bool(self.banner) or bool(self.demo_link)
