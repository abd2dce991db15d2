"""Data Transfer Objects for wire contracts.

These Pydantic models describe JSON crossing the process boundary:
payloads received from GitHub and the response/cache format of a
display card. Internal logic should use entities from the entities package.
"""

from .payloads import ManifestPayload, RepositoryPayload
from .responses import DisplayCardItem, ErrorResponse

__all__ = [
    "ManifestPayload",
    "RepositoryPayload",
    "DisplayCardItem",
    "ErrorResponse",
]
