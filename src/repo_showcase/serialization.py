"""Conversion between JSON values and domain entities.

Decoding goes through the pydantic DTOs; any mismatch is raised as
DecodeError so callers deal with a single failure type.
"""

import json
from typing import Any

from pydantic import ValidationError

from repo_showcase.dto import DisplayCardItem, ManifestPayload, RepositoryPayload
from repo_showcase.entities import DisplayCard, ManifestDocument, RepositorySummary
from repo_showcase.errors import DecodeError


def decode_repository(raw: Any) -> RepositorySummary:
    """Decode one entry of the repository listing."""
    try:
        payload = RepositoryPayload.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(f"Invalid repository entry: {e.error_count()} error(s)") from e

    return RepositorySummary(
        name=payload.name,
        html_url=payload.html_url,
        default_branch=payload.default_branch,
        description=payload.description,
    )


def decode_manifest(raw: Any) -> ManifestDocument:
    """Decode a parsed ``project.json`` value."""
    if not isinstance(raw, dict):
        raise DecodeError(f"Manifest must be a JSON object, got {type(raw).__name__}")

    try:
        payload = ManifestPayload.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(f"Invalid manifest: {e.error_count()} error(s)") from e

    return ManifestDocument(banner=payload.banner, demo_link=payload.demo_link)


def decode_manifest_text(body: str | bytes) -> ManifestDocument:
    """Parse and decode the raw body of a ``project.json`` file.

    Bytes are decoded by ``json.loads``, which detects UTF-8 (with or without
    a BOM), UTF-16 and UTF-32.
    """
    try:
        raw = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Manifest is not valid JSON: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"Manifest is not valid text: {e.reason}") from e
    return decode_manifest(raw)


def encode_manifest(manifest: ManifestDocument) -> dict[str, str]:
    """Encode a manifest for the manifest cache, omitting absent fields."""
    payload = ManifestPayload(banner=manifest.banner, demo_link=manifest.demo_link)
    return payload.model_dump(by_alias=True, exclude_none=True)


def decode_cards(raw: Any) -> list[DisplayCard]:
    """Decode a cached card list."""
    if not isinstance(raw, list):
        raise DecodeError(f"Cached cards must be a JSON array, got {type(raw).__name__}")

    try:
        return [DisplayCardItem.model_validate(item).to_entity() for item in raw]
    except ValidationError as e:
        raise DecodeError(f"Invalid cached card: {e.error_count()} error(s)") from e


def encode_cards(cards: list[DisplayCard]) -> list[dict[str, str]]:
    """Encode cards in the public response format."""
    return [DisplayCardItem.from_entity(card).model_dump(by_alias=True) for card in cards]
