"""
Tests for cache keys and payload decoding.
"""

import pytest

from repo_showcase.cache_keys import manifest_cache_key, repos_cache_key
from repo_showcase.entities import DisplayCard, ManifestDocument
from repo_showcase.errors import DecodeError
from repo_showcase.serialization import (
    decode_cards,
    decode_manifest,
    decode_manifest_text,
    decode_repository,
    encode_cards,
    encode_manifest,
)


def test_cache_key_shapes():
    assert repos_cache_key("alice") == "repos_alice"
    assert manifest_cache_key("alice", "site") == "project_json_alice_site"


def test_decode_repository_ignores_unknown_fields():
    repository = decode_repository(
        {
            "name": "site",
            "html_url": "https://github.com/alice/site",
            "description": None,
            "default_branch": "main",
            "stargazers_count": 3,
        }
    )

    assert repository.name == "site"
    assert repository.description is None


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "site", "html_url": "https://github.com/alice/site"},
        {"name": "", "html_url": "u", "default_branch": "main"},
        {"name": 7, "html_url": "u", "default_branch": "main"},
        None,
    ],
)
def test_decode_repository_rejects_bad_entries(raw):
    with pytest.raises(DecodeError):
        decode_repository(raw)


def test_decode_manifest_reads_camel_case_demo_link():
    manifest = decode_manifest({"banner": "https://x/b.png", "demoLink": "https://demo", "tags": ["web"]})

    assert manifest == ManifestDocument(banner="https://x/b.png", demo_link="https://demo")
    assert manifest.is_qualifying


@pytest.mark.parametrize("raw", [["banner"], "banner", 3, {"banner": 42}, {"demoLink": True}])
def test_decode_manifest_rejects_wrong_shapes(raw):
    with pytest.raises(DecodeError):
        decode_manifest(raw)


def test_decode_manifest_text_rejects_invalid_json():
    with pytest.raises(DecodeError):
        decode_manifest_text("{'banner': 'single quotes'}")


@pytest.mark.parametrize(
    ("banner", "demo_link", "expected"),
    [
        (None, None, False),
        ("", "", False),
        ("https://x/b.png", None, True),
        (None, "https://demo", True),
    ],
)
def test_manifest_qualifying(banner, demo_link, expected):
    assert ManifestDocument(banner=banner, demo_link=demo_link).is_qualifying is expected


def test_encode_manifest_omits_absent_fields():
    assert encode_manifest(ManifestDocument(demo_link="https://demo")) == {"demoLink": "https://demo"}


def test_encode_cards_uses_public_field_names():
    card = DisplayCard(
        name="site",
        html_url="https://github.com/alice/site",
        description="Portfolio",
        banner="https://x/b.png",
        demo_link="https://demo",
    )

    encoded = encode_cards([card])

    assert list(encoded[0]) == ["name", "html_url", "description", "banner", "demoLink"]
    assert decode_cards(encoded) == [card]


@pytest.mark.parametrize("raw", [{"name": "site"}, "[]", [{"name": "site"}]])
def test_decode_cards_rejects_wrong_shapes(raw):
    with pytest.raises(DecodeError):
        decode_cards(raw)


def test_decode_manifest_text_accepts_bom_bytes():
    manifest = decode_manifest_text(b'\xef\xbb\xbf{"demoLink": "https://demo"}')

    assert manifest == ManifestDocument(demo_link="https://demo")
