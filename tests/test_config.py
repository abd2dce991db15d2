"""
Tests for settings validation.
"""

import pytest

from repo_showcase.config import Settings


def test_defaults():
    config = Settings(github_token=None)

    assert config.github_per_page == 100
    assert config.manifest_filename == "project.json"
    assert not config.is_authenticated


def test_token_marks_authenticated():
    assert Settings(github_token="ghp_example").is_authenticated


@pytest.mark.parametrize("per_page", [0, 101])
def test_per_page_out_of_range(per_page):
    with pytest.raises(ValueError):
        Settings(github_per_page=per_page)


def test_concurrency_must_be_positive():
    with pytest.raises(ValueError):
        Settings(enrichment_concurrency=0)


@pytest.mark.parametrize("field", ["repos_cache_ttl", "manifest_cache_ttl"])
def test_ttls_must_be_positive(field):
    with pytest.raises(ValueError):
        Settings(**{field: 0})
