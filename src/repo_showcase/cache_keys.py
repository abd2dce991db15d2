"""Cache key construction.

Both cache namespaces share one store, so key shapes are part of the storage
contract and must stay stable:

    repos_<username>                      -> list of display cards
    project_json_<username>_<reponame>    -> manifest document
"""

REPOS_KEY_PREFIX = "repos_"
MANIFEST_KEY_PREFIX = "project_json_"


def repos_cache_key(username: str) -> str:
    """Key of the cached card list for a user."""
    return f"{REPOS_KEY_PREFIX}{username}"


def manifest_cache_key(username: str, repo_name: str) -> str:
    """Key of the cached manifest for one repository."""
    return f"{MANIFEST_KEY_PREFIX}{username}_{repo_name}"
