"""Exception types shared across layers."""


class ShowcaseError(Exception):
    """Base error for the showcase proxy."""


class UpstreamError(ShowcaseError):
    """The hosting API could not list a user's repositories.

    This is the only failure that reaches the caller. ``status_code`` mirrors
    the upstream status when one was received, otherwise 500.
    """

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CacheStoreError(ShowcaseError):
    """A cache backend operation failed (connection, timeout, bad JSON)."""


class DecodeError(ShowcaseError):
    """A payload did not have the expected structure."""


class ManifestFetchError(ShowcaseError):
    """Transport failure while fetching a repository manifest."""
