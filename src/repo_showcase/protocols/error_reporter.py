"""Error reporter protocol.

Failures that the pipeline recovers from (cache errors, broken manifests)
are handed to an ErrorReporter instead of being dropped.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ErrorReporter(Protocol):
    """Protocol for recording recovered failures."""

    def report(self, operation: str, error: BaseException, **context: Any) -> None:
        """Record a recovered failure.

        Args:
            operation: Short name of what failed (e.g. "cache_read")
            error: The exception that was caught
            **context: Identifiers such as the cache key or repository name
        """
        ...
