"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, GitHub → a mirror, etc.)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .cache_store import CacheStore
from .error_reporter import ErrorReporter
from .repository_host import RepositoryHost

__all__ = [
    "CacheStore",
    "ErrorReporter",
    "RepositoryHost",
]
