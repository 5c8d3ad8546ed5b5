"""Repository layer for data access.

This layer abstracts external dependencies (GitHub, Redis, HTML parsing)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (memory -> Redis, scraping -> API, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from pinned_repos.protocols import GithubSource, NameExtractor, ResultStore

from .github_client import GithubClient
from .memory_store import InMemoryResultStore
from .pinned_extractor import PINNED_SELECTORS, SoupPinnedNameExtractor
from .redis_store import RedisResultStore

__all__ = [
    "GithubSource",
    "NameExtractor",
    "ResultStore",
    "GithubClient",
    "InMemoryResultStore",
    "RedisResultStore",
    "SoupPinnedNameExtractor",
    "PINNED_SELECTORS",
]
