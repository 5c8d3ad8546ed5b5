"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (memory -> Redis, scraping -> GraphQL, etc.)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .github_source import GithubSource
from .name_extractor import NameExtractor
from .result_store import ResultStore

__all__ = [
    "GithubSource",
    "NameExtractor",
    "ResultStore",
]
