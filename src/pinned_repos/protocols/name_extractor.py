"""Pinned-name extraction protocol.

Defines the interface for anything that can turn a profile page's
markup into the ordered list of pinned project names.

Implementations can include:
- CSS selector scraping with BeautifulSoup (default)
- A GraphQL-backed source that ignores the markup entirely
- Fixed lists for tests
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NameExtractor(Protocol):
    """Protocol for pinned-name extractors.

    Implementations must be pure: no network access and no mutable
    state, so the same markup always yields the same names.
    """

    def extract_pinned_names(self, markup: str) -> list[str]:
        """Extract pinned project names from profile markup.

        Args:
            markup: Raw HTML of a profile page

        Returns:
            Project names in document order, empty when nothing matched
        """
        ...
