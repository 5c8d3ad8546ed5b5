"""BeautifulSoup implementation of NameExtractor.

GitHub's profile markup is an unversioned external contract, so the
selector chain is pinned here under an explicit version. When GitHub
changes the markup, add a new version instead of editing an old one.
"""

import logging

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# container > container > container > label within link > name
PINNED_SELECTORS: dict[str, str] = {
    "v1": ".pinned-item-list-item-content > div > div > span > a > span",
}

DEFAULT_SELECTOR_VERSION = "v1"


class SoupPinnedNameExtractor:
    """CSS-selector scraper for pinned repository names.

    This class satisfies the NameExtractor protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        extractor = SoupPinnedNameExtractor.create()
        extractor.extract_pinned_names(html)  # ["repo-a", "repo-b"]
        ```
    """

    def __init__(self, selector_version: str = DEFAULT_SELECTOR_VERSION, parser: str = "html.parser") -> None:
        """Initialize the extractor.

        Args:
            selector_version: Key into PINNED_SELECTORS.
            parser: BeautifulSoup tree builder name.

        Raises:
            ValueError: If the selector version is unknown
        """
        if selector_version not in PINNED_SELECTORS:
            raise ValueError(
                f"Unknown pinned selector version {selector_version!r}, "
                f"expected one of {sorted(PINNED_SELECTORS)}"
            )
        self._selector_version = selector_version
        self._selector = PINNED_SELECTORS[selector_version]
        self._parser = parser

    @classmethod
    def create(cls, selector_version: str | None = None) -> "SoupPinnedNameExtractor":
        """Factory method to create the extractor with defaults."""
        return cls(selector_version=selector_version or DEFAULT_SELECTOR_VERSION)

    @property
    def selector_version(self) -> str:
        return self._selector_version

    def extract_pinned_names(self, markup: str) -> list[str]:
        """Extract pinned project names in document order.

        Args:
            markup: Raw HTML of a profile page

        Returns:
            One stripped label text per match; empty list when nothing matched
        """
        soup = BeautifulSoup(markup, self._parser)
        names = [element.get_text().strip() for element in soup.select(self._selector)]

        if not names:
            logger.warning(
                "No pinned names matched selector %s (%r); the user may have nothing pinned "
                "or the profile markup changed",
                self._selector_version,
                self._selector,
            )
        return names
