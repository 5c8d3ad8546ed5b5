"""GitHub source protocol.

Defines the three upstream reads the pipeline needs. Every method
either returns validated data or raises an ``UpstreamError``.
"""

from typing import Protocol, runtime_checkable

from pinned_repos.dto import GithubRepoRecord


@runtime_checkable
class GithubSource(Protocol):
    """Protocol for the upstream profile page and listing API."""

    async def fetch_profile_page(self, username: str) -> str:
        """Fetch the raw HTML of a user's profile page."""
        ...

    async def fetch_public_repo_count(self, username: str) -> int:
        """Fetch the number of public repositories a user owns."""
        ...

    async def fetch_repo_page(self, username: str, page: int) -> list[GithubRepoRecord]:
        """Fetch one page (1-based) of the user's repository listing."""
        ...
