"""httpx implementation of GithubSource.

Every outbound call goes through ``_get``, which converts transport
failures and non-success statuses into typed ``UpstreamError``s so the
pipeline never tries to parse an error page.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pinned_repos.config import settings
from pinned_repos.dto import GithubRepoRecord, GithubUser
from pinned_repos.errors import UpstreamDecodeError, UpstreamStatusError, UpstreamTransportError

logger = logging.getLogger(__name__)

API_ACCEPT = "application/vnd.github+json"


class GithubClient:
    """Async GitHub reader for profile pages and the repository listing.

    This class satisfies the GithubSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GithubClient.create()
        html = await client.fetch_profile_page("octocat")
        count = await client.fetch_public_repo_count("octocat")
        repos = await client.fetch_repo_page("octocat", page=1)
        await client.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_url: str | None = None,
        user_agent: str | None = None,
        page_size: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            base_url: Profile page host. Defaults to settings.github_base_url.
            api_url: REST API host. Defaults to settings.github_api_url.
            user_agent: Outbound User-Agent. Defaults to settings.github_user_agent.
            page_size: Listing page size. Defaults to settings.github_page_size.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
        """
        self._base_url = (base_url or settings.github_base_url).rstrip("/")
        self._api_url = (api_url or settings.github_api_url).rstrip("/")
        self._user_agent = user_agent or settings.github_user_agent
        self._page_size = page_size or settings.github_page_size
        self._timeout = timeout or settings.http_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> "GithubClient":
        """Factory method to create GithubClient with defaults from settings."""
        return cls(transport=transport, **overrides)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    def profile_url(self, username: str) -> str:
        return f"{self._base_url}/{quote(username, safe='')}"

    def user_url(self, username: str) -> str:
        return f"{self._api_url}/users/{quote(username, safe='')}"

    def repos_url(self, username: str) -> str:
        return f"{self.user_url(username)}/repos"

    async def _get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        page: int | None = None,
    ) -> httpx.Response:
        """Fetch a URL and validate the response status.

        Raises:
            UpstreamTransportError: If no response was received
            UpstreamStatusError: If the status is not 2xx
        """
        try:
            response = await self.client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("GitHub request to %s failed: %s", url, e)
            raise UpstreamTransportError(f"Request to {url} failed: {e}", url=url, page=page) from e

        if not response.is_success:
            logger.warning("GitHub returned %s for %s", response.status_code, url)
            raise UpstreamStatusError(url=url, status_code=response.status_code, page=page)

        return response

    @staticmethod
    def _json(response: httpx.Response, url: str, page: int | None = None) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamDecodeError(f"Invalid JSON from {url}: {e}", url=url, page=page) from e

    async def fetch_profile_page(self, username: str) -> str:
        """Fetch the raw HTML of a user's profile page.

        Args:
            username: GitHub username, used as one path segment

        Returns:
            The page body as text
        """
        response = await self._get(self.profile_url(username))
        return response.text

    async def fetch_public_repo_count(self, username: str) -> int:
        """Fetch ``public_repos`` from the user-info endpoint.

        Raises:
            UpstreamDecodeError: If the body has no integer ``public_repos``
        """
        url = self.user_url(username)
        response = await self._get(url, headers={"Accept": API_ACCEPT})
        payload = self._json(response, url)
        try:
            user = GithubUser.model_validate(payload)
        except ValidationError as e:
            raise UpstreamDecodeError(f"Unexpected user payload from {url}: {e}", url=url) from e
        return user.public_repos

    async def fetch_repo_page(self, username: str, page: int) -> list[GithubRepoRecord]:
        """Fetch one page of the user's repository listing.

        Args:
            username: GitHub username
            page: 1-based page number

        Returns:
            Repository records in upstream order

        Raises:
            UpstreamDecodeError: If the body is not a list of repository objects
        """
        url = self.repos_url(username)
        response = await self._get(
            url,
            params={"page": page, "per_page": self._page_size},
            headers={"Accept": API_ACCEPT},
            page=page,
        )
        payload = self._json(response, url, page=page)
        if not isinstance(payload, list):
            raise UpstreamDecodeError(
                f"Expected a list of repositories from {url}, got {type(payload).__name__}",
                url=url,
                page=page,
            )
        try:
            return [GithubRepoRecord.model_validate(item) for item in payload]
        except ValidationError as e:
            raise UpstreamDecodeError(f"Unexpected repository payload from {url}: {e}", url=url, page=page) from e

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
