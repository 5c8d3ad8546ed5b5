"""Pinned projects service for core business logic.

This service orchestrates the pipeline by coordinating the GitHub
source (network), the name extractor (parsing) and the optional
result store (cache).
"""

import logging
import math
from collections.abc import Sequence

from pinned_repos.config import settings
from pinned_repos.entities import ProjectEntity
from pinned_repos.protocols import GithubSource, NameExtractor, ResultStore
from pinned_repos.utils import SingleFlight

logger = logging.getLogger(__name__)


class PinnedProjectsService:
    """Core pinned projects orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - GithubSource: httpx client, or a fake in tests
    - NameExtractor: BeautifulSoup scraper, or anything else
    - ResultStore: in-memory, Redis, or None for no caching

    Example:
        ```python
        from pinned_repos.repositories import GithubClient, InMemoryResultStore, SoupPinnedNameExtractor
        from pinned_repos.services import PinnedProjectsService

        service = PinnedProjectsService.create(
            github=GithubClient.create(),
            extractor=SoupPinnedNameExtractor.create(),
            result_store=InMemoryResultStore.create(),
        )
        projects = await service.get_pinned_projects("octocat")
        ```
    """

    def __init__(
        self,
        github: GithubSource,
        extractor: NameExtractor,
        result_store: ResultStore | None = None,
        page_size: int | None = None,
        preserve_pinned_order: bool | None = None,
    ) -> None:
        """Initialize the pinned projects service.

        Args:
            github: Upstream source (required).
            extractor: Pinned-name extractor (required).
            result_store: Result cache. None disables caching.
            page_size: Listing page size. Defaults to settings.
            preserve_pinned_order: Re-sort results to pinned order. Defaults to settings.
        """
        self._github = github
        self._extractor = extractor
        self._store = result_store
        self._page_size = page_size or settings.github_page_size
        if preserve_pinned_order is None:
            preserve_pinned_order = settings.preserve_pinned_order
        self._preserve_pinned_order = preserve_pinned_order
        self._flights: SingleFlight[list[ProjectEntity]] = SingleFlight()

    @classmethod
    def create(
        cls,
        github: GithubSource,
        extractor: NameExtractor,
        result_store: ResultStore | None = None,
        page_size: int | None = None,
        preserve_pinned_order: bool | None = None,
    ) -> "PinnedProjectsService":
        """Factory method to create PinnedProjectsService with sensible defaults.

        Args:
            github: Upstream source (required).
            extractor: Pinned-name extractor (required).
            result_store: Result cache. None disables caching.
            page_size: Listing page size. If None, uses settings.
            preserve_pinned_order: Pinned-order sorting. If None, uses settings.

        Returns:
            Configured PinnedProjectsService instance
        """
        return cls(
            github=github,
            extractor=extractor,
            result_store=result_store,
            page_size=page_size,
            preserve_pinned_order=preserve_pinned_order,
        )

    async def get_pinned_projects(self, username: str) -> list[ProjectEntity]:
        """Return metadata for every pinned project of a user.

        Business logic:
        1. Serve a non-expired cached result if there is one
        2. Otherwise run the pipeline once per username, however many
           requests are waiting for it
        3. Cache non-empty results

        Args:
            username: GitHub username

        Returns:
            Projects in listing order (or pinned order, if configured)

        Raises:
            UpstreamError: If any upstream call fails
        """
        cached = self._lookup_cache(username)
        if cached is not None:
            return cached

        projects = await self._flights.do(username, lambda: self._run_pipeline(username))
        return list(projects)

    def _lookup_cache(self, username: str) -> list[ProjectEntity] | None:
        if self._store is None:
            return None

        entry = self._store.get(username)
        if entry is None:
            logger.debug("Cache miss for %s", username)
            return None

        if self._store.is_expired(entry):
            logger.debug("Cache entry for %s expired", username)
            self._store.delete(username)
            return None

        logger.debug("Cache hit for %s", username)
        return list(entry.data)

    async def _run_pipeline(self, username: str) -> list[ProjectEntity]:
        markup = await self._github.fetch_profile_page(username)
        names = self._extractor.extract_pinned_names(markup)
        projects = await self.fetch_repo_metadata(username, names)

        # An empty name list is never cached
        if self._store is not None and names:
            self._store.set(username, projects)

        return projects

    async def fetch_repo_metadata(self, username: str, names: Sequence[str]) -> list[ProjectEntity]:
        """Fetch and project listing records for the given repository names.

        Business logic:
        1. Return immediately, with no network access, for an empty name list
        2. Read the user's public repository count
        3. Fetch ceil(count / page_size) listing pages sequentially
        4. Keep records whose name was requested and project them

        Args:
            username: GitHub username
            names: Repository names to keep

        Returns:
            Matching projects in upstream listing order (or pinned order, if configured)

        Raises:
            UpstreamError: If any upstream call fails; page failures carry the page number
        """
        if not names:
            return []

        repo_count = await self._github.fetch_public_repo_count(username)
        page_count = math.ceil(repo_count / self._page_size)

        records = []
        for page in range(1, page_count + 1):
            records.extend(await self._github.fetch_repo_page(username, page))

        wanted = set(names)
        projects = [record.to_entity() for record in records if record.name in wanted]

        if self._preserve_pinned_order:
            position = {name: index for index, name in reversed(list(enumerate(names)))}
            projects.sort(key=lambda project: position[project.repo_name])

        logger.info(
            "Resolved %d of %d pinned projects for %s across %d page(s)",
            len(projects),
            len(wanted),
            username,
            page_count,
        )
        return projects

    async def is_healthy(self) -> bool:
        """Check if the result store is reachable.

        Returns:
            True when caching is disabled or the store answers
        """
        if self._store is None:
            return True
        return self._store.health_check()
