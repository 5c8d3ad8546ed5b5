"""Pinned Repos - GitHub pinned repositories enriched with listing metadata.

This package provides a layered architecture for the lookup pipeline:

Layers:
    - protocols: Interface contracts (GithubSource, NameExtractor, ResultStore)
    - repositories: Data access implementations
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API and upstream contracts)
    - entities: Domain models (internal)

Usage:
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

For HTTP API:
    ```python
    from pinned_repos.api.app import app
    ```
"""

__version__ = "0.1.0"

from pinned_repos.config import get_redis_client, settings  # noqa: E402
from pinned_repos.dto import PinnedProjectsRequest, ProjectDataItem  # noqa: E402
from pinned_repos.entities import CachedResultEntity, ProjectEntity  # noqa: E402
from pinned_repos.errors import (  # noqa: E402
    InvalidRequestError,
    PinnedReposError,
    UpstreamDecodeError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from pinned_repos.handlers import PinnedHandler  # noqa: E402
from pinned_repos.protocols import GithubSource, NameExtractor, ResultStore  # noqa: E402
from pinned_repos.repositories import (  # noqa: E402
    GithubClient,
    InMemoryResultStore,
    RedisResultStore,
    SoupPinnedNameExtractor,
)
from pinned_repos.services import PinnedProjectsService  # noqa: E402

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "GithubSource",
    "NameExtractor",
    "ResultStore",
    # Services (business logic)
    "PinnedProjectsService",
    # Handlers (HTTP)
    "PinnedHandler",
    # Repositories (data access)
    "GithubClient",
    "InMemoryResultStore",
    "RedisResultStore",
    "SoupPinnedNameExtractor",
    # Entities (domain models)
    "CachedResultEntity",
    "ProjectEntity",
    # DTOs (API contracts)
    "PinnedProjectsRequest",
    "ProjectDataItem",
    # Errors
    "PinnedReposError",
    "InvalidRequestError",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamDecodeError",
    "UpstreamTransportError",
]
