"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Request

from pinned_repos.config import Settings, get_redis_client
from pinned_repos.handlers import PinnedHandler
from pinned_repos.protocols import ResultStore
from pinned_repos.repositories import (
    GithubClient,
    InMemoryResultStore,
    RedisResultStore,
    SoupPinnedNameExtractor,
)
from pinned_repos.services import PinnedProjectsService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> PinnedHandler:
    """Dependency injection for PinnedHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PinnedHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "pinned_handler", None)
    if handler is None:
        raise RuntimeError("PinnedHandler not initialized. Check lifespan setup.")
    return handler


def build_result_store(config: Settings) -> ResultStore | None:
    """Create the result store selected by CACHE_BACKEND.

    Returns:
        The store, or None when caching is disabled
    """
    if config.cache_backend == "none":
        return None
    if config.cache_backend == "redis":
        return RedisResultStore(
            redis_client=get_redis_client(config),
            ttl=config.cache_ttl,
            key_prefix=config.cache_key_prefix,
        )
    return InMemoryResultStore(ttl=config.cache_ttl)


def build_lifespan(
    config: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
    result_store: ResultStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Create the lifespan context manager for the FastAPI app.

    Args:
        config: Application settings
        transport: Optional httpx transport for the GitHub client
        result_store: Optional pre-built store, overriding CACHE_BACKEND

    Returns:
        A lifespan callable for FastAPI
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        1. Repositories (GitHub client, extractor, result store)
        2. Service (business logic) - stored in app.state.pinned_service
        3. Handler (HTTP endpoints) - stored in app.state.pinned_handler

        Cleanup:
            Closes the HTTP client and removes all services from app.state
        """
        github = GithubClient(
            base_url=config.github_base_url,
            api_url=config.github_api_url,
            user_agent=config.github_user_agent,
            page_size=config.github_page_size,
            timeout=config.http_timeout,
            transport=transport,
        )
        extractor = SoupPinnedNameExtractor.create(selector_version=config.pinned_selector_version)
        store = result_store if result_store is not None else build_result_store(config)

        pinned_service = PinnedProjectsService.create(
            github=github,
            extractor=extractor,
            result_store=store,
            page_size=config.github_page_size,
            preserve_pinned_order=config.preserve_pinned_order,
        )
        pinned_handler = PinnedHandler(
            pinned_service=pinned_service,
            allow_origin=config.cors_allow_origin,
            cache_backend=type(store).__name__ if result_store is not None else config.cache_backend,
        )

        # Store in app.state (FastAPI pattern)
        app.state.github = github
        app.state.result_store = store
        app.state.pinned_service = pinned_service
        app.state.pinned_handler = pinned_handler

        logger.info("Pinned repos service initialized")
        logger.info("Cache backend: %s (ttl %ss)", config.cache_backend, config.cache_ttl)
        logger.info("Selector version: %s, result order: %s", extractor.selector_version, config.result_order)

        yield

        await github.close()
        del app.state.pinned_handler
        del app.state.pinned_service
        del app.state.result_store
        del app.state.github
        logger.info("Pinned repos service shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PinnedHandler, Depends(get_handler)]
