"""HTTP handlers for pinned project lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from pinned_repos.config import settings
from pinned_repos.dto import ErrorResponse, HealthCheckResponse, PinnedProjectsRequest, ProjectDataItem
from pinned_repos.errors import InvalidRequestError, UpstreamError, UpstreamTransportError
from pinned_repos.services import PinnedProjectsService

logger = logging.getLogger(__name__)

INCORRECT_REQUEST = "Incorrect request"


class PinnedHandler:
    """HTTP handlers for pinned project lookups.

    This handler delegates business logic to PinnedProjectsService
    and handles HTTP-specific concerns like:
    - Validating the username query parameter
    - Converting entities to DTOs
    - Mapping upstream errors to distinct responses
    - Attaching the cross-origin header

    Example:
        ```python
        handler = PinnedHandler(pinned_service=service)

        @app.get("/get")
        async def get_pinned(u: str | None = None, user: str | None = None):
            return await handler.get_pinned(u=u, user=user)
        ```
    """

    def __init__(
        self,
        pinned_service: PinnedProjectsService,
        allow_origin: str | None = None,
        cache_backend: str | None = None,
    ) -> None:
        """Initialize the pinned handler.

        Args:
            pinned_service: The service for business logic (required).
            allow_origin: Access-Control-Allow-Origin value. Defaults to settings.
            cache_backend: Cache backend name reported by the health check.
        """
        self._service = pinned_service
        self._allow_origin = allow_origin or settings.cors_allow_origin
        self._cache_backend = cache_backend or settings.cache_backend

    @property
    def cors_headers(self) -> dict[str, str]:
        return {"Access-Control-Allow-Origin": self._allow_origin}

    def incorrect_request(self) -> PlainTextResponse:
        """Build the fixed validation-error response."""
        return PlainTextResponse(
            INCORRECT_REQUEST,
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=self.cors_headers,
        )

    async def get_pinned(self, u: str | None = None, user: str | None = None) -> Response:
        """Handle GET /get requests.

        Args:
            u: Username (preferred alias)
            user: Username (fallback alias)

        Returns:
            200 with a JSON array of projects, 400 on a missing username,
            502/504 with an ErrorResponse body on upstream failure
        """
        try:
            request = PinnedProjectsRequest.from_query(u=u, user=user)
        except InvalidRequestError:
            return self.incorrect_request()

        try:
            projects = await self._service.get_pinned_projects(request.username)
        except UpstreamError as e:
            logger.warning("Pinned lookup for %s failed: %s", request.username, e)
            error = ErrorResponse(**e.to_dict())
            status_code = (
                status.HTTP_504_GATEWAY_TIMEOUT
                if isinstance(e, UpstreamTransportError)
                else status.HTTP_502_BAD_GATEWAY
            )
            return JSONResponse(error.model_dump(), status_code=status_code, headers=self.cors_headers)

        items = [ProjectDataItem.from_entity(project).model_dump(by_alias=True) for project in projects]
        return JSONResponse(items, headers=self.cors_headers)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with cache status
        """
        is_healthy = await self._service.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_backend=self._cache_backend,
            cache_healthy=is_healthy,
        )
