import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from pinned_repos import __version__
from pinned_repos.api.dependencies import HandlerDep, build_lifespan
from pinned_repos.config import Settings, configure_logging, settings
from pinned_repos.dto import HealthCheckResponse
from pinned_repos.handlers import INCORRECT_REQUEST
from pinned_repos.protocols import ResultStore


def create_app(
    config: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    result_store: ResultStore | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Application settings. Defaults to the global settings.
        transport: Optional httpx transport for outbound GitHub calls.
        result_store: Optional result store overriding CACHE_BACKEND.

    Returns:
        The configured FastAPI app
    """
    config = config or settings

    app = FastAPI(
        title="Pinned Repos API",
        description="Pinned GitHub repositories enriched with listing metadata",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=build_lifespan(config, transport=transport, result_store=result_store),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=[config.cors_allow_origin],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def incorrect_route(request: Request, exc: StarletteHTTPException) -> Response:
        """Answer unknown routes and methods with the fixed validation error."""
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            handler = getattr(request.app.state, "pinned_handler", None)
            if handler is not None:
                return handler.incorrect_request()
            return PlainTextResponse(INCORRECT_REQUEST, status_code=status.HTTP_400_BAD_REQUEST)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.get("/get")
    async def get_pinned(handler: HandlerDep, u: str | None = None, user: str | None = None) -> Response:
        """Return the pinned projects of ``u`` (or ``user``) as a JSON array."""
        return await handler.get_pinned(u=u, user=user)

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(
        "pinned_repos.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
