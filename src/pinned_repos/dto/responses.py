"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pinned_repos.entities import ProjectEntity


class ProjectDataItem(BaseModel):
    """One pinned project as returned by ``GET /get``.

    Serialized with camelCase keys (``repoName``, ``starAmount``, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    repo_name: str = Field(..., description="Repository name")
    repo_link: str = Field(..., description="Browser URL of the repository")
    repo_description: str | None = Field(None, description="Repository description, if any")
    is_fork: bool = Field(..., description="Whether the repository is a fork")
    is_template: bool = Field(..., description="Whether the repository is a template")
    created_at: str = Field(..., description="Creation timestamp (ISO 8601)")
    last_update: str = Field(..., description="Last update timestamp (ISO 8601)")
    main_language: str | None = Field(None, description="Primary language, if detected")
    star_amount: int = Field(..., description="Stargazer count", ge=0)
    topics: list[str] = Field(default_factory=list, description="Repository topics")

    @classmethod
    def from_entity(cls, entity: ProjectEntity) -> "ProjectDataItem":
        return cls(
            repo_name=entity.repo_name,
            repo_link=entity.repo_link,
            repo_description=entity.repo_description,
            is_fork=entity.is_fork,
            is_template=entity.is_template,
            created_at=entity.created_at,
            last_update=entity.last_update,
            main_language=entity.main_language,
            star_amount=entity.star_amount,
            topics=list(entity.topics),
        )


class ErrorResponse(BaseModel):
    """Structured error body for upstream failures."""

    error: str = Field(..., description="Error kind: upstream_status, upstream_decode or upstream_transport")
    message: str = Field(..., description="Human-readable error message")
    url: str | None = Field(None, description="Upstream URL that failed")
    status_code: int | None = Field(None, description="Upstream HTTP status, for upstream_status errors")
    page: int | None = Field(None, description="Listing page number, when the failure was inside the page loop")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_backend: str = Field(..., description="Configured result cache backend")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
