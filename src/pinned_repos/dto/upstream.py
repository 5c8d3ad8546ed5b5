"""DTOs for the GitHub REST payloads we consume.

Only the fields the pipeline reads are declared; everything else
GitHub sends is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from pinned_repos.entities import ProjectEntity


class GithubUser(BaseModel):
    """Subset of ``GET /users/{username}``."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None
    public_repos: int = Field(..., ge=0)


class GithubRepoRecord(BaseModel):
    """Subset of one item of ``GET /users/{username}/repos``."""

    model_config = ConfigDict(extra="ignore")

    name: str
    html_url: str
    description: str | None = None
    fork: bool = False
    is_template: bool = False
    created_at: str
    updated_at: str
    language: str | None = None
    stargazers_count: int = 0
    topics: list[str] = Field(default_factory=list)

    def to_entity(self) -> ProjectEntity:
        """Project the upstream record into the flattened domain shape."""
        return ProjectEntity(
            repo_name=self.name,
            repo_link=self.html_url,
            repo_description=self.description,
            is_fork=self.fork,
            is_template=self.is_template,
            created_at=self.created_at,
            last_update=self.updated_at,
            main_language=self.language,
            star_amount=self.stargazers_count,
            topics=tuple(self.topics),
        )
