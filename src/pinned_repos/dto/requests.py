"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field, ValidationError

from pinned_repos.errors import InvalidRequestError


class PinnedProjectsRequest(BaseModel):
    """Request DTO for ``GET /get``.

    The username may arrive as ``u`` or ``user``; ``u`` wins when both
    are present and non-empty.
    """

    username: str = Field(..., description="GitHub username", min_length=1)

    @classmethod
    def from_query(cls, u: str | None = None, user: str | None = None) -> "PinnedProjectsRequest":
        """Build the request from the two accepted query parameter aliases.

        Raises:
            InvalidRequestError: If neither alias carries a non-empty value
        """
        try:
            return cls(username=u or user or "")
        except ValidationError as e:
            raise InvalidRequestError("A non-empty 'u' or 'user' query parameter is required") from e
