"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract and the shape
of the GitHub payloads we consume.

Internal domain logic should use entities from the entities package.
"""

from .requests import PinnedProjectsRequest
from .responses import ErrorResponse, HealthCheckResponse, ProjectDataItem
from .upstream import GithubRepoRecord, GithubUser

__all__ = [
    "PinnedProjectsRequest",
    "ProjectDataItem",
    "ErrorResponse",
    "HealthCheckResponse",
    "GithubRepoRecord",
    "GithubUser",
]
