"""Cached result domain entity."""

from dataclasses import dataclass

from .project import ProjectEntity


@dataclass(frozen=True)
class CachedResultEntity:
    """A computed result held by a result store.

    Attributes:
        data: The projects returned for the username
        created_at: When the result was stored (Unix timestamp)
    """

    data: tuple[ProjectEntity, ...]
    created_at: float
