"""In-process implementation of ResultStore."""

import time
from collections.abc import Callable, Sequence

from pinned_repos.config import settings
from pinned_repos.entities import CachedResultEntity, ProjectEntity


class InMemoryResultStore:
    """Dictionary-backed result store.

    This class satisfies the ResultStore protocol through structural
    typing - no explicit inheritance needed.

    Entries live for the lifetime of the process. Nothing is evicted
    proactively; stale entries are only dropped when a reader finds them.
    """

    def __init__(self, ttl: int | None = None, clock: Callable[[], float] = time.time) -> None:
        """Initialize the store.

        Args:
            ttl: Expiry window in seconds. Defaults to settings.cache_ttl.
            clock: Source of the current Unix time.
        """
        self._ttl = ttl or settings.cache_ttl
        self._clock = clock
        self._entries: dict[str, CachedResultEntity] = {}

    @classmethod
    def create(cls, ttl: int | None = None) -> "InMemoryResultStore":
        return cls(ttl=ttl)

    @property
    def ttl(self) -> int:
        return self._ttl

    def get(self, username: str) -> CachedResultEntity | None:
        return self._entries.get(username)

    def set(self, username: str, projects: Sequence[ProjectEntity]) -> CachedResultEntity:
        entry = CachedResultEntity(data=tuple(projects), created_at=self._clock())
        self._entries[username] = entry
        return entry

    def is_expired(self, entry: CachedResultEntity) -> bool:
        return entry.created_at + self._ttl <= self._clock()

    def delete(self, username: str) -> bool:
        return self._entries.pop(username, None) is not None

    def health_check(self) -> bool:
        return True
