"""Result store protocol.

Defines the interface for any backend that holds computed pinned
project lists keyed by username, with a fixed time-to-live.

Implementations can include:
- In-process dictionary (default)
- Redis
- Any other key-value store
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pinned_repos.entities import CachedResultEntity, ProjectEntity


@runtime_checkable
class ResultStore(Protocol):
    """Protocol for result cache backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Example:
        ```python
        store: ResultStore = InMemoryResultStore(ttl=600)
        store: ResultStore = RedisResultStore.create()
        ```
    """

    @property
    def ttl(self) -> int:
        """Return the expiry window in seconds."""
        ...

    def get(self, username: str) -> CachedResultEntity | None:
        """Look up the stored result for a username.

        Expired entries are still returned; callers decide with
        ``is_expired``.

        Args:
            username: The key

        Returns:
            The stored entry, or None if nothing is stored
        """
        ...

    def set(self, username: str, projects: Sequence[ProjectEntity]) -> CachedResultEntity:
        """Store a result, replacing any previous entry.

        Args:
            username: The key
            projects: The computed projects

        Returns:
            The stored entry, stamped with the current time
        """
        ...

    def is_expired(self, entry: CachedResultEntity) -> bool:
        """Check whether an entry is older than the expiry window.

        Args:
            entry: A previously stored entry

        Returns:
            True if the entry must not be served
        """
        ...

    def delete(self, username: str) -> bool:
        """Remove the entry for a username.

        Args:
            username: The key

        Returns:
            True if an entry was removed
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
