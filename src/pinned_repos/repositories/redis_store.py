"""Redis implementation of ResultStore.

Entries are stored as JSON strings under ``{prefix}:{username}``. The
creation timestamp travels inside the value so expiry is decided the
same way as in the in-memory store; the Redis key TTL is only there so
abandoned usernames eventually disappear.
"""

import json
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import asdict

import redis

from pinned_repos.config import get_redis_client, settings
from pinned_repos.entities import CachedResultEntity, ProjectEntity

logger = logging.getLogger(__name__)


class RedisResultStore:
    """Redis-backed result store.

    This class satisfies the ResultStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        ttl: int | None = None,
        key_prefix: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the Redis result store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            ttl: Expiry window in seconds. Defaults to settings.cache_ttl.
            key_prefix: Key namespace. Defaults to settings.cache_key_prefix.
            clock: Source of the current Unix time.
        """
        self._client = redis_client if redis_client is not None else get_redis_client()
        self._ttl = ttl or settings.cache_ttl
        self._prefix = key_prefix or settings.cache_key_prefix
        self._clock = clock

    @classmethod
    def create(
        cls,
        ttl: int | None = None,
        key_prefix: str | None = None,
    ) -> "RedisResultStore":
        """Factory method to create RedisResultStore with defaults.

        Args:
            ttl: Expiry window in seconds. If None, uses settings.
            key_prefix: Redis key prefix. If None, uses settings.

        Returns:
            Configured RedisResultStore
        """
        return cls(ttl=ttl, key_prefix=key_prefix)

    @property
    def ttl(self) -> int:
        return self._ttl

    def _key(self, username: str) -> str:
        return f"{self._prefix}:{username}"

    def get(self, username: str) -> CachedResultEntity | None:
        raw = self._client.get(self._key(username))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode()

        try:
            payload = json.loads(raw)
            return CachedResultEntity(
                data=tuple(
                    ProjectEntity(**{**item, "topics": tuple(item.get("topics", ()))})
                    for item in payload["data"]
                ),
                created_at=float(payload["created_at"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            # Unreadable entries are treated as a miss and overwritten on the next store
            logger.warning("Discarding unreadable cache entry %s: %s", self._key(username), e)
            return None

    def set(self, username: str, projects: Sequence[ProjectEntity]) -> CachedResultEntity:
        entry = CachedResultEntity(data=tuple(projects), created_at=self._clock())
        value = json.dumps(
            {
                "created_at": entry.created_at,
                "data": [asdict(project) for project in entry.data],
            }
        )
        self._client.set(self._key(username), value, ex=self._ttl)
        return entry

    def is_expired(self, entry: CachedResultEntity) -> bool:
        return entry.created_at + self._ttl <= self._clock()

    def delete(self, username: str) -> bool:
        result: int = self._client.delete(self._key(username))  # type: ignore[assignment]
        return result > 0

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
