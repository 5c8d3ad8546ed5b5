"""Single-flight call de-duplication for asyncio."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Collapse concurrent calls that share a key into one execution.

    The first caller for a key (the leader) runs the coroutine; callers
    arriving while it is in flight wait for the leader's outcome, result
    or exception. Once the leader finishes the key is released, so later
    calls run again.

    Example:
        ```python
        group: SingleFlight[list[ProjectEntity]] = SingleFlight()
        projects = await group.do("octocat", lambda: pipeline("octocat"))
        ```
    """

    def __init__(self) -> None:
        self._calls: dict[str, asyncio.Future[T]] = {}

    async def do(self, key: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Run ``fn`` for ``key`` unless a call for the same key is in flight.

        Args:
            key: De-duplication key
            fn: Zero-argument coroutine factory

        Returns:
            The leader's result
        """
        inflight = self._calls.get(key)
        if inflight is not None:
            logger.debug("Joining in-flight call for %s", key)
            # shield so a cancelled follower does not cancel the leader's future
            return await asyncio.shield(inflight)

        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._calls[key] = future
        try:
            result = await fn()
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            future.set_exception(e)
            # Mark retrieved so an unobserved failure is not logged by asyncio
            future.exception()
            raise
        else:
            future.set_result(result)
            return result
        finally:
            del self._calls[key]

    def in_flight(self, key: str) -> bool:
        return key in self._calls
