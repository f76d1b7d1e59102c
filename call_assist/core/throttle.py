"""
Minimum-interval throttle for outbound generative backend calls.
"""
import asyncio
import time
from typing import Awaitable, Callable, Optional

import structlog

logger = structlog.get_logger(__name__)


class RequestThrottle:
    """
    Enforces a minimum spacing between consecutive backend calls.

    The elapsed-time check, the optional sleep and the timestamp update run
    under one lock, so concurrent callers are spaced out in acquisition order
    and never share a window.
    """

    def __init__(
        self,
        min_interval_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if min_interval_seconds < 0:
            raise ValueError("min_interval_seconds must be non-negative")
        self.min_interval_seconds = min_interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_call_time: Optional[float] = None

    @property
    def last_call_time(self) -> Optional[float]:
        """Clock reading recorded by the most recent acquisition."""
        return self._last_call_time

    async def acquire(self) -> float:
        """
        Wait until a backend call is allowed.

        Returns:
            The clock reading recorded as the new last-call time
        """
        async with self._lock:
            if self._last_call_time is not None:
                elapsed = self._clock() - self._last_call_time
                remaining = self.min_interval_seconds - elapsed
                if remaining > 0:
                    logger.debug(
                        "Throttling backend call",
                        wait_ms=round(remaining * 1000, 2),
                        min_interval_ms=round(self.min_interval_seconds * 1000, 2),
                    )
                    await self._sleep(remaining)

            self._last_call_time = self._clock()
            return self._last_call_time

    def reset(self) -> None:
        """Forget the last recorded call."""
        self._last_call_time = None
