"""Request pacing matching Riot API personal-key limits."""
import asyncio
import time
from collections import deque
from typing import Any, Awaitable, Callable, Deque
import logging

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Sequential pacer with two constraints:
      - Spacing : at least ``min_interval_s`` between consecutive requests
      - Window  : at most N requests per 120 seconds (Riot's 2-min window)

    Personal keys allow 20/s and 100/120s; the defaults stay below both.
    """

    def __init__(
        self,
        min_interval_s: float = 0.4,
        requests_per_2_min: int = 90,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.min_interval_s = min_interval_s
        self.requests_per_2_min = requests_per_2_min
        self._clock = clock
        self._sleep = sleep

        self._last: float | None = None
        self._times_2min: Deque[float] = deque()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = self._clock()

                # clean 120-second window
                while self._times_2min and now - self._times_2min[0] > 120.0:
                    self._times_2min.popleft()

                wait = 0.0
                if self._last is not None:
                    wait = max(wait, self.min_interval_s - (now - self._last))
                if len(self._times_2min) >= self.requests_per_2_min:
                    wait = max(wait, 120.0 - (now - self._times_2min[0]) + 0.01)

                if wait <= 0:
                    self._last = now
                    self._times_2min.append(now)
                    return

                logger.debug(f"Pacing — waiting {wait:.2f}s")
                await self._sleep(wait)

