from __future__ import annotations

import asyncio
import math
import os
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional

from core.env import env_float, env_int, env_int_set
from core.logging.logger import StructuredLogger, get_logger
from .errors import RateLimitExceeded, TransientUpstreamError

Supplier = Callable[[], Awaitable[Any]]
Sleeper = Callable[[float], Awaitable[Any]]

DEFAULT_RETRYABLE_STATUSES = frozenset({429, 502, 503})

_log = get_logger(__name__, service="riot-api")


@dataclass(slots=True)
class RetryPolicy:
    """Capped exponential backoff for transient upstream statuses.

    Attempt ``n`` (0-based) that fails transiently waits
    ``min(backoff_cap_ms, backoff_base_ms * backoff_factor ** n)`` before
    attempt ``n + 1``. Non-transient errors are re-raised untouched.
    """

    max_attempts: int = 12
    backoff_base_ms: int = 1000
    backoff_factor: float = 1.6
    backoff_cap_ms: int = 10_000
    retryable_statuses: frozenset[int] = DEFAULT_RETRYABLE_STATUSES
    sleep: Sleeper = field(default=asyncio.sleep, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_factor <= 1:
            raise ValueError("backoff_factor must be greater than 1")
        if self.backoff_base_ms < 0 or self.backoff_cap_ms < 0:
            raise ValueError("backoff delays must not be negative")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RetryPolicy":
        """Create policy from environment variables."""
        env = os.environ if env is None else env
        return cls(
            max_attempts=env_int(env, "RETRY_MAX_ATTEMPTS", 12),
            backoff_base_ms=env_int(env, "RETRY_BACKOFF_MS", 1000),
            backoff_factor=env_float(env, "RETRY_BACKOFF_FACTOR", 1.6),
            backoff_cap_ms=env_int(env, "RETRY_BACKOFF_CAP_MS", 10_000),
            retryable_statuses=env_int_set(env, "RETRY_STATUSES", DEFAULT_RETRYABLE_STATUSES),
        )

    def is_retryable(self, status_code: Optional[int]) -> bool:
        return status_code is not None and status_code in self.retryable_statuses

    def delay_ms(self, attempt: int) -> int:
        return int(min(self.backoff_cap_ms, self.backoff_base_ms * math.pow(self.backoff_factor, attempt)))

    def delays_ms(self) -> list[int]:
        """Every wait a fully exhausted run would take, in order."""
        return [self.delay_ms(n) for n in range(self.max_attempts - 1)]

    async def run(
        self,
        supplier: Supplier,
        *,
        logger: StructuredLogger | None = None,
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Execute an async supplier, retrying only on TransientUpstreamError."""
        log = logger or _log
        last: TransientUpstreamError | None = None
        for attempt in range(self.max_attempts):
            try:
                return await supplier()
            except TransientUpstreamError as e:
                last = e
                if attempt + 1 >= self.max_attempts:
                    break
                wait_ms = self.delay_ms(attempt)
                log.warning(
                    lambda: f"Retry {attempt + 1} for {e.status_code}... waiting {wait_ms}ms",
                    extra={"context": context or {}},
                )
                await self.sleep(wait_ms / 1000.0)
        raise RateLimitExceeded(
            self.max_attempts,
            last.status_code if last else None,
            last.url if last else "",
        )
