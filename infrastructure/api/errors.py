"""Riot API failure taxonomy."""
from __future__ import annotations

from typing import Optional


class RiotAPIError(Exception):
    """Base class for every failed Riot API request."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class TransientUpstreamError(RiotAPIError):
    """Retryable status (rate limited, bad gateway, unavailable)."""

    def __init__(self, status_code: int, url: str = "") -> None:
        super().__init__(f"transient HTTP {status_code} for {url}", status_code, url)


class FatalRequestError(RiotAPIError):
    """Any other failure; never retried."""

    def __init__(self, status_code: Optional[int], url: str = "", detail: str = "") -> None:
        what = f"HTTP {status_code}" if status_code is not None else "request failed"
        message = f"{what} for {url}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, status_code, url)
        self.detail = detail


class RateLimitExceeded(RiotAPIError):
    """The retry budget ran out while the upstream kept answering with transient statuses."""

    def __init__(self, attempts: int, last_status: Optional[int] = None, url: str = "") -> None:
        super().__init__(
            f"rate-limit retries exceeded after {attempts} attempts (last HTTP {last_status})",
            last_status,
            url,
        )
        self.attempts = attempts
