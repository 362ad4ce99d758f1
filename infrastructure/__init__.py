"""Infrastructure layer - API clients and repositories."""
from .api import (
    RiotAPIClient,
    RateLimiter,
    RetryPolicy,
    RiotAPIError,
    TransientUpstreamError,
    FatalRequestError,
    RateLimitExceeded,
)
from .repositories import AccountRepository, MatchRepository

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'RetryPolicy',
    'RiotAPIError',
    'TransientUpstreamError',
    'FatalRequestError',
    'RateLimitExceeded',
    'AccountRepository',
    'MatchRepository',
]
