"""Infrastructure API module."""
from .errors import FatalRequestError, RateLimitExceeded, RiotAPIError, TransientUpstreamError
from .rate_limiter import RateLimiter
from .retry_policy import RetryPolicy
from .riot_client import RiotAPIClient

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'RetryPolicy',
    'RiotAPIError',
    'TransientUpstreamError',
    'FatalRequestError',
    'RateLimitExceeded',
]
