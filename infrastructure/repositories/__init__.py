"""Infrastructure repositories."""
from .account_repository import AccountRepository
from .match_repository import MatchRepository

__all__ = [
    'AccountRepository',
    'MatchRepository',
]
