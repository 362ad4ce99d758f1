"""Domain entities."""
from .player import Player, Account
from .match import MatchDetail
from .progress import (
    COMPLETE_STATUS,
    ERROR_STATUS,
    AggregateResult,
    BucketProgress,
    ProgressBucket,
    ProgressReport,
)

__all__ = [
    'Player',
    'Account',
    'MatchDetail',
    'ProgressBucket',
    'BucketProgress',
    'ProgressReport',
    'AggregateResult',
    'COMPLETE_STATUS',
    'ERROR_STATUS',
]
