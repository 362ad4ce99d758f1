"""Domain layer - Business entities, enums, and interfaces."""
from .entities import (
    Player,
    Account,
    MatchDetail,
    ProgressBucket,
    BucketProgress,
    ProgressReport,
    AggregateResult,
)
from .enums import Region, QueueType
from .interfaces import IAccountRepository, IMatchRepository

__all__ = [
    # Entities
    'Player',
    'Account',
    'MatchDetail',
    'ProgressBucket',
    'BucketProgress',
    'ProgressReport',
    'AggregateResult',
    # Enums
    'Region',
    'QueueType',
    # Interfaces
    'IAccountRepository',
    'IMatchRepository',
]
