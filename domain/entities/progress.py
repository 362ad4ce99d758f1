"""Progress buckets, evaluation reports and per-player results."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .player import Player

COMPLETE_STATUS = "✅ complete"
ERROR_STATUS = "❌ Error"


@dataclass(frozen=True)
class ProgressBucket:
    """A named time window (e.g. a season split) with its own match goal.

    A bucket covers matches ending at or after ``cutoff`` and before the next
    bucket's cutoff.
    """

    name: str
    cutoff: datetime
    requirement: int

    @property
    def cutoff_ts(self) -> int:
        return int(self.cutoff.timestamp())


@dataclass(slots=True)
class BucketProgress:
    bucket: ProgressBucket
    count: int

    @property
    def met(self) -> bool:
        return self.count >= self.bucket.requirement

    @property
    def shortfall(self) -> int:
        return max(0, self.bucket.requirement - self.count)


@dataclass(slots=True)
class ProgressReport:
    buckets: list[BucketProgress]
    total: int
    total_requirement: int
    status: str = ""

    @property
    def total_met(self) -> bool:
        return self.total >= self.total_requirement

    @property
    def total_shortfall(self) -> int:
        return max(0, self.total_requirement - self.total)

    @property
    def complete(self) -> bool:
        return self.total_met and all(b.met for b in self.buckets)


@dataclass(slots=True)
class AggregateResult:
    """Final per-player record handed to the reporter."""

    player: Player
    counts: dict[str, int]
    report: Optional[ProgressReport] = None
    first_match_at: Optional[datetime] = None
    last_match_at: Optional[datetime] = None
    status: str = ""
    error: Optional[str] = None

    @property
    def total_matches(self) -> int:
        return sum(self.counts.values())

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def failure(cls, player: Player, buckets: tuple[ProgressBucket, ...] | list[ProgressBucket], error: str) -> "AggregateResult":
        """Zero-valued record standing in for a player whose aggregation aborted."""
        return cls(
            player=player,
            counts={b.name: 0 for b in buckets},
            status=ERROR_STATUS,
            error=error,
        )
