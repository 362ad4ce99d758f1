"""Match aggregation - page through one account's history and tally buckets."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence, Set

from domain.entities import Account, MatchDetail, ProgressBucket
from domain.interfaces import IMatchRepository

logger = logging.getLogger(__name__)


def assign_bucket(end_seconds: int, buckets: Sequence[ProgressBucket]) -> Optional[ProgressBucket]:
    """Latest bucket whose cutoff the match ended at or after; ``None`` if before all of them."""
    for bucket in sorted(buckets, key=lambda b: b.cutoff_ts, reverse=True):
        if end_seconds >= bucket.cutoff_ts:
            return bucket
    return None


def classify_match(
    detail: MatchDetail,
    *,
    queue_id: int,
    buckets: Sequence[ProgressBucket],
    include_remakes: bool = False,
    remake_threshold_s: int = 300,
) -> Optional[ProgressBucket]:
    """Bucket a match counts toward, or ``None`` when it is filtered out.

    Filters apply in order: queue, remake duration, earliest cutoff.
    """
    if detail.queue_id != queue_id:
        return None
    if not include_remakes and detail.game_duration <= remake_threshold_s:
        return None
    return assign_bucket(detail.end_seconds, buckets)


@dataclass(slots=True)
class MatchTally:
    """Accumulator threaded through one account's pagination."""

    counts: dict[str, int]
    first_end: Optional[int] = None
    last_end: Optional[int] = None
    pages: int = 0
    seen: Set[str] = field(default_factory=set)

    @classmethod
    def empty(cls, buckets: Iterable[ProgressBucket]) -> "MatchTally":
        return cls(counts={b.name: 0 for b in buckets})

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def first_match_at(self) -> Optional[datetime]:
        return _as_datetime(self.first_end)

    @property
    def last_match_at(self) -> Optional[datetime]:
        return _as_datetime(self.last_end)

    def record(self, bucket: ProgressBucket, end_seconds: int) -> None:
        self.counts[bucket.name] = self.counts.get(bucket.name, 0) + 1
        if self.first_end is None or end_seconds < self.first_end:
            self.first_end = end_seconds
        if self.last_end is None or end_seconds > self.last_end:
            self.last_end = end_seconds


def _as_datetime(seconds: Optional[int]) -> Optional[datetime]:
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class MatchAggregator:
    """
    Walks an account's ranked history page by page.

    Paging stops on an empty page, on a short page (after processing it),
    or after ``max_pages``. Fetch errors propagate to the caller.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        buckets: Sequence[ProgressBucket],
        *,
        queue_id: int,
        include_remakes: bool = False,
        remake_threshold_s: int = 300,
        page_size: int = 50,
        max_pages: int = 8,
    ):
        if not buckets:
            raise ValueError("at least one progress bucket is required")
        self.match_repo = match_repo
        self.buckets = tuple(sorted(buckets, key=lambda b: b.cutoff_ts))
        self.queue_id = queue_id
        self.include_remakes = include_remakes
        self.remake_threshold_s = remake_threshold_s
        self.page_size = page_size
        self.max_pages = max_pages

    @property
    def earliest_cutoff(self) -> int:
        return self.buckets[0].cutoff_ts

    async def aggregate(self, account: Account) -> MatchTally:
        tally = MatchTally.empty(self.buckets)
        start = 0

        for _ in range(self.max_pages):
            match_ids = await self.match_repo.get_match_ids(
                puuid=account.puuid,
                start=start,
                count=self.page_size,
                start_time=self.earliest_cutoff,
            )
            if not match_ids:
                break
            tally.pages += 1

            for match_id in match_ids:
                await self._process(match_id, tally)

            if len(match_ids) < self.page_size:
                break
            start += len(match_ids)

        logger.debug(f"{account.puuid}: {tally.pages} pages, {len(tally.seen)} matches inspected")
        return tally

    async def _process(self, match_id: str, tally: MatchTally) -> None:
        # history can shift under us between pages; count a match once
        if match_id in tally.seen:
            return
        tally.seen.add(match_id)

        detail = await self.match_repo.get_match(match_id)
        if detail is None:
            return
        bucket = classify_match(
            detail,
            queue_id=self.queue_id,
            buckets=self.buckets,
            include_remakes=self.include_remakes,
            remake_threshold_s=self.remake_threshold_s,
        )
        if bucket is not None:
            tally.record(bucket, detail.end_seconds)
