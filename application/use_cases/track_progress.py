"""Use case for tracking ranked progress across the roster."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from config.settings import TrackerConfig
from core.logging.context import context as log_context
from core.logging.logger import get_logger
from domain.entities import AggregateResult, Player, ProgressBucket
from domain.interfaces import IAccountRepository, IMatchRepository
from application.services.match_aggregator import MatchAggregator
from application.services.progress_evaluator import ProgressEvaluator
from application.services.summary_reporter import WebhookReporter

ResultCallback = Callable[[int, int, AggregateResult], None]


class TrackProgressUseCase:
    """
    Runs the roster one player at a time.

    A failure for one player (lookup, listing or match fetch) becomes a
    zero-valued error record; the rest of the roster and the final report
    still go ahead.
    """

    def __init__(
        self,
        account_repo: IAccountRepository,
        aggregator: MatchAggregator,
        evaluator: ProgressEvaluator,
        reporter: Optional[WebhookReporter] = None,
        result_callback: Optional[ResultCallback] = None,
    ):
        self.account_repo = account_repo
        self.aggregator   = aggregator
        self.evaluator    = evaluator
        self.reporter     = reporter
        self._result_cb   = result_callback
        self._log         = get_logger(__name__, service="tracker")

    @classmethod
    def from_config(
        cls,
        config: TrackerConfig,
        account_repo: IAccountRepository,
        match_repo: IMatchRepository,
        *,
        webhook_timeout: float = 15.0,
        result_callback: Optional[ResultCallback] = None,
    ) -> "TrackProgressUseCase":
        aggregator = MatchAggregator(
            match_repo,
            config.buckets,
            queue_id=config.queue.queue_id,
            include_remakes=config.include_remakes,
            remake_threshold_s=config.remake_threshold_s,
            page_size=config.page_size,
            max_pages=config.max_pages,
        )
        return cls(
            account_repo,
            aggregator,
            ProgressEvaluator(config.buckets, config.total_requirement),
            reporter=WebhookReporter(config.webhook_url, config.buckets, timeout=webhook_timeout),
            result_callback=result_callback,
        )

    @property
    def buckets(self) -> Sequence[ProgressBucket]:
        return self.evaluator.buckets

    async def execute(self, players: Sequence[Player]) -> List[AggregateResult]:
        results: List[AggregateResult] = []

        for idx, player in enumerate(players, start=1):
            with log_context(player=player.riot_id):
                result = await self._track(player)
            results.append(result)
            if self._result_cb:
                self._result_cb(idx, len(players), result)

        if self.reporter is not None:
            await self.reporter.deliver(results)
        return results

    async def _track(self, player: Player) -> AggregateResult:
        try:
            account = await self.account_repo.get_account(player)
            tally = await self.aggregator.aggregate(account)
        except Exception as exc:
            self._log.error(lambda: f"{player.name} → Error: {exc}")
            return AggregateResult.failure(player, self.buckets, str(exc))

        report = self.evaluator.evaluate(tally.counts)
        self._log.info(lambda: f"{player.name}: {tally.total} games logged")
        return AggregateResult(
            player=player,
            counts=dict(tally.counts),
            report=report,
            first_match_at=tally.first_match_at,
            last_match_at=tally.last_match_at,
            status=report.status,
        )
