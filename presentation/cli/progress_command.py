from __future__ import annotations

from typing import List, Optional

from config import settings
from config.settings import TrackerConfig
from domain.entities import AggregateResult
from infrastructure import AccountRepository, MatchRepository, RateLimiter, RiotAPIClient
from application.use_cases import TrackProgressUseCase
from core.logging.logger import get_logger

_GREEN = "\033[92m"
_RED = "\033[91m"
_RESET = "\033[0m"


class ProgressCommand:
    """Single-shot progress run: resolve, aggregate, evaluate, report."""

    def __init__(self, config: Optional[TrackerConfig] = None) -> None:
        self._config = config
        self._log = get_logger(__name__, service="progress-cli")

    def _print_banner(self) -> None:
        print("""
╔═════════════════════════════════════════╗
║                                         ║
║      LOL RANKED PROGRESS TRACKER        ║
║                                         ║
╚═════════════════════════════════════════╝
        """)

    def _print_summary(self, config: TrackerConfig) -> None:
        print("=" * 57)
        print("CONFIGURATION SUMMARY")
        print("=" * 57)
        print(f"Server: {config.region.friendly} ({config.region.regional_route})")
        print(f"Queue: {config.queue.queue_name}"
              f"{'' if not config.include_remakes else ' (remakes included)'}")
        for b in config.buckets:
            print(f"Bucket: {b.name} from {b.cutoff:%Y-%m-%d} — goal {b.requirement}")
        print(f"Total goal: {config.total_requirement}")
        print(f"Players: {len(config.roster)}")
        print(f"Webhook: {'configured' if config.webhook_url else 'not set'}")
        print("=" * 57)
        print("")

    @staticmethod
    def _print_result(idx: int, total: int, result: AggregateResult) -> None:
        color = _RED if result.failed or not (result.report and result.report.complete) else _GREEN
        counts = ", ".join(f"{name} {count}" for name, count in result.counts.items())
        print(f"[{idx}/{total}] {result.player.riot_id:<24} {counts:<30} {color}{result.status}{_RESET}", flush=True)

    async def run(self) -> List[AggregateResult]:
        config = self._config or TrackerConfig.from_env()
        config.validate()
        self._log.info("start")

        self._print_banner()
        self._print_summary(config)

        limiter = RateLimiter(min_interval_s=config.request_interval_ms / 1000.0)
        async with RiotAPIClient(
            config.api_key,
            config.region,
            retry_policy=config.retry,
            rate_limiter=limiter,
            timeout=settings.REQUEST_TIMEOUT,
            http2=settings.HTTP2,
        ) as api:
            use_case = TrackProgressUseCase.from_config(
                config,
                AccountRepository(api),
                MatchRepository(api),
                webhook_timeout=settings.WEBHOOK_TIMEOUT,
                result_callback=self._print_result,
            )
            results = await use_case.execute(config.roster)
            requests_made = api.request_count

        failed = sum(1 for r in results if r.failed)
        self._log.info(f"all-done players={len(results)} failed={failed} requests={requests_made}")
        print(f"\nAll done! {len(results)} players checked, {failed} failed.")
        return results
