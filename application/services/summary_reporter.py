"""Summary formatting and webhook delivery."""
from __future__ import annotations

from typing import List, Optional, Sequence

import httpx

from core.logging.logger import get_logger
from domain.entities import AggregateResult, ProgressBucket

HEADER = "**📊 Ranked Progress Update (All Players)**"


def _date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else "-"


class WebhookReporter:
    """Builds the roster summary and posts it as one Discord-style webhook message."""

    def __init__(
        self,
        webhook_url: str,
        buckets: Sequence[ProgressBucket],
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url
        self.buckets = tuple(sorted(buckets, key=lambda b: b.cutoff_ts))
        self.timeout = timeout
        self._transport = transport
        self._log = get_logger(__name__, service="reporter")

    def format_summary(self, results: Sequence[AggregateResult]) -> str:
        lines: List[str] = [HEADER]
        for r in results:
            lines.append(f"**{r.player.riot_id}** – {r.total_matches} games – {r.status}")
            if r.failed:
                continue
            lines.append("   " + " · ".join(self._bucket_cell(r, b) for b in self.buckets))
            if len(self.buckets) == 1 and r.first_match_at:
                lines.append(f"   first {_date(r.first_match_at)}, last {_date(r.last_match_at)}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _bucket_cell(result: AggregateResult, bucket: ProgressBucket) -> str:
        count = result.counts.get(bucket.name, 0)
        marker = "✅" if count >= bucket.requirement else "❌"
        return f"{bucket.name}: {count}/{bucket.requirement} {marker}"

    async def deliver(self, results: Sequence[AggregateResult]) -> bool:
        """Post the summary once. Failures are logged, never retried or raised."""
        if not self.webhook_url:
            self._log.warning("WEBHOOK_URL not set, summary not sent")
            return False

        summary = self.format_summary(results)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.webhook_url, json={"content": summary})
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._log.error(lambda: f"Discord webhook failed: {exc}")
            return False

        self._log.success("✅ Discord message sent")
        return True
