"""Riot Games API client."""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from core.logging.logger import get_logger
from domain.enums import Region
from .errors import FatalRequestError, TransientUpstreamError
from .rate_limiter import RateLimiter
from .retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """Asynchronous, strictly sequential Riot API client.

    Every request is paced by the rate limiter and wrapped in the retry
    policy. The API key travels as the ``api_key`` query parameter and is
    kept out of every URL that gets logged or raised.
    """

    def __init__(
        self,
        api_key: str,
        region: Region = Region.EUW1,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        rate_limiter: Optional[RateLimiter] = None,
        timeout: float = 30.0,
        http2: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.region = region
        self.retry_policy = retry_policy or RetryPolicy()
        self.rate_limiter = rate_limiter or RateLimiter()
        self.timeout = timeout
        self.http2 = http2
        self.session: Optional[httpx.AsyncClient] = None
        self.request_count = 0
        self._transport = transport
        self._log = get_logger(__name__, service="riot-api")

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            http2=self.http2,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    @property
    def base_url(self) -> str:
        return f"https://{self.region.regional_route}.api.riotgames.com"

    async def _request_once(self, path: str, params: Dict[str, Any]) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        await self.rate_limiter.acquire()
        self.request_count += 1
        try:
            response = await self.session.get(path, params={**params, "api_key": self.api_key})
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {path}: {exc}")
            raise FatalRequestError(None, path, str(exc)) from exc

        if response.is_success:
            return response.json()

        if self.retry_policy.is_retryable(response.status_code):
            raise TransientUpstreamError(response.status_code, path)

        if response.status_code in (401, 403):
            logger.error(f"{response.status_code} from Riot API — check RIOT_API_KEY")
        else:
            logger.warning(f"HTTP {response.status_code} for {path}")
        raise FatalRequestError(response.status_code, path)

    async def _get(self, path: str, **params: Any) -> Any:
        return await self.retry_policy.run(
            lambda: self._request_once(path, params),
            logger=self._log,
            context={"path": path},
        )

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Dict[str, Any]:
        path = (
            "/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        return await self._get(path)

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        start: int = 0,
        count: int = 20,
        start_time: Optional[int] = None,
        match_type: str = "ranked",
    ) -> List[str]:
        params: Dict[str, Any] = {"type": match_type, "start": start, "count": min(count, 100)}
        if start_time is not None:
            params["startTime"] = start_time
        result = await self._get(f"/lol/match/v5/matches/by-puuid/{puuid}/ids", **params)
        return result if isinstance(result, list) else []

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        return await self._get(f"/lol/match/v5/matches/{match_id}")
