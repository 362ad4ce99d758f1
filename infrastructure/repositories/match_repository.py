"""Match repository implementation."""
import logging
from typing import List, Optional

from domain.entities import MatchDetail
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match history using match-v5."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_match_ids(
        self,
        puuid: str,
        start: int = 0,
        count: int = 20,
        start_time: Optional[int] = None,
    ) -> List[str]:
        """Get one page of ranked match IDs for an account."""
        return await self.api_client.get_match_ids_by_puuid(
            puuid=puuid,
            start=start,
            count=count,
            start_time=start_time,
        )

    async def get_match(self, match_id: str) -> Optional[MatchDetail]:
        """
        Get a single match by ID.

        Args:
            match_id: Match identifier

        Returns:
            MatchDetail, or None when the payload carries no ``info`` block
        """
        data = await self.api_client.get_match_by_id(match_id)
        detail = MatchDetail.from_api(data)
        if detail is None:
            logger.warning(f"Match {match_id} has no info block, skipping")
            return None
        if not detail.match_id:
            detail = MatchDetail(match_id, detail.queue_id, detail.game_duration, detail.game_end_timestamp)
        return detail
