"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Account, MatchDetail, Player


class IAccountRepository(ABC):
    """Interface for Riot account lookups."""

    @abstractmethod
    async def get_account(self, player: Player) -> Account:
        """Resolve a player's Riot ID to an account; raises when it cannot."""
        pass


class IMatchRepository(ABC):
    """Interface for match history data."""

    @abstractmethod
    async def get_match_ids(
        self,
        puuid: str,
        start: int = 0,
        count: int = 20,
        start_time: Optional[int] = None,
    ) -> List[str]:
        """Get one page of ranked match IDs for an account."""
        pass

    @abstractmethod
    async def get_match(self, match_id: str) -> Optional[MatchDetail]:
        """Get a single match; ``None`` when the payload has no match info."""
        pass
