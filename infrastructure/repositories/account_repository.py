"""Account repository implementation."""
import logging

from domain.entities import Account, Player
from domain.interfaces import IAccountRepository
from infrastructure.api import FatalRequestError, RiotAPIClient

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """Resolves Riot IDs to accounts via account-v1."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def get_account(self, player: Player) -> Account:
        """
        Resolve a player's Riot ID.

        Args:
            player: Tracked player (name + tag)

        Returns:
            Account carrying the player's PUUID

        Raises:
            RiotAPIError: lookup failed or the payload had no PUUID
        """
        data = await self.api_client.get_account_by_riot_id(player.name, player.tag)
        if not isinstance(data, dict) or not data.get('puuid'):
            raise FatalRequestError(None, "/riot/account/v1/accounts/by-riot-id", f"no puuid for {player.riot_id}")
        account = Account.from_api(data)
        logger.info(f"{player.name} → PUUID: {account.puuid}")
        return account
