"""Player and Account entities."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A tracked player, identified by Riot ID (game name + tag line)."""

    name: str
    tag: str

    @property
    def riot_id(self) -> str:
        return f"{self.name}#{self.tag}"

    @classmethod
    def from_riot_id(cls, riot_id: str) -> 'Player':
        """Create a Player from ``name#tag``."""
        name, sep, tag = riot_id.strip().rpartition("#")
        if not sep or not name.strip() or not tag.strip():
            raise ValueError(f"invalid Riot ID {riot_id!r}, expected name#tag")
        return cls(name=name.strip(), tag=tag.strip())

    def __str__(self) -> str:
        return self.riot_id


@dataclass(frozen=True)
class Account:
    """Riot account resolved from a Player for the duration of one run."""

    puuid: str
    game_name: str
    tag_line: str

    @classmethod
    def from_api(cls, data: dict) -> 'Account':
        """Build from an account-v1 payload."""
        return cls(
            puuid=data['puuid'],
            game_name=data.get('gameName', ''),
            tag_line=data.get('tagLine', ''),
        )
