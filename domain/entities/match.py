"""Match detail entity."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchDetail:
    """The handful of match-v5 fields progress tracking looks at."""

    match_id: str
    queue_id: int
    game_duration: int        # Seconds
    game_end_timestamp: int   # Unix timestamp milliseconds

    @property
    def end_seconds(self) -> int:
        """End time as whole unix seconds (floored)."""
        return self.game_end_timestamp // 1000

    @classmethod
    def from_api(cls, data: dict) -> Optional['MatchDetail']:
        """Parse a match-v5 payload; ``None`` when it carries no ``info`` block."""
        info = (data or {}).get('info')
        if not info:
            return None
        metadata = data.get('metadata') or {}
        return cls(
            match_id=metadata.get('matchId', ''),
            queue_id=int(info.get('queueId', 0)),
            game_duration=int(info.get('gameDuration', 0)),
            game_end_timestamp=int(info.get('gameEndTimestamp', 0)),
        )
