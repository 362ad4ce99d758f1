"""Queue type enumeration for ranked matches."""
from enum import Enum


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    Provides:
    - queue_id: numeric queue id carried by match details
    - queue_name: human-readable name
    """

    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue
    RANKED_FLEX_SR = 440   # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        """Get queue ID as reported in match-v5 ``info.queueId``."""
        return self.value

    @property
    def queue_name(self) -> str:
        """Get human-readable queue name."""
        names = {
            420: "Ranked Solo/Duo",
            440: "Ranked Flex 5v5"
        }
        return names[self.value]

    @classmethod
    def from_string(cls, value: str) -> 'QueueType':
        """Resolve ``RANKED_SOLO_5x5`` or ``420`` style values."""
        raw = value.strip()
        if raw.isdigit():
            return cls(int(raw))
        for queue in cls:
            if queue.name.lower() == raw.lower():
                return queue
        raise ValueError(f"unknown queue {value!r}")
