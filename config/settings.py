"""Application settings and configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.env import env_bool, env_int
from domain.entities import Player, ProgressBucket
from domain.enums import QueueType, Region
from infrastructure.api.retry_policy import RetryPolicy

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """Process-level knobs: paths, logging, HTTP timeouts."""

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    # relative LOG_DIR values resolve against the project root; unset = console only
    LOG_DIR:  Optional[Path] = BASE_DIR / os.environ['LOG_DIR'] if os.getenv('LOG_DIR') else None

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '30'))
    WEBHOOK_TIMEOUT: float = float(os.getenv('WEBHOOK_TIMEOUT', '15'))
    # needs the `http2` extra (h2) installed
    HTTP2: bool = env_bool(os.environ, "HTTP2", False)

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')


settings = Settings()


# ── Tracker configuration ──────────────────────────────────────────────────

DEFAULT_BUCKETS = "Current split=2025-08-26:50"


def parse_cutoff(value: str) -> datetime:
    """``YYYY-MM-DD`` → UTC midnight of that day."""
    try:
        day = date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"invalid cutoff date {value!r}, expected YYYY-MM-DD") from None
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def parse_buckets(raw: str) -> tuple[ProgressBucket, ...]:
    """Parse ``name=YYYY-MM-DD:goal`` entries separated by commas."""
    buckets = []
    for entry in (e.strip() for e in raw.split(",")):
        if not entry:
            continue
        name, sep, rest = entry.partition("=")
        cutoff, sep2, goal = rest.rpartition(":")
        if not sep or not sep2 or not name.strip():
            raise ValueError(f"invalid bucket {entry!r}, expected name=YYYY-MM-DD:goal")
        try:
            requirement = int(goal)
        except ValueError:
            raise ValueError(f"invalid goal in bucket {entry!r}") from None
        if requirement < 0:
            raise ValueError(f"negative goal in bucket {entry!r}")
        buckets.append(ProgressBucket(name=name.strip(), cutoff=parse_cutoff(cutoff), requirement=requirement))
    return tuple(sorted(buckets, key=lambda b: b.cutoff))


def parse_roster(raw: str) -> tuple[Player, ...]:
    """Parse Riot IDs (``name#tag``) separated by commas, keeping order."""
    players = []
    for entry in (e.strip() for e in raw.split(",")):
        if not entry:
            continue
        players.append(Player.from_riot_id(entry))
    return tuple(players)


@dataclass(frozen=True, slots=True)
class TrackerConfig:
    """Everything one tracking run needs, resolved up front."""

    api_key: str
    roster: tuple[Player, ...]
    buckets: tuple[ProgressBucket, ...]
    total_requirement: int
    region: Region = Region.EUW1
    queue: QueueType = QueueType.RANKED_SOLO_5x5
    webhook_url: str = ""
    include_remakes: bool = False
    remake_threshold_s: int = 300
    page_size: int = 50
    max_pages: int = 8
    request_interval_ms: int = 400
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TrackerConfig":
        env = os.environ if env is None else env
        buckets = parse_buckets(env.get("PROGRESS_BUCKETS", "") or DEFAULT_BUCKETS)
        return cls(
            api_key=(env.get("RIOT_API_KEY") or env.get("API_KEY") or "").strip(),
            roster=parse_roster(env.get("ROSTER", "")),
            buckets=buckets,
            total_requirement=env_int(env, "TOTAL_GOAL", sum(b.requirement for b in buckets)),
            region=Region.from_string(env.get("REGION", "") or "euw1"),
            queue=QueueType.from_string(env.get("QUEUE", "") or "RANKED_SOLO_5x5"),
            webhook_url=env.get("WEBHOOK_URL", "").strip(),
            include_remakes=env_bool(env, "INCLUDE_REMAKES", False),
            remake_threshold_s=env_int(env, "REMAKE_THRESHOLD_S", 300),
            page_size=env_int(env, "PAGE_SIZE", 50),
            max_pages=env_int(env, "MAX_PAGES", 8),
            request_interval_ms=env_int(env, "REQUEST_INTERVAL_MS", 400),
            retry=RetryPolicy.from_env(env),
        )

    def validate(self) -> None:
        if not self.api_key:
            raise ValueError("RIOT_API_KEY must be set in config/.env or the environment")
        if not self.roster:
            raise ValueError("ROSTER must list at least one Riot ID (name#tag)")
        if not self.buckets:
            raise ValueError("PROGRESS_BUCKETS must define at least one bucket")
        names = [b.name for b in self.buckets]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate bucket names in {names}")
        cutoffs = [b.cutoff for b in self.buckets]
        if len(set(cutoffs)) != len(cutoffs):
            raise ValueError("bucket cutoffs must be distinct")
        if not 1 <= self.page_size <= 100:
            raise ValueError("PAGE_SIZE must be between 1 and 100")
        if self.max_pages < 1:
            raise ValueError("MAX_PAGES must be at least 1")
        if self.total_requirement < 0:
            raise ValueError("TOTAL_GOAL must not be negative")
