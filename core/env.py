"""Typed environment lookups that name the variable when a value is malformed."""
from __future__ import annotations

from typing import Mapping


def env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def env_int_set(env: Mapping[str, str], name: str, default: frozenset[int]) -> frozenset[int]:
    """Comma separated integers, e.g. ``RETRY_STATUSES=429,502,503``."""
    raw = env.get(name, "").strip()
    if not raw:
        return default
    values = set()
    for entry in (e.strip() for e in raw.split(",")):
        if not entry:
            continue
        try:
            values.add(int(entry))
        except ValueError:
            raise ValueError(f"{name} entries must be integers, got {entry!r}") from None
    return frozenset(values)
