from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Sequence, TypeVar

from .models import Impact


logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_AGE = 18
MAX_AGE = 100


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def round_half_up(value: float) -> int:
    # .5 always rounds toward +inf, unlike Python's banker's rounding
    return int(math.floor(value + 0.5))


def clamp_age(value: float) -> int:
    """Round an estimated age and clamp it to the presentable range."""
    return int(clamp(round_half_up(value), MIN_AGE, MAX_AGE))


def lookup_offset(table: Mapping[Any, float], key: Any, *, name: str, default: float = 0) -> float:
    """Total table lookup: unknown keys fall back to the neutral bucket."""
    try:
        return table[key]
    except (KeyError, TypeError):
        logger.warning("Unknown %s value %r; using neutral offset %s", name, key, default)
        return default


def impact_for(offset: float) -> Impact:
    if offset > 0:
        return "negative"
    if offset < 0:
        return "positive"
    return "neutral"


def pick_suggestion(table: Dict[str, Dict[str, str]], tag: str, offset: float) -> str:
    texts = table.get(tag) or {}
    return texts.get("negative" if offset > 0 else "positive", "")


def rank_top(items: Sequence[T], magnitude: Callable[[T], float], limit: int = 3) -> List[T]:
    """Top ``limit`` items by absolute magnitude; equal magnitudes keep input order."""
    return sorted(items, key=lambda item: abs(magnitude(item)), reverse=True)[:limit]


__all__ = [
    "MIN_AGE",
    "MAX_AGE",
    "clamp",
    "round_half_up",
    "clamp_age",
    "lookup_offset",
    "impact_for",
    "pick_suggestion",
    "rank_top",
]
