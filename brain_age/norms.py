"""Age-bracket norm tables for the Brain Age games.

Each table maps a bracket to excellent/good/average/poor thresholds. For
lower-is-better metrics a value under "excellent" reads younger; for
higher-is-better metrics a value over "excellent" does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class NormBracket:
    excellent: float
    good: float
    average: float
    poor: float


BRACKETS = ('18-29', '30-39', '40-49', '50-59', '60-69', '70+')


def get_bracket(age: float) -> str:
    if age < 30:
        return '18-29'
    if age < 40:
        return '30-39'
    if age < 50:
        return '40-49'
    if age < 60:
        return '50-59'
    if age < 70:
        return '60-69'
    return '70+'


def _table(rows: Dict[str, Tuple[float, float, float, float]]) -> Dict[str, NormBracket]:
    return {bracket: NormBracket(*row) for bracket, row in rows.items()}


# Lightning Tap: trimmed mean RT in ms (lower = better)
LIGHTNING_TAP_NORMS = _table({
    '18-29': (220, 260, 300, 370),
    '30-39': (240, 280, 320, 390),
    '40-49': (260, 300, 350, 420),
    '50-59': (280, 330, 380, 460),
    '60-69': (310, 360, 420, 510),
    '70+':   (340, 400, 470, 570),
})

# Color Clash: Stroop interference in ms (lower = better)
COLOR_CLASH_NORMS = _table({
    '18-29': (40, 80, 130, 200),
    '30-39': (50, 100, 150, 230),
    '40-49': (60, 110, 170, 260),
    '50-59': (80, 130, 200, 300),
    '60-69': (100, 160, 240, 350),
    '70+':   (120, 190, 280, 400),
})

# Memory Matrix: weighted span score (higher = better)
MEMORY_MATRIX_NORMS = _table({
    '18-29': (11, 9, 7, 5),
    '30-39': (10, 8.5, 6.5, 4.5),
    '40-49': (9.5, 8, 6, 4),
    '50-59': (9, 7, 5.5, 3.5),
    '60-69': (8, 6.5, 5, 3),
    '70+':   (7, 5.5, 4, 2.5),
})

# Focus Filter: go/no-go composite 0-100 (higher = better)
FOCUS_FILTER_NORMS = _table({
    '18-29': (90, 80, 65, 45),
    '30-39': (88, 77, 62, 42),
    '40-49': (85, 73, 58, 38),
    '50-59': (80, 68, 53, 33),
    '60-69': (75, 62, 47, 28),
    '70+':   (68, 55, 40, 22),
})

# Trail Switch: B-A difference in ms (lower = better)
TRAIL_SWITCH_NORMS = _table({
    '18-29': (4000, 8000, 14000, 22000),
    '30-39': (5000, 10000, 16000, 25000),
    '40-49': (6000, 12000, 19000, 29000),
    '50-59': (8000, 15000, 23000, 35000),
    '60-69': (10000, 18000, 28000, 42000),
    '70+':   (13000, 22000, 34000, 50000),
})

# (offset, percentile) per band, best to worst
BAND_SCORES = ((-4, 90), (-2, 72), (0, 50), (3, 28), (5, 10))


def score_lower_is_better(value: float, norms: NormBracket) -> Tuple[float, int]:
    """Return (age offset, percentile); negative offset = younger."""
    thresholds = (norms.excellent, norms.good, norms.average, norms.poor)
    for threshold, band in zip(thresholds, BAND_SCORES):
        if value <= threshold:
            return band
    return BAND_SCORES[-1]


def score_higher_is_better(value: float, norms: NormBracket) -> Tuple[float, int]:
    thresholds = (norms.excellent, norms.good, norms.average, norms.poor)
    for threshold, band in zip(thresholds, BAND_SCORES):
        if value >= threshold:
            return band
    return BAND_SCORES[-1]


__all__ = [
    'NormBracket',
    'BRACKETS',
    'get_bracket',
    'LIGHTNING_TAP_NORMS',
    'COLOR_CLASH_NORMS',
    'MEMORY_MATRIX_NORMS',
    'FOCUS_FILTER_NORMS',
    'TRAIL_SWITCH_NORMS',
    'score_lower_is_better',
    'score_higher_is_better',
]
