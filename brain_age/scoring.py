"""Brain Age scoring.

Each game is scored against the norm bracket for the user's age, giving a
percentile and a signed age offset. Offsets are combined as a weighted mean
(weights sum to 1.0, but the mean still divides by the actual total) and
added to chronological age.

Domain weights:
  - Processing Speed 0.20 (Lightning Tap)
  - Executive Function 0.25 (Color Clash)
  - Working Memory 0.25 (Memory Matrix)
  - Attention 0.15 (Focus Filter)
  - Cognitive Flexibility 0.15 (Trail Switch)

Skipped or unplayed games score a fixed +3 years at the 35th percentile.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from core_domain.models import TopDriver
from core_domain.utils import clamp_age, impact_for, pick_suggestion, rank_top

from . import norms
from .models import (
    BrainAgeData,
    BrainAgeProfile,
    BrainAgeResult,
    ColorClashResult,
    DomainScore,
    FocusFilterResult,
    LightningTapResult,
    MemoryMatrixResult,
    TrailSwitchResult,
)


logger = logging.getLogger(__name__)

PROCESSING_SPEED = 'Processing Speed'
EXECUTIVE_FUNCTION = 'Executive Function'
WORKING_MEMORY = 'Working Memory'
ATTENTION = 'Attention'
COGNITIVE_FLEXIBILITY = 'Cognitive Flexibility'

DOMAIN_WEIGHTS = {
    PROCESSING_SPEED: 0.20,
    EXECUTIVE_FUNCTION: 0.25,
    WORKING_MEMORY: 0.25,
    ATTENTION: 0.15,
    COGNITIVE_FLEXIBILITY: 0.15,
}

SKIP_PENALTY = 3
SKIP_PERCENTILE = 35

DOMAIN_SUGGESTIONS = {
    PROCESSING_SPEED: {
        'positive': 'Sharp reflexes! Regular aerobic exercise helps maintain processing speed.',
        'negative': 'Try reaction-time games and aerobic exercise to boost processing speed.',
    },
    EXECUTIVE_FUNCTION: {
        'positive': 'Strong cognitive control. Keep challenging yourself with complex tasks.',
        'negative': 'Practice mindfulness and puzzles that require ignoring distractions.',
    },
    WORKING_MEMORY: {
        'positive': 'Excellent working memory. Mental math and strategy games are keeping you sharp.',
        'negative': 'Try memory exercises like n-back training and reduce multitasking.',
    },
    ATTENTION: {
        'positive': 'Great sustained focus. Your attention stamina is above average.',
        'negative': 'Practice focused single-tasking sessions and consider mindfulness meditation.',
    },
    COGNITIVE_FLEXIBILITY: {
        'positive': 'Nimble mental switching. Keep engaging in diverse cognitive activities.',
        'negative': 'Practice task-switching exercises and learn new skills to improve flexibility.',
    },
}

SLEEP_NOTE = (
    "You reported less than 6 hours of sleep. Sleep deprivation can temporarily reduce "
    "cognitive performance by 10-25%. Consider retaking after a good night's rest for a "
    "more accurate baseline."
)
CAFFEINE_NOTE = (
    "Heavy caffeine intake can affect reaction time variability. Your scores may not "
    "reflect your typical baseline."
)
MIN_RESTED_SLEEP_HOURS = 6


# ---------------------------- Modifiers ----------------------------


def variability_penalty(standard_deviation: float) -> float:
    if standard_deviation > 100:
        return 1
    if standard_deviation > 70:
        return 0.5
    return 0


def accuracy_penalty(accuracy: float) -> float:
    if accuracy < 0.8:
        return 2
    if accuracy < 0.9:
        return 1
    return 0


def vigilance_penalty(decrement: float) -> float:
    if decrement > 80:
        return 1
    if decrement > 50:
        return 0.5
    return 0


# ---------------------------- Per-game scorers ----------------------------


def _domain(domain: str, percentile: float, offset: float) -> DomainScore:
    return DomainScore(domain=domain, percentile=percentile, age_offset=offset, weight=DOMAIN_WEIGHTS[domain])


def score_lightning_tap(result: LightningTapResult, age: int) -> DomainScore:
    table = norms.LIGHTNING_TAP_NORMS[norms.get_bracket(age)]
    offset, percentile = norms.score_lower_is_better(result.trimmed_mean, table)
    return _domain(PROCESSING_SPEED, percentile, offset + variability_penalty(result.standard_deviation))


def score_color_clash(result: ColorClashResult, age: int) -> DomainScore:
    table = norms.COLOR_CLASH_NORMS[norms.get_bracket(age)]
    offset, percentile = norms.score_lower_is_better(result.interference_score, table)
    return _domain(EXECUTIVE_FUNCTION, percentile, offset + accuracy_penalty(result.accuracy))


def score_memory_matrix(result: MemoryMatrixResult, age: int) -> DomainScore:
    table = norms.MEMORY_MATRIX_NORMS[norms.get_bracket(age)]
    offset, percentile = norms.score_higher_is_better(result.weighted_score, table)
    return _domain(WORKING_MEMORY, percentile, offset)


def score_focus_filter(result: FocusFilterResult, age: int) -> DomainScore:
    table = norms.FOCUS_FILTER_NORMS[norms.get_bracket(age)]
    offset, percentile = norms.score_higher_is_better(result.score, table)
    return _domain(ATTENTION, percentile, offset + vigilance_penalty(result.vigilance_decrement))


def score_trail_switch(result: TrailSwitchResult, age: int) -> DomainScore:
    # the 3000 ms per-error penalty is already part of ba_difference
    table = norms.TRAIL_SWITCH_NORMS[norms.get_bracket(age)]
    offset, percentile = norms.score_lower_is_better(result.ba_difference, table)
    return _domain(COGNITIVE_FLEXIBILITY, percentile, offset)


def skipped_domain(domain: str) -> DomainScore:
    return _domain(domain, SKIP_PERCENTILE, SKIP_PENALTY)


# slot name, domain, completed result type, scorer
_GAMES = (
    ('lightning_tap', PROCESSING_SPEED, LightningTapResult, score_lightning_tap),
    ('color_clash', EXECUTIVE_FUNCTION, ColorClashResult, score_color_clash),
    ('memory_matrix', WORKING_MEMORY, MemoryMatrixResult, score_memory_matrix),
    ('focus_filter', ATTENTION, FocusFilterResult, score_focus_filter),
    ('trail_switch', COGNITIVE_FLEXIBILITY, TrailSwitchResult, score_trail_switch),
)


# ---------------------------- Aggregation ----------------------------


def _coerce(data: Union[BrainAgeData, Mapping[str, Any]]) -> BrainAgeData:
    if isinstance(data, BrainAgeData):
        return data
    return BrainAgeData.model_validate(data)


def score_domains(data: BrainAgeData, age: int) -> List[DomainScore]:
    scores: List[DomainScore] = []
    for slot_name, domain, result_type, scorer in _GAMES:
        slot = getattr(data, slot_name)
        if isinstance(slot, result_type):
            scores.append(scorer(slot, age))
        else:
            scores.append(skipped_domain(domain))
    return scores


def weighted_offset(domain_scores: List[DomainScore]) -> float:
    total_weight = sum(d.weight for d in domain_scores)
    if total_weight <= 0:
        return 0.0
    return sum(d.age_offset * d.weight for d in domain_scores) / total_weight


def contextual_note(profile: BrainAgeProfile) -> Optional[str]:
    """Single caveat; short sleep takes priority over heavy caffeine."""
    if profile.sleep_hours < MIN_RESTED_SLEEP_HOURS:
        return SLEEP_NOTE
    if profile.caffeine_status == 'heavy':
        return CAFFEINE_NOTE
    return None


def rank_domains(domain_scores: List[DomainScore], limit: int = 3) -> List[TopDriver]:
    top = rank_top(domain_scores, lambda d: d.age_offset, limit)
    return [
        TopDriver(
            tag=d.domain,
            impact=impact_for(d.age_offset),
            suggestion=pick_suggestion(DOMAIN_SUGGESTIONS, d.domain, d.age_offset),
        )
        for d in top
    ]


def calculate_brain_age_results(data: Union[BrainAgeData, Mapping[str, Any]]) -> Optional[BrainAgeResult]:
    """Estimate brain age from a session snapshot; None if no profile yet."""
    data = _coerce(data)
    profile = data.profile
    if profile is None:
        return None

    age = profile.age
    domain_scores = score_domains(data, age)
    offset = weighted_offset(domain_scores)
    brain_age = clamp_age(age + offset)
    logger.debug("brain age %s (chronological %s, weighted offset %+.2f)", brain_age, age, offset)

    return BrainAgeResult(
        brain_age=brain_age,
        chronological_age=age,
        gap=brain_age - age,
        domain_scores=domain_scores,
        top_drivers=rank_domains(domain_scores),
        contextual_note=contextual_note(profile),
    )


__all__ = [
    'DOMAIN_WEIGHTS',
    'SKIP_PENALTY',
    'SKIP_PERCENTILE',
    'DOMAIN_SUGGESTIONS',
    'SLEEP_NOTE',
    'CAFFEINE_NOTE',
    'variability_penalty',
    'accuracy_penalty',
    'vigilance_penalty',
    'score_lightning_tap',
    'score_color_clash',
    'score_memory_matrix',
    'score_focus_filter',
    'score_trail_switch',
    'skipped_domain',
    'score_domains',
    'weighted_offset',
    'contextual_note',
    'rank_domains',
    'calculate_brain_age_results',
]
