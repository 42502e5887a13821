from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from core_domain.models import DriverScore, TopDriver
from core_domain.utils import clamp_age, impact_for, lookup_offset, pick_suggestion, rank_top

from . import constants as C
from .models import (
    AssessmentData,
    AssessmentResult,
    BalanceResult,
    CrossLeggedResult,
    IntegrationResult,
    MarchRecoveryResult,
    OverheadReachResult,
    RecoveryContextResult,
    ScoreBreakdown,
    SitToStandResult,
    SkippedStep,
    WallSitResult,
)


logger = logging.getLogger(__name__)


def _step(value: float, bands: Sequence[Tuple[float, float]], fallback: float, *, at_least: bool) -> float:
    """First band whose threshold ``value`` meets (>= or <=), else ``fallback``."""
    for threshold, offset in bands:
        if (value >= threshold) if at_least else (value <= threshold):
            return offset
    return fallback


def expected_reps(age: int) -> int:
    for upper, reps in C.EXPECTED_REPS_BY_AGE:
        if age < upper:
            return reps
    return C.EXPECTED_REPS_OLDEST


def reps_offset(reps: int, age: int) -> float:
    diff = reps - expected_reps(age)
    return _step(diff, C.REPS_DIFF_OFFSETS, C.REPS_DIFF_FLOOR_OFFSET, at_least=True)


def exertion_offset(exertion: float) -> float:
    return _step(exertion, C.EXERTION_OFFSETS, C.EXERTION_CEILING_OFFSET, at_least=False)


def breathing_difficulty_offset(value: float) -> float:
    return _step(value, C.BREATHING_DIFFICULTY_OFFSETS, C.BREATHING_DIFFICULTY_CEILING_OFFSET, at_least=False)


def nose_breathing_offset(value: float) -> float:
    return _step(value, C.NOSE_BREATHING_OFFSETS, C.NOSE_BREATHING_FLOOR_OFFSET, at_least=True)


# ---------------------------- Per-test scorers ----------------------------
# Each returns the signed offset for its slot; None (not reached) scores 0.


def score_sit_to_stand(slot: Union[SitToStandResult, SkippedStep, None], age: int) -> float:
    if slot is None:
        return 0
    if isinstance(slot, SkippedStep):
        return C.SKIP_PENALTY_SIT_TO_STAND
    return reps_offset(slot.reps, age) + exertion_offset(slot.perceived_exertion)


def score_wall_sit(slot: Union[WallSitResult, SkippedStep, None]) -> float:
    if slot is None:
        return 0
    if isinstance(slot, SkippedStep):
        return C.SKIP_PENALTY_WALL_SIT
    return (
        lookup_offset(C.WALL_SIT_DURATION, slot.duration, name='wall sit duration')
        + lookup_offset(C.WALL_SIT_STOP_REASON, slot.stop_reason, name='wall sit stop reason')
    )


def score_balance(slot: Union[BalanceResult, SkippedStep, None]) -> float:
    if slot is None:
        return 0
    if isinstance(slot, SkippedStep):
        return C.SKIP_PENALTY_BALANCE
    return (
        lookup_offset(C.BALANCE_DURATION, slot.best_time, name='balance duration')
        + lookup_offset(C.BALANCE_END_REASON, slot.end_reason, name='balance end reason')
    )


def score_march_recovery(slot: Union[MarchRecoveryResult, SkippedStep, None]) -> Tuple[float, float]:
    """Return (cardiovascular, recovery speed) offsets."""
    if slot is None:
        return 0, 0
    if isinstance(slot, SkippedStep):
        return C.SKIP_PENALTY_CARDIO, C.SKIP_PENALTY_RECOVERY_SPEED
    cardio = breathing_difficulty_offset(slot.breathing_difficulty)
    recovery = (
        lookup_offset(C.RECOVERY_TIME, slot.recovery_time, name='recovery time')
        + nose_breathing_offset(slot.nose_breathing_comfort)
    )
    return cardio, recovery


def score_mobility(
    overhead: Union[OverheadReachResult, SkippedStep, None],
    cross_legged: Union[CrossLeggedResult, SkippedStep, None],
) -> float:
    # skipped mobility answers carry no penalty
    score = 0
    if isinstance(overhead, OverheadReachResult):
        score += lookup_offset(C.OVERHEAD_REACH, overhead.answer, name='overhead reach')
    if isinstance(cross_legged, CrossLeggedResult):
        score += lookup_offset(C.CROSS_LEGGED, cross_legged.answer, name='cross-legged')
    return score


def score_integration(result: Optional[IntegrationResult]) -> float:
    if result is None:
        return 0
    return (
        lookup_offset(C.ENERGY_LEVEL, result.energy_level, name='energy level')
        + lookup_offset(C.COORDINATION_LEVEL, result.coordination_level, name='coordination level')
    )


def score_recovery_context(result: Optional[RecoveryContextResult]) -> float:
    if result is None:
        return 0
    return (
        lookup_offset(C.MORNING_STIFFNESS, result.morning_stiffness, name='morning stiffness')
        + lookup_offset(C.POST_WORKOUT_SORENESS, result.post_workout_soreness, name='post-workout soreness')
    )


def fitness_adjustment(fitness_level: str) -> float:
    return lookup_offset(C.FITNESS_ADJUSTMENT, fitness_level, name='fitness level')


# ---------------------------- Aggregation ----------------------------


def _coerce(data: Union[AssessmentData, Mapping[str, Any]]) -> AssessmentData:
    if isinstance(data, AssessmentData):
        return data
    return AssessmentData.model_validate(data)


def score_breakdown(data: Union[AssessmentData, Mapping[str, Any]]) -> Optional[ScoreBreakdown]:
    """Per-driver scores plus the unranked components behind the total.

    Returns None when the profile is missing.
    """
    data = _coerce(data)
    profile = data.user_profile
    if profile is None:
        return None

    age = profile.chronological_age
    cardio, recovery = score_march_recovery(data.march_recovery)
    scores = {
        C.LOWER_BODY: score_sit_to_stand(data.sit_to_stand, age),
        C.BALANCE: score_balance(data.balance),
        C.CARDIO: cardio,
        C.RECOVERY_SPEED: recovery,
        C.MOBILITY: score_mobility(data.overhead_reach, data.cross_legged),
    }
    drivers = [
        DriverScore(tag=tag, score=scores[tag], max_possible=max_possible)
        for tag, max_possible in C.DRIVER_MAX.items()
    ]
    return ScoreBreakdown(
        drivers=drivers,
        wall_sit=score_wall_sit(data.wall_sit),
        integration=score_integration(data.integration),
        recovery_context=score_recovery_context(data.recovery_context),
        fitness_adjustment=fitness_adjustment(profile.fitness_level),
    )


def rank_drivers(drivers: List[DriverScore], limit: int = 3) -> List[TopDriver]:
    top = rank_top(drivers, lambda d: d.normalized, limit)
    return [
        TopDriver(
            tag=d.tag,
            impact=impact_for(d.score),
            suggestion=pick_suggestion(C.DRIVER_SUGGESTIONS, d.tag, d.score),
        )
        for d in top
    ]


def calculate_results(data: Union[AssessmentData, Mapping[str, Any]]) -> Optional[AssessmentResult]:
    """Estimate functional age from a session snapshot.

    Steps:
      - sum every test offset, the skip penalties and the fitness adjustment
      - add to chronological age, round (half up), clamp to [18, 100]
      - rank the five drivers by |score / max| and attach suggestions

    Returns None if the profile has not been entered yet.
    """
    data = _coerce(data)
    breakdown = score_breakdown(data)
    if breakdown is None:
        return None

    chronological_age = data.user_profile.chronological_age
    functional_age = clamp_age(chronological_age + breakdown.total_offset)
    logger.debug(
        "functional age %s (chronological %s, offset %+.1f)",
        functional_age, chronological_age, breakdown.total_offset,
    )
    return AssessmentResult(
        functional_age=functional_age,
        chronological_age=chronological_age,
        gap=functional_age - chronological_age,
        top_drivers=rank_drivers(breakdown.drivers),
    )


__all__ = [
    'expected_reps',
    'reps_offset',
    'exertion_offset',
    'breathing_difficulty_offset',
    'nose_breathing_offset',
    'score_sit_to_stand',
    'score_wall_sit',
    'score_balance',
    'score_march_recovery',
    'score_mobility',
    'score_integration',
    'score_recovery_context',
    'fitness_adjustment',
    'score_breakdown',
    'rank_drivers',
    'calculate_results',
]
