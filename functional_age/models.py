"""Functional Age data model.

Answer fields that come from fixed choice lists are plain strings; the
allowed values are the keys of the tables in ``functional_age.constants``
and unknown values score as the neutral bucket.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field, field_validator

from core_domain.models import (
    DriverScore,
    EntropyModel,
    SessionRecord,
    SkipMarker,
    TopDriver,
    tag_legacy_slot,
)


Sex = Literal['male', 'female', 'prefer-not-to-say']
InjuryArea = Literal['knees', 'hips', 'back', 'shoulders', 'none']
SkipReason = Literal['pain', 'no-space', 'other']


class UserProfile(EntropyModel):
    chronological_age: int = Field(..., ge=18, le=100)
    sex: Optional[Sex] = None
    fitness_level: str = Field(..., description="beginner / intermediate / advanced")
    injuries: List[InjuryArea] = Field(default_factory=lambda: ['none'])
    has_equipment: bool = False

    @field_validator('injuries')
    @classmethod
    def _none_is_exclusive(cls, value: List[str]) -> List[str]:
        if not value:
            return ['none']
        if 'none' in value and len(value) > 1:
            raise ValueError("'none' cannot be combined with other injury areas")
        return value


def toggle_injury(current: List[str], injury: str) -> List[str]:
    """Setup-step toggle: 'none' clears the rest, any area clears 'none'."""
    if injury == 'none':
        return ['none']
    filtered = [i for i in current if i != 'none']
    if injury in filtered:
        return [i for i in filtered if i != injury]
    return filtered + [injury]


class SkippedStep(SkipMarker):
    reason: SkipReason


class SitToStandResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    reps: int = Field(..., ge=0)
    perceived_exertion: float = Field(..., ge=0, le=10)


class WallSitResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    duration: str
    stop_reason: str


class BalanceResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    best_time: str
    end_reason: str


class MarchRecoveryResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    breathing_difficulty: float = Field(..., ge=0, le=10)
    recovery_time: str
    nose_breathing_comfort: float = Field(..., ge=0, le=10)


class OverheadReachResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    answer: str


class CrossLeggedResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    answer: str


class IntegrationResult(EntropyModel):
    energy_level: str
    coordination_level: str


class RecoveryContextResult(EntropyModel):
    morning_stiffness: str
    post_workout_soreness: str


def _slot(result_type):
    return Optional[Annotated[Union[result_type, SkippedStep], Field(discriminator='kind')]]


SitToStandSlot = _slot(SitToStandResult)
WallSitSlot = _slot(WallSitResult)
BalanceSlot = _slot(BalanceResult)
MarchRecoverySlot = _slot(MarchRecoveryResult)
OverheadReachSlot = _slot(OverheadReachResult)
CrossLeggedSlot = _slot(CrossLeggedResult)

SKIPPABLE_SLOTS = (
    'sit_to_stand',
    'wall_sit',
    'balance',
    'march_recovery',
    'overhead_reach',
    'cross_legged',
)


class AssessmentData(SessionRecord):
    """Everything captured during one Functional Age session."""

    user_profile: Optional[UserProfile] = None
    sit_to_stand: SitToStandSlot = None
    wall_sit: WallSitSlot = None
    balance: BalanceSlot = None
    march_recovery: MarchRecoverySlot = None
    overhead_reach: OverheadReachSlot = None
    cross_legged: CrossLeggedSlot = None
    integration: Optional[IntegrationResult] = None
    recovery_context: Optional[RecoveryContextResult] = None

    @field_validator(*SKIPPABLE_SLOTS, mode='before')
    @classmethod
    def _tag_slot(cls, value: Any) -> Any:
        # mobility answers used to be stored as bare strings
        if isinstance(value, str):
            return {'kind': 'completed', 'answer': value}
        return tag_legacy_slot(value)

    def results(self) -> dict:
        """Raw per-test slots keyed by their wire (camelCase) names."""
        names = SKIPPABLE_SLOTS + ('integration', 'recovery_context')
        return {type(self).model_fields[n].alias or n: getattr(self, n) for n in names}


class AssessmentResult(EntropyModel):
    functional_age: int
    chronological_age: int
    gap: int = Field(..., description="positive = older, negative = younger")
    top_drivers: List[TopDriver] = Field(default_factory=list)


class ScoreBreakdown(EntropyModel):
    """Per-component offsets behind one functional-age estimate."""

    drivers: List[DriverScore] = Field(default_factory=list)
    wall_sit: float = 0
    integration: float = 0
    recovery_context: float = 0
    fitness_adjustment: float = 0

    @property
    def total_offset(self) -> float:
        return (
            sum(d.score for d in self.drivers)
            + self.wall_sit
            + self.integration
            + self.recovery_context
            + self.fitness_adjustment
        )


__all__ = [
    'UserProfile',
    'toggle_injury',
    'SkippedStep',
    'SitToStandResult',
    'WallSitResult',
    'BalanceResult',
    'MarchRecoveryResult',
    'OverheadReachResult',
    'CrossLeggedResult',
    'IntegrationResult',
    'RecoveryContextResult',
    'AssessmentData',
    'AssessmentResult',
    'ScoreBreakdown',
    'SKIPPABLE_SLOTS',
]
