from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field, field_validator

from core_domain.models import EntropyModel, SessionRecord, SkipMarker, TopDriver, tag_legacy_slot


CaffeineStatus = Literal['none', 'light', 'moderate', 'heavy']
TimeOfDay = Literal['morning', 'afternoon', 'evening', 'night']
GameSkipReason = Literal['too-difficult', 'accessibility', 'other']
BrainDomainTag = Literal[
    'Processing Speed',
    'Executive Function',
    'Working Memory',
    'Attention',
    'Cognitive Flexibility',
]


def detect_time_of_day(hour: int) -> TimeOfDay:
    if 5 <= hour < 12:
        return 'morning'
    if 12 <= hour < 17:
        return 'afternoon'
    if 17 <= hour < 21:
        return 'evening'
    return 'night'


class BrainAgeProfile(EntropyModel):
    age: int = Field(..., ge=18, le=100)
    sleep_hours: float = Field(7, ge=0, le=12, multiple_of=0.5)
    caffeine_status: str = Field('none', description="none / light / moderate / heavy")
    # informational only; not read by any scorer
    time_of_day: Optional[TimeOfDay] = None


class SkippedGame(SkipMarker):
    reason: GameSkipReason


# ---------------------------- Trials ----------------------------


class LightningTapTrial(EntropyModel):
    delay: float = Field(..., ge=0, description="ms before the stimulus appeared")
    reaction_time: float = Field(..., ge=0, description="ms from stimulus to tap")
    premature: bool = False


class ColorClashTrial(EntropyModel):
    word: str
    ink_color: str
    correct_answer: str
    user_answer: str
    reaction_time: float = Field(..., ge=0)
    correct: bool
    phase: Literal['congruent', 'incongruent', 'mixed']


class FocusFilterTrial(EntropyModel):
    stimulus_type: Literal['go', 'no-go', 'distractor']
    responded: bool
    reaction_time: float = Field(0, ge=0, description="ms, 0 if no response")
    correct: bool


# ---------------------------- Game results ----------------------------


class LightningTapResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    trials: List[LightningTapTrial] = Field(default_factory=list)
    trimmed_mean: float = Field(..., ge=0)
    standard_deviation: float = Field(..., ge=0)


class ColorClashResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    trials: List[ColorClashTrial] = Field(default_factory=list)
    median_congruent: float
    median_incongruent: float
    interference_score: float
    accuracy: float = Field(..., ge=0, le=1)


class MemoryMatrixResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    forward_span: int = Field(..., ge=0)
    backward_span: int = Field(..., ge=0)
    weighted_score: float = Field(..., ge=0)


class FocusFilterResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    trials: List[FocusFilterTrial] = Field(default_factory=list)
    commission_errors: int = Field(0, ge=0)
    omission_errors: int = Field(0, ge=0)
    score: float = Field(..., ge=0, le=100)
    vigilance_decrement: float = 0


class TrailSwitchResult(EntropyModel):
    kind: Literal['completed'] = 'completed'
    part_a_time: float = Field(..., ge=0)
    part_b_time: float = Field(..., ge=0)
    part_b_errors: int = Field(0, ge=0)
    ba_difference: float


def _slot(result_type):
    return Optional[Annotated[Union[result_type, SkippedGame], Field(discriminator='kind')]]


LightningTapSlot = _slot(LightningTapResult)
ColorClashSlot = _slot(ColorClashResult)
MemoryMatrixSlot = _slot(MemoryMatrixResult)
FocusFilterSlot = _slot(FocusFilterResult)
TrailSwitchSlot = _slot(TrailSwitchResult)

GAME_SLOTS = ('lightning_tap', 'color_clash', 'memory_matrix', 'focus_filter', 'trail_switch')


class BrainAgeData(SessionRecord):
    """Everything captured during one Brain Age session."""

    profile: Optional[BrainAgeProfile] = None
    lightning_tap: LightningTapSlot = None
    color_clash: ColorClashSlot = None
    memory_matrix: MemoryMatrixSlot = None
    focus_filter: FocusFilterSlot = None
    trail_switch: TrailSwitchSlot = None

    @field_validator(*GAME_SLOTS, mode='before')
    @classmethod
    def _tag_slot(cls, value: Any) -> Any:
        return tag_legacy_slot(value)

    def results(self) -> dict:
        return {type(self).model_fields[n].alias or n: getattr(self, n) for n in GAME_SLOTS}


# ---------------------------- Scores ----------------------------


class DomainScore(EntropyModel):
    domain: BrainDomainTag
    percentile: float = Field(..., ge=0, le=100)
    age_offset: float = Field(..., description="years; negative = younger")
    weight: float = Field(..., ge=0, le=1)


class BrainAgeResult(EntropyModel):
    brain_age: int
    chronological_age: int
    gap: int = Field(..., description="positive = older brain, negative = younger")
    domain_scores: List[DomainScore] = Field(default_factory=list)
    top_drivers: List[TopDriver] = Field(default_factory=list)
    contextual_note: Optional[str] = None


__all__ = [
    'detect_time_of_day',
    'BrainAgeProfile',
    'SkippedGame',
    'LightningTapTrial',
    'ColorClashTrial',
    'FocusFilterTrial',
    'LightningTapResult',
    'ColorClashResult',
    'MemoryMatrixResult',
    'FocusFilterResult',
    'TrailSwitchResult',
    'BrainAgeData',
    'DomainScore',
    'BrainAgeResult',
    'GAME_SLOTS',
]
