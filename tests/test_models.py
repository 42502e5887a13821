import pytest
from pydantic import ValidationError

from core_domain.models import DriverScore, tag_legacy_slot
from functional_age.models import (
    AssessmentData,
    CrossLeggedResult,
    OverheadReachResult,
    SkippedStep,
    UserProfile,
    toggle_injury,
)
from brain_age.models import BrainAgeProfile, detect_time_of_day


class TestUserProfile:
    def test_defaults(self):
        profile = UserProfile(chronological_age=30, fitness_level='beginner')
        assert profile.injuries == ['none']
        assert profile.has_equipment is False

    def test_empty_injuries_mean_none(self):
        assert UserProfile(chronological_age=30, fitness_level='beginner', injuries=[]).injuries == ['none']

    def test_none_is_exclusive(self):
        with pytest.raises(ValidationError):
            UserProfile(chronological_age=30, fitness_level='beginner', injuries=['none', 'knees'])

    @pytest.mark.parametrize("age", [17, 101])
    def test_age_range(self, age):
        with pytest.raises(ValidationError):
            UserProfile(chronological_age=age, fitness_level='beginner')

    def test_camel_case_aliases(self):
        profile = UserProfile.model_validate({'chronologicalAge': 52, 'fitnessLevel': 'advanced', 'hasEquipment': True})
        assert profile.chronological_age == 52
        assert profile.model_dump(by_alias=True)['fitnessLevel'] == 'advanced'


class TestToggleInjury:
    def test_area_replaces_none(self):
        assert toggle_injury(['none'], 'knees') == ['knees']

    def test_toggle_off(self):
        assert toggle_injury(['knees', 'back'], 'knees') == ['back']

    def test_none_clears_areas(self):
        assert toggle_injury(['knees', 'back'], 'none') == ['none']


class TestBrainAgeProfile:
    def test_sleep_in_half_hours(self):
        assert BrainAgeProfile(age=30, sleep_hours=6.5).sleep_hours == 6.5
        with pytest.raises(ValidationError):
            BrainAgeProfile(age=30, sleep_hours=6.3)
        with pytest.raises(ValidationError):
            BrainAgeProfile(age=30, sleep_hours=13)

    @pytest.mark.parametrize(
        "hour,expected",
        [(5, 'morning'), (11, 'morning'), (12, 'afternoon'), (17, 'evening'), (20, 'evening'), (21, 'night'), (3, 'night')],
    )
    def test_detect_time_of_day(self, hour, expected):
        assert detect_time_of_day(hour) == expected


class TestSlots:
    def test_tag_legacy_slot(self):
        assert tag_legacy_slot({'reason': 'pain'}) == {'reason': 'pain', 'kind': 'skipped'}
        assert tag_legacy_slot({'reps': 3}) == {'reps': 3, 'kind': 'completed'}
        assert tag_legacy_slot(None) is None

    def test_bare_mobility_answers(self):
        data = AssessmentData.model_validate({'overheadReach': 'compensate', 'crossLegged': {'reason': 'other', 'details': 'cast'}})
        assert data.overhead_reach == OverheadReachResult(answer='compensate')
        assert data.cross_legged == SkippedStep(reason='other', details='cast')

    def test_explicit_kind_wins(self):
        data = AssessmentData.model_validate({'crossLegged': {'kind': 'completed', 'answer': 'yes-stiff'}})
        assert data.cross_legged == CrossLeggedResult(answer='yes-stiff')

    def test_unknown_skip_reason_rejected(self):
        with pytest.raises(ValidationError):
            AssessmentData.model_validate({'wallSit': {'reason': 'bored'}})

    def test_results_keyed_by_wire_name(self):
        assert list(AssessmentData().results()) == [
            'sitToStand', 'wallSit', 'balance', 'marchRecovery', 'overheadReach', 'crossLegged',
            'integration', 'recoveryContext',
        ]


def test_driver_score_normalized():
    assert DriverScore(tag='Mobility', score=-4, max_possible=8).normalized == -0.5
    with pytest.raises(ValidationError):
        DriverScore(tag='Mobility', score=1, max_possible=0)
