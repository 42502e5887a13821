import pytest

from core_domain.storage import MemoryKeyValueStore, set_default_storage
from functional_age.models import (
    AssessmentData,
    IntegrationResult,
    RecoveryContextResult,
    SkippedStep,
    UserProfile,
)
from brain_age.models import BrainAgeData, BrainAgeProfile, SkippedGame


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture(autouse=True)
def _isolated_default_storage():
    set_default_storage(MemoryKeyValueStore())
    yield
    set_default_storage(None)


@pytest.fixture
def profile():
    return UserProfile(chronological_age=45, fitness_level='intermediate', injuries=['none'])


@pytest.fixture
def all_skipped(profile):
    skip = SkippedStep(reason='pain')
    return AssessmentData(
        user_profile=profile,
        sit_to_stand=skip,
        wall_sit=skip,
        balance=skip,
        march_recovery=skip,
        overhead_reach=skip,
        cross_legged=skip,
        integration=IntegrationResult(energy_level='neutral', coordination_level='functional-but-stiff'),
        recovery_context=RecoveryContextResult(morning_stiffness='<5m', post_workout_soreness='1-2d'),
    )


@pytest.fixture
def brain_profile():
    return BrainAgeProfile(age=30, sleep_hours=7.5, caffeine_status='light', time_of_day='morning')


@pytest.fixture
def brain_all_skipped(brain_profile):
    skip = SkippedGame(reason='too-difficult')
    return BrainAgeData(
        profile=brain_profile,
        lightning_tap=skip,
        color_clash=skip,
        memory_matrix=skip,
        focus_filter=skip,
        trail_switch=skip,
    )
