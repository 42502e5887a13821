from __future__ import annotations

from typing import Any, Optional

from core_domain import session as _session
from core_domain.storage import KeyValueStore

from .models import AssessmentData


STORAGE_KEY = 'entropy-age-assessment'
# Landing, Setup, eight tests, Results
TOTAL_STEPS = 11


def new_assessment() -> AssessmentData:
    return AssessmentData()


def update_data(data: AssessmentData, key: str, value: Any) -> AssessmentData:
    return _session.update_slot(data, key, value)


def go_to_step(data: AssessmentData, step: int) -> AssessmentData:
    return _session.go_to_step(data, step, TOTAL_STEPS)


def next_step(data: AssessmentData) -> AssessmentData:
    return _session.next_step(data, TOTAL_STEPS)


def prev_step(data: AssessmentData) -> AssessmentData:
    return _session.prev_step(data, TOTAL_STEPS)


def progress(data: AssessmentData) -> float:
    return _session.progress(data, TOTAL_STEPS)


def save(data: AssessmentData, store: Optional[KeyValueStore] = None) -> bool:
    return _session.save_session(data, STORAGE_KEY, store)


def load(store: Optional[KeyValueStore] = None) -> AssessmentData:
    return _session.load_session(AssessmentData, STORAGE_KEY, store, TOTAL_STEPS)


def reset(store: Optional[KeyValueStore] = None) -> AssessmentData:
    return _session.reset_session(AssessmentData, STORAGE_KEY, store)


__all__ = [
    'new_assessment',
    'update_data',
    'go_to_step',
    'next_step',
    'prev_step',
    'progress',
    'save',
    'load',
    'reset',
]
