from __future__ import annotations

from typing import Any, Optional

from core_domain import session as _session
from core_domain.storage import KeyValueStore

from .models import BrainAgeData


STORAGE_KEY = 'entropy-brain-age'
# Landing, Setup, five games, Results
TOTAL_STEPS = 8


def new_assessment() -> BrainAgeData:
    return BrainAgeData()


def update_data(data: BrainAgeData, key: str, value: Any) -> BrainAgeData:
    return _session.update_slot(data, key, value)


def go_to_step(data: BrainAgeData, step: int) -> BrainAgeData:
    return _session.go_to_step(data, step, TOTAL_STEPS)


def next_step(data: BrainAgeData) -> BrainAgeData:
    return _session.next_step(data, TOTAL_STEPS)


def prev_step(data: BrainAgeData) -> BrainAgeData:
    return _session.prev_step(data, TOTAL_STEPS)


def progress(data: BrainAgeData) -> float:
    return _session.progress(data, TOTAL_STEPS)


def save(data: BrainAgeData, store: Optional[KeyValueStore] = None) -> bool:
    return _session.save_session(data, STORAGE_KEY, store)


def load(store: Optional[KeyValueStore] = None) -> BrainAgeData:
    return _session.load_session(BrainAgeData, STORAGE_KEY, store, TOTAL_STEPS)


def reset(store: Optional[KeyValueStore] = None) -> BrainAgeData:
    return _session.reset_session(BrainAgeData, STORAGE_KEY, store)
