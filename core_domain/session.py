"""Immutable session helpers shared by both assessment flows.

Every operation returns a new session value. Storage is touched only by
``save_session`` / ``load_session`` / ``reset_session``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Type, TypeVar

from pydantic import ValidationError

from .models import SessionRecord
from .storage import KeyValueStore, get_default_storage


logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SessionRecord)


def update_slot(data: S, key: str, value: Any) -> S:
    """Return a copy of ``data`` with one field replaced (and re-validated)."""
    if key not in type(data).model_fields:
        raise KeyError(f"Unknown session field: {key}")
    payload = data.model_dump()
    payload[key] = value
    return type(data).model_validate(payload)


def go_to_step(data: S, step: int, total_steps: int) -> S:
    step = max(0, min(int(step), total_steps))
    return data.model_copy(update={"current_step": step})


def next_step(data: S, total_steps: int) -> S:
    return go_to_step(data, data.current_step + 1, total_steps)


def prev_step(data: S, total_steps: int) -> S:
    return go_to_step(data, data.current_step - 1, total_steps)


def progress(data: SessionRecord, total_steps: int) -> float:
    """Completion percentage; the last step counts as 100."""
    return min(100.0, data.current_step / (total_steps - 1) * 100)


def mark_completed(data: S, when: Optional[datetime] = None) -> S:
    when = when or datetime.now(timezone.utc)
    return data.model_copy(update={"completed_at": iso_timestamp(when)})


def iso_timestamp(when: datetime) -> str:
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def save_session(data: SessionRecord, key: str, store: Optional[KeyValueStore] = None) -> bool:
    store = store or get_default_storage()
    return store.set_item(key, data.model_dump_json(by_alias=True))


def load_session(
    model: Type[S],
    key: str,
    store: Optional[KeyValueStore] = None,
    total_steps: Optional[int] = None,
) -> S:
    """Read a saved session; missing or corrupt entries load as a fresh session.

    With ``total_steps`` the stored step is clamped to the flow's range.
    """
    store = store or get_default_storage()
    raw = store.get_item(key)
    if raw is None:
        return model()
    try:
        data = model.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Discarding unreadable session %s: %s", key, e)
        return model()
    if total_steps is not None and data.current_step > total_steps:
        logger.warning("Session %s step %s past the last step; clamping", key, data.current_step)
        data = go_to_step(data, data.current_step, total_steps)
    return data


def reset_session(model: Type[S], key: str, store: Optional[KeyValueStore] = None) -> S:
    store = store or get_default_storage()
    store.remove_item(key)
    return model()


__all__ = [
    "update_slot",
    "go_to_step",
    "next_step",
    "prev_step",
    "progress",
    "mark_completed",
    "iso_timestamp",
    "save_session",
    "load_session",
    "reset_session",
]
