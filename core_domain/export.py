from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from .session import iso_timestamp


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def build_export(
    profile: Any,
    results: Mapping[str, Any],
    scores: Mapping[str, Any],
    *,
    exported_at: Optional[datetime] = None,
) -> str:
    """Serialize an assessment summary to the shareable JSON document.

    Layout::

        {"assessment": {"date", "profile", "results"}, "scores": {...}}
    """
    when = exported_at or datetime.now(timezone.utc)
    document = {
        "assessment": {
            "date": iso_timestamp(when),
            "profile": _dump(profile),
            "results": {name: _dump(slot) for name, slot in results.items()},
        },
        "scores": {name: _dump(value) for name, value in scores.items()},
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def parse_export(text: str) -> Dict[str, Any]:
    document = json.loads(text)
    if not isinstance(document, dict) or "assessment" not in document or "scores" not in document:
        raise ValueError("Not an assessment export: expected 'assessment' and 'scores' keys")
    return document


__all__ = ["build_export", "parse_export"]
