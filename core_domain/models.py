from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Impact = Literal["positive", "negative", "neutral"]


class EntropyModel(BaseModel):
    """Base for every record: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SkipMarker(EntropyModel):
    """A test or game the user chose not to perform."""

    kind: Literal["skipped"] = "skipped"
    reason: str
    details: Optional[str] = None


class DriverScore(EntropyModel):
    """Per-driver contribution used for ranking (functional flow)."""

    tag: str
    score: float = Field(..., description="Signed offset in years.")
    max_possible: float = Field(..., gt=0)

    @property
    def normalized(self) -> float:
        return self.score / self.max_possible


class TopDriver(EntropyModel):
    tag: str
    impact: Impact
    suggestion: str


class SessionRecord(EntropyModel):
    """Shared shape of a saved assessment session."""

    current_step: int = Field(0, ge=0)
    completed_at: Optional[str] = None


def tag_legacy_slot(value: Any) -> Any:
    """Add the explicit ``kind`` tag to records stored without one.

    Older saved sessions marked a skip only by the presence of a ``reason`` key.
    """
    if isinstance(value, dict) and "kind" not in value:
        kind = "skipped" if "reason" in value else "completed"
        return {**value, "kind": kind}
    return value


__all__ = [
    "Impact",
    "EntropyModel",
    "SkipMarker",
    "DriverScore",
    "TopDriver",
    "SessionRecord",
    "tag_legacy_slot",
]
