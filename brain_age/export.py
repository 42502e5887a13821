from __future__ import annotations

from datetime import datetime
from typing import Optional

from core_domain.export import build_export

from .models import BrainAgeData, BrainAgeResult


def export_brain_age_results(
    data: BrainAgeData,
    result: BrainAgeResult,
    *,
    exported_at: Optional[datetime] = None,
) -> str:
    scores = {
        'brainAge': result.brain_age,
        'chronologicalAge': result.chronological_age,
        'gap': result.gap,
        'topDrivers': [d.model_dump(mode='json', by_alias=True) for d in result.top_drivers],
    }
    return build_export(data.profile, data.results(), scores, exported_at=exported_at)


__all__ = ['export_brain_age_results']
