from __future__ import annotations

from datetime import datetime
from typing import Optional

from core_domain.export import build_export

from .models import AssessmentData, AssessmentResult


def export_results(
    data: AssessmentData,
    result: AssessmentResult,
    *,
    exported_at: Optional[datetime] = None,
) -> str:
    """Shareable JSON summary of a Functional Age session and its scores."""
    scores = {
        'functionalAge': result.functional_age,
        'chronologicalAge': result.chronological_age,
        'gap': result.gap,
        'topDrivers': [d.model_dump(mode='json', by_alias=True) for d in result.top_drivers],
    }
    return build_export(data.user_profile, data.results(), scores, exported_at=exported_at)


__all__ = ['export_results']
