"""Brain Age assessment.

Scores five in-browser mini-games (reaction time, Stroop, spatial span,
go/no-go, trail switching) against age-bracket norms and combines them into
an estimated brain age, per-domain percentiles and ranked drivers.
"""

from .models import (
    BrainAgeData,
    BrainAgeProfile,
    BrainAgeResult,
    ColorClashResult,
    DomainScore,
    FocusFilterResult,
    LightningTapResult,
    MemoryMatrixResult,
    SkippedGame,
    TrailSwitchResult,
    detect_time_of_day,
)
from .scoring import calculate_brain_age_results
from .export import export_brain_age_results

__all__ = [
    "BrainAgeProfile",
    "detect_time_of_day",
    "SkippedGame",
    "LightningTapResult",
    "ColorClashResult",
    "MemoryMatrixResult",
    "FocusFilterResult",
    "TrailSwitchResult",
    "BrainAgeData",
    "DomainScore",
    "BrainAgeResult",
    "calculate_brain_age_results",
    "export_brain_age_results",
]
