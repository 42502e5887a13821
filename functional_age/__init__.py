"""Functional Age assessment.

Turns a user profile plus self-reported physical test outcomes (sit-to-stand,
wall sit, balance, march + recovery, mobility, integration and recovery
context) into an estimated functional age and the three drivers that moved it
most.
"""

from .models import (
    AssessmentData,
    AssessmentResult,
    BalanceResult,
    CrossLeggedResult,
    IntegrationResult,
    MarchRecoveryResult,
    OverheadReachResult,
    RecoveryContextResult,
    SitToStandResult,
    SkippedStep,
    UserProfile,
    WallSitResult,
    toggle_injury,
)
from .scoring import calculate_results, score_breakdown
from .export import export_results

__all__ = [
    "UserProfile",
    "toggle_injury",
    "SkippedStep",
    "SitToStandResult",
    "WallSitResult",
    "BalanceResult",
    "MarchRecoveryResult",
    "OverheadReachResult",
    "CrossLeggedResult",
    "IntegrationResult",
    "RecoveryContextResult",
    "AssessmentData",
    "AssessmentResult",
    "calculate_results",
    "score_breakdown",
    "export_results",
]
