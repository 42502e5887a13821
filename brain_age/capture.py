"""Build game result records from trial-level data.

These are the only aggregates computed on the game side (trimmed mean,
median, standard deviation, spans, go/no-go composite); everything else is
left to ``brain_age.scoring``. Timer-driven non-responses must already be
recorded as ``reaction_time=0, responded=False``.
"""

from __future__ import annotations

import statistics
from typing import List, Sequence

from core_domain.utils import clamp, round_half_up

from .models import (
    ColorClashResult,
    ColorClashTrial,
    FocusFilterResult,
    FocusFilterTrial,
    LightningTapResult,
    LightningTapTrial,
    MemoryMatrixResult,
    TrailSwitchResult,
)


TRIM_EACH_SIDE = 2
TRAIL_ERROR_PENALTY_MS = 3000
FORWARD_SPAN_WEIGHT = 1.0
BACKWARD_SPAN_WEIGHT = 1.5
VIGILANCE_WINDOW = 20
DEFAULT_GO_RT_MS = 500


def trimmed_mean(times: Sequence[float]) -> float:
    """Mean after dropping the fastest and slowest samples (only when > 4)."""
    if not times:
        return 0.0
    if len(times) <= 2 * TRIM_EACH_SIDE:
        return statistics.mean(times)
    ordered = sorted(times)
    return statistics.mean(ordered[TRIM_EACH_SIDE:-TRIM_EACH_SIDE])


def standard_deviation(times: Sequence[float]) -> float:
    if not times:
        return 0.0
    return statistics.pstdev(times)


def median(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return statistics.median(values)


def _mean_or_zero(values: List[float]) -> float:
    return statistics.mean(values) if values else 0.0


def build_lightning_tap_result(trials: Sequence[LightningTapTrial]) -> LightningTapResult:
    valid = [t.reaction_time for t in trials if not t.premature]
    return LightningTapResult(
        trials=list(trials),
        trimmed_mean=round_half_up(trimmed_mean(valid)),
        standard_deviation=round_half_up(standard_deviation(valid)),
    )


def build_color_clash_result(trials: Sequence[ColorClashTrial]) -> ColorClashResult:
    congruent = [t.reaction_time for t in trials if t.phase == 'congruent' and t.correct]
    incongruent = [t.reaction_time for t in trials if t.phase == 'incongruent' and t.correct]
    med_con = median(congruent)
    med_incon = median(incongruent)
    accuracy = sum(1 for t in trials if t.correct) / len(trials) if trials else 0.0
    return ColorClashResult(
        trials=list(trials),
        median_congruent=round_half_up(med_con),
        median_incongruent=round_half_up(med_incon),
        interference_score=round_half_up(med_incon - med_con),
        accuracy=round_half_up(accuracy * 100) / 100,
    )


def build_memory_matrix_result(forward_span: int, backward_span: int) -> MemoryMatrixResult:
    """Spans are the longest sequence recalled before two consecutive failures."""
    weighted = forward_span * FORWARD_SPAN_WEIGHT + backward_span * BACKWARD_SPAN_WEIGHT
    return MemoryMatrixResult(
        forward_span=forward_span,
        backward_span=backward_span,
        weighted_score=round_half_up(weighted * 10) / 10,
    )


def build_focus_filter_result(trials: Sequence[FocusFilterTrial]) -> FocusFilterResult:
    go = [t for t in trials if t.stimulus_type == 'go']
    # a tap on either no-go or distractor counts as a commission error
    commission = sum(1 for t in trials if t.stimulus_type != 'go' and t.responded)
    omission = sum(1 for t in go if not t.responded)

    go_rts = [t.reaction_time for t in go if t.responded and t.reaction_time > 0]
    mean_go_rt = statistics.mean(go_rts) if go_rts else DEFAULT_GO_RT_MS
    rt_penalty = min(15.0, max(0.0, (mean_go_rt - 300) / 30))
    score = clamp(100 - 8 * commission - 5 * omission - rt_penalty, 0, 100)

    first = [t.reaction_time for t in go[:VIGILANCE_WINDOW] if t.responded]
    last = [t.reaction_time for t in go[-VIGILANCE_WINDOW:] if t.responded]
    return FocusFilterResult(
        trials=list(trials),
        commission_errors=commission,
        omission_errors=omission,
        score=round_half_up(score),
        vigilance_decrement=round_half_up(_mean_or_zero(last) - _mean_or_zero(first)),
    )


def build_trail_switch_result(part_a_time: float, part_b_time: float, part_b_errors: int) -> TrailSwitchResult:
    return TrailSwitchResult(
        part_a_time=part_a_time,
        part_b_time=part_b_time,
        part_b_errors=part_b_errors,
        ba_difference=part_b_time - part_a_time + part_b_errors * TRAIL_ERROR_PENALTY_MS,
    )


__all__ = [
    'trimmed_mean',
    'standard_deviation',
    'median',
    'build_lightning_tap_result',
    'build_color_clash_result',
    'build_memory_matrix_result',
    'build_focus_filter_result',
    'build_trail_switch_result',
]
