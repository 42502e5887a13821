import pytest

from brain_age.capture import (
    build_color_clash_result,
    build_focus_filter_result,
    build_lightning_tap_result,
    build_memory_matrix_result,
    build_trail_switch_result,
    median,
    standard_deviation,
    trimmed_mean,
)
from brain_age.models import ColorClashTrial, FocusFilterTrial, LightningTapTrial


def _go(rt, responded=True):
    return FocusFilterTrial(stimulus_type='go', responded=responded, reaction_time=rt if responded else 0, correct=responded)


def _stroop(phase, rt, correct=True):
    return ColorClashTrial(
        word='RED',
        ink_color='blue',
        correct_answer='blue',
        user_answer='blue' if correct else 'red',
        reaction_time=rt,
        correct=correct,
        phase=phase,
    )


class TestAggregates:
    def test_trimmed_mean(self):
        assert trimmed_mean([]) == 0
        assert trimmed_mean([100, 200]) == 150
        # four samples or fewer are not trimmed
        assert trimmed_mean([100, 200, 300, 400]) == 250
        assert trimmed_mean([1000, 100, 500, 300, 200, 400]) == 350

    def test_population_standard_deviation(self):
        assert standard_deviation([]) == 0
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2)

    def test_median(self):
        assert median([]) == 0
        assert median([3, 1, 2]) == 2
        assert median([1, 2, 3, 4]) == 2.5


class TestLightningTap:
    def test_premature_taps_are_excluded(self):
        trials = [LightningTapTrial(delay=2000, reaction_time=rt) for rt in (200, 250, 300, 350, 400)]
        trials.append(LightningTapTrial(delay=1500, reaction_time=50, premature=True))
        result = build_lightning_tap_result(trials)
        assert result.trimmed_mean == 300
        assert result.standard_deviation == 71
        assert len(result.trials) == 6


class TestColorClash:
    def test_interference_uses_correct_trials_only(self):
        trials = [
            _stroop('congruent', 500),
            _stroop('congruent', 520),
            _stroop('congruent', 480),
            _stroop('incongruent', 640),
            _stroop('incongruent', 660),
            _stroop('incongruent', 650),
            _stroop('incongruent', 900, correct=False),
        ]
        result = build_color_clash_result(trials)
        assert result.median_congruent == 500
        assert result.median_incongruent == 650
        assert result.interference_score == 150
        assert result.accuracy == 0.86

    def test_no_trials(self):
        result = build_color_clash_result([])
        assert result.accuracy == 0
        assert result.interference_score == 0


class TestMemoryMatrix:
    @pytest.mark.parametrize("forward,backward,weighted", [(5, 4, 11.0), (6, 5, 13.5), (0, 0, 0)])
    def test_backward_span_weighs_more(self, forward, backward, weighted):
        assert build_memory_matrix_result(forward, backward).weighted_score == weighted


class TestFocusFilter:
    def test_errors_and_rt_penalty(self):
        trials = [_go(400) for _ in range(20)]
        trials += [
            FocusFilterTrial(stimulus_type='no-go', responded=True, reaction_time=350, correct=False),
            FocusFilterTrial(stimulus_type='no-go', responded=False, correct=True),
            FocusFilterTrial(stimulus_type='distractor', responded=False, correct=True),
            _go(0, responded=False),
        ]
        result = build_focus_filter_result(trials)
        assert result.commission_errors == 1
        assert result.omission_errors == 1
        # 100 - 8 - 5 - (400 - 300) / 30
        assert result.score == 84
        assert result.vigilance_decrement == 0

    def test_distractor_tap_is_a_commission_error(self):
        trials = [_go(300), FocusFilterTrial(stimulus_type='distractor', responded=True, reaction_time=280, correct=False)]
        assert build_focus_filter_result(trials).commission_errors == 1

    def test_vigilance_decrement(self):
        trials = [_go(400) for _ in range(20)] + [_go(460) for _ in range(20)]
        result = build_focus_filter_result(trials)
        assert result.vigilance_decrement == 60
        # mean go RT 430 → penalty 4.33
        assert result.score == 96

    def test_no_responses_floor_at_zero(self):
        result = build_focus_filter_result([_go(0, responded=False) for _ in range(25)])
        assert result.omission_errors == 25
        assert result.score == 0
        assert result.vigilance_decrement == 0


class TestTrailSwitch:
    def test_errors_add_time(self):
        result = build_trail_switch_result(20000, 50000, 2)
        assert result.ba_difference == 36000
        assert result.part_b_errors == 2
