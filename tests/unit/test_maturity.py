"""Unit tests for maturity classification, gap analysis and progression."""

import pytest

from dma_assessment.core.maturity import (
    DEFAULT_MATURITY_BANDS,
    analyze_gaps,
    classify,
    improvement_priorities,
    maturity_progression,
)
from dma_assessment.core.models import DimensionScore
from dma_assessment.core.utils import clamp, round_half_up, weighted_mean


def _score(dimension_id: str, score: int, target: int = 100) -> DimensionScore:
    return DimensionScore(id=dimension_id, score=score, target=target, gap=max(0, target - score))


class TestClassify:
    """Band boundaries have inclusive lower bounds."""

    @pytest.mark.parametrize(
        ("score", "level", "label"),
        [
            (0, 1, "Basic"),
            (25, 1, "Basic"),
            (26, 2, "Average"),
            (50, 2, "Average"),
            (51, 3, "Moderately Advanced"),
            (75, 3, "Moderately Advanced"),
            (76, 4, "Advanced"),
            (100, 4, "Advanced"),
        ],
    )
    def test_boundaries(self, score: int, level: int, label: str) -> None:
        result = classify(score)
        assert result.level == level
        assert result.label == label

    def test_overall_65_is_moderately_advanced(self) -> None:
        assert classify(65).band == "moderately_advanced"

    def test_out_of_range_is_clamped(self) -> None:
        assert classify(-10).level == 1
        assert classify(140).level == 4

    def test_fractional_between_bands_falls_low(self) -> None:
        assert classify(25.5).level == 1

    def test_bands_cover_full_range(self) -> None:
        assert DEFAULT_MATURITY_BANDS[0].min_score == 0
        assert DEFAULT_MATURITY_BANDS[-1].max_score == 100
        for lower, upper in zip(DEFAULT_MATURITY_BANDS, DEFAULT_MATURITY_BANDS[1:]):
            assert upper.min_score == lower.max_score + 1


class TestGapAnalysis:
    """Severity grouping and improvement priorities."""

    @pytest.fixture()
    def scores(self) -> list[DimensionScore]:
        return [
            _score("strategy", 30),  # gap 70
            _score("readiness", 70),  # gap 30
            _score("people", 85),  # gap 15
            _score("data", 92),  # gap 8
            _score("green", 97),  # gap 3
        ]

    def test_groups_by_severity(self, scores: list[DimensionScore]) -> None:
        gaps = analyze_gaps(scores)
        assert [d.id for d in gaps.critical] == ["strategy"]
        assert [d.id for d in gaps.moderate] == ["readiness"]
        assert [d.id for d in gaps.minor] == ["people"]
        assert [d.id for d in gaps.strengths] == ["green", "data"]

    def test_priorities_skip_small_gaps(self, scores: list[DimensionScore]) -> None:
        priorities = improvement_priorities(scores)
        assert [p.dimension_id for p in priorities] == ["strategy", "readiness", "people", "data"]
        assert [p.priority for p in priorities] == ["critical", "moderate", "minor", "minor"]

    def test_priorities_sorted_by_gap_within_level(self) -> None:
        priorities = improvement_priorities([_score("a", 55), _score("b", 45)])
        assert [p.dimension_id for p in priorities] == ["b", "a"]


class TestMaturityProgression:
    """Distance to a target band."""

    def test_levels_to_advance(self) -> None:
        progression = maturity_progression(40, 80)
        assert progression.current_level.level == 2
        assert progression.target_level.level == 4
        assert progression.levels_to_advance == 2

    def test_progress_within_band(self) -> None:
        progression = maturity_progression(38, 100)
        # band 26-50 spans 24 points; 12 covered
        assert progression.progress_in_current_level == pytest.approx(0.5)
        assert progression.remaining_in_current_level == pytest.approx(0.5)


class TestNumericHelpers:
    """Rounding and averaging used across the engine."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (72.5, 73), (3.49, 3), (-2.5, -2), (0.0, 0)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    def test_clamp(self) -> None:
        assert clamp(120) == 100
        assert clamp(-4) == 0
        assert clamp(0.4, 0.0, 1.0) == 0.4

    def test_weighted_mean_zero_weight(self) -> None:
        assert weighted_mean([10.0, 20.0], [0.0, 0.0]) == 0.0

    def test_weighted_mean_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            weighted_mean([1.0], [1.0, 2.0])
