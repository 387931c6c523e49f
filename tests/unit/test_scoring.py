"""Unit tests for the Digital Maturity Assessment scoring algorithm.

Tests cover:
- aggregate_dimension with known inputs (normalised -> 0-100)
- compose_overall weighted combination and missing dimensions
- AssessmentScorer full pipeline on the shipped definition
- Score range and idempotence over repeated runs
- Edge cases: no answers, maximal answers, dimension without questions
"""

import pytest

from dma_assessment.core.errors import AnswerTypeMismatchError
from dma_assessment.core.models import (
    Answer,
    AssessmentSpec,
    CheckboxesAnswer,
    CheckboxesQuestion,
    Dimension,
    DimensionScore,
    DualCell,
    Option,
    Question,
    QuestionType,
    ScaleAnswer,
    ScaleQuestion,
    ScaleTableAnswer,
    TableDualCheckboxesAnswer,
    TriState,
    TriStateTableAnswer,
)
from dma_assessment.core.scoring import AssessmentScorer, aggregate_dimension, compose_overall


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _max_answer(question: Question) -> Answer:
    """Build the highest-scoring answer for a shipped question."""
    if question.type is QuestionType.CHECKBOXES:
        return CheckboxesAnswer(selected=tuple(o.id for o in question.options if o.weight > 0))
    if question.type is QuestionType.TABLE_DUAL_CHECKBOXES:
        return TableDualCheckboxesAnswer(
            rows={r.id: DualCell(left=True, right=True) for r in question.rows}
        )
    if question.type is QuestionType.SCALE_TABLE:
        return ScaleTableAnswer(rows={r.id: 5 for r in question.rows})
    if question.type is QuestionType.TRI_STATE_TABLE:
        return TriStateTableAnswer(rows={r.id: TriState.YES for r in question.rows})
    raise AssertionError(f"Unexpected shipped question type {question.type}")


def _partial_answer(question: Question) -> Answer:
    """Build a mid-range answer for a shipped question."""
    if question.type is QuestionType.CHECKBOXES:
        return CheckboxesAnswer(selected=tuple(o.id for o in question.options[::2]))
    if question.type is QuestionType.TABLE_DUAL_CHECKBOXES:
        return TableDualCheckboxesAnswer(rows={r.id: DualCell(right=True) for r in question.rows})
    if question.type is QuestionType.SCALE_TABLE:
        return ScaleTableAnswer(rows={r.id: i % 6 for i, r in enumerate(question.rows)})
    return TriStateTableAnswer(rows={r.id: TriState.PARTIAL for r in question.rows})


@pytest.fixture()
def scorer(spec: AssessmentSpec) -> AssessmentScorer:
    """Provide an AssessmentScorer over the shipped definition."""
    return AssessmentScorer(spec)


# ---------------------------------------------------------------------------
# aggregate_dimension
# ---------------------------------------------------------------------------


class TestAggregateDimension:
    """Per-dimension weighted mean, target and gap."""

    @pytest.fixture()
    def dimension(self) -> Dimension:
        return Dimension(id="strategy", name="Strategy", target_level=1.0)

    @pytest.fixture()
    def questions(self) -> list[Question]:
        return [
            CheckboxesQuestion(
                id="CB",
                dimension_id="strategy",
                options=tuple(Option(f"o{i}") for i in range(5)),
            ),
            ScaleQuestion(id="SC", dimension_id="strategy"),
        ]

    def test_checkbox_and_scale_scenario(self, dimension: Dimension, questions: list[Question]) -> None:
        """3-of-5 checkboxes (0.6) and scale 4 (0.8) give 70, target 100, gap 30."""
        answers = {
            "CB": CheckboxesAnswer(selected=("o0", "o1", "o2")),
            "SC": ScaleAnswer(value=4),
        }
        result = aggregate_dimension(dimension, questions, answers)
        assert result == DimensionScore(id="strategy", score=70, target=100, gap=30)

    def test_unanswered_question_keeps_weight(self, dimension: Dimension, questions: list[Question]) -> None:
        result = aggregate_dimension(dimension, questions, {"SC": ScaleAnswer(value=5)})
        assert result.score == 50

    def test_question_weights_apply(self, dimension: Dimension) -> None:
        questions = [
            ScaleQuestion(id="A", dimension_id="strategy", weight=3.0),
            ScaleQuestion(id="B", dimension_id="strategy", weight=1.0),
        ]
        result = aggregate_dimension(dimension, questions, {"A": ScaleAnswer(value=5)})
        assert result.score == 75

    def test_other_dimension_questions_ignored(self, dimension: Dimension) -> None:
        questions = [
            ScaleQuestion(id="A", dimension_id="strategy"),
            ScaleQuestion(id="B", dimension_id="elsewhere"),
        ]
        result = aggregate_dimension(dimension, questions, {"A": ScaleAnswer(value=5)})
        assert result.score == 100

    def test_dimension_without_questions_scores_zero(self, dimension: Dimension) -> None:
        result = aggregate_dimension(dimension, [], {})
        assert result.score == 0
        assert result.gap == 100

    def test_halves_round_up(self, dimension: Dimension) -> None:
        """One of four questions at 0.5 gives 12.5, which rounds to 13, not 12."""
        questions = [
            ScaleQuestion(id="A", dimension_id="strategy"),
            ScaleQuestion(id="B", dimension_id="strategy"),
            ScaleQuestion(id="C", dimension_id="strategy"),
            ScaleQuestion(id="D", dimension_id="strategy"),
        ]
        result = aggregate_dimension(dimension, questions, {"A": ScaleAnswer(value=2.5)})
        assert result.score == 13

    def test_target_level_below_one(self) -> None:
        dimension = Dimension(id="strategy", name="Strategy", target_level=0.5)
        questions = [ScaleQuestion(id="A", dimension_id="strategy")]
        result = aggregate_dimension(dimension, questions, {"A": ScaleAnswer(value=5)})
        assert result.target == 50
        assert result.gap == 0

    def test_mismatch_propagates(self, dimension: Dimension, questions: list[Question]) -> None:
        with pytest.raises(AnswerTypeMismatchError):
            aggregate_dimension(dimension, questions, {"SC": CheckboxesAnswer(selected=("o0",))})


# ---------------------------------------------------------------------------
# compose_overall
# ---------------------------------------------------------------------------


class TestComposeOverall:
    """Dimension-weighted overall score."""

    @pytest.fixture()
    def dimensions(self) -> list[Dimension]:
        return [Dimension(id=f"d{i}", name=f"D{i}") for i in range(6)]

    def test_six_equal_dimensions_scenario(self, dimensions: list[Dimension]) -> None:
        scores = [
            DimensionScore(id=f"d{i}", score=s, target=100, gap=100 - s)
            for i, s in enumerate([70, 60, 80, 50, 40, 90])
        ]
        assert compose_overall(scores, dimensions) == 65

    def test_missing_dimension_counts_zero(self, dimensions: list[Dimension]) -> None:
        scores = [DimensionScore(id="d0", score=60, target=100, gap=40)]
        assert compose_overall(scores, dimensions) == 10

    def test_dimension_weights_apply(self) -> None:
        dimensions = [
            Dimension(id="a", name="A", weight=3.0),
            Dimension(id="b", name="B", weight=1.0),
        ]
        scores = [
            DimensionScore(id="a", score=100, target=100, gap=0),
            DimensionScore(id="b", score=0, target=100, gap=100),
        ]
        assert compose_overall(scores, dimensions) == 75

    def test_zero_total_weight_is_zero(self) -> None:
        dimensions = [Dimension(id="a", name="A", weight=0.0)]
        scores = [DimensionScore(id="a", score=80, target=100, gap=20)]
        assert compose_overall(scores, dimensions) == 0


# ---------------------------------------------------------------------------
# AssessmentScorer
# ---------------------------------------------------------------------------


class TestAssessmentScorer:
    """Full pipeline over the shipped definition."""

    def test_no_answers_scores_zero(self, scorer: AssessmentScorer) -> None:
        result = scorer.score_assessment({})
        assert result.overall == 0
        assert all(d.score == 0 for d in result.dimensions)
        assert result.maturity_classification.level == 1

    def test_maximal_answers_score_hundred(self, scorer: AssessmentScorer, spec: AssessmentSpec) -> None:
        answers = {q.id: _max_answer(q) for q in spec.questions}
        result = scorer.score_assessment(answers)
        assert result.overall == 100
        assert all(d.score == 100 and d.gap == 0 for d in result.dimensions)
        assert result.maturity_classification.band == "advanced"

    def test_dimensions_in_definition_order(self, scorer: AssessmentScorer, spec: AssessmentSpec) -> None:
        result = scorer.score_assessment({})
        assert [d.id for d in result.dimensions] == [d.id for d in spec.dimensions]

    def test_scores_within_range(self, scorer: AssessmentScorer, spec: AssessmentSpec) -> None:
        answers = {q.id: _partial_answer(q) for q in spec.questions}
        result = scorer.score_assessment(answers)
        assert 0 <= result.overall <= 100
        for dimension in result.dimensions:
            assert 0 <= dimension.score <= 100
            assert 0 <= dimension.target <= 100
            assert dimension.gap == max(0, dimension.target - dimension.score)

    def test_repeated_runs_are_equal(self, scorer: AssessmentScorer, spec: AssessmentSpec) -> None:
        answers = {q.id: _partial_answer(q) for q in spec.questions}
        assert scorer.score_assessment(answers) == scorer.score_assessment(answers)

    def test_wire_shape(self, scorer: AssessmentScorer) -> None:
        document = scorer.score_assessment({}).to_dict()
        assert set(document) == {"dimensions", "overall", "maturityClassification"}
        assert document["dimensions"]["automation"] == {"score": 0, "target": 100, "gap": 100}
        assert document["maturityClassification"] == {"level": 1, "label": "Basic", "band": "basic"}
