"""Digital Maturity Assessment scoring algorithm.

Answers are normalised to 0-1 contributions, combined per dimension as a
question-weighted mean scaled to 0-100, then combined across dimensions as
a dimension-weighted mean. The overall score maps to one of four maturity
bands.

This module is intentionally independent of any I/O layer so that the
scoring logic can be unit-tested without infrastructure.
"""

from collections.abc import Sequence

from dma_assessment.core.maturity import classify
from dma_assessment.core.models.assessment import (
    AnswerMap,
    AssessmentSpec,
    Dimension,
    Question,
)
from dma_assessment.core.models.results import DimensionScore, ScoresDocument
from dma_assessment.core.normalizer import normalize
from dma_assessment.core.utils import clamp, round_half_up, weighted_mean
from dma_assessment.observability import get_logger

logger = get_logger(__name__)


def aggregate_dimension(
    dimension: Dimension,
    questions: Sequence[Question],
    answers: AnswerMap,
) -> DimensionScore:
    """Compute the 0-100 score, target and gap for one dimension.

    Only questions whose ``dimension_id`` matches contribute. Unanswered
    questions contribute zero but keep their weight, so the score reflects
    the whole dimension rather than the answered part of it.

    Args:
        dimension: The dimension to score.
        questions: Candidate questions; others' dimensions are ignored.
        answers: Answers keyed by question id.

    Returns:
        DimensionScore. A dimension with no questions scores 0.

    Raises:
        AnswerTypeMismatchError: If any answer's tag mismatches its question.
    """
    dimension_questions = [q for q in questions if q.dimension_id == dimension.id]

    contributions = [normalize(q, answers.get(q.id)) for q in dimension_questions]
    weights = [q.weight for q in dimension_questions]
    score = round_half_up(clamp(weighted_mean(contributions, weights) * 100.0))

    target = round_half_up(clamp(dimension.target_level * 100.0))
    return DimensionScore(
        id=dimension.id,
        score=score,
        target=target,
        gap=max(0, target - score),
    )


def compose_overall(
    dimension_scores: Sequence[DimensionScore],
    dimensions: Sequence[Dimension],
) -> int:
    """Combine dimension scores into the 0-100 overall score.

    Args:
        dimension_scores: Scores for some or all dimensions. A dimension
            without a score counts as 0.
        dimensions: Dimensions carrying the composition weights.

    Returns:
        Weighted mean of dimension scores, rounded and clamped to 0-100.
    """
    by_id = {score.id: score.score for score in dimension_scores}
    overall = weighted_mean(
        [float(by_id.get(d.id, 0)) for d in dimensions],
        [d.weight for d in dimensions],
    )
    return round_half_up(clamp(overall))


class AssessmentScorer:
    """Scoring engine for a Digital Maturity Assessment definition.

    Binds an AssessmentSpec once and scores any number of answer maps
    against it. Holds no per-run state, so one instance can be shared.
    """

    def __init__(self, spec: AssessmentSpec) -> None:
        """Initialise the scorer.

        Args:
            spec: The assessment definition answers are scored against.
        """
        self._spec = spec

    @property
    def spec(self) -> AssessmentSpec:
        return self._spec

    def score_dimensions(self, answers: AnswerMap) -> list[DimensionScore]:
        """Score every dimension of the assessment, in definition order."""
        return [
            aggregate_dimension(dimension, self._spec.questions, answers)
            for dimension in self._spec.dimensions
        ]

    def score_assessment(self, answers: AnswerMap) -> ScoresDocument:
        """Run the full scoring pipeline for one answer map.

        Args:
            answers: Answers keyed by question id. Missing entries score 0.

        Returns:
            ScoresDocument with dimension scores, overall score and
            maturity classification.
        """
        dimension_scores = self.score_dimensions(answers)
        overall = compose_overall(dimension_scores, self._spec.dimensions)
        classification = classify(overall)

        logger.debug(
            "Assessment scoring complete",
            spec_version=self._spec.version,
            overall_score=overall,
            maturity_level=classification.level,
            answer_count=len(answers),
        )

        return ScoresDocument(
            dimensions=tuple(dimension_scores),
            overall=overall,
            maturity_classification=classification,
        )
