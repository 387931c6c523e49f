"""Service layer assembling the results view for one assessment.

Implements the results flow:
    1. score_assessment()  scores the answers and classifies the overall score
    2. build_results()     adds gap priorities and the peer comparison

Access tiers gate what the comparison may contain:
    T0 (anonymous)        overall comparison only
    T1 (expanded access)  overall plus one comparison per dimension

The service never verifies the tier itself; the caller passes the gate.
A failed comparison never fails the results: they are returned with
``benchmark=None`` instead.
"""

from dataclasses import dataclass, field

from dma_assessment.core.benchmarks import BenchmarkTable, generate_benchmark_comparison
from dma_assessment.core.errors import DmaAssessmentError
from dma_assessment.core.maturity import ImprovementPriority, improvement_priorities
from dma_assessment.core.models.assessment import AnswerMap, AssessmentSpec
from dma_assessment.core.models.results import (
    BenchmarkComparison,
    CompanyDetails,
    ScoresDocument,
)
from dma_assessment.core.normalizer import calculate_progress, validate_answers
from dma_assessment.core.scoring import AssessmentScorer
from dma_assessment.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssessmentResults:
    """Everything the results page shows for one assessment.

    Attributes:
        scores: The scores document.
        benchmark: Peer comparison, or None when it could not be built.
        priorities: Dimensions ranked for improvement.
        progress: Percentage of questions with a meaningful answer.
        missing_required: Required question ids without an answer.
        has_expanded_access: Whether per-dimension comparisons were allowed.
    """

    scores: ScoresDocument
    benchmark: BenchmarkComparison | None
    priorities: list[ImprovementPriority] = field(default_factory=list)
    progress: float = 0.0
    missing_required: list[str] = field(default_factory=list)
    has_expanded_access: bool = False


class ResultsService:
    """Builds scores and peer comparisons for submitted answers.

    Holds the assessment definition and the benchmark table injected at
    construction time. Contains no framework-specific code.
    """

    def __init__(self, spec: AssessmentSpec, benchmark_table: BenchmarkTable) -> None:
        """Initialise the service.

        Args:
            spec: Assessment definition answers are scored against.
            benchmark_table: Cohort statistics used for comparisons.
        """
        self._scorer = AssessmentScorer(spec)
        self._table = benchmark_table

    @property
    def spec(self) -> AssessmentSpec:
        return self._scorer.spec

    @property
    def benchmark_table(self) -> BenchmarkTable:
        return self._table

    def score_assessment(self, answers: AnswerMap) -> ScoresDocument:
        """Score answers without any comparison.

        Raises:
            AnswerTypeMismatchError: If an answer's tag mismatches its question.
        """
        return self._scorer.score_assessment(answers)

    def compare_with_peers(
        self,
        scores: ScoresDocument,
        company: CompanyDetails | None,
        has_expanded_access: bool,
    ) -> BenchmarkComparison | None:
        """Compare scores with the company's cohort, or None on failure."""
        try:
            return generate_benchmark_comparison(
                scores,
                self._table,
                company,
                include_dimensions=has_expanded_access,
            )
        except DmaAssessmentError as exc:
            logger.warning(
                "Benchmark comparison failed, continuing without benchmark",
                error=str(exc),
                error_type=type(exc).__name__,
                sector=company.sector if company else None,
                company_size=company.company_size if company else None,
            )
            return None

    def build_results(
        self,
        answers: AnswerMap,
        company: CompanyDetails | None = None,
        has_expanded_access: bool = False,
    ) -> AssessmentResults:
        """Score answers and attach the comparisons the access tier allows.

        Args:
            answers: Answers keyed by question id.
            company: Company profile used to pick the cohort.
            has_expanded_access: True when the caller unlocked T1 results.

        Returns:
            AssessmentResults for the results view.

        Raises:
            AnswerTypeMismatchError: If an answer's tag mismatches its question.
        """
        scores = self.score_assessment(answers)
        benchmark = self.compare_with_peers(scores, company, has_expanded_access)

        logger.info(
            "Assessment results built",
            overall_score=scores.overall,
            maturity_level=scores.maturity_classification.level,
            has_benchmark=benchmark is not None,
            has_expanded_access=has_expanded_access,
        )

        return AssessmentResults(
            scores=scores,
            benchmark=benchmark,
            priorities=improvement_priorities(list(scores.dimensions)),
            progress=calculate_progress(self.spec, answers),
            missing_required=validate_answers(self.spec, answers),
            has_expanded_access=has_expanded_access,
        )
