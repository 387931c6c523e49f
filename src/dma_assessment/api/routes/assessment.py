"""FastAPI router for scoring and exporting Digital Maturity Assessments.

All routes are thin: they parse inputs, delegate to ResultsService, and
serialise responses. No business logic lives here.

API prefix: /api/v1/assessment
Auth: None. The expanded-access gate is supplied by the caller.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from dma_assessment.api.dependencies import get_results_service
from dma_assessment.api.schemas.assessment import (
    AssessmentSpecResponse,
    ExportRequest,
    ExportResponse,
    ResultsRequest,
    ResultsResponse,
    ScoreRequest,
    ScoresDocumentSchema,
    answers_to_domain,
)
from dma_assessment.core.errors import AnswerTypeMismatchError
from dma_assessment.core.export import (
    create_export_data,
    create_summary_text,
    generate_filename,
)
from dma_assessment.core.services import ResultsService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/assessment", tags=["Digital Maturity Assessment"])


def _mismatch_error(exc: AnswerTypeMismatchError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "message": str(exc),
            "question_id": exc.question_id,
            "expected": exc.expected,
            "received": exc.received,
        },
    )


@router.get(
    "/spec",
    response_model=AssessmentSpecResponse,
    status_code=status.HTTP_200_OK,
    summary="Retrieve the assessment definition",
)
async def get_assessment_spec(
    service: ResultsService = Depends(get_results_service),
) -> AssessmentSpecResponse:
    """Return the dimensions and questions the assessment is scored against."""
    return AssessmentSpecResponse.from_domain(service.spec)


@router.post(
    "/scores",
    response_model=ScoresDocumentSchema,
    status_code=status.HTTP_200_OK,
    summary="Score a set of answers",
)
async def score_answers(
    body: ScoreRequest,
    service: ResultsService = Depends(get_results_service),
) -> ScoresDocumentSchema:
    """Compute dimension scores, the overall score and the maturity band.

    Unanswered questions score 0. An answer whose ``type`` does not match
    its question is rejected with 422.
    """
    try:
        scores = service.score_assessment(answers_to_domain(body.answers))
    except AnswerTypeMismatchError as exc:
        raise _mismatch_error(exc) from exc

    return ScoresDocumentSchema.from_domain(scores)


@router.post(
    "/results",
    response_model=ResultsResponse,
    status_code=status.HTTP_200_OK,
    summary="Score answers and compare against peers",
)
async def build_results(
    body: ResultsRequest,
    service: ResultsService = Depends(get_results_service),
) -> ResultsResponse:
    """Return scores, improvement priorities and the peer comparison.

    Without expanded access only the overall comparison is returned. When
    no comparison can be built ``benchmark`` is null and the scores are
    still returned.
    """
    company = body.company.to_domain() if body.company is not None else None
    try:
        results = service.build_results(
            answers_to_domain(body.answers),
            company=company,
            has_expanded_access=body.has_expanded_access,
        )
    except AnswerTypeMismatchError as exc:
        raise _mismatch_error(exc) from exc

    return ResultsResponse.from_domain(results)


@router.post(
    "/export",
    response_model=ExportResponse,
    status_code=status.HTTP_200_OK,
    summary="Build the downloadable export document",
)
async def export_assessment(
    body: ExportRequest,
    service: ResultsService = Depends(get_results_service),
) -> ExportResponse:
    """Return the export JSON, a timestamped filename and a text summary."""
    answers = answers_to_domain(body.answers)
    try:
        scores = service.score_assessment(answers)
    except AnswerTypeMismatchError as exc:
        raise _mismatch_error(exc) from exc

    company = body.company.to_domain() if body.company is not None else None
    data = create_export_data(service.spec, answers, scores, company=company, export_id=body.export_id)

    logger.info("Assessment exported", export_id=data["id"], overall_score=scores.overall)

    return ExportResponse(
        filename=generate_filename("dma-results"),
        data=data,
        summary=create_summary_text(service.spec, scores),
    )
