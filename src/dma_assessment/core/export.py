"""User-facing export of an assessment and its scores.

The export JSON is re-imported by the assessment UI, so its field names
and nesting are fixed:

    {id, version, language, timestamp, answers, scores, userDetails?}

``scores`` is the scores document exactly as the scoring engine produces
it; ``answers`` holds each answer in its tagged wire shape.
"""

import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from dma_assessment.core.models.assessment import AnswerMap, AssessmentSpec
from dma_assessment.core.models.results import CompanyDetails, ScoresDocument

EXPORT_REQUIRED_FIELDS: tuple[str, ...] = ("id", "version", "language", "timestamp", "answers", "scores")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_export_data(
    spec: AssessmentSpec,
    answers: AnswerMap,
    scores: ScoresDocument,
    company: CompanyDetails | None = None,
    export_id: str | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the export document for one assessment.

    Args:
        spec: The assessment definition the answers belong to.
        answers: Answers keyed by question id.
        scores: Scores computed from the answers.
        company: Optional company profile, exported as ``userDetails``.
        export_id: Identifier of the export; a random UUID when omitted.
        now: Export time; the current UTC time when omitted.

    Returns:
        JSON-serialisable export document.
    """
    data: dict[str, Any] = {
        "id": export_id or str(uuid.uuid4()),
        "version": spec.version,
        "language": spec.language,
        "timestamp": _iso(now or _utc_now()),
        "answers": {question_id: answer.to_dict() for question_id, answer in answers.items()},
        "scores": scores.to_dict(),
    }
    if company is not None:
        data["userDetails"] = {
            key: value
            for key, value in {
                "sector": company.sector,
                "companySize": company.company_size,
                "region": company.region,
                "companyName": company.company_name,
            }.items()
            if value is not None
        }
    return data


def validate_export_data(data: Any) -> bool:
    """Return True when ``data`` has the shape produced by create_export_data."""
    if not isinstance(data, Mapping):
        return False
    if any(name not in data for name in EXPORT_REQUIRED_FIELDS):
        return False
    if not all(data[name] for name in ("id", "version", "language", "timestamp")):
        return False
    if not isinstance(data["answers"], Mapping):
        return False
    scores = data["scores"]
    return (
        isinstance(scores, Mapping)
        and isinstance(scores.get("dimensions"), Mapping)
        and isinstance(scores.get("overall"), (int, float))
        and not isinstance(scores.get("overall"), bool)
        and isinstance(scores.get("maturityClassification"), Mapping)
    )


def generate_filename(prefix: str, extension: str = "json", now: datetime | None = None) -> str:
    """Timestamped download name, e.g. 'dma-results-2024-12-01-09-30.json'."""
    stamp = _iso(now or _utc_now())[:16].replace(":", "-").replace("T", "-")
    return f"{prefix}-{stamp}.{extension}"


def create_summary_text(
    spec: AssessmentSpec,
    scores: ScoresDocument,
    now: datetime | None = None,
) -> str:
    """Plain-text summary of the scores for sharing."""
    classification = scores.maturity_classification

    lines = [
        "DIGITAL MATURITY ASSESSMENT RESULTS",
        "=" * 37,
        "",
        f"Assessment Version: {spec.version}",
        f"Language: {spec.language.upper()}",
        f"Generated: {_iso(now or _utc_now())}",
        "",
        f"OVERALL SCORE: {scores.overall}/100",
        f"MATURITY LEVEL: {classification.level} ({classification.label})",
        "",
        "DIMENSION SCORES:",
        "-" * 50,
    ]
    for dimension in spec.dimensions:
        score = scores.dimension(dimension.id)
        if score is None:
            continue
        lines.append(
            f"{dimension.name:<30} {score.score:>6} (Target: {score.target}, Gap: {score.gap})"
        )
    lines.extend(["", "For detailed results, please refer to the JSON export."])
    return "\n".join(lines)
