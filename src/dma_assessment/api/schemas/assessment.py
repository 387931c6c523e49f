"""Pydantic request/response schemas for the assessment endpoints.

All API inputs and outputs are strictly typed Pydantic v2 models. Answers
are a discriminated union on their ``type`` tag and convert to the core
value objects through ``to_domain()``.

The scores document keeps its camelCase wire keys (``maturityClassification``)
because it is persisted and exported verbatim.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from dma_assessment.api.schemas.benchmarks import BenchmarkComparisonSchema
from dma_assessment.core.models import (
    AssessmentSpec,
    CheckboxesAnswer,
    CompanyDetails,
    DualCell,
    DualCheckboxesAnswer,
    MaturityClassification,
    ScaleAnswer,
    ScaleTableAnswer,
    ScoresDocument,
    TableDualCheckboxesAnswer,
    TriState,
    TriStateAnswer,
    TriStateTableAnswer,
)
from dma_assessment.core.models.assessment import Answer, Question
from dma_assessment.core.services.results_service import AssessmentResults


# ---------------------------------------------------------------------------
# Answers (discriminated on ``type``)
# ---------------------------------------------------------------------------


class TriStateAnswerSchema(BaseModel):
    type: Literal["tri-state"]
    value: TriState

    def to_domain(self) -> TriStateAnswer:
        return TriStateAnswer(value=self.value)


class ScaleAnswerSchema(BaseModel):
    type: Literal["scale-0-5"]
    value: float = Field(allow_inf_nan=False)

    def to_domain(self) -> ScaleAnswer:
        return ScaleAnswer(value=self.value)


class CheckboxesAnswerSchema(BaseModel):
    type: Literal["checkboxes"]
    selected: list[str] = Field(default_factory=list)

    def to_domain(self) -> CheckboxesAnswer:
        return CheckboxesAnswer(selected=tuple(self.selected))


class DualCheckboxesAnswerSchema(BaseModel):
    type: Literal["dual-checkboxes"]
    left: bool = False
    right: bool = False

    def to_domain(self) -> DualCheckboxesAnswer:
        return DualCheckboxesAnswer(left=self.left, right=self.right)


class DualCellSchema(BaseModel):
    left: bool = False
    right: bool = False


class TableDualCheckboxesAnswerSchema(BaseModel):
    type: Literal["table-dual-checkboxes"]
    rows: dict[str, DualCellSchema] = Field(default_factory=dict)

    def to_domain(self) -> TableDualCheckboxesAnswer:
        return TableDualCheckboxesAnswer(
            rows={row_id: DualCell(left=cell.left, right=cell.right) for row_id, cell in self.rows.items()}
        )


class ScaleTableAnswerSchema(BaseModel):
    type: Literal["scale-table"]
    rows: dict[str, Annotated[float, Field(allow_inf_nan=False)]] = Field(default_factory=dict)

    def to_domain(self) -> ScaleTableAnswer:
        return ScaleTableAnswer(rows=dict(self.rows))


class TriStateTableAnswerSchema(BaseModel):
    type: Literal["tri-state-table"]
    rows: dict[str, TriState] = Field(default_factory=dict)

    def to_domain(self) -> TriStateTableAnswer:
        return TriStateTableAnswer(rows=dict(self.rows))


AnswerSchema = Annotated[
    Union[
        TriStateAnswerSchema,
        ScaleAnswerSchema,
        CheckboxesAnswerSchema,
        DualCheckboxesAnswerSchema,
        TableDualCheckboxesAnswerSchema,
        ScaleTableAnswerSchema,
        TriStateTableAnswerSchema,
    ],
    Field(discriminator="type"),
]


def answers_to_domain(answers: dict[str, AnswerSchema]) -> dict[str, Answer]:
    """Convert validated answer schemas into core Answer value objects."""
    return {question_id: answer.to_domain() for question_id, answer in answers.items()}


class CompanyDetailsSchema(BaseModel):
    """Company profile from the intake form.

    Attributes:
        sector: Simplified sector (e.g. 'manufacturing').
        company_size: Size bucket: micro | small | medium | large.
        region: Free-form region.
        company_name: Company display name.
    """

    model_config = ConfigDict(populate_by_name=True)

    sector: str | None = Field(default=None, max_length=100)
    company_size: str | None = Field(default=None, alias="companySize", max_length=50)
    region: str | None = Field(default=None, max_length=100)
    company_name: str | None = Field(default=None, alias="companyName", max_length=255)

    def to_domain(self) -> CompanyDetails:
        return CompanyDetails(
            sector=self.sector,
            company_size=self.company_size,
            region=self.region,
            company_name=self.company_name,
        )


# ---------------------------------------------------------------------------
# Assessment definition
# ---------------------------------------------------------------------------


class DimensionSchema(BaseModel):
    id: str
    name: str
    weight: float
    target_level: float
    description: str


class OptionSchema(BaseModel):
    id: str
    label: str
    weight: float


class RowSchema(BaseModel):
    id: str
    label: str


class QuestionSchema(BaseModel):
    """One question with its shape-specific configuration.

    Fields that do not apply to the question's type are null.
    """

    id: str
    dimension_id: str
    type: str
    title: str
    description: str
    weight: float
    required: bool
    options: list[OptionSchema] | None = None
    min_select: int | None = None
    max_select: int | None = None
    left: OptionSchema | None = None
    right: OptionSchema | None = None
    rows: list[RowSchema] | None = None
    scale_labels: list[str] | None = None

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionSchema":
        def _option(option: Any) -> OptionSchema | None:
            if option is None:
                return None
            return OptionSchema(id=option.id, label=option.label, weight=option.weight)

        options = getattr(question, "options", None)
        rows = getattr(question, "rows", None)
        scale_labels = getattr(question, "scale_labels", None)
        return cls(
            id=question.id,
            dimension_id=question.dimension_id,
            type=question.type.value,
            title=question.title,
            description=question.description,
            weight=question.weight,
            required=question.required,
            options=[_option(o) for o in options] if options is not None else None,
            min_select=getattr(question, "min_select", None),
            max_select=getattr(question, "max_select", None),
            left=_option(getattr(question, "left", None)),
            right=_option(getattr(question, "right", None)),
            rows=[RowSchema(id=r.id, label=r.label) for r in rows] if rows is not None else None,
            scale_labels=list(scale_labels) if scale_labels is not None else None,
        )


class AssessmentSpecResponse(BaseModel):
    version: str
    language: str
    dimensions: list[DimensionSchema]
    questions: list[QuestionSchema]

    @classmethod
    def from_domain(cls, spec: AssessmentSpec) -> "AssessmentSpecResponse":
        return cls(
            version=spec.version,
            language=spec.language,
            dimensions=[
                DimensionSchema(
                    id=d.id,
                    name=d.name,
                    weight=d.weight,
                    target_level=d.target_level,
                    description=d.description,
                )
                for d in spec.dimensions
            ],
            questions=[QuestionSchema.from_domain(q) for q in spec.questions],
        )


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------


class ScoreRequest(BaseModel):
    """Answers keyed by question id. Missing questions score 0."""

    answers: dict[str, AnswerSchema] = Field(default_factory=dict)


class DimensionScoreSchema(BaseModel):
    score: int
    target: int
    gap: int


class MaturityClassificationSchema(BaseModel):
    level: int
    label: str
    band: str

    @classmethod
    def from_domain(cls, classification: MaturityClassification) -> "MaturityClassificationSchema":
        return cls(level=classification.level, label=classification.label, band=classification.band)


class ScoresDocumentSchema(BaseModel):
    """Scores document in its persisted wire shape."""

    model_config = ConfigDict(populate_by_name=True)

    dimensions: dict[str, DimensionScoreSchema]
    overall: int
    maturity_classification: MaturityClassificationSchema = Field(alias="maturityClassification")

    @classmethod
    def from_domain(cls, scores: ScoresDocument) -> "ScoresDocumentSchema":
        return cls(
            dimensions={
                s.id: DimensionScoreSchema(score=s.score, target=s.target, gap=s.gap)
                for s in scores.dimensions
            },
            overall=scores.overall,
            maturity_classification=MaturityClassificationSchema.from_domain(
                scores.maturity_classification
            ),
        )


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


class ExportRequest(BaseModel):
    answers: dict[str, AnswerSchema] = Field(default_factory=dict)
    company: CompanyDetailsSchema | None = None
    export_id: str | None = Field(default=None, max_length=128)


class ExportResponse(BaseModel):
    """Export document plus a suggested download name and text summary."""

    filename: str
    data: dict[str, Any]
    summary: str


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class ResultsRequest(BaseModel):
    """Answers plus the context that decides the peer comparison.

    Attributes:
        answers: Answers keyed by question id.
        company: Company profile used to pick the cohort.
        has_expanded_access: True once the respondent unlocked full
            results; only then are per-dimension comparisons returned.
    """

    answers: dict[str, AnswerSchema] = Field(default_factory=dict)
    company: CompanyDetailsSchema | None = None
    has_expanded_access: bool = False


class ImprovementPrioritySchema(BaseModel):
    priority: str
    dimension_id: str
    gap: int
    score: int
    target: int


class ResultsResponse(BaseModel):
    scores: ScoresDocumentSchema
    benchmark: BenchmarkComparisonSchema | None
    priorities: list[ImprovementPrioritySchema]
    progress: float
    missing_required: list[str]
    has_expanded_access: bool

    @classmethod
    def from_domain(cls, results: AssessmentResults) -> "ResultsResponse":
        return cls(
            scores=ScoresDocumentSchema.from_domain(results.scores),
            benchmark=(
                BenchmarkComparisonSchema.from_domain(results.benchmark)
                if results.benchmark is not None
                else None
            ),
            priorities=[
                ImprovementPrioritySchema(
                    priority=p.priority,
                    dimension_id=p.dimension_id,
                    gap=p.gap,
                    score=p.score,
                    target=p.target,
                )
                for p in results.priorities
            ],
            progress=results.progress,
            missing_required=list(results.missing_required),
            has_expanded_access=results.has_expanded_access,
        )
