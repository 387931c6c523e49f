"""Assessment definition and answer value objects.

An assessment is an ordered list of dimensions plus an ordered list of
questions. Questions and answers are tagged unions over seven shapes; the
tag lives on the class (``type``) so that a mismatched answer can be
detected before any scoring rule runs.

All objects here are frozen dataclasses. Scoring never mutates them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from dma_assessment.core.errors import AssessmentSpecError


class QuestionType(str, Enum):
    """Wire tags shared by questions and their answers."""

    TRI_STATE = "tri-state"
    SCALE_0_5 = "scale-0-5"
    CHECKBOXES = "checkboxes"
    DUAL_CHECKBOXES = "dual-checkboxes"
    TABLE_DUAL_CHECKBOXES = "table-dual-checkboxes"
    SCALE_TABLE = "scale-table"
    TRI_STATE_TABLE = "tri-state-table"


class TriState(str, Enum):
    """Yes / partial / no answer cell."""

    YES = "yes"
    PARTIAL = "partial"
    NO = "no"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Dimension:
    """One axis of digital maturity.

    Attributes:
        id: Stable identifier (e.g. 'digitalStrategy').
        name: Display name.
        weight: Weight in the overall composite score.
        target_level: Target maturity as a 0-1 fraction, used for gap analysis.
        description: Optional display description.
    """

    id: str
    name: str
    weight: float = 1.0
    target_level: float = 1.0
    description: str = ""


@dataclass(frozen=True)
class Option:
    """A selectable option. Non-positive weights mark informational flags."""

    id: str
    label: str = ""
    weight: float = 1.0


@dataclass(frozen=True)
class Row:
    """A row of a table question."""

    id: str
    label: str = ""


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class BaseQuestion:
    """Fields shared by every question shape."""

    type: ClassVar[QuestionType]

    id: str
    dimension_id: str
    title: str = ""
    description: str = ""
    weight: float = 1.0
    required: bool = True


@dataclass(frozen=True, kw_only=True)
class TriStateQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.TRI_STATE


@dataclass(frozen=True, kw_only=True)
class ScaleQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.SCALE_0_5

    scale_labels: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class CheckboxesQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.CHECKBOXES

    options: tuple[Option, ...]
    min_select: int | None = None
    max_select: int | None = None


@dataclass(frozen=True, kw_only=True)
class DualCheckboxesQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.DUAL_CHECKBOXES

    left: Option
    right: Option


@dataclass(frozen=True, kw_only=True)
class TableDualCheckboxesQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.TABLE_DUAL_CHECKBOXES

    rows: tuple[Row, ...]
    left: Option
    right: Option


@dataclass(frozen=True, kw_only=True)
class ScaleTableQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.SCALE_TABLE

    rows: tuple[Row, ...]
    scale_labels: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class TriStateTableQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.TRI_STATE_TABLE

    rows: tuple[Row, ...]


Question = Union[
    TriStateQuestion,
    ScaleQuestion,
    CheckboxesQuestion,
    DualCheckboxesQuestion,
    TableDualCheckboxesQuestion,
    ScaleTableQuestion,
    TriStateTableQuestion,
]


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DualCell:
    """Left/right checkbox pair, used standalone and as a table cell."""

    left: bool = False
    right: bool = False


@dataclass(frozen=True)
class TriStateAnswer:
    type: ClassVar[QuestionType] = QuestionType.TRI_STATE

    value: TriState

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "value": self.value.value}


@dataclass(frozen=True)
class ScaleAnswer:
    type: ClassVar[QuestionType] = QuestionType.SCALE_0_5

    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "value": self.value}


@dataclass(frozen=True)
class CheckboxesAnswer:
    type: ClassVar[QuestionType] = QuestionType.CHECKBOXES

    selected: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "selected": list(self.selected)}


@dataclass(frozen=True)
class DualCheckboxesAnswer:
    type: ClassVar[QuestionType] = QuestionType.DUAL_CHECKBOXES

    left: bool = False
    right: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "left": self.left, "right": self.right}


@dataclass(frozen=True)
class TableDualCheckboxesAnswer:
    type: ClassVar[QuestionType] = QuestionType.TABLE_DUAL_CHECKBOXES

    rows: Mapping[str, DualCell] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "rows": {
                row_id: {"left": cell.left, "right": cell.right}
                for row_id, cell in self.rows.items()
            },
        }


@dataclass(frozen=True)
class ScaleTableAnswer:
    type: ClassVar[QuestionType] = QuestionType.SCALE_TABLE

    rows: Mapping[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "rows": dict(self.rows)}


@dataclass(frozen=True)
class TriStateTableAnswer:
    type: ClassVar[QuestionType] = QuestionType.TRI_STATE_TABLE

    rows: Mapping[str, TriState] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "rows": {row_id: cell.value for row_id, cell in self.rows.items()},
        }


Answer = Union[
    TriStateAnswer,
    ScaleAnswer,
    CheckboxesAnswer,
    DualCheckboxesAnswer,
    TableDualCheckboxesAnswer,
    ScaleTableAnswer,
    TriStateTableAnswer,
]

AnswerMap = Mapping[str, Answer]


def answer_from_dict(data: Mapping[str, Any]) -> Answer:
    """Build an Answer from its exported wire shape.

    Args:
        data: Mapping with a 'type' tag and the shape-specific payload,
            e.g. ``{"type": "scale-0-5", "value": 3}``.

    Returns:
        The matching Answer value object.

    Raises:
        ValueError: If the tag is unknown or the payload is malformed.
    """
    try:
        tag = QuestionType(data["type"])
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unknown answer type in {dict(data)!r}") from exc

    try:
        if tag is QuestionType.TRI_STATE:
            return TriStateAnswer(value=TriState(data["value"]))
        if tag is QuestionType.SCALE_0_5:
            return ScaleAnswer(value=float(data["value"]))
        if tag is QuestionType.CHECKBOXES:
            return CheckboxesAnswer(selected=tuple(data.get("selected", ())))
        if tag is QuestionType.DUAL_CHECKBOXES:
            return DualCheckboxesAnswer(
                left=bool(data.get("left", False)),
                right=bool(data.get("right", False)),
            )
        rows = data.get("rows") or {}
        if tag is QuestionType.TABLE_DUAL_CHECKBOXES:
            return TableDualCheckboxesAnswer(
                rows={
                    row_id: DualCell(
                        left=bool(cell.get("left", False)),
                        right=bool(cell.get("right", False)),
                    )
                    for row_id, cell in rows.items()
                }
            )
        if tag is QuestionType.SCALE_TABLE:
            return ScaleTableAnswer(
                rows={row_id: float(value) for row_id, value in rows.items()}
            )
        return TriStateTableAnswer(
            rows={row_id: TriState(value) for row_id, value in rows.items()}
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed {tag.value!r} answer: {dict(data)!r}") from exc


# ---------------------------------------------------------------------------
# Assessment definition
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AssessmentSpec:
    """A versioned, localised assessment definition.

    Attributes:
        version: Definition version string (e.g. '1.0.0').
        language: Language code of the display strings.
        dimensions: Ordered dimensions.
        questions: Ordered questions. Order drives display only.

    Raises:
        AssessmentSpecError: On duplicate ids or a question referencing an
            unknown dimension.
    """

    version: str
    language: str
    dimensions: tuple[Dimension, ...]
    questions: tuple[Question, ...]

    def __post_init__(self) -> None:
        dimension_ids = [d.id for d in self.dimensions]
        if len(set(dimension_ids)) != len(dimension_ids):
            raise AssessmentSpecError(f"Duplicate dimension ids in {dimension_ids!r}")

        question_ids = [q.id for q in self.questions]
        if len(set(question_ids)) != len(question_ids):
            raise AssessmentSpecError(f"Duplicate question ids in {question_ids!r}")

        known = set(dimension_ids)
        for question in self.questions:
            if question.dimension_id not in known:
                raise AssessmentSpecError(
                    f"Question {question.id!r} references unknown dimension "
                    f"{question.dimension_id!r}"
                )

    def questions_for(self, dimension_id: str) -> list[Question]:
        """Return the questions belonging to one dimension, in definition order."""
        return [q for q in self.questions if q.dimension_id == dimension_id]

    def get_question(self, question_id: str) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None
