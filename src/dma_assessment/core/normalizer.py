"""Answer normalisation.

Maps one answered question onto a contribution in [0, 1]. Each of the
seven question shapes has its own rule; table shapes apply the scalar rule
per row and average over every row the question defines, so an unanswered
row counts as zero rather than shrinking the denominator.

Rules:
    tri-state              yes=1, partial=0.5, no=0
    scale-0-5              value / 5 (value clamped to 0-5, non-finite is 0)
    checkboxes             sum(selected weights) / sum(positive weights)
    dual-checkboxes        (left*lw + right*rw) / (lw + rw)
    table-dual-checkboxes  mean of dual-checkboxes rule over all rows
    scale-table            mean of scale rule over all rows
    tri-state-table        mean of tri-state rule over all rows
"""

import math
from collections.abc import Callable, Mapping
from typing import Any

from dma_assessment.core.errors import AnswerTypeMismatchError
from dma_assessment.core.models.assessment import (
    Answer,
    AnswerMap,
    AssessmentSpec,
    CheckboxesAnswer,
    CheckboxesQuestion,
    DualCell,
    DualCheckboxesAnswer,
    DualCheckboxesQuestion,
    Option,
    Question,
    QuestionType,
    Row,
    ScaleAnswer,
    ScaleTableAnswer,
    ScaleTableQuestion,
    TableDualCheckboxesAnswer,
    TableDualCheckboxesQuestion,
    TriState,
    TriStateAnswer,
    TriStateTableAnswer,
    TriStateTableQuestion,
)

TRI_STATE_VALUES: dict[TriState, float] = {
    TriState.YES: 1.0,
    TriState.PARTIAL: 0.5,
    TriState.NO: 0.0,
}

SCALE_MAX: float = 5.0


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


# ---------------------------------------------------------------------------
# Scalar rules
# ---------------------------------------------------------------------------


def _tri_state_value(value: TriState | None) -> float:
    if value is None:
        return 0.0
    return TRI_STATE_VALUES[TriState(value)]


def _scale_value(value: float | None) -> float:
    # non-finite values contribute nothing
    if value is None or not math.isfinite(value):
        return 0.0
    return max(0.0, min(SCALE_MAX, float(value))) / SCALE_MAX


def _dual_value(cell: DualCell | None, left: Option, right: Option) -> float:
    if cell is None:
        return 0.0
    maximum = left.weight + right.weight
    if maximum <= 0:
        return 0.0
    achieved = (left.weight if cell.left else 0.0) + (right.weight if cell.right else 0.0)
    return _clamp_unit(achieved / maximum)


def _table_mean(rows: tuple[Row, ...], cell_score: Callable[[str], float]) -> float:
    if not rows:
        return 0.0
    return sum(cell_score(row.id) for row in rows) / len(rows)


# ---------------------------------------------------------------------------
# Per-shape rules
# ---------------------------------------------------------------------------


def _normalize_tri_state(question: Question, answer: TriStateAnswer) -> float:
    return _tri_state_value(answer.value)


def _normalize_scale(question: Question, answer: ScaleAnswer) -> float:
    return _scale_value(answer.value)


def _normalize_checkboxes(question: CheckboxesQuestion, answer: CheckboxesAnswer) -> float:
    # Non-positive weights are informational flags: they never enlarge the
    # denominator, and a negative flag can only pull the score down.
    denominator = sum(o.weight for o in question.options if o.weight > 0)
    if denominator <= 0:
        return 0.0

    selected = set(answer.selected)
    if question.min_select is not None and len(selected) < question.min_select:
        return 0.0

    numerator = sum(o.weight for o in question.options if o.id in selected)
    return _clamp_unit(numerator / denominator)


def _normalize_dual(question: DualCheckboxesQuestion, answer: DualCheckboxesAnswer) -> float:
    return _dual_value(DualCell(left=answer.left, right=answer.right), question.left, question.right)


def _normalize_table_dual(
    question: TableDualCheckboxesQuestion, answer: TableDualCheckboxesAnswer
) -> float:
    return _table_mean(
        question.rows,
        lambda row_id: _dual_value(answer.rows.get(row_id), question.left, question.right),
    )


def _normalize_scale_table(question: ScaleTableQuestion, answer: ScaleTableAnswer) -> float:
    return _table_mean(question.rows, lambda row_id: _scale_value(answer.rows.get(row_id)))


def _normalize_tri_state_table(
    question: TriStateTableQuestion, answer: TriStateTableAnswer
) -> float:
    return _table_mean(question.rows, lambda row_id: _tri_state_value(answer.rows.get(row_id)))


_RULES: dict[QuestionType, Callable[[Any, Any], float]] = {
    QuestionType.TRI_STATE: _normalize_tri_state,
    QuestionType.SCALE_0_5: _normalize_scale,
    QuestionType.CHECKBOXES: _normalize_checkboxes,
    QuestionType.DUAL_CHECKBOXES: _normalize_dual,
    QuestionType.TABLE_DUAL_CHECKBOXES: _normalize_table_dual,
    QuestionType.SCALE_TABLE: _normalize_scale_table,
    QuestionType.TRI_STATE_TABLE: _normalize_tri_state_table,
}

if set(_RULES) != set(QuestionType):
    raise RuntimeError(f"Missing normalisation rules for {set(QuestionType) - set(_RULES)}")


def normalize(question: Question, answer: Answer | None) -> float:
    """Normalise one answer to a contribution in [0, 1].

    Args:
        question: The question being scored.
        answer: The respondent's answer, or None when not yet answered.

    Returns:
        Contribution in range 0.0-1.0. An absent answer contributes 0.0.

    Raises:
        AnswerTypeMismatchError: If the answer's tag differs from the
            question's type.
    """
    if answer is None:
        return 0.0
    if answer.type is not question.type:
        raise AnswerTypeMismatchError(question.id, question.type.value, answer.type.value)
    return _RULES[question.type](question, answer)


def answer_has_value(answer: Answer | None) -> bool:
    """Return True when an answer carries at least one meaningful selection.

    Used for progress tracking: an empty checkbox list or a table with no
    filled cell does not count as answered.
    """
    if answer is None:
        return False
    if isinstance(answer, CheckboxesAnswer):
        return len(answer.selected) > 0
    if isinstance(answer, DualCheckboxesAnswer):
        return answer.left or answer.right
    if isinstance(answer, TableDualCheckboxesAnswer):
        return any(cell.left or cell.right for cell in answer.rows.values())
    if isinstance(answer, (ScaleTableAnswer, TriStateTableAnswer)):
        return any(value is not None for value in answer.rows.values())
    return answer.value is not None


def calculate_progress(spec: AssessmentSpec, answers: AnswerMap) -> float:
    """Return the percentage (0-100) of questions with a meaningful answer."""
    if not spec.questions:
        return 0.0
    answered = sum(1 for q in spec.questions if answer_has_value(answers.get(q.id)))
    return answered / len(spec.questions) * 100.0


def validate_answers(spec: AssessmentSpec, answers: Mapping[str, Answer]) -> list[str]:
    """Return the ids of required questions that have no answer, in definition order."""
    return [q.id for q in spec.questions if q.required and answers.get(q.id) is None]
