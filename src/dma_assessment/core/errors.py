"""Error taxonomy for the scoring and benchmark engine.

Every error raised by the core derives from DmaAssessmentError so callers
can catch the whole family at the service boundary.
"""


class DmaAssessmentError(Exception):
    """Base class for all scoring and benchmark engine errors."""


class AssessmentSpecError(DmaAssessmentError):
    """Raised when an assessment definition is internally inconsistent."""


class AnswerTypeMismatchError(DmaAssessmentError):
    """Raised when an answer's tag does not match its question's type.

    Indicates a data-integrity bug upstream and is never recovered locally.

    Attributes:
        question_id: The question whose answer was mismatched.
        expected: The question's type tag.
        received: The answer's type tag.
    """

    def __init__(self, question_id: str, expected: str, received: str) -> None:
        super().__init__(
            f"Answer for question {question_id!r} has type {received!r}, "
            f"expected {expected!r}"
        )
        self.question_id = question_id
        self.expected = expected
        self.received = received


class MissingDefaultBenchmarkError(DmaAssessmentError):
    """Raised when a benchmark table is built without a 'default' entry."""


class BenchmarkDimensionNotFoundError(DmaAssessmentError):
    """Raised when a comparison targets a dimension absent from the cohort."""

    def __init__(self, dimension_id: str, available: list[str]) -> None:
        super().__init__(
            f"Benchmark data not found for dimension {dimension_id!r}; "
            f"available: {', '.join(available) or 'none'}"
        )
        self.dimension_id = dimension_id
        self.available = available
