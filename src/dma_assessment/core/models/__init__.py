"""Domain value objects for the Digital Maturity Assessment engine."""

from dma_assessment.core.models.assessment import (
    Answer,
    AnswerMap,
    AssessmentSpec,
    BaseQuestion,
    CheckboxesAnswer,
    CheckboxesQuestion,
    Dimension,
    DualCell,
    DualCheckboxesAnswer,
    DualCheckboxesQuestion,
    Option,
    Question,
    QuestionType,
    Row,
    ScaleAnswer,
    ScaleQuestion,
    ScaleTableAnswer,
    ScaleTableQuestion,
    TableDualCheckboxesAnswer,
    TableDualCheckboxesQuestion,
    TriState,
    TriStateAnswer,
    TriStateQuestion,
    TriStateTableAnswer,
    TriStateTableQuestion,
    answer_from_dict,
)
from dma_assessment.core.models.results import (
    BenchmarkComparison,
    BenchmarkData,
    CohortStats,
    CompanyDetails,
    ComparisonResult,
    DataSource,
    DimensionScore,
    IndustryBenchmark,
    LeaderboardEntry,
    MaturityClassification,
    PerformanceLevel,
    ResolvedBenchmark,
    ScoresDocument,
)

__all__ = [
    "Answer",
    "AnswerMap",
    "AssessmentSpec",
    "BaseQuestion",
    "BenchmarkComparison",
    "BenchmarkData",
    "CheckboxesAnswer",
    "CheckboxesQuestion",
    "CohortStats",
    "CompanyDetails",
    "ComparisonResult",
    "DataSource",
    "Dimension",
    "DimensionScore",
    "DualCell",
    "DualCheckboxesAnswer",
    "DualCheckboxesQuestion",
    "IndustryBenchmark",
    "LeaderboardEntry",
    "MaturityClassification",
    "Option",
    "PerformanceLevel",
    "Question",
    "QuestionType",
    "ResolvedBenchmark",
    "Row",
    "ScaleAnswer",
    "ScaleQuestion",
    "ScaleTableAnswer",
    "ScaleTableQuestion",
    "ScoresDocument",
    "TableDualCheckboxesAnswer",
    "TableDualCheckboxesQuestion",
    "TriState",
    "TriStateAnswer",
    "TriStateQuestion",
    "TriStateTableAnswer",
    "TriStateTableQuestion",
    "answer_from_dict",
]
