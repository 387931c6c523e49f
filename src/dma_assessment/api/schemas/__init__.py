"""API schemas package for the DMA assessment service."""

from dma_assessment.api.schemas.assessment import (
    AnswerSchema,
    AssessmentSpecResponse,
    CompanyDetailsSchema,
    ExportRequest,
    ExportResponse,
    ResultsRequest,
    ResultsResponse,
    ScoreRequest,
    ScoresDocumentSchema,
    answers_to_domain,
)
from dma_assessment.api.schemas.benchmarks import (
    BenchmarkComparisonSchema,
    ComparisonSchema,
    IndustryBenchmarkListResponse,
    IndustryBenchmarkRequest,
    IndustryBenchmarkSchema,
    LeaderboardEntrySchema,
    LeaderboardRequest,
    LeaderboardResponse,
    PeerAveragesRequest,
    PeerAveragesResponse,
    PercentileRankRequest,
    PercentileRankResponse,
    ResolvedBenchmarkResponse,
)

__all__ = [
    "AnswerSchema",
    "AssessmentSpecResponse",
    "BenchmarkComparisonSchema",
    "CompanyDetailsSchema",
    "ComparisonSchema",
    "ExportRequest",
    "ExportResponse",
    "IndustryBenchmarkListResponse",
    "IndustryBenchmarkRequest",
    "IndustryBenchmarkSchema",
    "LeaderboardEntrySchema",
    "LeaderboardRequest",
    "LeaderboardResponse",
    "PeerAveragesRequest",
    "PeerAveragesResponse",
    "PercentileRankRequest",
    "PercentileRankResponse",
    "ResolvedBenchmarkResponse",
    "ResultsRequest",
    "ResultsResponse",
    "ScoreRequest",
    "ScoresDocumentSchema",
    "answers_to_domain",
]
