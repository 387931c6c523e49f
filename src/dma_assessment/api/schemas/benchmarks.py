"""Pydantic schemas for peer comparison, benchmark and cohort endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from dma_assessment.core.cohorts import PeerAverages
from dma_assessment.core.models import (
    BenchmarkComparison,
    ComparisonResult,
    IndustryBenchmark,
    LeaderboardEntry,
)


class ComparisonSchema(BaseModel):
    """A score bucketed against one cohort statistic set.

    Attributes:
        user_score: The compared score (0-100).
        percentile: Bucketed percentile: 25, 45, 65, 87 or 95.
        performance_level: below_average | average | above_average |
            top_quartile | top_decile.
        gap: Signed distance to the cohort average.
        gap_to_top25: Distance to the top quartile, never negative.
        message: Human-readable verdict.
    """

    user_score: float
    percentile: int
    performance_level: str
    gap: int
    gap_to_top25: int
    message: str

    @classmethod
    def from_domain(cls, result: ComparisonResult) -> "ComparisonSchema":
        return cls(
            user_score=result.user_score,
            percentile=result.percentile,
            performance_level=result.performance_level.value,
            gap=result.gap,
            gap_to_top25=result.gap_to_top25,
            message=result.message,
        )


class BenchmarkComparisonSchema(BaseModel):
    """Overall and per-dimension comparisons against one resolved cohort.

    ``benchmark`` is the cohort record in its camelCase snapshot shape.
    ``data_source`` and ``has_sufficient_data`` must be shown alongside the
    comparison so fallback cohorts are not presented as authoritative.
    """

    overall: ComparisonSchema
    dimensions: dict[str, ComparisonSchema]
    data_source: str
    has_sufficient_data: bool
    benchmark: dict[str, Any]
    strongest_dimension: str | None = None
    weakest_dimension: str | None = None
    above_average_count: int = 0
    below_average_count: int = 0
    top_quartile_count: int = 0

    @classmethod
    def from_domain(cls, comparison: BenchmarkComparison) -> "BenchmarkComparisonSchema":
        return cls(
            overall=ComparisonSchema.from_domain(comparison.overall),
            dimensions={
                dimension_id: ComparisonSchema.from_domain(result)
                for dimension_id, result in comparison.dimensions.items()
            },
            data_source=comparison.resolved.data_source.value,
            has_sufficient_data=comparison.resolved.has_sufficient_data,
            benchmark=comparison.resolved.benchmark.to_dict(),
            strongest_dimension=comparison.strongest_dimension,
            weakest_dimension=comparison.weakest_dimension,
            above_average_count=comparison.above_average_count,
            below_average_count=comparison.below_average_count,
            top_quartile_count=comparison.top_quartile_count,
        )


class ResolvedBenchmarkResponse(BaseModel):
    """The cohort a company profile resolves to."""

    data_source: str
    has_sufficient_data: bool
    sector_label: str
    company_size_label: str
    benchmark: dict[str, Any]


# ---------------------------------------------------------------------------
# Cohorts
# ---------------------------------------------------------------------------


class CohortRequest(BaseModel):
    """Completed assessment records to aggregate.

    Records use the stored shape (``companyDetails``, ``scores``,
    ``isAnonymous``, ``completedAt``). Malformed records are skipped.
    """

    records: list[Any] = Field(default_factory=list)


class IndustryBenchmarkRequest(CohortRequest):
    min_sample_size: int | None = Field(default=None, ge=1)


class IndustryBenchmarkSchema(BaseModel):
    sector: str
    sector_label: str
    average_score: float
    count: int
    dimension_averages: dict[str, float]

    @classmethod
    def from_domain(cls, benchmark: IndustryBenchmark) -> "IndustryBenchmarkSchema":
        return cls(
            sector=benchmark.sector,
            sector_label=benchmark.sector_label,
            average_score=benchmark.average_score,
            count=benchmark.count,
            dimension_averages=dict(benchmark.dimension_averages),
        )


class IndustryBenchmarkListResponse(BaseModel):
    items: list[IndustryBenchmarkSchema]
    total: int


class LeaderboardRequest(CohortRequest):
    sector: str | None = None
    company_size: str | None = None
    limit: int | None = Field(default=None, ge=1, le=1000)


class LeaderboardEntrySchema(BaseModel):
    """One leaderboard row; scores on the 0-10 display scale."""

    id: str
    rank: int
    display_name: str
    sector: str
    sector_label: str
    company_size: str | None
    region: str | None
    overall_score: float
    dimension_scores: dict[str, float]
    badge: str
    completed_at: str | None
    is_anonymous: bool

    @classmethod
    def from_domain(cls, entry: LeaderboardEntry) -> "LeaderboardEntrySchema":
        return cls(
            id=entry.id,
            rank=entry.rank,
            display_name=entry.display_name,
            sector=entry.sector,
            sector_label=entry.sector_label,
            company_size=entry.company_size,
            region=entry.region,
            overall_score=entry.overall_score,
            dimension_scores=dict(entry.dimension_scores),
            badge=entry.badge,
            completed_at=entry.completed_at,
            is_anonymous=entry.is_anonymous,
        )


class LeaderboardResponse(BaseModel):
    items: list[LeaderboardEntrySchema]
    total: int


class PeerAveragesRequest(CohortRequest):
    sector: str | None = Field(default=None, max_length=100)
    company_size: str | None = Field(default=None, max_length=50)
    region: str | None = Field(default=None, max_length=100)
    min_sample_size: int | None = Field(default=None, ge=1)


class PeerAveragesResponse(BaseModel):
    """Average overall score per requested peer group; null when too small."""

    sector: int | None
    company_size: int | None
    region: int | None

    @classmethod
    def from_domain(cls, averages: PeerAverages) -> "PeerAveragesResponse":
        return cls(sector=averages.sector, company_size=averages.company_size, region=averages.region)


class PercentileRankRequest(CohortRequest):
    score: float = Field(ge=0, le=100, allow_inf_nan=False)
    sector: str = Field(min_length=1, max_length=100)


class PercentileRankResponse(BaseModel):
    percentile: int
    total: int
