"""Value objects produced by scoring, benchmarking and cohort aggregation.

Everything here is derived and immutable: a new scoring run builds new
objects rather than updating old ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class DimensionScore:
    """Achieved, target and gap scores for one dimension, all 0-100 integers."""

    id: str
    score: int
    target: int
    gap: int

    def to_dict(self) -> dict[str, int]:
        return {"score": self.score, "target": self.target, "gap": self.gap}


@dataclass(frozen=True)
class MaturityClassification:
    """Discrete maturity band for an overall score.

    Attributes:
        level: 1-4.
        label: Human-readable label (e.g. 'Moderately Advanced').
        band: Machine-readable band key (e.g. 'moderately_advanced').
        min_score: Inclusive lower bound of the band.
        max_score: Inclusive upper bound of the band.
    """

    level: int
    label: str
    band: str
    min_score: int
    max_score: int

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "label": self.label, "band": self.band}


@dataclass(frozen=True)
class ScoresDocument:
    """The persisted/exported scores document for one assessment."""

    dimensions: tuple[DimensionScore, ...]
    overall: int
    maturity_classification: MaturityClassification

    def dimension(self, dimension_id: str) -> DimensionScore | None:
        for score in self.dimensions:
            if score.id == dimension_id:
                return score
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire shape shared with the storage collaborator."""
        return {
            "dimensions": {score.id: score.to_dict() for score in self.dimensions},
            "overall": self.overall,
            "maturityClassification": self.maturity_classification.to_dict(),
        }


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CohortStats:
    """Summary statistics of one score within a cohort (0-100 scale)."""

    average: float
    median: float
    top25: float
    top10: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CohortStats:
        return cls(
            average=float(data["average"]),
            median=float(data["median"]),
            top25=float(data["top25"]),
            top10=float(data["top10"]),
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "average": self.average,
            "median": self.median,
            "top25": self.top25,
            "top10": self.top10,
        }


@dataclass(frozen=True)
class BenchmarkData:
    """Precomputed cohort statistics for one sector x company-size bucket."""

    sector: str
    company_size: str
    region: str
    sample_size: int
    dimensions: Mapping[str, CohortStats]
    overall: CohortStats
    last_updated: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BenchmarkData:
        """Build from the camelCase shape produced by the benchmark job."""
        return cls(
            sector=str(data["sector"]),
            company_size=str(data["companySize"]),
            region=str(data.get("region", "")),
            sample_size=int(data["sampleSize"]),
            dimensions={
                dimension_id: CohortStats.from_dict(stats)
                for dimension_id, stats in data.get("dimensions", {}).items()
            },
            overall=CohortStats.from_dict(data["overall"]),
            last_updated=str(data.get("lastUpdated", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sector": self.sector,
            "companySize": self.company_size,
            "region": self.region,
            "sampleSize": self.sample_size,
            "dimensions": {
                dimension_id: stats.to_dict()
                for dimension_id, stats in self.dimensions.items()
            },
            "overall": self.overall.to_dict(),
            "lastUpdated": self.last_updated,
        }


class DataSource(str, Enum):
    """Which fallback tier produced a resolved benchmark."""

    EXACT = "exact"
    SECTOR = "sector"
    DEFAULT = "default"


@dataclass(frozen=True)
class ResolvedBenchmark:
    """A benchmark together with how it was found and whether it is reliable."""

    benchmark: BenchmarkData
    data_source: DataSource
    has_sufficient_data: bool


class PerformanceLevel(str, Enum):
    """Discrete performance tiers, lowest first."""

    BELOW_AVERAGE = "below_average"
    AVERAGE = "average"
    ABOVE_AVERAGE = "above_average"
    TOP_QUARTILE = "top_quartile"
    TOP_DECILE = "top_decile"


@dataclass(frozen=True)
class ComparisonResult:
    """A score compared against one cohort statistic set.

    Attributes:
        user_score: The compared score.
        benchmark: The full cohort record the comparison used.
        percentile: Bucketed percentile (25, 45, 65, 87 or 95).
        performance_level: Tier matching the percentile bucket.
        gap: Signed, rounded distance to the cohort average.
        gap_to_top25: Rounded distance to the top quartile, never negative.
        message: Fixed human-readable message for the tier.
    """

    user_score: float
    benchmark: BenchmarkData
    percentile: int
    performance_level: PerformanceLevel
    gap: int
    gap_to_top25: int
    message: str


@dataclass(frozen=True)
class BenchmarkComparison:
    """Overall and per-dimension comparisons for one assessment."""

    overall: ComparisonResult
    dimensions: Mapping[str, ComparisonResult]
    resolved: ResolvedBenchmark
    strongest_dimension: str | None = None
    weakest_dimension: str | None = None
    above_average_count: int = 0
    below_average_count: int = 0
    top_quartile_count: int = 0


# ---------------------------------------------------------------------------
# Company & cohort projections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CompanyDetails:
    """Company profile supplied by the intake form."""

    sector: str | None = None
    company_size: str | None = None
    region: str | None = None
    company_name: str | None = None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked row of the public leaderboard (0-10 display scale)."""

    id: str
    display_name: str
    sector: str
    sector_label: str
    company_size: str | None
    region: str | None
    overall_score: float
    dimension_scores: Mapping[str, float]
    badge: str
    completed_at: str | None
    is_anonymous: bool
    rank: int


@dataclass(frozen=True)
class IndustryBenchmark:
    """Per-sector averages over completed assessments (0-100 scale)."""

    sector: str
    sector_label: str
    average_score: float
    count: int
    dimension_averages: Mapping[str, float] = field(default_factory=dict)
