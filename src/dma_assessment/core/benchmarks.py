"""Benchmark resolution and percentile comparison.

Resolves the cohort a company is compared against and buckets a score
against that cohort's statistics. Peer group selection follows a fixed
fallback hierarchy:

    1. exact        sector + company size key ('manufacturing-medium')
    2. sector       first entry whose key starts with '<sector>-'
    3. default      the global 'default' entry

Percentiles are discrete buckets, not interpolated ranks:

    user >= top10          95  top_decile
    user >= top25          87  top_quartile
    user >= median         65  above_average
    user >= average - 10   45  average
    otherwise              25  below_average
"""

from collections.abc import Iterator, Mapping
from typing import Any

from dma_assessment.core.benchmark_data import DEFAULT_BENCHMARKS
from dma_assessment.core.errors import (
    BenchmarkDimensionNotFoundError,
    MissingDefaultBenchmarkError,
)
from dma_assessment.core.models.results import (
    BenchmarkComparison,
    BenchmarkData,
    CompanyDetails,
    ComparisonResult,
    DataSource,
    PerformanceLevel,
    ResolvedBenchmark,
    ScoresDocument,
)
from dma_assessment.core.utils import round_half_up
from dma_assessment.observability import get_logger

logger = get_logger(__name__)

DEFAULT_KEY = "default"

# Cohorts smaller than this are flagged as statistically weak
MIN_SAMPLE_SIZE: int = 15

# Width of the 'average' band below the cohort average
AVERAGE_BAND: float = 10.0

PERFORMANCE_MESSAGES: dict[PerformanceLevel, str] = {
    PerformanceLevel.TOP_DECILE: "Outstanding performance! You're in the top 10% of organizations.",
    PerformanceLevel.TOP_QUARTILE: "Excellent performance! You're in the top 25% of organizations.",
    PerformanceLevel.ABOVE_AVERAGE: "Above average performance. You're ahead of most organizations.",
    PerformanceLevel.AVERAGE: "Average performance. There's room for improvement.",
    PerformanceLevel.BELOW_AVERAGE: "Below average performance. Consider focusing on this area.",
}


class BenchmarkTable(Mapping[str, BenchmarkData]):
    """Read-only table of cohort benchmarks keyed by 'sector-companySize'.

    A table always contains a 'default' entry, which makes every lookup
    total. Entries keep their insertion order, which decides which entry
    wins a sector-level fallback.
    """

    def __init__(self, entries: Mapping[str, BenchmarkData]) -> None:
        """Initialise the table.

        Args:
            entries: Benchmarks keyed by 'sector-companySize', plus 'default'.

        Raises:
            MissingDefaultBenchmarkError: If no 'default' entry is supplied.
        """
        if DEFAULT_KEY not in entries:
            raise MissingDefaultBenchmarkError(
                f"Benchmark table has no {DEFAULT_KEY!r} entry; "
                f"keys: {', '.join(entries) or 'none'}"
            )
        self._entries: dict[str, BenchmarkData] = dict(entries)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Any]]) -> "BenchmarkTable":
        """Build a table from the camelCase snapshot produced by the benchmark job."""
        return cls({key: BenchmarkData.from_dict(value) for key, value in raw.items()})

    @classmethod
    def default(cls) -> "BenchmarkTable":
        """Return the table built from the shipped snapshot."""
        return cls.from_dict(DEFAULT_BENCHMARKS)

    @property
    def default_entry(self) -> BenchmarkData:
        return self._entries[DEFAULT_KEY]

    def __getitem__(self, key: str) -> BenchmarkData:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {key: entry.to_dict() for key, entry in self._entries.items()}


def resolve_benchmark(
    table: BenchmarkTable,
    sector: str | None,
    company_size: str | None,
) -> ResolvedBenchmark:
    """Pick the cohort a company is compared against.

    Args:
        table: Benchmark table to search.
        sector: Company sector, or None when unknown.
        company_size: Company size bucket, or None when unknown.

    Returns:
        ResolvedBenchmark with the chosen cohort, the fallback tier that
        produced it and whether its sample size meets MIN_SAMPLE_SIZE.
        The sufficiency flag is independent of the tier.
    """
    benchmark: BenchmarkData | None = None
    data_source = DataSource.DEFAULT

    if sector and company_size:
        benchmark = table.get(f"{sector}-{company_size}")
        if benchmark is not None:
            data_source = DataSource.EXACT

    if benchmark is None and sector:
        prefix = f"{sector}-"
        for key, entry in table.items():
            if key != DEFAULT_KEY and key.startswith(prefix):
                benchmark = entry
                data_source = DataSource.SECTOR
                break

    if benchmark is None:
        benchmark = table.default_entry
        data_source = DataSource.DEFAULT

    if data_source is not DataSource.EXACT:
        logger.info(
            "Benchmark resolved via fallback",
            sector=sector,
            company_size=company_size,
            data_source=data_source.value,
            sample_size=benchmark.sample_size,
        )

    return ResolvedBenchmark(
        benchmark=benchmark,
        data_source=data_source,
        has_sufficient_data=benchmark.sample_size >= MIN_SAMPLE_SIZE,
    )


def _bucket(user_score: float, average: float, median: float, top25: float, top10: float) -> tuple[int, PerformanceLevel]:
    if user_score >= top10:
        return 95, PerformanceLevel.TOP_DECILE
    if user_score >= top25:
        return 87, PerformanceLevel.TOP_QUARTILE
    if user_score >= median:
        return 65, PerformanceLevel.ABOVE_AVERAGE
    if user_score >= average - AVERAGE_BAND:
        return 45, PerformanceLevel.AVERAGE
    return 25, PerformanceLevel.BELOW_AVERAGE


def compare(
    user_score: float,
    benchmark: BenchmarkData,
    dimension_id: str | None = None,
) -> ComparisonResult:
    """Compare a score against the overall or one dimension's cohort statistics.

    Args:
        user_score: Score on the 0-100 scale.
        benchmark: Cohort to compare against.
        dimension_id: Dimension to compare; None compares the overall score.

    Returns:
        ComparisonResult with bucketed percentile, tier, gaps and message.

    Raises:
        BenchmarkDimensionNotFoundError: If dimension_id is not in the cohort.
    """
    if dimension_id is None:
        stats = benchmark.overall
    else:
        stats = benchmark.dimensions.get(dimension_id)
        if stats is None:
            raise BenchmarkDimensionNotFoundError(dimension_id, list(benchmark.dimensions))

    percentile, level = _bucket(user_score, stats.average, stats.median, stats.top25, stats.top10)

    return ComparisonResult(
        user_score=user_score,
        benchmark=benchmark,
        percentile=percentile,
        performance_level=level,
        gap=round_half_up(user_score - stats.average),
        gap_to_top25=max(0, round_half_up(stats.top25 - user_score)),
        message=PERFORMANCE_MESSAGES[level],
    )


_TOP_LEVELS = (PerformanceLevel.TOP_QUARTILE, PerformanceLevel.TOP_DECILE)


def generate_benchmark_comparison(
    scores: ScoresDocument,
    table: BenchmarkTable,
    company: CompanyDetails | None = None,
    include_dimensions: bool = True,
) -> BenchmarkComparison:
    """Compare a full scores document against the company's cohort.

    Args:
        scores: Scores produced by the scoring engine.
        table: Benchmark table to resolve the cohort from.
        company: Company profile; None compares against the default cohort.
        include_dimensions: When False only the overall comparison is built.

    Returns:
        BenchmarkComparison with the overall comparison, per-dimension
        comparisons, the strongest and weakest dimension by gap to the
        cohort average, and summary counts.

    Raises:
        BenchmarkDimensionNotFoundError: If a scored dimension is missing
            from the resolved cohort.
    """
    company = company or CompanyDetails()
    resolved = resolve_benchmark(table, company.sector, company.company_size)
    overall = compare(scores.overall, resolved.benchmark)

    if not include_dimensions:
        return BenchmarkComparison(overall=overall, dimensions={}, resolved=resolved)

    dimensions = {
        score.id: compare(score.score, resolved.benchmark, score.id)
        for score in scores.dimensions
    }
    if not dimensions:
        return BenchmarkComparison(overall=overall, dimensions=dimensions, resolved=resolved)

    # max/min keep the first entry on ties
    strongest = max(dimensions, key=lambda dimension_id: dimensions[dimension_id].gap)
    weakest = min(dimensions, key=lambda dimension_id: dimensions[dimension_id].gap)

    return BenchmarkComparison(
        overall=overall,
        dimensions=dimensions,
        resolved=resolved,
        strongest_dimension=strongest,
        weakest_dimension=weakest,
        above_average_count=sum(1 for c in dimensions.values() if c.gap > 0),
        below_average_count=sum(1 for c in dimensions.values() if c.gap < 0),
        top_quartile_count=sum(1 for c in dimensions.values() if c.performance_level in _TOP_LEVELS),
    )
