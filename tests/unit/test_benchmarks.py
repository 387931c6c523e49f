"""Unit tests for benchmark resolution and percentile comparison.

Tests cover:
- BenchmarkTable construction and the mandatory 'default' entry
- resolve_benchmark fallback tiers and the sufficiency flag
- compare() bucketing against the shipped default cohort
- generate_benchmark_comparison insights and summary counts
"""

import pytest

from dma_assessment.core.benchmark_data import DEFAULT_BENCHMARKS
from dma_assessment.core.benchmarks import (
    MIN_SAMPLE_SIZE,
    PERFORMANCE_MESSAGES,
    BenchmarkTable,
    compare,
    generate_benchmark_comparison,
    resolve_benchmark,
)
from dma_assessment.core.errors import (
    BenchmarkDimensionNotFoundError,
    MissingDefaultBenchmarkError,
)
from dma_assessment.core.maturity import classify
from dma_assessment.core.models import (
    BenchmarkData,
    CompanyDetails,
    DataSource,
    DimensionScore,
    PerformanceLevel,
    ScoresDocument,
)


def _scores(overall: int, dimension_scores: dict[str, int]) -> ScoresDocument:
    return ScoresDocument(
        dimensions=tuple(
            DimensionScore(id=dimension_id, score=score, target=100, gap=100 - score)
            for dimension_id, score in dimension_scores.items()
        ),
        overall=overall,
        maturity_classification=classify(overall),
    )


class TestBenchmarkTable:
    """Table construction."""

    def test_default_table_loads(self, benchmark_table: BenchmarkTable) -> None:
        assert len(benchmark_table) == 4
        assert benchmark_table.default_entry.sample_size == 850
        assert benchmark_table["services-medium"].overall.average == 68

    def test_missing_default_raises(self) -> None:
        raw = {k: v for k, v in DEFAULT_BENCHMARKS.items() if k != "default"}
        with pytest.raises(MissingDefaultBenchmarkError):
            BenchmarkTable.from_dict(raw)

    def test_round_trips_snapshot_shape(self, benchmark_table: BenchmarkTable) -> None:
        assert benchmark_table.to_dict()["default"]["companySize"] == "all_sizes"

    def test_table_is_not_mutated_by_lookups(self, benchmark_table: BenchmarkTable) -> None:
        before = benchmark_table.to_dict()
        resolve_benchmark(benchmark_table, "retail", "small")
        resolve_benchmark(benchmark_table, "manufacturing", "micro")
        assert benchmark_table.to_dict() == before


class TestResolveBenchmark:
    """Exact -> sector -> default fallback."""

    def test_exact_match(self, benchmark_table: BenchmarkTable) -> None:
        resolved = resolve_benchmark(benchmark_table, "manufacturing", "large")
        assert resolved.data_source is DataSource.EXACT
        assert resolved.benchmark.sample_size == 89
        assert resolved.has_sufficient_data

    def test_sector_fallback_takes_first_entry(self, benchmark_table: BenchmarkTable) -> None:
        resolved = resolve_benchmark(benchmark_table, "manufacturing", "micro")
        assert resolved.data_source is DataSource.SECTOR
        assert resolved.benchmark.company_size == "medium"

    def test_unregistered_pair_uses_default(self, benchmark_table: BenchmarkTable) -> None:
        resolved = resolve_benchmark(benchmark_table, "healthcare", "micro")
        assert resolved.data_source is DataSource.DEFAULT
        assert resolved.benchmark.sector == "all_sectors"

    def test_unknown_profile_uses_default(self, benchmark_table: BenchmarkTable) -> None:
        resolved = resolve_benchmark(benchmark_table, None, None)
        assert resolved.data_source is DataSource.DEFAULT

    def test_sector_prefix_must_match_whole_sector(self, benchmark_table: BenchmarkTable) -> None:
        """'manu' is not a prefix match for 'manufacturing-medium'."""
        resolved = resolve_benchmark(benchmark_table, "manu", "medium")
        assert resolved.data_source is DataSource.DEFAULT

    def test_small_cohort_flagged_in_any_tier(self) -> None:
        raw = dict(DEFAULT_BENCHMARKS)
        raw["retail-small"] = {
            **DEFAULT_BENCHMARKS["default"],
            "sector": "retail",
            "companySize": "small",
            "sampleSize": MIN_SAMPLE_SIZE - 1,
        }
        table = BenchmarkTable.from_dict(raw)

        exact = resolve_benchmark(table, "retail", "small")
        assert exact.data_source is DataSource.EXACT
        assert not exact.has_sufficient_data

        sector = resolve_benchmark(table, "retail", "large")
        assert sector.data_source is DataSource.SECTOR
        assert not sector.has_sufficient_data


class TestCompare:
    """Bucketing against the shipped default cohort {66, 69, 78, 85}."""

    @pytest.fixture()
    def default_cohort(self, benchmark_table: BenchmarkTable) -> BenchmarkData:
        return benchmark_table.default_entry

    def test_above_average(self, default_cohort: BenchmarkData) -> None:
        result = compare(70, default_cohort)
        assert result.percentile == 65
        assert result.performance_level is PerformanceLevel.ABOVE_AVERAGE
        assert result.gap == 4
        assert result.gap_to_top25 == 8

    def test_top_decile_clamps_gap_to_top25(self, default_cohort: BenchmarkData) -> None:
        result = compare(85, default_cohort)
        assert result.percentile == 95
        assert result.performance_level is PerformanceLevel.TOP_DECILE
        assert result.gap_to_top25 == 0
        assert result.message == PERFORMANCE_MESSAGES[PerformanceLevel.TOP_DECILE]

    @pytest.mark.parametrize(
        ("score", "percentile", "level"),
        [
            (78, 87, PerformanceLevel.TOP_QUARTILE),
            (69, 65, PerformanceLevel.ABOVE_AVERAGE),
            (68, 45, PerformanceLevel.AVERAGE),
            (56, 45, PerformanceLevel.AVERAGE),
            (55, 25, PerformanceLevel.BELOW_AVERAGE),
            (0, 25, PerformanceLevel.BELOW_AVERAGE),
        ],
    )
    def test_bucket_boundaries(
        self, default_cohort: BenchmarkData, score: int, percentile: int, level: PerformanceLevel
    ) -> None:
        result = compare(score, default_cohort)
        assert result.percentile == percentile
        assert result.performance_level is level

    def test_negative_gap_below_average(self, default_cohort: BenchmarkData) -> None:
        assert compare(50, default_cohort).gap == -16

    def test_dimension_comparison(self, default_cohort: BenchmarkData) -> None:
        # automation cohort: average 57, median 60, top25 72, top10 81
        result = compare(60, default_cohort, "automation")
        assert result.performance_level is PerformanceLevel.ABOVE_AVERAGE
        assert result.gap == 3
        assert result.gap_to_top25 == 12

    def test_unknown_dimension_raises(self, default_cohort: BenchmarkData) -> None:
        with pytest.raises(BenchmarkDimensionNotFoundError) as exc_info:
            compare(50, default_cohort, "quantumReadiness")
        assert exc_info.value.dimension_id == "quantumReadiness"
        assert "automation" in exc_info.value.available


class TestGenerateBenchmarkComparison:
    """Full comparison with insights."""

    @pytest.fixture()
    def scores(self) -> ScoresDocument:
        return _scores(
            70,
            {
                "digitalStrategy": 86,  # +20, top decile
                "digitalReadiness": 62,  # 0
                "humanCentric": 58,  # -10
                "dataManagement": 83,  # +13, top quartile
                "automation": 40,  # -17
                "greenDigitalization": 75,  # +4
            },
        )

    def test_insights_and_counts(self, scores: ScoresDocument, benchmark_table: BenchmarkTable) -> None:
        comparison = generate_benchmark_comparison(scores, benchmark_table)

        assert comparison.resolved.data_source is DataSource.DEFAULT
        assert comparison.overall.percentile == 65
        assert set(comparison.dimensions) == set(scores.to_dict()["dimensions"])
        assert comparison.strongest_dimension == "digitalStrategy"
        assert comparison.weakest_dimension == "automation"
        assert comparison.above_average_count == 3
        assert comparison.below_average_count == 2
        assert comparison.top_quartile_count == 2

    def test_overall_only(self, scores: ScoresDocument, benchmark_table: BenchmarkTable) -> None:
        comparison = generate_benchmark_comparison(
            scores,
            benchmark_table,
            CompanyDetails(sector="services", company_size="medium"),
            include_dimensions=False,
        )
        assert comparison.resolved.data_source is DataSource.EXACT
        assert comparison.dimensions == {}
        assert comparison.strongest_dimension is None

    def test_unknown_scored_dimension_raises(self, benchmark_table: BenchmarkTable) -> None:
        with pytest.raises(BenchmarkDimensionNotFoundError):
            generate_benchmark_comparison(_scores(50, {"quantumReadiness": 50}), benchmark_table)
