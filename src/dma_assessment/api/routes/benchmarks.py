"""FastAPI router for benchmark lookup and cohort aggregation.

Cohort endpoints receive the completed assessment records in the request
body; the service keeps no store of its own.

API prefixes: /api/v1/benchmarks, /api/v1/cohorts
"""

from fastapi import APIRouter, Depends, Query, status

from dma_assessment.api.dependencies import get_app_settings, get_results_service
from dma_assessment.api.schemas.benchmarks import (
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
from dma_assessment.core.benchmarks import resolve_benchmark
from dma_assessment.core.cohorts import (
    industry_benchmarks,
    leaderboard_entries,
    peer_averages,
    percentile_rank,
)
from dma_assessment.core.sectors import company_size_display_name, sector_display_name
from dma_assessment.core.services import ResultsService
from dma_assessment.settings import Settings

benchmarks_router = APIRouter(prefix="/benchmarks", tags=["Benchmarks"])
cohorts_router = APIRouter(prefix="/cohorts", tags=["Cohorts"])


@benchmarks_router.get(
    "",
    response_model=ResolvedBenchmarkResponse,
    status_code=status.HTTP_200_OK,
    summary="Resolve the benchmark cohort for a company profile",
)
async def get_benchmark(
    sector: str | None = Query(default=None, max_length=100),
    company_size: str | None = Query(default=None, max_length=50),
    service: ResultsService = Depends(get_results_service),
) -> ResolvedBenchmarkResponse:
    """Return the cohort a company would be compared against.

    Falls back from the exact sector and size to the sector, then to the
    global default cohort. ``data_source`` names the tier used.
    """
    resolved = resolve_benchmark(service.benchmark_table, sector, company_size)
    return ResolvedBenchmarkResponse(
        data_source=resolved.data_source.value,
        has_sufficient_data=resolved.has_sufficient_data,
        sector_label=sector_display_name(resolved.benchmark.sector),
        company_size_label=company_size_display_name(resolved.benchmark.company_size),
        benchmark=resolved.benchmark.to_dict(),
    )


@cohorts_router.post(
    "/industry-benchmarks",
    response_model=IndustryBenchmarkListResponse,
    status_code=status.HTTP_200_OK,
    summary="Average completed assessments per sector",
)
async def get_industry_benchmarks(
    body: IndustryBenchmarkRequest,
    settings: Settings = Depends(get_app_settings),
) -> IndustryBenchmarkListResponse:
    """Sectors with fewer records than the minimum sample size are omitted."""
    min_sample_size = body.min_sample_size or settings.cohort_min_sample_size
    items = [
        IndustryBenchmarkSchema.from_domain(b)
        for b in industry_benchmarks(body.records, min_sample_size=min_sample_size)
    ]
    return IndustryBenchmarkListResponse(items=items, total=len(items))


@cohorts_router.post(
    "/leaderboard",
    response_model=LeaderboardResponse,
    status_code=status.HTTP_200_OK,
    summary="Rank completed assessments",
)
async def get_leaderboard(
    body: LeaderboardRequest,
    settings: Settings = Depends(get_app_settings),
) -> LeaderboardResponse:
    """Anonymous entries are listed under a stable generated alias."""
    entries = leaderboard_entries(
        body.records,
        sector=body.sector,
        company_size=body.company_size,
        limit=body.limit or settings.leaderboard_default_limit,
    )
    items = [LeaderboardEntrySchema.from_domain(e) for e in entries]
    return LeaderboardResponse(items=items, total=len(items))


@cohorts_router.post(
    "/averages",
    response_model=PeerAveragesResponse,
    status_code=status.HTTP_200_OK,
    summary="Average overall score of a company's peer groups",
)
async def get_peer_averages(
    body: PeerAveragesRequest,
    settings: Settings = Depends(get_app_settings),
) -> PeerAveragesResponse:
    """Sector, company-size and region averages, each filtered on its own.

    A group that was not requested, or has fewer records than the minimum
    sample size, is null.
    """
    averages = peer_averages(
        body.records,
        sector=body.sector,
        company_size=body.company_size,
        region=body.region,
        min_sample_size=body.min_sample_size or settings.cohort_min_sample_size,
    )
    return PeerAveragesResponse.from_domain(averages)


@cohorts_router.post(
    "/percentile-rank",
    response_model=PercentileRankResponse,
    status_code=status.HTTP_200_OK,
    summary="Rank a score within its sector",
)
async def get_percentile_rank(body: PercentileRankRequest) -> PercentileRankResponse:
    rank = percentile_rank(body.score, body.records, body.sector)
    return PercentileRankResponse(percentile=rank.percentile, total=rank.total)
