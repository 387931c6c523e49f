"""Test fixtures for dma-assessment.

Provides the shipped assessment definition, benchmark tables, a results
service and an async HTTP client with the service dependency overridden.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dma_assessment.api.dependencies import get_results_service
from dma_assessment.core.benchmarks import BenchmarkTable
from dma_assessment.core.models import AssessmentSpec
from dma_assessment.core.questions import DMA_SPEC
from dma_assessment.core.services import ResultsService
from dma_assessment.main import app


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def spec() -> AssessmentSpec:
    """The shipped DMA v1 assessment definition."""
    return DMA_SPEC


@pytest.fixture()
def benchmark_table() -> BenchmarkTable:
    """The shipped benchmark table."""
    return BenchmarkTable.default()


@pytest.fixture()
def results_service(spec: AssessmentSpec, benchmark_table: BenchmarkTable) -> ResultsService:
    """ResultsService over the shipped definition and benchmarks."""
    return ResultsService(spec, benchmark_table)


def make_record(
    record_id: str,
    sector: str | None,
    overall: Any,
    dimensions: dict[str, Any] | None = None,
    company_size: str | None = "medium",
    company_name: str | None = None,
    is_anonymous: bool = True,
) -> dict[str, Any]:
    """Build a stored cohort record in the persistence collaborator's shape."""
    return {
        "id": record_id,
        "companyDetails": {
            "sector": sector,
            "companySize": company_size,
            "region": "west",
            "companyName": company_name,
        },
        "scores": {
            "overall": overall,
            "dimensions": {
                dimension_id: {"score": score, "target": 100, "gap": 0}
                for dimension_id, score in (dimensions or {}).items()
            },
        },
        "isAnonymous": is_anonymous,
        "completedAt": "2024-11-02T10:00:00Z",
    }


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def client(results_service: ResultsService) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with the results service dependency overridden."""
    app.dependency_overrides[get_results_service] = lambda: results_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def record_factory() -> Any:
    """Factory for stored cohort records; see make_record."""
    return make_record
