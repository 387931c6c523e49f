"""Top-level API router for the DMA assessment service.

All routes are thin: they validate inputs, delegate to the core, and
serialise responses. No business logic here.

API prefix: /api/v1
"""

from fastapi import APIRouter, Depends

from dma_assessment.api.dependencies import get_app_settings
from dma_assessment.api.routes.assessment import router as assessment_router
from dma_assessment.api.routes.benchmarks import benchmarks_router, cohorts_router
from dma_assessment.settings import Settings

router = APIRouter()

router.include_router(assessment_router)
router.include_router(benchmarks_router)
router.include_router(cohorts_router)


@router.get("/health", tags=["Health"], summary="Liveness check")
async def health(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {"status": "ok", "service": settings.service_name, "version": settings.version}
