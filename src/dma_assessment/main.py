"""DMA assessment service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dma_assessment.adapters.benchmark_loader import load_benchmark_table
from dma_assessment.api.router import router
from dma_assessment.core.errors import DmaAssessmentError
from dma_assessment.core.questions import DMA_SPEC
from dma_assessment.core.services import ResultsService
from dma_assessment.observability import configure_logging, get_logger
from dma_assessment.settings import get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Loads the benchmark table once; a missing 'default' cohort fails
    startup rather than the first comparison.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    table = load_benchmark_table(settings.benchmark_table_path)
    app.state.results_service = ResultsService(DMA_SPEC, table)

    logger.info(
        "Service started",
        service=settings.service_name,
        version=settings.version,
        spec_version=DMA_SPEC.version,
        benchmark_entries=len(table),
    )
    yield
    logger.info("Service stopped", service=settings.service_name)


def create_app() -> FastAPI:
    """Build the FastAPI application with routes and error handlers."""
    settings = get_settings()
    application = FastAPI(
        title=settings.service_name,
        version=settings.version,
        lifespan=lifespan,
    )

    @application.exception_handler(DmaAssessmentError)
    async def handle_engine_error(request: Request, exc: DmaAssessmentError) -> JSONResponse:
        logger.error(
            "Unhandled engine error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "error_type": type(exc).__name__},
        )

    @application.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # echoed inputs may hold NaN or Infinity, which JSON responses cannot carry
        errors = [
            {key: value for key, value in error.items() if key not in ("input", "ctx")}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(errors)},
        )

    application.include_router(router, prefix="/api/v1")
    return application


app: FastAPI = create_app()
