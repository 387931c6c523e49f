"""Dependency factories shared by the API routes."""

from fastapi import Request

from dma_assessment.core.services import ResultsService
from dma_assessment.settings import Settings, get_settings


def get_results_service(request: Request) -> ResultsService:
    """Return the ResultsService built at application startup.

    Args:
        request: Incoming request carrying the application state.

    Returns:
        The shared ResultsService instance.
    """
    return request.app.state.results_service


def get_app_settings() -> Settings:
    return get_settings()
