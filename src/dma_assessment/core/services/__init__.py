"""Services package for the DMA assessment service."""

from dma_assessment.core.services.results_service import AssessmentResults, ResultsService

__all__ = [
    "AssessmentResults",
    "ResultsService",
]
