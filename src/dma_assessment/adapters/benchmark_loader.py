"""Loader for benchmark table snapshots produced by the offline benchmark job.

The job writes one JSON object keyed by 'sector-companySize' (plus
'default') in the camelCase BenchmarkData shape. Snapshots are validated
with pydantic before they reach the core, so a malformed file fails at
startup instead of at comparison time.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from dma_assessment.core.benchmarks import BenchmarkTable
from dma_assessment.core.errors import DmaAssessmentError
from dma_assessment.observability import get_logger

logger = get_logger(__name__)


class BenchmarkSnapshotError(DmaAssessmentError):
    """Raised when a benchmark snapshot cannot be read or fails validation."""


class CohortStatsRecord(BaseModel):
    average: float
    median: float
    top25: float
    top10: float


class BenchmarkRecord(BaseModel):
    """One cohort entry of a snapshot, in the job's camelCase shape."""

    model_config = ConfigDict(populate_by_name=True)

    sector: str
    company_size: str = Field(alias="companySize")
    region: str = ""
    sample_size: int = Field(alias="sampleSize", ge=0)
    dimensions: dict[str, CohortStatsRecord] = Field(default_factory=dict)
    overall: CohortStatsRecord
    last_updated: str = Field(default="", alias="lastUpdated")


class BenchmarkSnapshot(RootModel[dict[str, BenchmarkRecord]]):
    pass


def parse_benchmark_snapshot(raw: Any) -> BenchmarkTable:
    """Validate a decoded snapshot and build a BenchmarkTable from it.

    Args:
        raw: Decoded JSON object.

    Returns:
        The validated BenchmarkTable.

    Raises:
        BenchmarkSnapshotError: If the snapshot fails validation.
        MissingDefaultBenchmarkError: If the snapshot has no 'default' entry.
    """
    try:
        snapshot = BenchmarkSnapshot.model_validate(raw)
    except ValidationError as exc:
        raise BenchmarkSnapshotError(f"Invalid benchmark snapshot: {exc}") from exc

    return BenchmarkTable.from_dict(
        {key: record.model_dump(by_alias=True) for key, record in snapshot.root.items()}
    )


def load_benchmark_table(path: str | Path | None = None) -> BenchmarkTable:
    """Load the benchmark table from a JSON snapshot, or the shipped default.

    Args:
        path: Snapshot file path; None returns the shipped table.

    Returns:
        BenchmarkTable ready for resolution and comparison.

    Raises:
        BenchmarkSnapshotError: If the file cannot be read or parsed.
        MissingDefaultBenchmarkError: If the snapshot has no 'default' entry.
    """
    if path is None:
        table = BenchmarkTable.default()
        logger.info("Using shipped benchmark table", entries=len(table))
        return table

    snapshot_path = Path(path)
    try:
        raw = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise BenchmarkSnapshotError(f"Cannot read benchmark snapshot {snapshot_path}: {exc}") from exc

    table = parse_benchmark_snapshot(raw)
    logger.info("Loaded benchmark snapshot", path=str(snapshot_path), entries=len(table))
    return table
