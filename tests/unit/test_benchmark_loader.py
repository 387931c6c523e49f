"""Unit tests for loading benchmark snapshots from disk."""

import json
from pathlib import Path
from typing import Any

import pytest

from dma_assessment.adapters.benchmark_loader import (
    BenchmarkSnapshotError,
    load_benchmark_table,
    parse_benchmark_snapshot,
)
from dma_assessment.core.benchmark_data import DEFAULT_BENCHMARKS
from dma_assessment.core.errors import MissingDefaultBenchmarkError


def _write(tmp_path: Path, payload: Any) -> Path:
    path = tmp_path / "benchmarks.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_no_path_returns_shipped_table() -> None:
    table = load_benchmark_table(None)
    assert set(table) == set(DEFAULT_BENCHMARKS)


def test_loads_snapshot_file(tmp_path: Path) -> None:
    snapshot = {"default": {**DEFAULT_BENCHMARKS["default"], "sampleSize": 1200}}
    table = load_benchmark_table(_write(tmp_path, snapshot))
    assert len(table) == 1
    assert table.default_entry.sample_size == 1200
    assert table.default_entry.dimensions["automation"].average == 57


def test_region_and_date_are_optional() -> None:
    entry = {k: v for k, v in DEFAULT_BENCHMARKS["default"].items() if k not in ("region", "lastUpdated")}
    table = parse_benchmark_snapshot({"default": entry})
    assert table.default_entry.region == ""


def test_missing_default_entry(tmp_path: Path) -> None:
    snapshot = {"retail-small": DEFAULT_BENCHMARKS["default"]}
    with pytest.raises(MissingDefaultBenchmarkError):
        load_benchmark_table(_write(tmp_path, snapshot))


def test_invalid_record_rejected() -> None:
    broken = {**DEFAULT_BENCHMARKS["default"], "sampleSize": -1}
    with pytest.raises(BenchmarkSnapshotError):
        parse_benchmark_snapshot({"default": broken})


def test_missing_overall_rejected() -> None:
    broken = {k: v for k, v in DEFAULT_BENCHMARKS["default"].items() if k != "overall"}
    with pytest.raises(BenchmarkSnapshotError):
        parse_benchmark_snapshot({"default": broken})


def test_unreadable_file(tmp_path: Path) -> None:
    with pytest.raises(BenchmarkSnapshotError):
        load_benchmark_table(tmp_path / "missing.json")


def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "benchmarks.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(BenchmarkSnapshotError):
        load_benchmark_table(path)
