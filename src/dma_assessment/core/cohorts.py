"""Cohort aggregation over completed assessments.

Read-only reductions used by the leaderboard and the industry overview.
Inputs are raw records as stored by the persistence collaborator:

    {
        "id": "abc123",
        "companyDetails": {"sector": "services", "companySize": "small",
                           "region": "west", "companyName": "Acme AS"},
        "scores": {"overall": 64, "dimensions": {"automation": {"score": 40}}},
        "isAnonymous": true,
        "completedAt": "2024-11-02T10:00:00Z"
    }

A malformed record (no sector, no scores, non-numeric or non-finite
scores) is skipped with a warning; it never aborts the reduction.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from dma_assessment.core.models.results import IndustryBenchmark, LeaderboardEntry
from dma_assessment.core.questions import ALL_DIMENSIONS
from dma_assessment.core.sectors import sector_display_name
from dma_assessment.core.utils import round_half_up
from dma_assessment.observability import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_SAMPLE_SIZE: int = 3

# Leaderboard shows scores on a 0-10 scale
DISPLAY_SCALE_DIVISOR: float = 10.0

ADJECTIVES: tuple[str, ...] = (
    "Agile",
    "Bold",
    "Bright",
    "Clever",
    "Curious",
    "Daring",
    "Eager",
    "Nimble",
    "Quick",
    "Resilient",
    "Sharp",
    "Steady",
    "Swift",
    "Vivid",
    "Wise",
    "Zealous",
)

NOUNS: tuple[str, ...] = (
    "Falcon",
    "Fjord",
    "Glacier",
    "Harbor",
    "Lynx",
    "Maple",
    "Meteor",
    "Orca",
    "Otter",
    "Pioneer",
    "Raven",
    "Summit",
    "Tiger",
    "Voyager",
    "Wolf",
    "Aurora",
)

# Leaderboard badge thresholds on the 0-10 scale, highest first
BADGE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (4.5, "Expert"),
    (3.5, "Advanced"),
    (2.5, "Competent"),
    (1.5, "Basic"),
)

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 encoding of ``text``."""
    h = _FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h


def anonymous_alias(identifier: str) -> str:
    """Derive a stable display name such as 'SwiftOtter42' from an identifier.

    The same identifier always yields the same alias and no mapping table
    is stored. Collisions are tolerated.
    """
    h = fnv1a_32(identifier)
    adjective = ADJECTIVES[h % len(ADJECTIVES)]
    noun = NOUNS[(h // len(ADJECTIVES)) % len(NOUNS)]
    return f"{adjective}{noun}{h % 90 + 10}"


def leaderboard_badge(score: float) -> str:
    """Badge label for a 0-10 leaderboard score.

    Distinct from the 0-100 maturity bands; the two scales do not agree
    at their boundaries.
    """
    for threshold, label in BADGE_THRESHOLDS:
        if score >= threshold:
            return label
    return "Beginner"


@dataclass(frozen=True)
class CompletedAssessment:
    """A validated cohort record with scores on the 0-100 scale."""

    id: str
    sector: str
    overall: float
    dimensions: Mapping[str, float] = field(default_factory=dict)
    company_size: str | None = None
    region: str | None = None
    company_name: str | None = None
    is_anonymous: bool = True
    completed_at: str | None = None


def parse_record(record: Mapping[str, Any]) -> CompletedAssessment:
    """Validate one raw cohort record.

    Raises:
        ValueError: If the record lacks a sector or scores, or a score is
            not a finite number.
    """
    details = record.get("companyDetails") or {}
    sector = details.get("sector")
    if not sector:
        raise ValueError("record has no sector")

    scores = record.get("scores")
    if not isinstance(scores, Mapping) or "overall" not in scores:
        raise ValueError("record has no scores")

    overall = _as_score(scores["overall"])
    dimensions: dict[str, float] = {}
    for dimension_id, value in (scores.get("dimensions") or {}).items():
        raw = value.get("score") if isinstance(value, Mapping) else value
        dimensions[dimension_id] = _as_score(raw)

    return CompletedAssessment(
        id=str(record.get("id", "")),
        sector=str(sector),
        overall=overall,
        dimensions=dimensions,
        company_size=details.get("companySize"),
        region=details.get("region"),
        company_name=details.get("companyName"),
        is_anonymous=bool(record.get("isAnonymous", True)),
        completed_at=record.get("completedAt"),
    )


def _as_score(value: Any) -> float:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"non-numeric score {value!r}")
    try:
        score = float(value)
    except OverflowError as exc:
        raise ValueError(f"score out of range {value!r}") from exc
    if not math.isfinite(score):
        raise ValueError(f"non-finite score {value!r}")
    return score


def parse_records(records: Iterable[Mapping[str, Any]]) -> list[CompletedAssessment]:
    """Parse raw records, skipping and logging malformed ones."""
    parsed: list[CompletedAssessment] = []
    for index, record in enumerate(records):
        try:
            parsed.append(parse_record(record))
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning(
                "Skipping malformed cohort record",
                record_index=index,
                record_id=record.get("id") if isinstance(record, Mapping) else None,
                reason=str(exc),
            )
    return parsed


def _round1(value: float) -> float:
    return round_half_up(value * 10) / 10


def industry_benchmarks(
    records: Iterable[Mapping[str, Any]],
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
    dimension_ids: Iterable[str] = ALL_DIMENSIONS,
) -> list[IndustryBenchmark]:
    """Average completed assessments per sector.

    Sectors with fewer than ``min_sample_size`` valid records are dropped
    from the output entirely. A record without a score for a dimension
    counts as 0 for that dimension.

    Args:
        records: Raw cohort records.
        min_sample_size: Minimum valid records for a sector to be reported.
        dimension_ids: Dimensions to average.

    Returns:
        IndustryBenchmark per qualifying sector (0-100 scale, one decimal),
        sorted by average score descending.
    """
    groups: dict[str, list[CompletedAssessment]] = {}
    for assessment in parse_records(records):
        groups.setdefault(assessment.sector, []).append(assessment)

    dimension_ids = list(dimension_ids)
    benchmarks: list[IndustryBenchmark] = []
    for sector, members in groups.items():
        if len(members) < min_sample_size:
            logger.debug("Dropping undersized sector", sector=sector, count=len(members))
            continue
        count = len(members)
        benchmarks.append(
            IndustryBenchmark(
                sector=sector,
                sector_label=sector_display_name(sector),
                average_score=_round1(sum(m.overall for m in members) / count),
                count=count,
                dimension_averages={
                    dimension_id: _round1(
                        sum(m.dimensions.get(dimension_id, 0.0) for m in members) / count
                    )
                    for dimension_id in dimension_ids
                },
            )
        )

    benchmarks.sort(key=lambda b: b.average_score, reverse=True)
    return benchmarks


def leaderboard_entries(
    records: Iterable[Mapping[str, Any]],
    sector: str | None = None,
    company_size: str | None = None,
    limit: int | None = None,
) -> list[LeaderboardEntry]:
    """Rank completed assessments by overall score.

    Anonymous records are shown under their deterministic alias. Scores are
    projected onto the 0-10 display scale.

    Args:
        records: Raw cohort records.
        sector: Only include this sector; None or 'all' includes every sector.
        company_size: Only include this size; None or 'all' includes every size.
        limit: Maximum number of entries to return after ranking.

    Returns:
        Entries sorted by overall score descending with 1-based ranks.
    """
    selected = [
        a
        for a in parse_records(records)
        if (not sector or sector == "all" or a.sector == sector)
        and (not company_size or company_size == "all" or a.company_size == company_size)
    ]
    selected.sort(key=lambda a: a.overall, reverse=True)
    if limit is not None:
        selected = selected[:limit]

    entries: list[LeaderboardEntry] = []
    for rank, assessment in enumerate(selected, start=1):
        overall = assessment.overall / DISPLAY_SCALE_DIVISOR
        if assessment.is_anonymous or not assessment.company_name:
            display_name = anonymous_alias(assessment.id)
        else:
            display_name = assessment.company_name
        entries.append(
            LeaderboardEntry(
                id=assessment.id,
                display_name=display_name,
                sector=assessment.sector,
                sector_label=sector_display_name(assessment.sector),
                company_size=assessment.company_size,
                region=assessment.region,
                overall_score=overall,
                dimension_scores={
                    dimension_id: score / DISPLAY_SCALE_DIVISOR
                    for dimension_id, score in assessment.dimensions.items()
                },
                badge=leaderboard_badge(overall),
                completed_at=assessment.completed_at,
                is_anonymous=assessment.is_anonymous,
                rank=rank,
            )
        )
    return entries


@dataclass(frozen=True)
class PercentileRank:
    percentile: int
    total: int


def percentile_rank(
    score: float,
    records: Iterable[Mapping[str, Any]],
    sector: str,
) -> PercentileRank:
    """Share (0-100) of a sector's assessments scoring strictly below ``score``.

    Args:
        score: Overall score on the 0-100 scale.
        records: Raw cohort records.
        sector: Sector to rank within.

    Returns:
        PercentileRank; an empty sector yields percentile 0 and total 0.
    """
    peers = [a for a in parse_records(records) if a.sector == sector]
    if not peers:
        return PercentileRank(percentile=0, total=0)
    below = sum(1 for a in peers if a.overall < score)
    return PercentileRank(percentile=round_half_up(below / len(peers) * 100), total=len(peers))


@dataclass(frozen=True)
class PeerAverages:
    """Average overall scores (0-100, whole points) of peer groups.

    A group is None when it was not requested or has fewer valid records
    than the minimum sample size.
    """

    sector: int | None = None
    company_size: int | None = None
    region: int | None = None


def _group_average(members: list[CompletedAssessment], min_sample_size: int) -> int | None:
    if not members or len(members) < min_sample_size:
        return None
    return round_half_up(sum(m.overall for m in members) / len(members))


def peer_averages(
    records: Iterable[Mapping[str, Any]],
    sector: str | None = None,
    company_size: str | None = None,
    region: str | None = None,
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
) -> PeerAverages:
    """Average overall score of the company's sector, size class and region.

    Each group is filtered independently: the sector average covers every
    company size and region, and so on.

    Args:
        records: Raw cohort records.
        sector: Sector to average over, or None to skip.
        company_size: Company size to average over, or None to skip.
        region: Region to average over, or None to skip.
        min_sample_size: Minimum valid records for a group to be reported.

    Returns:
        PeerAverages with one value per requested, sufficiently large group.
    """
    assessments = parse_records(records)

    def average(attribute: str, value: str | None) -> int | None:
        if not value:
            return None
        members = [a for a in assessments if getattr(a, attribute) == value]
        return _group_average(members, min_sample_size)

    return PeerAverages(
        sector=average("sector", sector),
        company_size=average("company_size", company_size),
        region=average("region", region),
    )
