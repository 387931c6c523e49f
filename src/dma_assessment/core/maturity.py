"""Maturity classification and gap analysis.

The overall 0-100 score maps onto four bands (inclusive lower bounds):

    Score    Level  Label                Band
    -------  -----  -------------------  -------------------
    0-25     1      Basic                basic
    26-50    2      Average              average
    51-75    3      Moderately Advanced  moderately_advanced
    76-100   4      Advanced             advanced

The leaderboard uses a separate 0-10 badge scale with different cut
points; see ``cohorts.leaderboard_badge``. The two are not interchangeable.
"""

from dataclasses import dataclass

from dma_assessment.core.models.results import DimensionScore, MaturityClassification
from dma_assessment.core.utils import clamp

DEFAULT_MATURITY_BANDS: tuple[MaturityClassification, ...] = (
    MaturityClassification(level=1, label="Basic", band="basic", min_score=0, max_score=25),
    MaturityClassification(level=2, label="Average", band="average", min_score=26, max_score=50),
    MaturityClassification(
        level=3,
        label="Moderately Advanced",
        band="moderately_advanced",
        min_score=51,
        max_score=75,
    ),
    MaturityClassification(level=4, label="Advanced", band="advanced", min_score=76, max_score=100),
)

# Gap thresholds on the 0-100 scale
CRITICAL_GAP: int = 40
MODERATE_GAP: int = 20
MINOR_GAP: int = 10
MEANINGFUL_GAP: int = 5


def classify(
    score: float,
    bands: tuple[MaturityClassification, ...] = DEFAULT_MATURITY_BANDS,
) -> MaturityClassification:
    """Classify an overall score into a maturity band.

    Bands are searched from the highest down, so each band's lower bound
    is inclusive and fractional scores between two integer bands (e.g.
    25.5) fall into the lower one.

    Args:
        score: Overall score; clamped to 0-100 first.
        bands: Band table ordered from lowest to highest.

    Returns:
        The matching MaturityClassification.
    """
    normalized = clamp(score)
    for band in reversed(bands):
        if normalized >= band.min_score:
            return band
    return bands[0]


@dataclass(frozen=True)
class GapAnalysis:
    """Dimensions grouped by gap severity.

    Attributes:
        critical: gap > 40, largest gap first.
        moderate: 20 < gap <= 40, largest gap first.
        minor: 10 < gap <= 20, largest gap first.
        strengths: gap <= 10, highest score first.
    """

    critical: list[DimensionScore]
    moderate: list[DimensionScore]
    minor: list[DimensionScore]
    strengths: list[DimensionScore]


def analyze_gaps(dimension_scores: list[DimensionScore]) -> GapAnalysis:
    """Group dimension scores by how far they fall short of their target."""
    by_gap = sorted(dimension_scores, key=lambda d: d.gap, reverse=True)
    return GapAnalysis(
        critical=[d for d in by_gap if d.gap > CRITICAL_GAP],
        moderate=[d for d in by_gap if MODERATE_GAP < d.gap <= CRITICAL_GAP],
        minor=[d for d in by_gap if MINOR_GAP < d.gap <= MODERATE_GAP],
        strengths=sorted(
            (d for d in dimension_scores if d.gap <= MINOR_GAP),
            key=lambda d: d.score,
            reverse=True,
        ),
    )


@dataclass(frozen=True)
class ImprovementPriority:
    priority: str
    dimension_id: str
    gap: int
    score: int
    target: int


_PRIORITY_ORDER: dict[str, int] = {"critical": 3, "moderate": 2, "minor": 1}


def improvement_priorities(dimension_scores: list[DimensionScore]) -> list[ImprovementPriority]:
    """Rank dimensions with a meaningful gap (> 5 points) for improvement.

    Sorted by priority (critical, moderate, minor), then by gap descending.
    """
    priorities = [
        ImprovementPriority(
            priority=(
                "critical" if d.gap > CRITICAL_GAP
                else "moderate" if d.gap > MODERATE_GAP
                else "minor"
            ),
            dimension_id=d.id,
            gap=d.gap,
            score=d.score,
            target=d.target,
        )
        for d in dimension_scores
        if d.gap > MEANINGFUL_GAP
    ]
    priorities.sort(key=lambda p: (_PRIORITY_ORDER[p.priority], p.gap), reverse=True)
    return priorities


@dataclass(frozen=True)
class MaturityProgression:
    current_level: MaturityClassification
    target_level: MaturityClassification
    levels_to_advance: int
    progress_in_current_level: float
    remaining_in_current_level: float


def maturity_progression(
    current_score: float,
    target_score: float,
    bands: tuple[MaturityClassification, ...] = DEFAULT_MATURITY_BANDS,
) -> MaturityProgression:
    """Describe how far a score is from a target band.

    Args:
        current_score: Achieved overall score (0-100).
        target_score: Desired overall score (0-100).
        bands: Band table to classify against.

    Returns:
        MaturityProgression with level distance and the 0-1 fraction of
        the current band already covered.
    """
    current = classify(current_score, bands)
    target = classify(target_score, bands)

    band_range = current.max_score - current.min_score
    progress = (clamp(current_score) - current.min_score) / band_range if band_range > 0 else 0.0
    progress = clamp(progress, 0.0, 1.0)

    return MaturityProgression(
        current_level=current,
        target_level=target,
        levels_to_advance=target.level - current.level,
        progress_in_current_level=progress,
        remaining_in_current_level=1.0 - progress,
    )
