"""Shipped cohort benchmark snapshot.

Precomputed statistics for sector x company-size buckets, in the camelCase
shape produced by the offline benchmark job. The 'default' entry covers
every sector and size and must always be present.
"""

from typing import Any


def _stats(average: int, median: int, top25: int, top10: int) -> dict[str, int]:
    return {"average": average, "median": median, "top25": top25, "top10": top10}


LAST_UPDATED = "2024-12-01"

DEFAULT_BENCHMARKS: dict[str, dict[str, Any]] = {
    "manufacturing-medium": {
        "sector": "manufacturing",
        "companySize": "medium",
        "region": "europe",
        "sampleSize": 145,
        "dimensions": {
            "digitalStrategy": _stats(65, 68, 78, 85),
            "digitalReadiness": _stats(58, 62, 74, 82),
            "humanCentric": _stats(62, 64, 76, 84),
            "dataManagement": _stats(71, 73, 81, 88),
            "automation": _stats(54, 56, 69, 79),
            "greenDigitalization": _stats(69, 72, 80, 86),
        },
        "overall": _stats(63, 66, 76, 84),
        "lastUpdated": LAST_UPDATED,
    },
    "manufacturing-large": {
        "sector": "manufacturing",
        "companySize": "large",
        "region": "europe",
        "sampleSize": 89,
        "dimensions": {
            "digitalStrategy": _stats(72, 75, 83, 89),
            "digitalReadiness": _stats(68, 71, 81, 87),
            "humanCentric": _stats(70, 73, 82, 88),
            "dataManagement": _stats(78, 80, 87, 92),
            "automation": _stats(64, 67, 78, 85),
            "greenDigitalization": _stats(75, 77, 85, 90),
        },
        "overall": _stats(71, 74, 83, 88),
        "lastUpdated": LAST_UPDATED,
    },
    "services-medium": {
        "sector": "services",
        "companySize": "medium",
        "region": "europe",
        "sampleSize": 203,
        "dimensions": {
            "digitalStrategy": _stats(69, 72, 81, 87),
            "digitalReadiness": _stats(66, 69, 79, 85),
            "humanCentric": _stats(74, 76, 84, 89),
            "dataManagement": _stats(68, 71, 80, 86),
            "automation": _stats(59, 62, 73, 81),
            "greenDigitalization": _stats(72, 74, 82, 87),
        },
        "overall": _stats(68, 71, 80, 86),
        "lastUpdated": LAST_UPDATED,
    },
    "default": {
        "sector": "all_sectors",
        "companySize": "all_sizes",
        "region": "europe",
        "sampleSize": 850,
        "dimensions": {
            "digitalStrategy": _stats(66, 69, 78, 85),
            "digitalReadiness": _stats(62, 65, 76, 83),
            "humanCentric": _stats(68, 71, 80, 86),
            "dataManagement": _stats(70, 73, 82, 88),
            "automation": _stats(57, 60, 72, 81),
            "greenDigitalization": _stats(71, 74, 82, 87),
        },
        "overall": _stats(66, 69, 78, 85),
        "lastUpdated": LAST_UPDATED,
    },
}
