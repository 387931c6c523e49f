"""Unit tests for sector and company-size vocabularies."""

import pytest

from dma_assessment.core.sectors import (
    COMPANY_SIZES,
    SECTORS,
    company_size_display_name,
    map_nace_to_sector,
    sector_display_name,
)


@pytest.mark.parametrize(
    ("nace", "sector"),
    [
        ("C25.1", "manufacturing"),
        ("c10", "manufacturing"),
        ("G47", "retail"),
        ("J62.01", "services"),
        ("K64", "finance"),
        ("P85", "education"),
        ("Q86", "healthcare"),
        ("O84", "government"),
        ("A01", "other"),
        ("Z99", "other"),
        ("", "other"),
        (None, "other"),
    ],
)
def test_map_nace_to_sector(nace: str | None, sector: str) -> None:
    assert map_nace_to_sector(nace) == sector


def test_every_mapped_sector_is_known() -> None:
    assert {map_nace_to_sector(letter) for letter in "ABCDEFGHIJKLMNOPQRSTU"} <= set(SECTORS)


def test_every_sector_has_a_label() -> None:
    labels = {sector_display_name(sector) for sector in SECTORS}
    assert "All Sectors" not in labels
    assert sector_display_name("finance") == "Finance"


def test_label_fallbacks() -> None:
    assert sector_display_name(None) == "All Sectors"
    assert sector_display_name("mining") == "All Sectors"
    assert company_size_display_name(None) == "All Company Sizes"


def test_company_size_labels() -> None:
    assert [company_size_display_name(size) for size in COMPANY_SIZES][0] == "Micro (1-9 employees)"
    assert company_size_display_name("large") == "Large (250+ employees)"
