"""Sector and company-size vocabularies.

Companies register with a NACE Rev. 2 code; benchmarks and leaderboards
work on a coarser simplified sector derived from the NACE section letter.
"""

SECTORS: tuple[str, ...] = (
    "manufacturing",
    "services",
    "retail",
    "healthcare",
    "education",
    "government",
    "finance",
    "other",
)

COMPANY_SIZES: tuple[str, ...] = ("micro", "small", "medium", "large")

# NACE Rev. 2 section letter -> simplified sector
NACE_TO_SECTOR: dict[str, str] = {
    "A": "other",
    "B": "other",
    "C": "manufacturing",
    "D": "other",
    "E": "other",
    "F": "other",
    "G": "retail",
    "H": "other",
    "I": "services",
    "J": "services",
    "K": "finance",
    "L": "services",
    "M": "services",
    "N": "services",
    "O": "government",
    "P": "education",
    "Q": "healthcare",
    "R": "services",
    "S": "services",
    "T": "other",
    "U": "government",
}

SECTOR_DISPLAY_NAMES: dict[str, str] = {
    "manufacturing": "Manufacturing",
    "services": "Services",
    "retail": "Retail",
    "healthcare": "Healthcare",
    "education": "Education",
    "government": "Government",
    "finance": "Finance",
    "other": "Other Industries",
}

COMPANY_SIZE_DISPLAY_NAMES: dict[str, str] = {
    "micro": "Micro (1-9 employees)",
    "small": "Small (10-49 employees)",
    "medium": "Medium (50-249 employees)",
    "large": "Large (250+ employees)",
}


def map_nace_to_sector(nace: str | None) -> str:
    """Map a NACE code (e.g. 'C25.1') to its simplified sector.

    Only the section letter is significant. Empty or unknown codes map to
    'other'.
    """
    if not nace:
        return "other"
    return NACE_TO_SECTOR.get(nace[0].upper(), "other")


def sector_display_name(sector: str | None) -> str:
    return SECTOR_DISPLAY_NAMES.get(sector or "", "All Sectors")


def company_size_display_name(company_size: str | None) -> str:
    return COMPANY_SIZE_DISPLAY_NAMES.get(company_size or "", "All Company Sizes")
