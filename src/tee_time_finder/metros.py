"""Metro areas served by the tee time server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Metro:
    """A geographic service area that scopes an inventory fetch."""

    slug: str
    name: str
    state: str
    tagline: str


METROS = {
    metro.slug: metro
    for metro in (
        Metro("denver", "Denver", "CO", "Municipal & Public Courses"),
        Metro("phoenix", "Phoenix", "AZ", "Valley of the Sun Public Courses"),
        Metro("lasvegas", "Las Vegas", "NV", "Desert Golf Year-Round"),
        Metro("atlanta", "Atlanta", "GA", "Public Courses Across Metro Atlanta"),
        Metro("dallas", "DFW", "TX", "Public Courses Across the Dallas-Fort Worth Metroplex"),
        Metro("neworleans", "New Orleans", "LA", "Public Courses Across Metro New Orleans"),
        Metro("nashville", "Nashville", "TN", "Public Courses Across Middle Tennessee"),
        Metro("miami", "South Florida", "FL", "Public Courses from Miami to Fort Lauderdale"),
        Metro("sanfrancisco", "Bay Area", "CA", "Public Courses from San Francisco to San Jose"),
        Metro("albuquerque", "Albuquerque & Santa Fe", "NM", "High Desert Golf Along the Rio Grande"),
        Metro("oklahomacity", "Oklahoma City", "OK", "Public Courses Across Metro OKC"),
        Metro("losangeles", "LA & Orange County", "CA", "Public Courses Across Los Angeles and Orange County"),
        Metro("charlotte", "Greater Charlotte", "NC", "Public Courses Across the Carolinas' Queen City"),
        Metro("sandiego", "San Diego", "CA", "Year-Round Golf Across San Diego County"),
        Metro("austin", "Austin", "TX", "Public Courses Across the Texas Hill Country"),
        Metro("houston", "Houston", "TX", "Public Courses Across Greater Houston"),
        Metro("tampa", "Tampa Bay", "FL", "Public Courses Across the Tampa Bay Area"),
        Metro("orlando", "Orlando", "FL", "Championship Golf in the Heart of Central Florida"),
    )
}


def get_metro(slug: str) -> Metro:
    """Look up a metro by slug, case-insensitively."""
    key = (slug or "").strip().lower()
    try:
        return METROS[key]
    except KeyError:
        raise ValueError(f"Unknown metro {slug!r}. Known metros: {', '.join(sorted(METROS))}") from None


def list_metros() -> List[Metro]:
    return sorted(METROS.values(), key=lambda metro: metro.name)
