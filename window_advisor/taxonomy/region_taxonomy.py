"""
Region reference tables: climate zones, cost-of-living factors, and
installation requirements by home age.

Locations are free text in ``"City, REGION"`` form.  The region code is the
last two letters of the string, upper-cased, so ``"Seattle, WA"``,
``"seattle,wa"`` and ``"Seattle, Washington WA"`` all resolve to ``WA``.

Climate resolution
------------------
Each region carries a heating/cooling flag pair.  The coarse climate used
for scoring is::

    heating  -> "cold"
    cooling  -> "hot"
    neither  -> "mixed"

Unknown or missing regions resolve to ``DEFAULT_CLIMATE_ZONE`` (mixed),
which contributes no climate bonus.

All tables are module-level constants and must be treated as read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from window_advisor.taxonomy.window_taxonomy import ClimateType, HomeAge


@dataclass(frozen=True)
class ClimateZone:
    """An IECC-style climate zone for a region.

    Attributes:
        zone:        Zone label, e.g. ``"4C"``.
        heating:     True if the zone is heating-dominated.
        cooling:     True if the zone is cooling-dominated.
        description: Short human-readable description.
    """

    zone:        str
    heating:     bool
    cooling:     bool
    description: str

    @property
    def climate(self) -> ClimateType:
        if self.heating:
            return ClimateType.COLD
        if self.cooling:
            return ClimateType.HOT
        return ClimateType.MIXED


@dataclass(frozen=True)
class InstallationRequirements:
    """Installation guidance for a home-age bracket."""

    method:         str
    timeframe:      str
    permits:        str
    cost_modifier:  float


CLIMATE_ZONES: dict[str, ClimateZone] = {
    "WA": ClimateZone("4C", heating=True,  cooling=False, description="Mixed-Humid, Cold Winters"),
    "CA": ClimateZone("3B", heating=False, cooling=True,  description="Warm-Dry, Hot Summers"),
    "FL": ClimateZone("1A", heating=False, cooling=True,  description="Very Hot-Humid"),
    "TX": ClimateZone("2A", heating=False, cooling=True,  description="Hot-Humid"),
    "NY": ClimateZone("4A", heating=True,  cooling=False, description="Mixed-Humid"),
    "IL": ClimateZone("5A", heating=True,  cooling=False, description="Cool-Humid"),
    "CO": ClimateZone("5B", heating=True,  cooling=False, description="Cool-Dry"),
    "AZ": ClimateZone("2B", heating=False, cooling=True,  description="Hot-Dry"),
}

DEFAULT_CLIMATE_ZONE = ClimateZone(
    "4A", heating=False, cooling=False, description="Mixed-Humid (default)",
)

# Cost-of-living multipliers applied to the window (not installation) price.
LOCATION_COST_FACTORS: dict[str, float] = {
    "WA": 1.15,
    "CA": 1.25,
    "NY": 1.20,
    "FL": 1.05,
    "TX": 1.00,
    "IL": 1.10,
    "CO": 1.08,
    "AZ": 1.03,
}

DEFAULT_COST_FACTOR = 1.0

INSTALLATION_REQUIREMENTS: dict[HomeAge, InstallationRequirements] = {
    HomeAge.NEW: InstallationRequirements(
        method="Insert or Full-Frame",
        timeframe="1-2 days per 8-10 windows",
        permits="Usually not required",
        cost_modifier=1.0,
    ),
    HomeAge.MEDIUM: InstallationRequirements(
        method="Likely Insert",
        timeframe="1-3 days per 8-10 windows",
        permits="Check local requirements",
        cost_modifier=1.1,
    ),
    HomeAge.OLD: InstallationRequirements(
        method="Often Full-Frame",
        timeframe="2-4 days per 8-10 windows",
        permits="Likely required",
        cost_modifier=1.3,
    ),
    HomeAge.HISTORIC: InstallationRequirements(
        method="Specialized Full-Frame",
        timeframe="3-5 days per 8-10 windows",
        permits="Historic approval required",
        cost_modifier=1.5,
    ),
}


def parse_region(location: Optional[str]) -> Optional[str]:
    """Extract the two-letter region code from a ``"City, REGION"`` string.

    Returns ``None`` when the string has no comma or the part after the
    last comma has fewer than two letters.
    """
    if not location or not isinstance(location, str) or "," not in location:
        return None
    tail = location.rsplit(",", 1)[1]
    letters = [c for c in tail if c.isalpha()]
    if len(letters) < 2:
        return None
    return "".join(letters[-2:]).upper()


def resolve_climate_zone(location: Optional[str]) -> ClimateZone:
    """Return the climate zone for ``location``, or the default zone."""
    region = parse_region(location)
    if region is None:
        return DEFAULT_CLIMATE_ZONE
    return CLIMATE_ZONES.get(region, DEFAULT_CLIMATE_ZONE)


def location_cost_factor(location: Optional[str]) -> float:
    """Return the cost-of-living multiplier for ``location`` (1.0 if unknown)."""
    region = parse_region(location)
    if region is None:
        return DEFAULT_COST_FACTOR
    return LOCATION_COST_FACTORS.get(region, DEFAULT_COST_FACTOR)


def installation_requirements(home_age: Optional[str]) -> Optional[InstallationRequirements]:
    """Look up installation requirements for a home-age bracket string."""
    try:
        return INSTALLATION_REQUIREMENTS[HomeAge(home_age)]
    except ValueError:
        return None
