"""
Manufacturer reputation table.

Used only as a scoring and explanation input::

    Luxury  -> +15
    Premium -> +10
    Value   -> +0

Brands not in the table score no reputation bonus and get no reputation
statement in their explanation.  Lookups are exact (case-sensitive) on the
catalog's brand string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from window_advisor.taxonomy.window_taxonomy import ReputationTier


@dataclass(frozen=True)
class Manufacturer:
    """Static metadata for a window manufacturer."""

    reputation:        ReputationTier
    customer_service:  float
    founded:           int
    specialty:         str


MANUFACTURERS: dict[str, Manufacturer] = {
    "Andersen": Manufacturer(ReputationTier.PREMIUM, 4.6, 1903, "Fibrex composite technology"),
    "Pella":    Manufacturer(ReputationTier.PREMIUM, 4.4, 1925, "Design innovation"),
    "Marvin":   Manufacturer(ReputationTier.LUXURY,  4.7, 1912, "Custom luxury windows"),
    "Milgard":  Manufacturer(ReputationTier.VALUE,   4.2, 1958, "West Coast expertise"),
    "JELD-WEN": Manufacturer(ReputationTier.VALUE,   4.1, 1960, "Broad product range"),
}

REPUTATION_BONUS: dict[ReputationTier, int] = {
    ReputationTier.LUXURY:  15,
    ReputationTier.PREMIUM: 10,
    ReputationTier.VALUE:    0,
}


def get_manufacturer(brand: Optional[str]) -> Optional[Manufacturer]:
    if not brand:
        return None
    return MANUFACTURERS.get(brand)
