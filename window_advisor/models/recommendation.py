"""
Recommendation output models.

``PricingResult`` is derived, never stored: it is recomputed for every
product on every scoring pass.  ``Recommendation`` couples a catalog
``Product`` with its score, explanation, and pricing.

Both models are frozen: a recommendation list is rebuilt from scratch on
every scoring pass and never patched in place.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from window_advisor.models.product import Product
from window_advisor.taxonomy.manufacturer_taxonomy import Manufacturer
from window_advisor.taxonomy.region_taxonomy import InstallationRequirements


class PricingResult(BaseModel):
    """Per-window cost estimate in whole currency units.

    Attributes:
        window: Window price after the location cost factor.
        installation: Installation labour after the home-age modifier.
        total: ``window + installation``.
    """

    model_config = ConfigDict(frozen=True)

    window: int
    installation: int
    total: int

    @model_validator(mode="after")
    def validate_total(self) -> "PricingResult":
        if self.total != self.window + self.installation:
            raise ValueError(
                f"total ({self.total}) must equal window + installation "
                f"({self.window} + {self.installation})."
            )
        return self


class Recommendation(BaseModel):
    """A ranked, explained product recommendation.

    Attributes:
        product: The recommended catalog product.
        score: Additive integer score (higher is better).
        reasons: Up to four human-readable justifications, most important first.
        pricing: Cost estimate for the user's location and home age.
        score_breakdown: Non-zero score signals, e.g. ``{"type_match": 50}``.
        installation: Installation guidance for the user's home age.
        manufacturer: Manufacturer metadata, if the brand is known.
    """

    model_config = ConfigDict(frozen=True)

    product: Product
    score: int
    reasons: tuple[str, ...]
    pricing: PricingResult
    score_breakdown: dict[str, int] = {}
    installation: Optional[InstallationRequirements] = None
    manufacturer: Optional[Manufacturer] = None
