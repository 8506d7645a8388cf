"""
Per-window cost estimates.

Formula
-------
    window       = midpoint(price_range_low, price_range_high) * location_factor
    installation = 200 * home_age_modifier
    total        = window + installation

``location_factor`` comes from ``LOCATION_COST_FACTORS`` keyed by the
region code of ``"City, REGION"`` (1.0 when unknown).  ``home_age_modifier``
comes from ``INSTALLATION_REQUIREMENTS`` (1.0 for an unknown bracket).

Amounts are computed in ``Decimal`` and rounded half-up to whole currency
units *before* summing, so ``total == window + installation`` always holds.

``calculate_pricing`` is pure and cheap; the engine calls it for every
product on every pass without caching.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from window_advisor.models.product import Product
from window_advisor.models.recommendation import PricingResult
from window_advisor.taxonomy.region_taxonomy import (
    installation_requirements,
    location_cost_factor,
)

BASE_INSTALLATION_COST = Decimal("200")

_WHOLE_UNIT = Decimal("1")


def calculate_pricing(
    product:  Product,
    location: Optional[str],
    home_age: Optional[str],
) -> PricingResult:
    """Estimate window, installation, and total cost for one product.

    Args:
        product:  Catalog product (uses its price range).
        location: ``"City, REGION"`` string, or ``None`` / ``""`` if unknown.
        home_age: Home age bracket (``"new"``, ``"medium"``, ``"old"``,
                  ``"historic"``); anything else uses a 1.0 modifier.

    Returns:
        PricingResult with whole-unit amounts.
    """
    midpoint = (_dec(product.price_range_low) + _dec(product.price_range_high)) / 2
    window = _round_currency(midpoint * _dec(location_cost_factor(location)))

    reqs = installation_requirements(home_age)
    modifier = _dec(reqs.cost_modifier) if reqs is not None else Decimal("1")
    installation = _round_currency(BASE_INSTALLATION_COST * modifier)

    return PricingResult(
        window=window,
        installation=installation,
        total=window + installation,
    )


# ── Helpers ────────────────────────────────────────────────────────────────────

def _dec(value: float) -> Decimal:
    # str() keeps 1.15 as 1.15 rather than its binary expansion
    return Decimal(str(value))


def _round_currency(value: Decimal) -> int:
    return int(value.quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP))
