"""
Human-readable justifications for a recommendation.

Reasons are emitted in a fixed priority order and capped at ``max_reasons``
(default 4):

    1. Cost statement: tier-specific wording when the total falls inside
       the chosen budget band, otherwise a neutral "Total cost" line.
    2. Window type match.
    3. Manufacturer reputation (known brands only).
    4. Energy efficiency (energy priority and U-Factor < 0.25).
    5. Climate fit, durability, low maintenance, low upfront cost, as
       space allows.

The list is a deterministic function of its inputs and is never consulted
by the ranker.
"""

from __future__ import annotations

from typing import Optional

from window_advisor.models.answers import Answers
from window_advisor.models.product import Product
from window_advisor.models.recommendation import PricingResult
from window_advisor.recommendations.scorer import (
    is_budget_fit,
    is_climate_fit,
    is_cost_match,
    is_durability_match,
    is_energy_match,
    is_maintenance_match,
    matched_style,
)
from window_advisor.taxonomy.manufacturer_taxonomy import get_manufacturer
from window_advisor.taxonomy.window_taxonomy import BudgetTier, ClimateType

MAX_REASONS = 4

_IN_BAND_WORDING: dict[str, str] = {
    BudgetTier.BUDGET.value:  "Excellent budget value at {total} total cost",
    BudgetTier.MID.value:     "Great mid-range value at {total} total cost",
    BudgetTier.PREMIUM.value: "Premium investment at {total} total cost",
}


def build_reasons(
    product:     Product,
    answers:     Answers,
    pricing:     PricingResult,
    climate:     Optional[str] = None,
    max_reasons: int = MAX_REASONS,
) -> tuple[str, ...]:
    """Assemble up to ``max_reasons`` justifications for one product.

    Args:
        product:     The recommended product.
        answers:     Normalized questionnaire answers.
        pricing:     Pricing used for scoring this product.
        climate:     Resolved climate, or None when unknown.
        max_reasons: Cap on the number of reasons (clamped to 0..4).

    Returns:
        Tuple of reason strings, most important first.  Never empty when
        ``max_reasons >= 1`` because the cost statement is always present.
    """
    reasons: list[str] = [_cost_statement(answers.budget, pricing.total)]

    style = matched_style(product, answers.window_types) if answers.window_types else None
    if style is not None:
        reasons.append(f"Perfect match for your {style} selection")

    manufacturer = get_manufacturer(product.brand)
    if manufacturer is not None:
        reasons.append(
            f"{manufacturer.reputation} {product.brand} brand "
            f"({manufacturer.customer_service}/5 rating)"
        )

    if is_energy_match(product, answers):
        reasons.append(
            f"Excellent energy efficiency with U-Factor of {product.u_factor:g}"
        )

    if is_climate_fit(product, climate):
        if climate is not None and climate.casefold() == ClimateType.COLD:
            reasons.append(f"Well insulated for cold winters (U-Factor {product.u_factor:g})")
        else:
            reasons.append(f"Blocks solar heat in hot climates (SHGC {product.shgc:g})")

    if is_durability_match(product, answers):
        reasons.append("Fiberglass offers superior durability and longevity")

    if is_maintenance_match(product, answers):
        reasons.append("Vinyl frames need minimal upkeep")

    if is_cost_match(pricing, answers):
        reasons.append("Low upfront cost keeps the project affordable")

    limit = max(0, min(max_reasons, MAX_REASONS))
    return tuple(reasons[:limit])


def _cost_statement(budget: Optional[str], total: int) -> str:
    amount = f"${total:,}"
    if is_budget_fit(budget, total):
        return _IN_BAND_WORDING[budget.casefold()].format(total=amount)
    return f"Total cost: {amount} per window"
