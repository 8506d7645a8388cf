"""
Recommendation scoring: converts a Product + PricingResult + Answers into an
additive integer score with a per-signal breakdown.

Score formula (sum of independent signals)
------------------------------------------
    total = (
        type_match              # +50  desired-type filter active and matched
        + budget_fit            # +40  total inside the chosen budget band
        + climate_fit           # +30  cold & U < 0.25, or hot & SHGC < 0.30
        + energy_priority       # +20  "energy" selected & U < 0.25
        + durability_priority   # +15  "durability" selected & Fiberglass
        + maintenance_priority  # +15  "maintenance" selected & Vinyl
        + cost_priority         # +15  "cost" selected & total < 1000
        + reputation            # +15 Luxury, +10 Premium, +0 otherwise
    )

Budget bands
------------
    budget   total <  1000
    mid      800 <= total <= 1500
    premium  total >  1200

The bands overlap on purpose (soft boundaries) and "budget" has no lower
bound.  Keep the thresholds exactly as they are.

No signal depends on another, and every predicate here is also used by the
explainer, so a reason is shown if and only if its signal scored.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from window_advisor.models.answers import Answers
from window_advisor.models.product import Product
from window_advisor.models.recommendation import PricingResult
from window_advisor.taxonomy.manufacturer_taxonomy import REPUTATION_BONUS, get_manufacturer
from window_advisor.taxonomy.window_taxonomy import (
    BudgetTier,
    ClimateType,
    FrameMaterial,
    Priority,
)

TYPE_MATCH_POINTS           = 50
BUDGET_FIT_POINTS           = 40
CLIMATE_FIT_POINTS          = 30
ENERGY_PRIORITY_POINTS      = 20
DURABILITY_PRIORITY_POINTS  = 15
MAINTENANCE_PRIORITY_POINTS = 15
COST_PRIORITY_POINTS        = 15

EFFICIENT_U_FACTOR = 0.25
LOW_SHGC           = 0.30
LOW_COST_TOTAL     = 1000


@dataclass(frozen=True)
class ScoreComponents:
    """Points awarded by each scoring signal for one product."""

    type_match:            int = 0
    budget_fit:            int = 0
    climate_fit:           int = 0
    energy_priority:       int = 0
    durability_priority:   int = 0
    maintenance_priority:  int = 0
    cost_priority:         int = 0
    reputation:            int = 0

    @property
    def total(self) -> int:
        return (
            self.type_match
            + self.budget_fit
            + self.climate_fit
            + self.energy_priority
            + self.durability_priority
            + self.maintenance_priority
            + self.cost_priority
            + self.reputation
        )

    def non_zero(self) -> dict[str, int]:
        """Signals that contributed, in formula order."""
        return {k: v for k, v in asdict(self).items() if v}


def compute_score(
    product:  Product,
    pricing:  PricingResult,
    answers:  Answers,
    climate:  Optional[str],
) -> ScoreComponents:
    """Compute every scoring signal for one product that passed the type filter.

    Args:
        product:  Catalog product.
        pricing:  Pricing for the user's location and home age.
        answers:  Normalized questionnaire answers.
        climate:  Resolved climate (``"cold"``, ``"hot"``, ``"mixed"``) or None.

    Returns:
        ScoreComponents with integer points per signal.
    """
    type_match = 0
    if answers.window_types and matched_style(product, answers.window_types):
        type_match = TYPE_MATCH_POINTS

    manufacturer = get_manufacturer(product.brand)
    reputation = REPUTATION_BONUS.get(manufacturer.reputation, 0) if manufacturer else 0

    return ScoreComponents(
        type_match=type_match,
        budget_fit=BUDGET_FIT_POINTS if is_budget_fit(answers.budget, pricing.total) else 0,
        climate_fit=CLIMATE_FIT_POINTS if is_climate_fit(product, climate) else 0,
        energy_priority=(
            ENERGY_PRIORITY_POINTS if is_energy_match(product, answers) else 0
        ),
        durability_priority=(
            DURABILITY_PRIORITY_POINTS if is_durability_match(product, answers) else 0
        ),
        maintenance_priority=(
            MAINTENANCE_PRIORITY_POINTS if is_maintenance_match(product, answers) else 0
        ),
        cost_priority=(
            COST_PRIORITY_POINTS if is_cost_match(pricing, answers) else 0
        ),
        reputation=reputation,
    )


# ── Signal predicates ─────────────────────────────────────────────────────────

def matched_style(product: Product, desired: tuple[str, ...]) -> Optional[str]:
    """Return the first product style found in ``desired`` (case-insensitive)."""
    wanted = {d.casefold() for d in desired}
    for style in product.styles:
        if style.casefold() in wanted:
            return style
    return None


def is_budget_fit(budget: Optional[str], total: int) -> bool:
    budget = budget.casefold() if budget else None
    if budget == BudgetTier.BUDGET:
        return total < 1000
    if budget == BudgetTier.MID:
        return 800 <= total <= 1500
    if budget == BudgetTier.PREMIUM:
        return total > 1200
    return False


def is_climate_fit(product: Product, climate: Optional[str]) -> bool:
    climate = climate.casefold() if climate else None
    if climate == ClimateType.COLD:
        return product.u_factor < EFFICIENT_U_FACTOR
    if climate == ClimateType.HOT:
        return product.shgc < LOW_SHGC
    return False


def is_energy_match(product: Product, answers: Answers) -> bool:
    return _has_priority(answers, Priority.ENERGY) and product.u_factor < EFFICIENT_U_FACTOR


def is_durability_match(product: Product, answers: Answers) -> bool:
    return (
        _has_priority(answers, Priority.DURABILITY)
        and _is_material(product, FrameMaterial.FIBERGLASS)
    )


def is_maintenance_match(product: Product, answers: Answers) -> bool:
    return (
        _has_priority(answers, Priority.MAINTENANCE)
        and _is_material(product, FrameMaterial.VINYL)
    )


def is_cost_match(pricing: PricingResult, answers: Answers) -> bool:
    return _has_priority(answers, Priority.COST) and pricing.total < LOW_COST_TOTAL


# ── Helpers ────────────────────────────────────────────────────────────────────

def _has_priority(answers: Answers, priority: Priority) -> bool:
    return any(p.casefold() == priority.value for p in answers.priority)


def _is_material(product: Product, material: FrameMaterial) -> bool:
    return product.material.strip().casefold() == material.value.casefold()
