"""
Vocabulary for window products and questionnaire answers.

Product-side dimensions:
  - ``WindowType``     — operating style (Double-Hung, Casement, ...)
  - ``FrameMaterial``  — frame construction (Vinyl, Fiberglass, ...)

Answer-side dimensions:
  - ``BudgetTier``     — per-window budget band chosen by the user
  - ``Priority``       — multi-select priorities (energy, durability, ...)
  - ``HomeAge``        — age bracket of the home; drives installation cost
  - ``ClimateType``    — coarse climate descriptor derived from location

``ReputationTier`` classifies manufacturers; ``QuestionType`` tells the
questionnaire how an answer is collected.

Catalog values outside these vocabularies are preserved as plain strings on
the ``Product`` model, so the enums are used for comparison, not coercion::

    from window_advisor.taxonomy.window_taxonomy import FrameMaterial

    product.material == FrameMaterial.FIBERGLASS

This module has NO imports from any other ``window_advisor`` package.
"""

from enum import StrEnum


class WindowType(StrEnum):
    """Operating style of a window unit."""

    DOUBLE_HUNG = "Double-Hung"
    """Two vertically sliding sashes; traditional, easy to clean."""

    CASEMENT = "Casement"
    """Side-hinged, cranks outward; maximum ventilation."""

    SLIDING = "Sliding"
    """Horizontally sliding sash; simple operation."""

    PICTURE = "Picture"
    """Fixed, non-operable; maximum light."""

    AWNING = "Awning"
    """Top-hinged, opens outward from the bottom."""


class FrameMaterial(StrEnum):
    """Frame construction material."""

    VINYL = "Vinyl"
    FIBERGLASS = "Fiberglass"
    FIBREX = "Fibrex"
    WOOD = "Wood"
    COMPOSITE = "Composite"
    ALUMINUM = "Aluminum"


class BudgetTier(StrEnum):
    """Per-window budget band selected in the questionnaire."""

    BUDGET = "budget"
    """$300-600 per window; quality vinyl options."""

    MID = "mid"
    """$600-1,000 per window; fiberglass and premium vinyl."""

    PREMIUM = "premium"
    """$1,000-2,000+ per window; wood and luxury options."""


class Priority(StrEnum):
    """Multi-select priorities. Each contributes to the score independently."""

    ENERGY = "energy"
    DURABILITY = "durability"
    MAINTENANCE = "maintenance"
    COST = "cost"


class HomeAge(StrEnum):
    """Home age bracket; installation cost multipliers increase with age."""

    NEW = "new"
    """Less than 10 years old."""

    MEDIUM = "medium"
    """10-30 years old."""

    OLD = "old"
    """30+ years old."""

    HISTORIC = "historic"
    """50+ years old, historic construction."""


class ClimateType(StrEnum):
    """Coarse climate descriptor used by the climate-fit scoring signal."""

    COLD = "cold"
    HOT = "hot"
    MIXED = "mixed"


class ReputationTier(StrEnum):
    """Manufacturer reputation tier."""

    VALUE = "Value"
    PREMIUM = "Premium"
    LUXURY = "Luxury"


class QuestionType(StrEnum):
    """How a questionnaire answer is collected."""

    LOCATION = "location"
    """Free text "City, REGION"."""

    RADIO = "radio"
    """Single choice."""

    CHECKBOX = "checkbox"
    """Multiple choice; selecting an option twice deselects it."""
