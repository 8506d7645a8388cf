"""
Canned window-buying assistant.

Free-text questions are matched by keyword, first match wins::

    "cost" or "price"  -> material cost ranges
    "energy"           -> efficiency factors
    "material"         -> material comparison
    anything else      -> help prompt

Purely informational: the assistant never reads or changes answers and
has no influence on scoring.
"""

from __future__ import annotations

COST_RESPONSE = (
    "Window costs vary by material:\n"
    "• Vinyl: $300-800 + installation\n"
    "• Fiberglass: $600-1,200 + installation\n"
    "• Wood: $800-2,000+ + installation\n"
    "\n"
    "Your location affects pricing due to labor costs and regulations."
)

ENERGY_RESPONSE = (
    "Energy efficiency key factors:\n"
    "• U-Factor: Lower is better (0.15-0.30)\n"
    "• SHGC: Lower for hot climates\n"
    "• Triple-pane glass: 50% more efficient\n"
    "• Low-E coatings: 10-25% energy savings"
)

MATERIAL_RESPONSE = (
    "Material comparison:\n"
    "• Fiberglass: Best durability, paintable, 50+ years\n"
    "• Vinyl: Most affordable, low maintenance, 20-30 years\n"
    "• Wood: Beautiful, customizable, requires maintenance\n"
    "• Aluminum: Modern look, poor insulation"
)

DEFAULT_RESPONSE = (
    "I can help with window costs, energy efficiency, materials, brands, "
    "and installation. What would you like to know?"
)

# Evaluated in order; first keyword hit wins.
KEYWORD_RESPONSES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("cost", "price"), COST_RESPONSE),
    (("energy",),       ENERGY_RESPONSE),
    (("material",),     MATERIAL_RESPONSE),
)


def answer_question(message: str) -> str:
    """Return the canned answer for ``message`` (case-insensitive)."""
    lowered = (message or "").lower()
    for keywords, response in KEYWORD_RESPONSES:
        if any(k in lowered for k in keywords):
            return response
    return DEFAULT_RESPONSE
