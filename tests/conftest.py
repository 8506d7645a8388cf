"""
Shared pytest fixtures for the Window Advisor test suite.

Provides:
  - ``make_product``: factory for ``Product`` with sensible defaults.
  - ``milgard_sliding`` / ``sample_catalog``: fixed catalog fixtures.
  - ``seattle_answers``: a fully answered questionnaire.
  - ``isolated_env``: clears ``WINDOW_ADVISOR_*`` variables for config tests.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from window_advisor.models.answers import Answers
from window_advisor.models.product import Product


# ── Product factories ─────────────────────────────────────────────────────────

@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Return a factory building a valid ``Product``; kwargs override defaults."""

    def _make(**overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "id": 1,
            "brand": "Milgard",
            "model": "Ultra Sliding",
            "window_type": "Sliding",
            "material": "Fiberglass",
            "price_range_low": 600,
            "price_range_high": 1100,
            "u_factor": 0.29,
            "shgc": 0.32,
            "warranty_years": 10,
            "customer_rating": 4.2,
        }
        fields.update(overrides)
        return Product(**fields)

    return _make


@pytest.fixture
def milgard_sliding(make_product) -> Product:
    """Fiberglass Milgard slider, $600-1100."""
    return make_product()


@pytest.fixture
def sample_catalog(make_product) -> list[Product]:
    """Five products spanning brands, styles, materials, and price levels."""
    return [
        make_product(id=1),
        make_product(
            id=2, brand="Andersen", model="Acclaim Sliding", material="Fibrex",
            price_range_low=1500, price_range_high=2500, u_factor=0.22, shgc=0.27,
            warranty_years=20, customer_rating=4.6,
        ),
        make_product(
            id=3, brand="JELD-WEN", model="V-2500 Casement", window_type="Casement",
            material="Vinyl", price_range_low=300, price_range_high=600,
            u_factor=0.30, shgc=0.29, customer_rating=4.0,
        ),
        make_product(
            id=4, brand="Marvin", model="Ultimate Casement", window_type="Casement",
            material="Wood", price_range_low=1400, price_range_high=2600,
            u_factor=0.18, shgc=0.21, customer_rating=4.7,
        ),
        make_product(
            id=5, brand="Pella", model="250 Series Double-Hung", window_type="Double-Hung",
            material="Vinyl", price_range_low=450, price_range_high=850,
            u_factor=0.27, shgc=0.24, customer_rating=4.3,
        ),
    ]


# ── Answers ───────────────────────────────────────────────────────────────────

@pytest.fixture
def seattle_answers() -> Answers:
    """Budget-tier Sliding search with a durability priority, medium-age home."""
    return Answers(
        location="Seattle, WA",
        budget="budget",
        priority=("durability",),
        window_types=("Sliding",),
        home_age="medium",
    )


# ── Environment ───────────────────────────────────────────────────────────────

@pytest.fixture
def isolated_env(monkeypatch) -> None:
    """Remove WINDOW_ADVISOR_* overrides so config tests see only TOML values."""
    for name in (
        "WINDOW_ADVISOR_CATALOG_SOURCE",
        "WINDOW_ADVISOR_LOG_LEVEL",
        "WINDOW_ADVISOR_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
