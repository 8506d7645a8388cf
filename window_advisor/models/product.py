"""
Catalog product model.

``Product`` is the fixed, well-typed shape every catalog record is parsed
into before it reaches the recommendation engine.  Loose text handling
(quoted CSV fields, malformed numbers, unknown columns) stays in
``window_advisor.ingestion.catalog_csv``; by the time a ``Product`` exists
its required fields are present and its numbers are sane.

``window_type`` and ``material`` are kept as plain strings so that catalog
values outside the ``WindowType`` / ``FrameMaterial`` vocabularies survive
the round trip to export.  Older catalogs list several styles for one
series (``"Sliding|Picture"``); ``styles`` exposes them as a tuple.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_STYLE_SEPARATORS = re.compile(r"\s*[|;]\s*")


class Product(BaseModel):
    """A window product from the catalog.

    Attributes:
        id: Catalog row ID; ``0`` when the source has none.
        brand: Manufacturer brand, e.g. ``"Milgard"``. Required.
        model: Model or series name, e.g. ``"Ultra Sliding"``.
        series: Optional product series.
        window_type: Operating style, e.g. ``"Sliding"``. Required.
        material: Frame material, e.g. ``"Fiberglass"``.
        glass_type: Glazing description, e.g. ``"Double Pane Low-E"``.
        price_range_low: Lower bound of per-window price. Must be > 0.
        price_range_high: Upper bound of per-window price; >= low.
        energy_rating: Certification text, e.g. ``"Energy Star Certified"``.
        u_factor: Heat-transfer coefficient; lower is more insulating.
        shgc: Solar heat gain coefficient; lower admits less solar heat.
        stc: Sound transmission class, if known.
        warranty_years: Warranty length in years.
        features: Feature tags, e.g. ``("Low-E coating", "Smooth operation")``.
        popularity_score: Relative popularity (catalog-defined scale).
        customer_rating: Average customer rating, 0-5.
        extra: Unrecognized catalog columns, preserved verbatim.
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0
    brand: str
    model: str = ""
    series: Optional[str] = None
    window_type: str
    material: str = ""
    glass_type: Optional[str] = None
    price_range_low: float
    price_range_high: float
    energy_rating: str = ""
    u_factor: float = 0.0
    shgc: float = 0.0
    stc: Optional[int] = None
    warranty_years: int = 0
    features: tuple[str, ...] = ()
    popularity_score: int = 0
    customer_rating: float = 0.0
    extra: dict[str, str] = {}

    @field_validator("brand", "window_type")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("brand and window_type must be non-empty.")
        return v

    @field_validator("price_range_low")
    @classmethod
    def validate_price_low(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"price_range_low must be positive, got {v}.")
        return v

    @field_validator("u_factor", "shgc")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Performance coefficients must be >= 0, got {v}.")
        return v

    @field_validator("warranty_years")
    @classmethod
    def validate_warranty(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"warranty_years must be >= 0, got {v}.")
        return v

    @field_validator("customer_rating")
    @classmethod
    def validate_rating(cls, v: float) -> float:
        if not 0.0 <= v <= 5.0:
            raise ValueError(f"customer_rating must be in [0, 5], got {v}.")
        return v

    @model_validator(mode="after")
    def validate_price_range(self) -> "Product":
        if self.price_range_high < self.price_range_low:
            raise ValueError(
                f"price_range_high ({self.price_range_high}) must be >= "
                f"price_range_low ({self.price_range_low})."
            )
        return self

    @property
    def styles(self) -> tuple[str, ...]:
        """All operating styles this product is offered in."""
        return tuple(s for s in _STYLE_SEPARATORS.split(self.window_type) if s)

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}".strip()
