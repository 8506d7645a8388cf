"""
Catalog loader — reads the product catalog from a local file or an
http(s) URL and falls back to a fixed two-entry catalog on failure.

Usage::

    result = load_catalog("data/window_catalog.csv")
    result.products      # list[Product], never empty
    result.is_fallback   # True if the fixed fallback was substituted

A fetch failure (missing file, network error, non-2xx status, undecodable
CSV) is recovered here and logged at WARNING.  The recommendation engine
always receives a valid, possibly tiny, catalog.

The load is one-shot: no retry, no caching.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import httpx

from window_advisor.ingestion.catalog_csv import parse_catalog_csv
from window_advisor.models.product import Product

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Substituted verbatim whenever the catalog source cannot be read.
FALLBACK_CATALOG: tuple[Product, ...] = (
    Product(
        id=1,
        brand="Milgard",
        material="Fiberglass",
        model="Ultra Sliding",
        window_type="Sliding",
        glass_type="Double Pane Low-E",
        price_range_low=600,
        price_range_high=1100,
        energy_rating="Energy Star Certified",
        u_factor=0.29,
        shgc=0.32,
        warranty_years=10,
        features=("Low-E coating", "Smooth operation"),
        popularity_score=82,
        customer_rating=4.2,
    ),
    Product(
        id=2,
        brand="Andersen",
        material="Fibrex",
        model="Acclaim Sliding",
        window_type="Sliding",
        glass_type="Double Pane Low-E",
        price_range_low=1500,
        price_range_high=2500,
        energy_rating="Energy Star Certified",
        u_factor=0.22,
        shgc=0.27,
        warranty_years=20,
        features=("Fibrex low maintenance", "Customizable colors"),
        popularity_score=90,
        customer_rating=4.6,
    ),
)


class CatalogLoadError(RuntimeError):
    """Raised when the catalog source cannot be read."""


@dataclass
class CatalogLoadResult:
    """Typed container for a catalog load.

    Attributes:
        products:    Parsed products (the fallback catalog on failure).
        source:      Path or URL that was requested.
        is_fallback: True if ``FALLBACK_CATALOG`` was substituted.
        error:       Failure description when ``is_fallback`` is True.
        loaded_at:   UTC timestamp of the load.
    """

    products:    list[Product]
    source:      str
    is_fallback: bool = False
    error:       Optional[str] = None
    loaded_at:   datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def load_catalog(
    source:  Union[str, Path],
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client:  Optional[httpx.Client] = None,
) -> CatalogLoadResult:
    """Load and parse the catalog, substituting the fallback on failure.

    Args:
        source:  Local file path or ``http(s)://`` URL of the catalog CSV.
        timeout: Network timeout in seconds (URL sources only).
        client:  Optional pre-configured ``httpx.Client`` (used in tests).

    Returns:
        CatalogLoadResult; ``products`` is never empty when falling back.
    """
    source_str = str(source)
    try:
        text = fetch_catalog_text(source_str, timeout=timeout, client=client)
        products = parse_catalog_csv(text)
    except (CatalogLoadError, csv.Error) as exc:
        logger.warning("Catalog load failed (%s); using fallback catalog", exc)
        return CatalogLoadResult(
            products=list(FALLBACK_CATALOG),
            source=source_str,
            is_fallback=True,
            error=str(exc),
        )

    logger.info("Loaded %d products from %s", len(products), source_str)
    return CatalogLoadResult(products=products, source=source_str)


def fetch_catalog_text(
    source:  str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client:  Optional[httpx.Client] = None,
) -> str:
    """Return the raw catalog CSV text from a path or URL.

    Raises:
        CatalogLoadError: On a missing file, network error, or non-2xx status.
    """
    if _is_url(source):
        try:
            if client is not None:
                resp = client.get(source, timeout=timeout)
            else:
                resp = httpx.get(source, timeout=timeout, follow_redirects=True)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise CatalogLoadError(f"Could not fetch catalog from {source}: {exc}") from exc
        return resp.text

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Could not read catalog file {path}: {exc}") from exc


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))
