"""
Tests for window_advisor.ingestion.catalog_client — catalog loading and fallback.

Covers:
  - load_catalog(): local file, http(s) URL via httpx.MockTransport
  - Fallback substitution on missing file, non-2xx status, network error
  - FALLBACK_CATALOG contents field-for-field
  - fetch_catalog_text() raising CatalogLoadError
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from window_advisor.ingestion.catalog_client import (
    FALLBACK_CATALOG,
    CatalogLoadError,
    fetch_catalog_text,
    load_catalog,
)

CATALOG_URL = "https://example.com/window_catalog.csv"

CSV_TEXT = (
    "id,brand,windowType,priceRangeLow,priceRangeHigh,material\n"
    "7,Pella,Casement,500,900,Vinyl\n"
    "8,Marvin,Picture,1200,2000,Wood\n"
)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


# ── Local file ────────────────────────────────────────────────────────────────

class TestLoadCatalogFile:
    def test_reads_local_file(self, tmp_path: Path):
        src = tmp_path / "catalog.csv"
        src.write_text(CSV_TEXT, encoding="utf-8")
        result = load_catalog(src)
        assert not result.is_fallback
        assert result.error is None
        assert result.source == str(src)
        assert [p.brand for p in result.products] == ["Pella", "Marvin"]
        assert result.loaded_at.tzinfo is not None

    def test_missing_file_falls_back(self, tmp_path: Path):
        result = load_catalog(tmp_path / "nope.csv")
        assert result.is_fallback
        assert result.products == list(FALLBACK_CATALOG)
        assert "nope.csv" in result.error

    def test_header_only_file_is_not_fallback(self, tmp_path: Path):
        src = tmp_path / "catalog.csv"
        src.write_text("brand,windowType,priceRangeLow\n", encoding="utf-8")
        result = load_catalog(src)
        assert not result.is_fallback
        assert result.products == []


# ── URL ───────────────────────────────────────────────────────────────────────

class TestLoadCatalogUrl:
    def test_fetches_url(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text=CSV_TEXT)

        result = load_catalog(CATALOG_URL, client=_client(handler))
        assert seen == [CATALOG_URL]
        assert not result.is_fallback
        assert len(result.products) == 2

    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_error_status_falls_back(self, status):
        result = load_catalog(CATALOG_URL, client=_client(lambda r: httpx.Response(status)))
        assert result.is_fallback
        assert result.products == list(FALLBACK_CATALOG)

    def test_network_error_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = load_catalog(CATALOG_URL, client=_client(handler))
        assert result.is_fallback
        assert "connection refused" in result.error


# ── FALLBACK_CATALOG ──────────────────────────────────────────────────────────

class TestFallbackCatalog:
    def test_two_entries(self):
        assert len(FALLBACK_CATALOG) == 2

    def test_milgard_entry(self):
        p = FALLBACK_CATALOG[0]
        assert (p.id, p.brand, p.material, p.model, p.window_type) == (
            1, "Milgard", "Fiberglass", "Ultra Sliding", "Sliding",
        )
        assert p.glass_type == "Double Pane Low-E"
        assert (p.price_range_low, p.price_range_high) == (600, 1100)
        assert p.energy_rating == "Energy Star Certified"
        assert (p.u_factor, p.shgc) == (0.29, 0.32)
        assert p.warranty_years == 10
        assert p.features == ("Low-E coating", "Smooth operation")
        assert (p.popularity_score, p.customer_rating) == (82, 4.2)

    def test_andersen_entry(self):
        p = FALLBACK_CATALOG[1]
        assert (p.id, p.brand, p.material, p.model, p.window_type) == (
            2, "Andersen", "Fibrex", "Acclaim Sliding", "Sliding",
        )
        assert p.glass_type == "Double Pane Low-E"
        assert (p.price_range_low, p.price_range_high) == (1500, 2500)
        assert p.energy_rating == "Energy Star Certified"
        assert (p.u_factor, p.shgc) == (0.22, 0.27)
        assert p.warranty_years == 20
        assert p.features == ("Fibrex low maintenance", "Customizable colors")
        assert (p.popularity_score, p.customer_rating) == (90, 4.6)


# ── fetch_catalog_text ────────────────────────────────────────────────────────

def test_fetch_missing_file_raises(tmp_path: Path):
    with pytest.raises(CatalogLoadError):
        fetch_catalog_text(str(tmp_path / "missing.csv"))


def test_fetch_non_2xx_raises():
    with pytest.raises(CatalogLoadError, match="Could not fetch"):
        fetch_catalog_text(CATALOG_URL, client=_client(lambda r: httpx.Response(502)))
