"""
Tests for window_advisor.ingestion.catalog_csv — catalog CSV parsing.

Covers:
  - parse_catalog_csv(): valid file, quoted features, unknown columns,
    malformed numbers, negative optional numbers clamped to 0, dropped rows,
    header normalization, BOM, empty input
  - parse_int() / parse_float() leading-number parsing
  - REQUIRED_CSV_COLUMNS
"""

from __future__ import annotations

from pathlib import Path

import pytest

from window_advisor.ingestion.catalog_csv import (
    REQUIRED_CSV_COLUMNS,
    parse_catalog_csv,
    parse_float,
    parse_int,
)


# ── Helpers ────────────────────────────────────────────────────────────────────

HEADER = (
    "id,brand,material,model,windowType,glassType,priceRangeLow,priceRangeHigh,"
    "energyRating,uFactor,shgc,warrantyYears,features,popularityScore,customerRating"
)

MILGARD_ROW = (
    "1,Milgard,Fiberglass,Ultra Sliding,Sliding,Double Pane Low-E,600,1100,"
    'Energy Star Certified,0.29,0.32,10,"Low-E coating, Smooth operation",82,4.2'
)


def _csv(*rows: str, header: str = HEADER) -> str:
    return "\n".join((header, *rows)) + "\n"


# ── REQUIRED_CSV_COLUMNS ───────────────────────────────────────────────────────

def test_required_columns():
    assert REQUIRED_CSV_COLUMNS == {"brand", "windowType", "priceRangeLow"}


# ── parse_catalog_csv — happy path ─────────────────────────────────────────────

class TestParseCatalogCsvValid:
    def test_parses_all_fields(self):
        [p] = parse_catalog_csv(_csv(MILGARD_ROW))
        assert p.id == 1
        assert p.brand == "Milgard"
        assert p.model == "Ultra Sliding"
        assert p.window_type == "Sliding"
        assert p.glass_type == "Double Pane Low-E"
        assert p.price_range_low == 600
        assert p.price_range_high == 1100
        assert p.u_factor == 0.29
        assert p.shgc == 0.32
        assert p.warranty_years == 10
        assert p.popularity_score == 82
        assert p.customer_rating == 4.2

    def test_quoted_features_split(self):
        [p] = parse_catalog_csv(_csv(MILGARD_ROW))
        assert p.features == ("Low-E coating", "Smooth operation")

    def test_unknown_columns_kept_in_extra(self):
        text = "brand,windowType,priceRangeLow,color\nPella,Casement,500,White\n"
        [p] = parse_catalog_csv(text)
        assert p.extra == {"color": "White"}

    def test_header_normalization(self):
        text = "Brand,Window Type,price_range_low,Price-Range-High\nPella,Casement,500,900\n"
        [p] = parse_catalog_csv(text)
        assert p.window_type == "Casement"
        assert p.price_range_high == 900

    def test_bom_is_ignored(self):
        [p] = parse_catalog_csv("\ufeff" + _csv(MILGARD_ROW))
        assert p.id == 1

    def test_optional_stc_and_series(self):
        text = "brand,windowType,priceRangeLow,stc,series\nPella,Casement,500,32,\nPella,Picture,500,,Lifestyle\n"
        first, second = parse_catalog_csv(text)
        assert first.stc == 32
        assert first.series is None
        assert second.stc is None
        assert second.series == "Lifestyle"

    def test_file_order_preserved(self, tmp_path: Path):
        src = tmp_path / "catalog.csv"
        src.write_text(_csv(MILGARD_ROW, MILGARD_ROW.replace("1,Milgard", "2,Pella", 1)), encoding="utf-8")
        assert [p.id for p in parse_catalog_csv(src.read_text(encoding="utf-8"))] == [1, 2]


# ── parse_catalog_csv — normalization and dropping ─────────────────────────────

class TestParseCatalogCsvNormalization:
    def test_decimal_price_truncated(self):
        text = "brand,windowType,priceRangeLow,priceRangeHigh\nPella,Casement,600.50,900.99\n"
        [p] = parse_catalog_csv(text)
        assert p.price_range_low == 600
        assert p.price_range_high == 900

    def test_malformed_numbers_default(self):
        text = "brand,windowType,priceRangeLow,uFactor,warrantyYears\nPella,Casement,500,abc,n/a\n"
        [p] = parse_catalog_csv(text)
        assert p.u_factor == 0.0
        assert p.warranty_years == 0

    def test_high_below_low_raised(self):
        text = "brand,windowType,priceRangeLow,priceRangeHigh\nPella,Casement,800,500\n"
        [p] = parse_catalog_csv(text)
        assert p.price_range_high == 800

    def test_missing_high_uses_low(self):
        text = "brand,windowType,priceRangeLow\nPella,Casement,800\n"
        assert parse_catalog_csv(text)[0].price_range_high == 800

    def test_rating_clamped(self):
        text = "brand,windowType,priceRangeLow,customerRating\nPella,Casement,500,7\n"
        assert parse_catalog_csv(text)[0].customer_rating == 5.0

    def test_negative_optional_numbers_clamped(self):
        text = (
            "brand,windowType,priceRangeLow,priceRangeHigh,uFactor,shgc,warrantyYears,popularityScore\n"
            "Milgard,Sliding,600,1100,0.29,0.32,-1,-5\n"
            "Pella,Casement,500,900,-0.1,-0.2,20,80\n"
        )
        milgard, pella = parse_catalog_csv(text)
        assert milgard.warranty_years == 0
        assert milgard.popularity_score == 0
        assert milgard.u_factor == 0.29
        assert pella.u_factor == 0.0
        assert pella.shgc == 0.0
        assert pella.warranty_years == 20

    @pytest.mark.parametrize(
        "row",
        [
            ",Casement,500",        # no brand
            "Pella,,500",           # no window type
            "Pella,Casement,0",     # non-positive price
            "Pella,Casement,free",  # unparseable price
        ],
    )
    def test_invalid_rows_dropped(self, row):
        text = f"brand,windowType,priceRangeLow\n{row}\nPella,Picture,400\n"
        products = parse_catalog_csv(text)
        assert [p.window_type for p in products] == ["Picture"]

    def test_empty_text(self):
        assert parse_catalog_csv("") == []

    def test_header_only(self):
        assert parse_catalog_csv(HEADER + "\n") == []


# ── parse_int / parse_float ────────────────────────────────────────────────────

@pytest.mark.parametrize("text, expected", [("600", 600), ("600.50", 600), (" 42abc", 42), ("abc", 0), ("", 0)])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text, expected", [("0.29", 0.29), (".3", 0.3), ("4.5 stars", 4.5), ("x", 0.0)])
def test_parse_float(text, expected):
    assert parse_float(text) == expected
