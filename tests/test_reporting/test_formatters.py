"""
Tests for window_advisor/reporting/formatters.py.

What we test
------------
  - Comparison table layout, explicit ranks, and the no-matches message.
  - Detail block and location banner.
  - filter_recommendations(): case-insensitive brand/material match that
    keeps the original ranks.
  - installer_search_url(): maps search link, ZIP encoded, blank rejected.
"""

from __future__ import annotations

import pytest

from window_advisor.recommendations.ranker import recommend
from window_advisor.reporting.formatters import (
    NO_MATCHES_MESSAGE,
    filter_recommendations,
    format_comparison_table,
    format_location_banner,
    format_recommendation_details,
    installer_search_url,
)
from window_advisor.taxonomy.region_taxonomy import resolve_climate_zone


def test_empty_table_shows_no_matches():
    assert NO_MATCHES_MESSAGE in format_comparison_table([])


def test_table_rows(sample_catalog, seattle_answers):
    recs = recommend(sample_catalog, seattle_answers)
    lines = format_comparison_table(recs).splitlines()
    assert lines[0].split()[:3] == ["Rank", "Brand", "Model"]
    assert set(lines[1]) == {"-"}
    assert len(lines) == 2 + len(recs)
    assert lines[2].split()[1] == "Andersen"
    assert "$1,198" in lines[3]


def test_details_block(milgard_sliding, seattle_answers):
    [rec] = recommend([milgard_sliding], seattle_answers)
    text = format_recommendation_details(rec, 1)
    assert text.startswith("#1 Milgard Ultra Sliding (Sliding, Fiberglass) -- score 65")
    assert "Cost: window $978 + installation $220 = $1,198" in text
    assert "Likely Insert" in text
    assert "founded 1958" in text
    for reason in rec.reasons:
        assert f"+ {reason}" in text


def test_banner_known_location():
    banner = format_location_banner("Seattle, WA", resolve_climate_zone("Seattle, WA"))
    assert "Climate Zone 4C" in banner


def test_banner_unknown_location():
    assert "unknown" in format_location_banner("", None)


def test_table_uses_explicit_ranks(sample_catalog, seattle_answers):
    recs = recommend(sample_catalog, seattle_answers)
    lines = format_comparison_table(recs[1:], ranks=[2]).splitlines()
    assert lines[2].split()[0] == "2"


# ── filter_recommendations ────────────────────────────────────────────────────

class TestFilterRecommendations:
    def test_blank_keeps_all(self, sample_catalog):
        recs = recommend(sample_catalog, {})
        assert filter_recommendations(recs, "  ") == list(enumerate(recs, start=1))
        assert filter_recommendations(recs, None) == list(enumerate(recs, start=1))

    def test_matches_brand_case_insensitive(self, sample_catalog):
        recs = recommend(sample_catalog, {})
        shown = filter_recommendations(recs, "jeld")
        assert [rec.product.brand for _, rec in shown] == ["JELD-WEN"]

    def test_matches_material_and_keeps_ranks(self, sample_catalog):
        recs = recommend(sample_catalog, {})
        shown = filter_recommendations(recs, "Vinyl")
        assert {rec.product.material for _, rec in shown} == {"Vinyl"}
        assert [rank for rank, _ in shown] == [
            rank for rank, rec in enumerate(recs, start=1) if rec.product.material == "Vinyl"
        ]

    def test_model_name_not_searched(self, sample_catalog):
        recs = recommend(sample_catalog, {})
        assert filter_recommendations(recs, "Ultra") == []


# ── installer_search_url ──────────────────────────────────────────────────────

class TestInstallerSearchUrl:
    def test_zip(self):
        assert installer_search_url(" 98101 ") == (
            "https://www.google.com/maps/search/window+installer+near+98101"
        )

    def test_text_is_encoded(self):
        assert installer_search_url("98101 4412").endswith("near+98101+4412")

    def test_blank_rejected(self):
        with pytest.raises(ValueError):
            installer_search_url("")
