"""
Tests for window_advisor/recommendations/pricing.py.

What we test
------------
calculate_pricing():
  - Seattle / medium home: window 978, installation 220, total 1198.
  - Location factor applies to the window price only.
  - Unknown location and unknown home age fall back to 1.0.
  - Half-up rounding of .5 amounts.
  - total == window + installation; identical calls give identical output.
"""

from __future__ import annotations

import pytest

from window_advisor.recommendations.pricing import calculate_pricing


class TestCalculatePricing:
    def test_seattle_medium_home(self, milgard_sliding):
        pr = calculate_pricing(milgard_sliding, "Seattle, WA", "medium")
        assert pr.window == 978        # 850 * 1.15 = 977.5
        assert pr.installation == 220  # 200 * 1.1
        assert pr.total == 1198

    def test_california_factor(self, milgard_sliding):
        pr = calculate_pricing(milgard_sliding, "San Diego, CA", "new")
        assert pr.window == 1063       # 850 * 1.25 = 1062.5
        assert pr.installation == 200

    @pytest.mark.parametrize("location", [None, "", "Springfield, ZZ", "Seattle"])
    def test_unknown_location_uses_midpoint(self, milgard_sliding, location):
        assert calculate_pricing(milgard_sliding, location, "new").window == 850

    @pytest.mark.parametrize(
        "home_age, installation",
        [("new", 200), ("medium", 220), ("old", 260), ("historic", 300), (None, 200), ("ancient", 200)],
    )
    def test_installation_by_home_age(self, milgard_sliding, home_age, installation):
        assert calculate_pricing(milgard_sliding, "Dallas, TX", home_age).installation == installation

    def test_half_up_rounding(self, make_product):
        p = make_product(price_range_low=100, price_range_high=101)
        assert calculate_pricing(p, None, "new").window == 101

    def test_total_is_sum(self, sample_catalog):
        for product in sample_catalog:
            pr = calculate_pricing(product, "Chicago, IL", "old")
            assert pr.total == pr.window + pr.installation

    def test_pure(self, milgard_sliding):
        first = calculate_pricing(milgard_sliding, "Seattle, WA", "old")
        second = calculate_pricing(milgard_sliding, "Seattle, WA", "old")
        assert first == second
