"""
Tests for window_advisor/assistant/chat.py.
"""

from __future__ import annotations

import pytest

from window_advisor.assistant.chat import (
    COST_RESPONSE,
    DEFAULT_RESPONSE,
    ENERGY_RESPONSE,
    MATERIAL_RESPONSE,
    answer_question,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        ("How much do they cost?", COST_RESPONSE),
        ("What's the PRICE range?", COST_RESPONSE),
        ("Tell me about energy ratings", ENERGY_RESPONSE),
        ("Which material lasts longest?", MATERIAL_RESPONSE),
        ("Who makes the best windows?", DEFAULT_RESPONSE),
        ("", DEFAULT_RESPONSE),
    ],
)
def test_keyword_routing(message, expected):
    assert answer_question(message) == expected


def test_cost_checked_before_energy():
    assert answer_question("energy savings vs cost") == COST_RESPONSE


def test_none_message():
    assert answer_question(None) == DEFAULT_RESPONSE


def test_cost_response_mentions_materials():
    assert "Vinyl: $300-800" in COST_RESPONSE
