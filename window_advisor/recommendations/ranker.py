"""
Recommendation ranker: filters the catalog, scores survivors, ranks them,
and attaches pricing and explanations to the top N.

Usage flow
----------
1. score_catalog(catalog, answers, location)
   -> list[ScoredProduct]  (one per product passing the type filter)

2. top_n(scored, n=5)
   -> list[ScoredProduct]  (stable sort by score desc, truncated)

3. build_recommendations(top, answers, climate)
   -> list[Recommendation]  (pricing + reasons attached)

``recommend()`` runs all three in one call.

Hard filter
-----------
When the user selected one or more window types, products whose style is
not among them are excluded before scoring.  This is a filter, not a
penalty: excluded products never get a score.

Tie-break policy
----------------
Python's ``sorted`` is stable, so equal scores keep their catalog order.
Identical inputs therefore always produce an identical ordered result.

Empty results (empty catalog, everything filtered) are a normal outcome
meaning "relax your filters", not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from window_advisor.models.answers import Answers
from window_advisor.models.product import Product
from window_advisor.models.recommendation import PricingResult, Recommendation
from window_advisor.recommendations.explainer import MAX_REASONS, build_reasons
from window_advisor.recommendations.pricing import calculate_pricing
from window_advisor.recommendations.scorer import (
    ScoreComponents,
    compute_score,
    matched_style,
)
from window_advisor.taxonomy.manufacturer_taxonomy import get_manufacturer
from window_advisor.taxonomy.region_taxonomy import (
    installation_requirements,
    resolve_climate_zone,
)
from window_advisor.taxonomy.window_taxonomy import HomeAge

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5

AnswersLike = Union[Answers, Mapping[str, Any], None]


@dataclass(frozen=True)
class ScoredProduct:
    """Intermediate object coupling a Product with its scoring inputs.

    Attributes:
        product:     The catalog product.
        pricing:     Pricing used to score it.
        components:  Per-signal score breakdown.
        position:    Index of the product in the input catalog.
    """

    product:     Product
    pricing:     PricingResult
    components:  ScoreComponents
    position:    int

    @property
    def score(self) -> int:
        return self.components.total


def resolve_climate(answers: Answers, location: Optional[str]) -> Optional[str]:
    """Resolve the climate used for scoring.

    A non-empty location always wins: its region's climate is used, and an
    unrecognized region yields the default (mixed) zone.  Without a
    location, an explicit ``climate`` answer is used if present.
    """
    if isinstance(location, str) and location.strip():
        return resolve_climate_zone(location).climate.value
    return answers.climate


def score_catalog(
    catalog:  Sequence[Product],
    answers:  Answers,
    location: Optional[str],
    climate:  Optional[str],
) -> list[ScoredProduct]:
    """Apply the window-type filter and score every surviving product.

    Args:
        catalog:  Read-only product sequence.
        answers:  Normalized answers.
        location: ``"City, REGION"`` used for pricing.
        climate:  Resolved climate for the climate-fit signal.

    Returns:
        ScoredProduct list in catalog order.
    """
    home_age = answers.home_age or HomeAge.MEDIUM.value
    desired = answers.window_types

    scored: list[ScoredProduct] = []
    filtered_out = 0
    for position, product in enumerate(catalog):
        if desired and matched_style(product, desired) is None:
            filtered_out += 1
            continue
        pricing = calculate_pricing(product, location, home_age)
        components = compute_score(product, pricing, answers, climate)
        scored.append(
            ScoredProduct(
                product=product,
                pricing=pricing,
                components=components,
                position=position,
            )
        )

    logger.debug(
        "Scored %d products (%d excluded by window-type filter)",
        len(scored), filtered_out,
        extra={"scored": len(scored), "filtered_out": filtered_out},
    )
    return scored


def top_n(scored: Sequence[ScoredProduct], n: int = DEFAULT_TOP_N) -> list[ScoredProduct]:
    """Return the ``n`` highest-scoring products, ties in catalog order."""
    if n <= 0:
        return []
    return sorted(scored, key=lambda sp: -sp.score)[:n]


def build_recommendations(
    top:         Sequence[ScoredProduct],
    answers:     Answers,
    climate:     Optional[str],
    max_reasons: int = MAX_REASONS,
) -> list[Recommendation]:
    """Attach reasons, installation guidance, and manufacturer info."""
    home_age = answers.home_age or HomeAge.MEDIUM.value
    install = installation_requirements(home_age)

    return [
        Recommendation(
            product=sp.product,
            score=sp.score,
            reasons=build_reasons(
                sp.product, answers, sp.pricing, climate=climate, max_reasons=max_reasons,
            ),
            pricing=sp.pricing,
            score_breakdown=sp.components.non_zero(),
            installation=install,
            manufacturer=get_manufacturer(sp.product.brand),
        )
        for sp in top
    ]


def recommend(
    catalog:     Optional[Sequence[Product]],
    answers:     AnswersLike,
    location:    Optional[str] = None,
    n:           int = DEFAULT_TOP_N,
    max_reasons: int = MAX_REASONS,
) -> list[Recommendation]:
    """Produce the ranked, explained shortlist for one set of answers.

    Args:
        catalog:     Product sequence (``None`` is treated as empty).
        answers:     ``Answers`` or a question-id keyed mapping.
        location:    ``"City, REGION"``.  Defaults to ``answers.location``.
        n:           Maximum number of recommendations (default 5).
        max_reasons: Maximum reasons per recommendation (default 4).

    Returns:
        Up to ``n`` Recommendations sorted by score descending.
    """
    answers = Answers.from_mapping(answers)
    if location is None:
        location = answers.location
    climate = resolve_climate(answers, location)

    scored = score_catalog(catalog or (), answers, location, climate)
    top = top_n(scored, n)
    recs = build_recommendations(top, answers, climate, max_reasons=max_reasons)

    summary = {
        "catalog_size": len(catalog or ()),
        "scored":       len(scored),
        "recommended":  len(recs),
        "best_score":   recs[0].score if recs else None,
        "climate":      climate,
    }
    if not recs:
        logger.info("No products matched the current answers", extra=summary)
    else:
        logger.info(
            "Recommended %d of %d scored products (best score %d)",
            len(recs), len(scored), recs[0].score,
            extra=summary,
        )
    return recs
