"""
ASCII terminal formatters for CLI output.

All formatters accept in-memory objects and return plain multi-line
strings suitable for ``typer.echo()``.  The comparison table doubles as the
print rendering: redirect ``window-advisor recommend`` to a file and it
prints cleanly.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import quote_plus

from window_advisor.models.recommendation import Recommendation
from window_advisor.taxonomy.region_taxonomy import ClimateZone

NO_MATCHES_MESSAGE = "No matches -- adjust your filters and try again."

INSTALLER_SEARCH_URL = "https://www.google.com/maps/search/window+installer+near+{zip}"


def format_location_banner(location: str, zone: Optional[ClimateZone]) -> str:
    """One-line location + climate zone header."""
    if not location:
        return "  Location: unknown (climate scoring disabled)"
    if zone is None:
        return f"  Location: {location}"
    return f"  Location: {location}  |  Climate Zone {zone.zone} - {zone.description}"


def format_comparison_table(
    recs: Sequence[Recommendation],
    ranks: Optional[Sequence[int]] = None,
) -> str:
    """Format ranked recommendations as an ASCII comparison table::

        Rank  Brand     Model            Type     Material     U     SHGC   Total  Score
        ---------------------------------------------------------------------------------
           1  Andersen  Acclaim Sliding  Sliding  Fibrex      0.22  0.27  $2,520     60

    ``ranks`` overrides the 1-based numbering, for tables that show a
    filtered subset of a longer ranking.
    """
    if not recs:
        return f"  {NO_MATCHES_MESSAGE}"

    headers = ("Rank", "Brand", "Model", "Type", "Material", "U", "SHGC", "Total", "Score")
    rows = [
        (
            str(rank),
            rec.product.brand,
            rec.product.model,
            rec.product.window_type,
            rec.product.material,
            f"{rec.product.u_factor:.2f}",
            f"{rec.product.shgc:.2f}",
            f"${rec.pricing.total:,}",
            str(rec.score),
        )
        for rank, rec in zip(ranks or range(1, len(recs) + 1), recs)
    ]
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]
    # Numeric columns right-aligned, text columns left-aligned
    numeric = {0, 5, 6, 7, 8}

    def _line(cells: Sequence[str]) -> str:
        return "  ".join(
            c.rjust(w) if i in numeric else c.ljust(w)
            for i, (c, w) in enumerate(zip(cells, widths))
        ).rstrip()

    lines = [_line(headers), "-" * len(_line(headers))]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines)


def format_recommendation_details(rec: Recommendation, rank: int) -> str:
    """Multi-line detail block: reasons, cost breakdown, installation."""
    p = rec.product
    lines = [
        f"#{rank} {p.display_name} ({p.window_type}, {p.material}) -- score {rec.score}",
    ]
    lines.extend(f"   + {reason}" for reason in rec.reasons)
    lines.append(
        f"   Cost: window ${rec.pricing.window:,} + installation "
        f"${rec.pricing.installation:,} = ${rec.pricing.total:,}"
    )
    if rec.installation is not None:
        lines.append(
            f"   Install: {rec.installation.method}; {rec.installation.timeframe}; "
            f"permits: {rec.installation.permits}"
        )
    if rec.manufacturer is not None:
        lines.append(
            f"   Maker: founded {rec.manufacturer.founded}, {rec.manufacturer.specialty}"
        )
    return "\n".join(lines)


def filter_recommendations(
    recs: Sequence[Recommendation],
    text: Optional[str],
) -> list[tuple[int, Recommendation]]:
    """Return ``(rank, rec)`` pairs whose brand or frame material contains ``text``.

    Matching is case-insensitive.  Ranks are positions in the full list, so a
    filtered table keeps the original numbering.  Blank ``text`` keeps every row.
    """
    needle = (text or "").strip().lower()
    ranked = list(enumerate(recs, start=1))
    if not needle:
        return ranked
    return [
        (rank, rec)
        for rank, rec in ranked
        if needle in rec.product.brand.lower() or needle in rec.product.material.lower()
    ]


def installer_search_url(zip_code: str) -> str:
    """Maps search URL for window installers near ``zip_code``.

    Raises:
        ValueError: If ``zip_code`` is blank.
    """
    cleaned = (zip_code or "").strip()
    if not cleaned:
        raise ValueError("ZIP code must not be empty")
    return INSTALLER_SEARCH_URL.format(zip=quote_plus(cleaned))
