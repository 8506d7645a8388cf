"""
Export helpers for the recommendation comparison table.

All ``export_*`` functions write to disk and return the written ``Path``.
Rows are flat (no nested dicts) so the CSV opens directly in a spreadsheet.

``comparison_rows()`` is the main adapter: it converts a ranked
``Recommendation`` list into one row per product in the fixed
``COMPARISON_COLUMNS`` order shared by the CSV export and the terminal
table.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional, Sequence

from window_advisor.models.recommendation import Recommendation

logger = logging.getLogger(__name__)

COMPARISON_COLUMNS: tuple[str, ...] = (
    "Rank",
    "Brand",
    "Model",
    "Type",
    "Material",
    "U-Factor",
    "SHGC",
    "Window Cost",
    "Installation",
    "Total",
    "Warranty (yrs)",
    "Rating",
    "Score",
    "Reasons",
)


def comparison_rows(
    recs: Sequence[Recommendation],
    ranks: Optional[Sequence[int]] = None,
) -> list[dict[str, Any]]:
    """Flatten recommendations into comparison-table rows (rank is 1-based).

    ``Reasons`` joins the reason list with ``"; "``.  ``ranks`` overrides the
    numbering when ``recs`` is a filtered subset.
    """
    rows: list[dict[str, Any]] = []
    for rank, rec in zip(ranks or range(1, len(recs) + 1), recs):
        p = rec.product
        rows.append(
            {
                "Rank":           rank,
                "Brand":          p.brand,
                "Model":          p.model,
                "Type":           p.window_type,
                "Material":       p.material,
                "U-Factor":       p.u_factor,
                "SHGC":           p.shgc,
                "Window Cost":    rec.pricing.window,
                "Installation":   rec.pricing.installation,
                "Total":          rec.pricing.total,
                "Warranty (yrs)": p.warranty_years,
                "Rating":         p.customer_rating,
                "Score":          rec.score,
                "Reasons":        "; ".join(rec.reasons),
            }
        )
    return rows


def recommendation_payload(
    recs: Sequence[Recommendation],
    location: str = "",
    answers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Structured (nested) form of a recommendation list for JSON export."""
    return {
        "location": location,
        "answers":  answers or {},
        "count":    len(recs),
        "recommendations": [
            {
                "rank":            rank,
                "product":         rec.product.model_dump(),
                "score":           rec.score,
                "score_breakdown": dict(rec.score_breakdown),
                "reasons":         list(rec.reasons),
                "pricing":         rec.pricing.model_dump(),
                "installation":    asdict(rec.installation) if rec.installation else None,
                "manufacturer":    asdict(rec.manufacturer) if rec.manufacturer else None,
            }
            for rank, rec in enumerate(recs, start=1)
        ],
    }


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: Sequence[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records and fieldnames is None:
        path.write_text("", encoding="utf-8")
        return path
    cols = list(fieldnames or records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def export_comparison_csv(
    recs: Sequence[Recommendation],
    path: Path,
    ranks: Optional[Sequence[int]] = None,
) -> Path:
    """Write the comparison table CSV (header always present)."""
    written = export_to_csv(comparison_rows(recs, ranks), path, fieldnames=COMPARISON_COLUMNS)
    logger.info("Comparison CSV written: %s (%d rows)", written, len(recs))
    return written
