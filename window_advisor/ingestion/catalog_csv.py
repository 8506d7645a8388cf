"""
CSV parser for the window product catalog.

Format — comma delimited, double-quoted fields allowed, with a header row.
Recognized columns (header matching ignores case, spaces, ``_`` and ``-``,
so ``windowType``, ``window_type`` and ``Window Type`` are equivalent):

  Required (rows missing these are dropped):
    brand, windowType, priceRangeLow (must parse to a positive number)

  Integer columns (leading-integer parse, malformed → 0):
    id, priceRangeLow, priceRangeHigh, warrantyYears, popularityScore

  Float columns (leading-number parse, malformed → 0.0):
    uFactor, shgc, customerRating

  Text columns:
    model, series, material, glassType, energyRating, features

  Optional integer:
    stc (empty or malformed → None)

Any other column is preserved verbatim in ``Product.extra``.

Normalization:
  - ``features`` is split on commas / semicolons into tags.
  - ``priceRangeHigh`` below ``priceRangeLow`` (or missing) is raised to low.
  - ``customerRating`` is clamped to [0, 5].
  - Negative ``id``, ``uFactor``, ``shgc``, ``stc``, ``warrantyYears`` and
    ``popularityScore`` values become 0; the row is kept.

Unlike strict imports, a bad row never fails the whole file: it is dropped
and counted in a DEBUG log line.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from typing import Optional

from pydantic import ValidationError

from window_advisor.models.product import Product

logger = logging.getLogger(__name__)

REQUIRED_CSV_COLUMNS = frozenset({"brand", "windowType", "priceRangeLow"})

# normalized header -> Product field
_COLUMN_FIELDS: dict[str, str] = {
    "id":             "id",
    "brand":          "brand",
    "model":          "model",
    "series":         "series",
    "windowtype":     "window_type",
    "material":       "material",
    "glasstype":      "glass_type",
    "pricerangelow":  "price_range_low",
    "pricerangehigh": "price_range_high",
    "energyrating":   "energy_rating",
    "ufactor":        "u_factor",
    "shgc":           "shgc",
    "stc":            "stc",
    "warrantyyears":  "warranty_years",
    "features":       "features",
    "popularityscore": "popularity_score",
    "customerrating": "customer_rating",
}

_INT_FIELDS = frozenset({
    "id", "price_range_low", "price_range_high", "warranty_years", "popularity_score",
})
_FLOAT_FIELDS = frozenset({"u_factor", "shgc", "customer_rating"})

# Optional numerics that cannot be negative; clamped to 0 instead of dropping the row
_NON_NEGATIVE_FIELDS = ("id", "u_factor", "shgc", "stc", "warranty_years", "popularity_score")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_FEATURE_SEPARATORS = re.compile(r"\s*[,;]\s*")
_HEADER_NOISE = re.compile(r"[\s_\-]+")


def parse_catalog_csv(text: str) -> list[Product]:
    """Parse catalog CSV text into validated :class:`Product` records.

    Args:
        text: Full CSV document, header row first.

    Returns:
        Products in file order.  Rows missing brand, window type, or a
        positive low price are dropped.

    Raises:
        csv.Error: If the text is not parseable as CSV at all.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")), skipinitialspace=True)
    if reader.fieldnames is None:
        logger.warning("Catalog CSV is empty or has no header row")
        return []

    columns = {raw: _normalize_header(raw) for raw in reader.fieldnames if raw is not None}
    missing = {c for c in REQUIRED_CSV_COLUMNS if _normalize_header(c) not in columns.values()}
    if missing:
        logger.warning("Catalog CSV missing required columns: %s", sorted(missing))

    products: list[Product] = []
    dropped = 0
    for row in reader:
        product = _row_to_product(row, columns)
        if product is None:
            dropped += 1
            continue
        products.append(product)

    if dropped:
        logger.debug("Dropped %d malformed catalog rows", dropped)
    logger.info("Parsed %d catalog products", len(products))
    return products


# ── Private helpers ────────────────────────────────────────────────────────────

def _row_to_product(row: dict[str, Optional[str]], columns: dict[str, str]) -> Optional[Product]:
    """Convert one CSV row to a Product, or None if it fails validation."""
    fields: dict[str, object] = {}
    extra: dict[str, str] = {}

    for raw_header, value in row.items():
        if raw_header is None:
            continue  # surplus cells beyond the header
        text = (value or "").strip()
        name = _COLUMN_FIELDS.get(columns.get(raw_header, ""))
        if name is None:
            extra[raw_header.strip()] = text
        elif name in _INT_FIELDS:
            fields[name] = parse_int(text)
        elif name in _FLOAT_FIELDS:
            fields[name] = parse_float(text)
        elif name == "stc":
            fields[name] = parse_int(text) if _LEADING_INT.match(text) else None
        elif name == "features":
            fields[name] = tuple(t for t in _FEATURE_SEPARATORS.split(text) if t)
        elif name in ("series", "glass_type"):
            fields[name] = text or None
        else:
            fields[name] = text

    low = fields.get("price_range_low", 0)
    high = fields.get("price_range_high", 0)
    if isinstance(low, int) and isinstance(high, int) and high < low:
        fields["price_range_high"] = low
    if "customer_rating" in fields:
        fields["customer_rating"] = min(5.0, max(0.0, float(fields["customer_rating"])))
    for name in _NON_NEGATIVE_FIELDS:
        value = fields.get(name)
        if value is not None and value < 0:
            fields[name] = type(value)(0)

    try:
        return Product(**fields, extra=extra)
    except ValidationError as exc:
        logger.debug("Skipping catalog row %r: %s", fields.get("model", ""), exc.errors()[0]["msg"])
        return None


def parse_int(text: str) -> int:
    """Leading-integer parse: ``"600.50"`` → 600, ``"abc"`` → 0."""
    m = _LEADING_INT.match(text or "")
    return int(m.group(1)) if m else 0


def parse_float(text: str) -> float:
    """Leading-number parse: ``"0.29 btu"`` → 0.29, ``""`` → 0.0."""
    m = _LEADING_FLOAT.match(text or "")
    return float(m.group(1)) if m else 0.0


def _normalize_header(header: str) -> str:
    return _HEADER_NOISE.sub("", header.strip().strip('"')).lower()
