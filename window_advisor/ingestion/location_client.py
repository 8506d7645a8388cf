"""
IP geolocation client — best-effort "City, REGION" detection.

API:   https://ipapi.co/json/  (no key required for low volume)

Response fields used::

    {"city": "Seattle", "region": "Washington", "region_code": "WA", ...}

``region_code`` is preferred because the climate-zone and cost tables are
keyed by two-letter codes; ``region`` is used only if no code is returned.

The lookup is one-shot with no retry.  Any failure (network error,
non-2xx status, non-JSON body, missing fields) returns ``""``, the unknown
location state, and the questionnaire simply asks for the location.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

import httpx

logger = logging.getLogger(__name__)


class LocationClient:
    """Client for an ipapi-compatible geolocation endpoint.

    Usage::

        client = LocationClient()
        location = client.detect_location()   # "Seattle, WA" or ""

    Attributes:
        lookup_url: Endpoint returning the caller's location as JSON.
        timeout:    Request timeout in seconds.
    """

    DEFAULT_URL: ClassVar[str] = "https://ipapi.co/json/"

    def __init__(
        self,
        lookup_url: str = DEFAULT_URL,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.lookup_url = lookup_url
        self.timeout = timeout
        self._client = client

    def detect_location(self) -> str:
        """Return ``"City, REGION"`` for the caller, or ``""`` on any failure."""
        try:
            if self._client is not None:
                resp = self._client.get(self.lookup_url, timeout=self.timeout)
            else:
                resp = httpx.get(self.lookup_url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.info("Location detection failed: %s", exc)
            return ""

        location = format_location(data)
        if location:
            logger.info("Detected location: %s", location)
        else:
            logger.info("Location detection returned no city/region")
        return location


def format_location(data: object) -> str:
    """Build ``"City, REGION"`` from a geolocation payload, or ``""``."""
    if not isinstance(data, dict):
        return ""
    city = data.get("city")
    region = data.get("region_code") or data.get("region")
    if not isinstance(city, str) or not isinstance(region, str):
        return ""
    city, region = city.strip(), region.strip()
    if not city or not region:
        return ""
    return f"{city}, {region}"
