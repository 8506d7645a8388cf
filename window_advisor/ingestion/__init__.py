"""
Ingestion layer — catalog loading and location detection.

Submodules:
  catalog_csv      — CSV parser producing validated Product records
  catalog_client   — file / URL catalog loader with fixed fallback catalog
  location_client  — best-effort IP geolocation ("City, REGION")

Both I/O operations are one-shot at startup with no retry; failures fall
back to the fallback catalog or an unknown ("") location.
"""
