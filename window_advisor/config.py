"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local overrides (gitignored)
  4. Environment variables        — ``WINDOW_ADVISOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance — never raw dicts or
individual env var lookups scattered through the codebase.  The scoring
weights and reference tables are NOT configurable: they live as constants
in ``window_advisor.recommendations.scorer`` and ``window_advisor.taxonomy``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class CatalogConfig(BaseModel):
    """Where the product catalog is read from."""

    model_config = ConfigDict(frozen=True)

    source: str = "data/window_catalog.csv"
    timeout_seconds: float = 10.0

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {v}.")
        return v


class LocationConfig(BaseModel):
    """IP geolocation lookup settings."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    lookup_url: str = "https://ipapi.co/json/"
    timeout_seconds: float = 5.0


class RecommendConfig(BaseModel):
    """Shortlist size and explanation length."""

    model_config = ConfigDict(frozen=True)

    top_n: int = 5
    max_reasons: int = 4

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if not 1 <= v <= 20:
            raise ValueError(f"top_n must be in [1, 20], got {v}.")
        return v

    @field_validator("max_reasons")
    @classmethod
    def validate_max_reasons(cls, v: int) -> int:
        if not 1 <= v <= 4:
            raise ValueError(f"max_reasons must be in [1, 4], got {v}.")
        return v


class ExportConfig(BaseModel):
    """Output locations for comparison-table exports."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    It is constructed by ``load_config()`` which merges TOML + .env.
    """

    model_config = ConfigDict(frozen=True)

    catalog: CatalogConfig = CatalogConfig()
    location: LocationConfig = LocationConfig()
    recommend: RecommendConfig = RecommendConfig()
    export: ExportConfig = ExportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply WINDOW_ADVISOR_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply WINDOW_ADVISOR_* env vars to the raw config dict.

    Supported overrides:
      WINDOW_ADVISOR_CATALOG_SOURCE → raw["catalog"]["source"]
      WINDOW_ADVISOR_LOG_LEVEL      → raw["logging"]["level"]
      WINDOW_ADVISOR_DEBUG          → raw["debug"]
    """
    if source := os.environ.get("WINDOW_ADVISOR_CATALOG_SOURCE"):
        raw.setdefault("catalog", {})["source"] = source

    if log_level := os.environ.get("WINDOW_ADVISOR_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("WINDOW_ADVISOR_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        catalog=CatalogConfig(**raw.get("catalog", {})),
        location=LocationConfig(**raw.get("location", {})),
        recommend=RecommendConfig(**raw.get("recommend", {})),
        export=ExportConfig(**raw.get("export", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
