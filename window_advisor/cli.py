"""
Window Advisor — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (load catalog, rank, answer a question, etc.).
  5. Report result to stdout.

Install and run::

    pip install -e .
    window-advisor --help
    window-advisor validate-config
    window-advisor questions
    window-advisor recommend --location "Seattle, WA" --budget mid -p energy -t Sliding
    window-advisor recommend -l "Seattle, WA" --filter vinyl --zip 98101
    window-advisor wizard
    window-advisor ask "How much do fiberglass windows cost?"
    window-advisor climate "Phoenix, AZ"
    window-advisor installer 98101
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="window-advisor",
    help="Window replacement advisor: questionnaire-driven product recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from window_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from window_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _detect_location(config) -> str:
    from window_advisor.ingestion.location_client import LocationClient

    client = LocationClient(
        lookup_url=config.location.lookup_url,
        timeout=config.location.timeout_seconds,
    )
    return client.detect_location()


def _check_choice(question_id: str, value: Optional[str]) -> None:
    """Exit with code 1 if ``value`` is not an option of ``question_id``."""
    from window_advisor.models.answers import QUESTIONS_BY_ID

    if value is None:
        return
    allowed = QUESTIONS_BY_ID[question_id].option_values
    if value not in allowed:
        typer.echo(
            f"[ERROR] Invalid {question_id} '{value}'. Choose from: {', '.join(allowed)}.",
            err=True,
        )
        raise typer.Exit(code=1)


def _run_recommendation(
    config,
    answers,
    catalog_source: Optional[str],
    top_n: Optional[int],
    csv_path: Optional[str],
    json_path: Optional[str],
    filter_text: Optional[str] = None,
    zip_code: Optional[str] = None,
) -> None:
    """Load the catalog, rank it for ``answers``, print and export the result.

    ``filter_text`` narrows the printed table, details and comparison CSV to
    brands or materials containing it; the JSON payload keeps the full ranking.
    """
    from window_advisor.ingestion.catalog_client import load_catalog
    from window_advisor.recommendations.ranker import recommend
    from window_advisor.reporting.export import (
        export_comparison_csv,
        export_to_json,
        recommendation_payload,
    )
    from window_advisor.reporting.formatters import (
        filter_recommendations,
        format_comparison_table,
        format_location_banner,
        format_recommendation_details,
        installer_search_url,
    )
    from window_advisor.taxonomy.region_taxonomy import resolve_climate_zone

    n = top_n if top_n is not None else config.recommend.top_n
    if not 1 <= n <= 20:
        typer.echo("[ERROR] --top-n must be between 1 and 20.", err=True)
        raise typer.Exit(code=1)

    source = catalog_source or config.catalog.source
    result = load_catalog(source, timeout=config.catalog.timeout_seconds)
    if result.is_fallback:
        typer.echo(
            f"[WARN] Catalog unavailable ({result.error}); using built-in fallback catalog.",
            err=True,
        )

    recs = recommend(
        result.products,
        answers,
        n=n,
        max_reasons=config.recommend.max_reasons,
    )

    location = answers.location or ""
    zone = resolve_climate_zone(location) if location else None

    typer.echo(
        f"Top {n} recommendations ({len(result.products)} products in catalog, "
        f"loaded {result.loaded_at:%Y-%m-%d %H:%M} UTC)"
    )
    typer.echo(format_location_banner(location, zone))

    shown = filter_recommendations(recs, filter_text)
    ranks = [rank for rank, _ in shown]
    shown_recs = [rec for _, rec in shown]
    if filter_text and filter_text.strip():
        typer.echo(f"  Filter: '{filter_text.strip()}' ({len(shown)} of {len(recs)} shown)")

    typer.echo("")
    typer.echo(format_comparison_table(shown_recs, ranks))
    for rank, rec in shown:
        typer.echo("")
        typer.echo(format_recommendation_details(rec, rank))

    if zip_code and zip_code.strip():
        typer.echo("")
        typer.echo(f"  Find a local installer: {installer_search_url(zip_code)}")

    if csv_path:
        written = export_comparison_csv(shown_recs, Path(csv_path), ranks)
        typer.echo("")
        typer.echo(f"  Comparison CSV: {written}")
    if json_path:
        payload = recommendation_payload(recs, location=location, answers=answers.to_mapping())
        written = export_to_json(payload, Path(json_path))
        typer.echo(f"  Recommendations JSON: {written}")


def _default_export_path(config, filename: str) -> str:
    return str(Path(config.export.output_dir) / filename)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog source:   {config.catalog.source}")
    typer.echo(f"  Location lookup:  {'on' if config.location.enabled else 'off'}")
    typer.echo(f"  Top N:            {config.recommend.top_n}")
    typer.echo(f"  Max reasons:      {config.recommend.max_reasons}")
    typer.echo(f"  Export dir:       {config.export.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("questions")
def questions() -> None:
    """Print the questionnaire with the accepted value for each option."""
    from window_advisor.models.answers import QUESTIONS

    for step, question in enumerate(QUESTIONS, start=1):
        typer.echo(f"{step}. {question.title}  [{question.id}, {question.type.value}]")
        typer.echo(f"   {question.explanation}")
        for option in question.options:
            typer.echo(f"     {option.value:<12} {option.label}: {option.desc}")
        typer.echo("")


@app.command("recommend")
def recommend_cmd(
    location: Optional[str] = typer.Option(
        None, "--location", "-l", help='Location as "City, REGION" (e.g. "Seattle, WA").',
    ),
    budget: Optional[str] = typer.Option(
        None, "--budget", "-b", help="Budget tier: budget, mid, or premium.",
    ),
    priority: Optional[list[str]] = typer.Option(
        None, "--priority", "-p", help="Priority (repeatable): energy, durability, maintenance, cost.",
    ),
    window_type: Optional[list[str]] = typer.Option(
        None, "--window-type", "-t", help="Window type filter (repeatable), e.g. Sliding.",
    ),
    home_age: Optional[str] = typer.Option(
        None, "--home-age", help="Home age: new, medium, old, or historic.",
    ),
    catalog: Optional[str] = typer.Option(
        None, "--catalog", help="Catalog CSV path or URL (overrides config).",
    ),
    top_n: Optional[int] = typer.Option(
        None, "--top-n", "-n", help="Number of recommendations (1-20, default from config).",
    ),
    csv_path: Optional[str] = typer.Option(
        None, "--csv", help="Write the comparison table to this CSV file.",
    ),
    json_path: Optional[str] = typer.Option(
        None, "--json", help="Write the full recommendation payload to this JSON file.",
    ),
    filter_text: Optional[str] = typer.Option(
        None, "--filter", help="Show only rows whose brand or frame material contains this text.",
    ),
    zip_code: Optional[str] = typer.Option(
        None, "--zip", help="Print a map search link for window installers near this ZIP code.",
    ),
    export: bool = typer.Option(
        False, "--export", help="Write CSV and JSON into the configured output directory.",
    ),
    detect_location: bool = typer.Option(
        False, "--detect-location", help="Look up location by IP when --location is omitted.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Rank catalog products for one set of answers and print the comparison."""
    from window_advisor.models.answers import Answers

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    _check_choice("budget", budget)
    _check_choice("homeAge", home_age)
    for p in priority or []:
        _check_choice("priority", p)

    if not location and (detect_location or config.location.enabled):
        location = _detect_location(config)
        if location:
            typer.echo(f"Detected location: {location}")
        else:
            typer.echo("[WARN] Location detection failed; climate scoring disabled.", err=True)

    answers = Answers.from_mapping(
        {
            "location":    location,
            "budget":      budget,
            "priority":    priority or [],
            "windowTypes": window_type or [],
            "homeAge":     home_age,
        }
    )

    if export:
        csv_path = csv_path or _default_export_path(config, "recommendations.csv")
        json_path = json_path or _default_export_path(config, "recommendations.json")

    _run_recommendation(
        config, answers, catalog, top_n, csv_path, json_path,
        filter_text=filter_text, zip_code=zip_code,
    )


@app.command("wizard")
def wizard(
    catalog: Optional[str] = typer.Option(
        None, "--catalog", help="Catalog CSV path or URL (overrides config).",
    ),
    csv_path: Optional[str] = typer.Option(
        None, "--csv", help="Write the comparison table to this CSV file.",
    ),
    filter_text: Optional[str] = typer.Option(
        None, "--filter", help="Show only rows whose brand or frame material contains this text.",
    ),
    zip_code: Optional[str] = typer.Option(
        None, "--zip", help="Print a map search link for window installers near this ZIP code.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Walk through the questionnaire interactively, then recommend.

    \b
    Radio questions take one option value (or its number).
    Checkbox questions take a comma-separated list; repeating a value
    removes it again.
    """
    from window_advisor.models.answers import QUESTIONS, Answers
    from window_advisor.taxonomy.region_taxonomy import (
        CLIMATE_ZONES,
        parse_region,
        resolve_climate_zone,
    )
    from window_advisor.taxonomy.window_taxonomy import QuestionType

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    detected = _detect_location(config) if config.location.enabled else ""
    answers = Answers()

    for step, question in enumerate(QUESTIONS, start=1):
        typer.echo("")
        typer.echo(f"Step {step} of {len(QUESTIONS)}: {question.title}")
        typer.echo(f"  {question.explanation}")
        for idx, option in enumerate(question.options, start=1):
            typer.echo(f"  {idx}. {option.label} ({option.value}): {option.desc}")

        while not answers.is_answered(question.id):
            if question.type == QuestionType.LOCATION:
                raw = typer.prompt('  City, STATE (e.g. "Seattle, WA")', default=detected or None)
                answers = answers.answer(question.id, raw)
                if not answers.is_answered(question.id):
                    typer.echo('  Unrecognized location; enter "City, ST" with a two-letter state code.')
                elif parse_region(answers.location) not in CLIMATE_ZONES:
                    zone = resolve_climate_zone(answers.location)
                    typer.echo(
                        "  Region not in the climate table; "
                        f"using zone {zone.zone} ({zone.description})."
                    )
                continue

            raw = typer.prompt("  Your choice")
            values = [v.strip() for v in raw.split(",") if v.strip()]
            if question.type == QuestionType.RADIO:
                values = values[:1]
            for value in values:
                if value.isdigit() and 1 <= int(value) <= len(question.options):
                    value = question.options[int(value) - 1].value
                if value not in question.option_values:
                    typer.echo(f"  Ignoring unknown option '{value}'.")
                    continue
                answers = answers.answer(question.id, value)

    typer.echo("")
    _run_recommendation(
        config, answers, catalog, None, csv_path, None,
        filter_text=filter_text, zip_code=zip_code,
    )


@app.command("ask")
def ask(
    message: str = typer.Argument(..., help="Free-text question about windows."),
) -> None:
    """Ask the window-buying assistant a question (costs, energy, materials)."""
    from window_advisor.assistant.chat import answer_question

    typer.echo(answer_question(message))


@app.command("climate")
def climate(
    location: str = typer.Argument(..., help='Location as "City, REGION".'),
) -> None:
    """Show the climate zone and labor cost factor used for a location."""
    from window_advisor.taxonomy.region_taxonomy import (
        CLIMATE_ZONES,
        location_cost_factor,
        parse_region,
        resolve_climate_zone,
    )

    region = parse_region(location)
    zone = resolve_climate_zone(location)

    typer.echo(f"  Location:      {location}")
    typer.echo(f"  Region:        {region or 'unknown'}")
    typer.echo(f"  Climate zone:  {zone.zone} - {zone.description}")
    typer.echo(f"  Climate type:  {zone.climate.value}")
    typer.echo(f"  Cost factor:   {location_cost_factor(location):.2f}")
    if region not in CLIMATE_ZONES:
        typer.echo("  [WARN] Region not recognized; default zone and cost factor used.")


@app.command("installer")
def installer(
    zip_code: str = typer.Argument(..., help="ZIP code to search near."),
) -> None:
    """Print a map search link for window installers near a ZIP code."""
    from window_advisor.reporting.formatters import installer_search_url

    try:
        url = installer_search_url(zip_code)
    except ValueError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"  Find a local installer: {url}")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
