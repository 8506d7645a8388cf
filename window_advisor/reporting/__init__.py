"""
window_advisor.reporting — Comparison-table formatting and export.

This package renders an already-computed recommendation list; it never
scores or filters.

Modules:
  formatters — ASCII terminal table and detail formatters for Typer CLI commands.
  export     — Flat comparison-table rows plus CSV/JSON file writers.
"""
