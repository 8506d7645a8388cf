"""
Tests for window_advisor/utils/logging.py.

What we test
------------
  - JSON lines carry the standard keys plus extra= fields.
  - The ranker's summary fields reach the JSON log.
  - Standard keys are not overwritten by extra= fields of the same name.
  - Level applies to the root logger; HTTP client loggers are quietened.
"""

from __future__ import annotations

import json
import logging

import pytest

from window_advisor.config import LoggingConfig
from window_advisor.recommendations.ranker import recommend
from window_advisor.utils.logging import _JsonFormatter, configure_logging, record_fields


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)


def _last_json_line(log_file) -> dict:
    for h in logging.getLogger().handlers:
        h.flush()
    return json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])


def test_json_lines_to_file(tmp_path):
    log_file = tmp_path / "logs" / "advisor.log"
    configure_logging(LoggingConfig(level="INFO", log_file=str(log_file), json_format=True))

    logging.getLogger("window_advisor.test").info("loaded %d products", 12, extra={"source": "x.csv"})

    record = _last_json_line(log_file)
    assert record["level"] == "INFO"
    assert record["logger"] == "window_advisor.test"
    assert record["msg"] == "loaded 12 products"
    assert record["source"] == "x.csv"


def test_ranker_summary_fields(tmp_path, sample_catalog, seattle_answers):
    log_file = tmp_path / "advisor.log"
    configure_logging(LoggingConfig(level="INFO", log_file=str(log_file), json_format=True))

    recs = recommend(sample_catalog, seattle_answers)

    record = _last_json_line(log_file)
    assert record["logger"] == "window_advisor.recommendations.ranker"
    assert record["catalog_size"] == len(sample_catalog)
    assert record["recommended"] == len(recs)
    assert record["best_score"] == recs[0].score
    assert record["climate"] == "cold"


def test_standard_keys_win_over_extra():
    record = logging.makeLogRecord(
        {"name": "window_advisor.x", "levelname": "INFO", "msg": "hi", "level": "loud"}
    )
    assert record_fields(record) == {"level": "loud"}
    assert json.loads(_JsonFormatter().format(record))["level"] == "INFO"


def test_level_applied():
    configure_logging(LoggingConfig(level="WARNING"))
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING
