"""Unit tests for structured logging utilities in ``observability``.

Validates the null handler, trace binding, event construction, and that a
search reports skipped candidates through the shared logger.
"""

from __future__ import annotations

import logging

import pytest

from lib_config_explorer import ConfigExplorer, MemoryFileSystem, bind_trace_id, get_logger
from lib_config_explorer.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert logger.name == "lib_config_explorer"
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="lib_config_explorer")
    bind_trace_id("trace-123")
    try:
        log_info("configuration_found", config="demo", path=None)
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "config": "demo", "path": None}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("demo", "/etc", {"keys": 3}) == {"config": "demo", "path": "/etc", "keys": 3}
    assert make_event("demo", None) == {"config": "demo", "path": None}
    assert make_event("demo", "/etc", {"path": "/other", "config": "x"}) == {"config": "demo", "path": "/etc"}


def test_search_reports_skipped_paths_and_bad_candidates(caplog: pytest.LogCaptureFixture) -> None:
    """Missing directories and malformed files show up as diagnostics, not exceptions."""

    caplog.set_level(logging.DEBUG, logger="lib_config_explorer")
    fs = MemoryFileSystem({"/work/.demo.json": "{broken"})
    result = ConfigExplorer("demo", paths=["/missing", "/work"], fs=fs, env={}).search()

    assert result is None
    messages = [record.getMessage() for record in caplog.records]
    assert "search_path_missing" in messages
    assert "config_file_invalid" in messages
    assert "config_file_rejected" in messages
    assert messages[-1] == "configuration_empty"
    missing = next(record for record in caplog.records if record.getMessage() == "search_path_missing")
    context = getattr(missing, "context")
    assert context["path"] == "/missing"
    assert context["config"] == "demo"
