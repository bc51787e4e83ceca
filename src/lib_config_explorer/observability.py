"""Structured logging helpers shared by every layer of the explorer.

Purpose
    Keep diagnostics about skipped directories, unreadable candidates, and
    rejected documents predictable and machine-readable without forcing the
    host application to adopt a logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the package logger (silent by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries.
    - ``make_event``: builder for ``{"config", "path", ...}`` payloads.

System Integration
    The path resolver, parser chain, and explorer all report through these
    helpers, so every diagnostic carries the same ``context`` mapping.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_config_explorer_trace_id", default=None)
"""Current trace identifier attached to every structured log entry."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_config_explorer")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('search-1')
    >>> TRACE_ID.get()
    'search-1'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Record a traversal step (path resolved, candidate matched, file read)."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Record the outcome of a query (``configuration_found`` and friends)."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Record a candidate the search had to skip; the search itself carries on."""

    _emit(logging.ERROR, message, fields)


def make_event(
    name: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe where a search event happened, for unpacking into ``log_*``.

    ``name`` is the configuration being searched for and ``path`` the search
    directory or candidate file involved (``None`` for whole-query outcomes
    such as ``configuration_found`` or ``configuration_empty``). Entries of
    *payload* (match counts, the parser pattern, an ``OSError`` message) are
    appended and may not shadow ``config`` or ``path``.

    Examples
    --------
    >>> make_event('demo', '/srv/app', {'keys': 2})
    {'config': 'demo', 'path': '/srv/app', 'keys': 2}
    >>> make_event('demo', None, {'path': 'ignored'})
    {'config': 'demo', 'path': None}
    """

    extra = {key: value for key, value in (payload or {}).items() if key not in ("config", "path")}
    return {"config": name, "path": path, **extra}


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    if not _LOGGER.isEnabledFor(level):
        return
    _LOGGER.log(level, message, extra={"context": {"trace_id": TRACE_ID.get(), **fields}})
