"""Application-layer result policies.

Purpose
-------
Turn the stream of documents produced by a traversal into one result. The
module is free of I/O so the policies can be tested in isolation.

Contents
    - ``merge_documents``: shallow merge, later keys overwrite earlier ones.
    - ``last_document``: keep only the most recent document.

System Role
-----------
Receives documents from :meth:`lib_config_explorer.core.ConfigExplorer.search`
in traversal order (search path order, then enumeration order within a path).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable


def merge_documents(documents: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Shallow-merge *documents* in order.

    Only top-level keys are considered: a nested mapping from a later document
    replaces the earlier value wholesale instead of being merged into it.

    Examples
    --------
    >>> merge_documents([{"a": 1, "db": {"host": "x"}}, {"a": 2, "b": 3, "db": {"port": 1}}])
    {'a': 2, 'db': {'port': 1}, 'b': 3}
    >>> merge_documents([])
    {}
    """

    merged: dict[str, Any] = {}
    for document in documents:
        merged.update(document)
    return merged


def last_document(documents: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Return a copy of the final document in *documents* (``{}`` when there is none).

    The whole iterable is consumed, so every earlier document is discarded.

    Examples
    --------
    >>> last_document([{"a": 1}, {"a": 2, "b": 3}])
    {'a': 2, 'b': 3}
    """

    last: Mapping[str, Any] = {}
    for document in documents:
        last = document
    return dict(last)
