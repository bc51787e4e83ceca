"""Domain value objects describing a configuration search.

Purpose
-------
Capture everything the explorer needs to run one traversal in a single
immutable value, so the orchestration code never mutates its inputs mid-search.

Contents
--------
* :data:`Document` – alias for the generic key/value result of a parse.
* :data:`NAME_PLACEHOLDER` – literal placeholder substituted into templates.
* :class:`SearchRequest` – frozen description of one search.
* :func:`expand_pattern` – substitute the search name into a template and compile it.

System Role
-----------
Built by :class:`lib_config_explorer.core.ConfigExplorer` at construction time
and consumed by its traversal helpers. Contains no I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from .errors import PatternError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..parsers import ConfigParser

Document = dict[str, Any]
"""Plain mapping of string keys to JSON-like values (str, number, bool, None, list, dict)."""

NAME_PLACEHOLDER: Final[str] = "{name}"


def expand_pattern(template: str, name: str) -> re.Pattern[str]:
    """Replace :data:`NAME_PLACEHOLDER` in *template* with *name* and compile the result.

    The name is regex-escaped so a dotted tool name (``my.tool``) only matches
    itself.

    Raises
    ------
    PatternError
        When the expanded template is not a valid regular expression.

    Examples
    --------
    >>> expand_pattern(r".{name}\\.json$", "demo").pattern
    '.demo\\\\.json$'
    >>> bool(expand_pattern(r".{name}\\.json$", "demo").search(".demo.json"))
    True
    """

    expanded = template.replace(NAME_PLACEHOLDER, re.escape(name))
    try:
        return re.compile(expanded)
    except re.error as exc:
        raise PatternError(f"Invalid filename pattern {template!r}: {exc}") from exc


@dataclass(frozen=True)
class SearchRequest:
    """Immutable description of a single configuration search.

    Attributes
    ----------
    name:
        Configuration identifier substituted into the filename templates.
    paths:
        Directories to search, highest priority first.
    filename_patterns:
        Templates containing ``{name}``; insertion order is priority order.
    merge_results:
        ``True`` to shallow-merge every match, ``False`` to keep only the last.
    parsers:
        Ordered parser chain tried against each candidate.
    """

    name: str
    paths: tuple[str, ...]
    filename_patterns: tuple[str, ...]
    merge_results: bool
    parsers: tuple["ConfigParser", ...]

    def compiled_patterns(self) -> tuple[re.Pattern[str], ...]:
        """Return the filename templates expanded for :attr:`name`, in order."""

        return tuple(expand_pattern(template, self.name) for template in self.filename_patterns)
