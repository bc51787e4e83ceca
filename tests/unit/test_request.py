from __future__ import annotations

import dataclasses

import pytest

from lib_config_explorer.domain.errors import PatternError
from lib_config_explorer.domain.request import SearchRequest, expand_pattern
from lib_config_explorer.parsers import DEFAULT_PARSERS


def test_expand_pattern_substitutes_every_placeholder() -> None:
    pattern = expand_pattern(r"{name}[\\/]{name}\.json$", "demo")
    assert pattern.search("/etc/demo/demo.json")
    assert not pattern.search("/etc/demo/other.json")


def test_expand_pattern_escapes_the_name() -> None:
    pattern = expand_pattern(r"^{name}\.json$", "my.tool")
    assert pattern.search("my.tool.json")
    assert not pattern.search("myXtool.json")


def test_expand_pattern_without_placeholder_is_used_verbatim() -> None:
    assert expand_pattern(r"^settings\.json$", "demo").search("settings.json")


def test_invalid_template_raises_pattern_error() -> None:
    with pytest.raises(PatternError, match="Invalid filename pattern"):
        expand_pattern(r"[{name}", "demo")


def test_search_request_is_immutable() -> None:
    request = SearchRequest(
        name="demo",
        paths=("/a", "/b"),
        filename_patterns=(r".{name}\.json$",),
        merge_results=True,
        parsers=DEFAULT_PARSERS,
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.name = "other"  # type: ignore[misc]
    assert [pattern.pattern for pattern in request.compiled_patterns()] == [r".demo\.json$"]
