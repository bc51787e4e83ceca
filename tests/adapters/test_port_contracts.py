"""Adapter contract tests for the application-layer ports.

Verifies the default adapters keep satisfying the protocols in
``src/lib_config_explorer/application/ports.py`` so the explorer can keep
depending on abstractions only.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_config_explorer.adapters.decoders.structured import JSONDecoder, TOMLDecoder, YAMLDecoder
from lib_config_explorer.adapters.filesystem.local import LocalFileSystem
from lib_config_explorer.adapters.filesystem.memory import MemoryFileSystem
from lib_config_explorer.adapters.path_resolvers.default import DefaultPathResolver
from lib_config_explorer.application import ports


@pytest.fixture()
def local_tree(tmp_path: Path) -> tuple[LocalFileSystem, str]:
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / ".demo.json").write_text('{"service": {"value": 1}}', encoding="utf-8")
    return LocalFileSystem(cwd=tmp_path), str(tmp_path)


@pytest.fixture()
def memory_tree() -> tuple[MemoryFileSystem, str]:
    fs = MemoryFileSystem({"/tree/sub/.demo.json": '{"service": {"value": 1}}'}, cwd="/tree")
    return fs, "/tree"


@pytest.mark.parametrize("tree", ["local_tree", "memory_tree"])
def test_filesystem_contract(tree: str, request: pytest.FixtureRequest) -> None:
    """Each filesystem adapter satisfies FileSystem and exposes the same view of a tree."""

    fs, root = request.getfixturevalue(tree)
    assert isinstance(fs, ports.FileSystem)

    entries = list(fs.list_recursive(root))
    files = [entry for entry in entries if fs.is_file(entry)]
    assert len(entries) == 2 and len(files) == 1
    assert files[0].replace("\\", "/").endswith("sub/.demo.json")
    assert fs.exists(root)
    assert fs.read_text(files[0]) == '{"service": {"value": 1}}'
    assert fs.current_directory() == root


@pytest.mark.parametrize(
    ("decoder", "text"),
    [
        (JSONDecoder(), '{"service": {"value": 1}}'),
        (YAMLDecoder(), "service:\n  value: 1\n"),
        (TOMLDecoder(), "[service]\nvalue = 1\n"),
    ],
)
def test_decoder_contract(decoder: ports.Decoder, text: str) -> None:
    assert isinstance(decoder, ports.Decoder)
    assert decoder.decode(text, path="config")["service"]["value"] == 1


def test_path_resolver_contract() -> None:
    resolver = DefaultPathResolver(MemoryFileSystem(cwd="/work"), env={"HOME": "/home/demo"})
    assert isinstance(resolver, ports.PathResolver)
    assert resolver.project_root() == "/work"
    assert resolver.home_directory() == "/home/demo"
    assert resolver.default_paths() == ["/work", "/home/demo"]
