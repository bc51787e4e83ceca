"""Shared sandbox fixtures for on-disk search scenarios.

The sandbox lays out a project directory (optionally holding ``pyproject.toml``)
and a separate home directory under ``tmp_path`` so tests can exercise the
default ``[project_root, home]`` search order against the real filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(frozen=True)
class SearchSandbox:
    """Paths and environment for a single on-disk search scenario."""

    project: Path
    home: Path

    @property
    def roots(self) -> dict[str, Path]:
        return {"project": self.project, "home": self.home}

    @property
    def env(self) -> dict[str, str]:
        return {"HOME": str(self.home)}

    def write(self, location: str, relative: str, *, content: str) -> Path:
        """Write *content* to *relative* below the ``project`` or ``home`` root."""

        target = self.roots[location] / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    def apply_env(self, monkeypatch: pytest.MonkeyPatch, *, cwd: Path | None = None) -> None:
        """Point ``HOME`` at the sandbox and change into *cwd* (the project by default)."""

        monkeypatch.setenv("HOME", str(self.home))
        monkeypatch.delenv("USERPROFILE", raising=False)
        monkeypatch.chdir(cwd or self.project)


def create_search_sandbox(tmp_path: Path, *, manifest: str | None = "") -> SearchSandbox:
    """Create project and home directories; write ``pyproject.toml`` unless *manifest* is ``None``."""

    project = tmp_path / "project"
    home = tmp_path / "home"
    project.mkdir(parents=True, exist_ok=True)
    home.mkdir(parents=True, exist_ok=True)
    sandbox = SearchSandbox(project=project, home=home)
    if manifest is not None:
        sandbox.write("project", "pyproject.toml", content=manifest)
    return sandbox
