"""Filesystem capability backed by the real disk.

Purpose
-------
Implement :class:`lib_config_explorer.application.ports.FileSystem` with
:mod:`os` and :mod:`pathlib` so the explorer can walk actual directories.

Contents
--------
* :class:`LocalFileSystem` – the default capability used by the explorer.

System Role
-----------
Injected into :class:`lib_config_explorer.core.ConfigExplorer` when the caller
supplies no filesystem. Listing errors for individual subdirectories are
reported and skipped so one unreadable folder never aborts a walk.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from ...observability import log_debug


class LocalFileSystem:
    """Read-only view of the local disk.

    Parameters
    ----------
    cwd:
        Optional working directory override. Defaults to :func:`os.getcwd`
        evaluated on every call, so a later ``chdir`` is honoured.
    """

    def __init__(self, cwd: str | os.PathLike[str] | None = None) -> None:
        self._cwd = os.fspath(cwd) if cwd is not None else None

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, entry: str) -> bool:
        return os.path.isfile(entry)

    def list_recursive(self, path: str) -> Iterator[str]:
        """Yield every entry below *path* depth first.

        Entries of each directory are sorted by name; files come before the
        contents of subdirectories, and a subdirectory is yielded right before
        its own contents.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> tmp = TemporaryDirectory()
        >>> root = Path(tmp.name)
        >>> (root / "sub").mkdir()
        >>> _ = (root / "b.json").write_text("{}", encoding="utf-8")
        >>> _ = (root / "sub" / "a.json").write_text("{}", encoding="utf-8")
        >>> [Path(p).relative_to(root).as_posix() for p in LocalFileSystem().list_recursive(tmp.name)]
        ['b.json', 'sub', 'sub/a.json']
        >>> tmp.cleanup()
        """

        for dirpath, dirnames, filenames in os.walk(path, onerror=_report_unlistable):
            dirnames.sort()
            if os.path.normpath(dirpath) != os.path.normpath(path):
                yield dirpath
            for filename in sorted(filenames):
                yield os.path.join(dirpath, filename)

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def current_directory(self) -> str:
        return self._cwd if self._cwd is not None else os.getcwd()


def _report_unlistable(exc: OSError) -> None:
    log_debug("search_path_unlistable", path=exc.filename, error=str(exc))
