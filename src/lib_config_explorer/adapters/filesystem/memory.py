"""In-memory filesystem capability for deterministic tests.

Purpose
-------
Let tests and examples describe a directory tree as a plain mapping and run the
full search algorithm against it without touching disk.

Contents
--------
* :class:`MemoryFileSystem` – POSIX-style tree keyed by absolute path.

System Role
-----------
Implements :class:`lib_config_explorer.application.ports.FileSystem` with the
same enumeration order as :class:`LocalFileSystem`, so results observed in
memory match what a real walk produces.
"""

from __future__ import annotations

import posixpath
from typing import Iterator, Mapping


class MemoryFileSystem:
    """A tiny POSIX tree held in dictionaries.

    Directories are implied by the files written below them; :meth:`mkdir`
    creates empty ones explicitly. Contents given as ``bytes`` are decoded as
    UTF-8 on read, which lets tests simulate undecodable files.

    Examples
    --------
    >>> fs = MemoryFileSystem({"/repo/.demo.json": '{"a": 1}'}, cwd="/repo")
    >>> fs.exists("/repo"), fs.is_file("/repo/.demo.json")
    (True, True)
    >>> list(fs.list_recursive("/"))
    ['/repo', '/repo/.demo.json']
    >>> fs.read_text(".demo.json")
    '{"a": 1}'
    """

    def __init__(
        self,
        files: Mapping[str, str | bytes] | None = None,
        *,
        cwd: str = "/",
    ) -> None:
        self._cwd = posixpath.normpath(cwd) if cwd.startswith("/") else posixpath.normpath("/" + cwd)
        self._files: dict[str, str | bytes] = {}
        self._dirs: set[str] = {"/"}
        self._unreadable: set[str] = set()
        self.mkdir(self._cwd)
        for path, content in (files or {}).items():
            self.write(path, content)

    def write(self, path: str, content: str | bytes) -> str:
        """Create or replace the file at *path* and return its absolute path."""

        full = self._absolute(path)
        if full in self._dirs:
            raise IsADirectoryError(full)
        self.mkdir(posixpath.dirname(full))
        self._files[full] = content
        return full

    def mkdir(self, path: str) -> str:
        """Create *path* and its parents as directories."""

        full = self._absolute(path)
        current = full
        while current not in self._dirs:
            if current in self._files:
                raise NotADirectoryError(current)
            self._dirs.add(current)
            current = posixpath.dirname(current)
        return full

    def mark_unreadable(self, path: str) -> None:
        """Make reads of *path* fail with :class:`PermissionError`."""

        self._unreadable.add(self._absolute(path))

    def exists(self, path: str) -> bool:
        full = self._absolute(path)
        return full in self._files or full in self._dirs

    def is_file(self, entry: str) -> bool:
        return self._absolute(entry) in self._files

    def list_recursive(self, path: str) -> Iterator[str]:
        root = self._absolute(path)
        if root not in self._dirs:
            raise NotADirectoryError(root)
        return self._walk(root)

    def read_text(self, path: str) -> str:
        full = self._absolute(path)
        if full in self._unreadable:
            raise PermissionError(f"Permission denied: {full!r}")
        if full in self._dirs:
            raise IsADirectoryError(f"Is a directory: {full!r}")
        try:
            content = self._files[full]
        except KeyError:
            raise FileNotFoundError(f"No such file: {full!r}") from None
        if isinstance(content, bytes):
            return content.decode("utf-8")
        return content

    def current_directory(self) -> str:
        return self._cwd

    def _walk(self, directory: str) -> Iterator[str]:
        files, subdirs = self._children(directory)
        yield from files
        for subdir in subdirs:
            yield subdir
            yield from self._walk(subdir)

    def _children(self, directory: str) -> tuple[list[str], list[str]]:
        files = sorted(path for path in self._files if posixpath.dirname(path) == directory)
        subdirs = sorted(path for path in self._dirs if path != "/" and posixpath.dirname(path) == directory)
        return files, subdirs

    def _absolute(self, path: str) -> str:
        if not path.startswith("/"):
            path = posixpath.join(self._cwd, path)
        return posixpath.normpath(path)
