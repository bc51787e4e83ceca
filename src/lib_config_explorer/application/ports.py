"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the explorer relies on so it can orchestrate a
search without depending on concrete implementations. Tests substitute an
in-memory filesystem through the same seam.

Contents
--------
* :class:`FileSystem` – narrow, read-only filesystem capability.
* :class:`Decoder` – turns raw text into a mapping.
* :class:`PathResolver` – computes the default search roots.

System Role
-----------
These protocols keep the dependency rule intact: adapters implement them, the
explorer and parser chain only ever talk to the protocol.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Read-only filesystem capability consumed by the explorer.

    Methods
    -------
    :meth:`exists`
        Whether *path* names an existing file or directory.
    :meth:`is_file`
        Whether an entry yielded by :meth:`list_recursive` is a regular file.
    :meth:`list_recursive`
        Lazily yield every entry below *path*, depth first.
    :meth:`read_text`
        Return the file contents as text; raise :class:`OSError` when missing
        or unreadable.
    :meth:`current_directory`
        Absolute path of the working directory used to resolve relative paths.
    """

    def exists(self, path: str) -> bool:
        """Return ``True`` when *path* exists."""

    def is_file(self, entry: str) -> bool:
        """Return ``True`` when *entry* is a regular file."""

    def list_recursive(self, path: str) -> Iterator[str]:
        """Yield absolute entry paths below *path*."""

    def read_text(self, path: str) -> str:
        """Return the UTF-8 contents of *path*."""

    def current_directory(self) -> str:
        """Return the absolute working directory."""


@runtime_checkable
class Decoder(Protocol):
    """Decode structured text into a mapping."""

    def decode(self, text: str, *, path: str) -> Mapping[str, object]:
        """Return a mapping parsed from *text*; *path* is used for diagnostics."""


@runtime_checkable
class PathResolver(Protocol):
    """Compute default search roots when the caller supplies none."""

    def project_root(self) -> str:
        """Nearest ancestor of the working directory holding the project manifest."""

    def home_directory(self) -> str:
        """Home directory of the current user."""

    def default_paths(self) -> list[str]:
        """Search roots in priority order."""
