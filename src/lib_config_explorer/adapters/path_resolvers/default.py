"""Default search roots for configuration discovery.

Purpose
-------
Implement the :class:`lib_config_explorer.application.ports.PathResolver`
protocol: find the project root (nearest ancestor holding the project
manifest) and the user's home directory, both through the injected filesystem
capability.

Contents
--------
* :data:`DEFAULT_MANIFEST` – file that marks a project root.
* :data:`HOME_VARIABLES` – environment variables consulted for the home directory.
* :func:`resolve_project_root` / :func:`resolve_home_directory` – pure lookups.
* :class:`DefaultPathResolver` – bundles both into the default search path list.

System Role
-----------
Called by :class:`lib_config_explorer.core.ConfigExplorer` when no explicit
``paths`` are given. Neither function raises: when nothing can be determined
they fall back to the filesystem's current directory. Results are never cached.
"""

from __future__ import annotations

import os
from typing import Final, Mapping

from ...application.ports import FileSystem
from ...observability import log_debug

DEFAULT_MANIFEST: Final[str] = "pyproject.toml"
HOME_VARIABLES: Final[tuple[str, ...]] = ("HOME", "USERPROFILE")


def resolve_project_root(fs: FileSystem, manifest: str = DEFAULT_MANIFEST) -> str:
    """Return the nearest ancestor of the working directory that contains *manifest*.

    The walk starts at ``fs.current_directory()`` and stops at the filesystem
    root (a directory that is its own parent). When no ancestor holds the
    manifest the original working directory is returned.

    Examples
    --------
    >>> from lib_config_explorer.adapters.filesystem.memory import MemoryFileSystem
    >>> fs = MemoryFileSystem({"/repo/pyproject.toml": ""}, cwd="/repo/src/pkg")
    >>> resolve_project_root(fs)
    '/repo'
    >>> resolve_project_root(MemoryFileSystem(cwd="/tmp/work"))
    '/tmp/work'
    """

    start = fs.current_directory()
    directory = start
    while True:
        if fs.exists(os.path.join(directory, manifest)):
            log_debug("path_resolved", kind="project_root", path=directory)
            return directory
        parent = os.path.dirname(directory)
        if parent == directory:
            log_debug("path_resolved", kind="project_root", path=start, fallback=True)
            return start
        directory = parent


def resolve_home_directory(fs: FileSystem, env: Mapping[str, str] | None = None) -> str:
    """Return the user's home directory from ``HOME`` then ``USERPROFILE``.

    Falls back to the filesystem's current directory when neither is set.

    Examples
    --------
    >>> from lib_config_explorer.adapters.filesystem.memory import MemoryFileSystem
    >>> resolve_home_directory(MemoryFileSystem(), {"USERPROFILE": "C:/Users/demo"})
    'C:/Users/demo'
    >>> resolve_home_directory(MemoryFileSystem(cwd="/work"), {})
    '/work'
    """

    environ = os.environ if env is None else env
    for variable in HOME_VARIABLES:
        value = environ.get(variable)
        if value:
            log_debug("path_resolved", kind="home", path=value, variable=variable)
            return value
    fallback = fs.current_directory()
    log_debug("path_resolved", kind="home", path=fallback, fallback=True)
    return fallback


class DefaultPathResolver:
    """Resolve the default ``[project_root, home_directory]`` search roots.

    Parameters
    ----------
    fs:
        Filesystem capability used for manifest lookups and as the fallback
        working directory.
    env:
        Optional environment mapping overriding :data:`os.environ` (useful for
        deterministic tests).
    manifest:
        File name that marks a project root.
    """

    def __init__(
        self,
        fs: FileSystem,
        *,
        env: Mapping[str, str] | None = None,
        manifest: str = DEFAULT_MANIFEST,
    ) -> None:
        self.fs = fs
        self.env = env
        self.manifest = manifest

    def project_root(self) -> str:
        return resolve_project_root(self.fs, self.manifest)

    def home_directory(self) -> str:
        return resolve_home_directory(self.fs, self.env)

    def default_paths(self) -> list[str]:
        return [self.project_root(), self.home_directory()]
