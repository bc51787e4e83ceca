"""Composition root for ``lib_config_explorer``.

Purpose
-------
Provide the entry points that orchestrate path resolution, directory walks,
filename matching, the parser chain, and the result policy.

Contents
--------
* :data:`DEFAULT_FILENAME_PATTERNS` – default filename pattern templates.
* :class:`ConfigExplorer` – configured search for one configuration name.
* :func:`search_config` / :func:`find_config` – one-shot conveniences.

System Role
-----------
This module connects the filesystem capability, the path resolver, and the
parser chain while emitting structured observability signals. Two query modes
share one traversal:

``search``
    Exhaustive. Every candidate under every path is parsed; the result is the
    shallow merge of all documents (``merge_results=True``) or the last one.
``find_config``
    Short-circuits at the first candidate that yields a document and returns
    its path.
"""

from __future__ import annotations

import asyncio
import os
from typing import Final, Iterator, Mapping, Sequence

from .adapters.filesystem.local import LocalFileSystem
from .adapters.path_resolvers.default import DefaultPathResolver
from .application.merge import last_document, merge_documents
from .application.ports import FileSystem
from .domain.request import Document, SearchRequest
from .observability import log_debug, log_info, make_event
from .parsers import DEFAULT_PARSERS, ConfigParser

DEFAULT_FILENAME_PATTERNS: Final[tuple[str, ...]] = (
    r"^pyproject\.toml$",
    r".{name}\.json$",
    r".{name}\.ya?ml$",
    r"\.config[\\/]{name}\.json$",
    r"\.config[\\/]{name}\.ya?ml$",
)
"""Templates tested against each file's full path and bare filename.

``{name}`` is replaced by the (regex-escaped) configuration name.
"""


class ConfigExplorer:
    """Search a set of directories for the configuration called *name*.

    Parameters
    ----------
    name:
        Configuration identifier substituted into the filename templates and
        used as the manifest section key.
    paths:
        Directories to search, highest priority first. Relative entries are
        resolved against the filesystem's current directory. Defaults to the
        project root followed by the home directory.
    filename_patterns:
        Templates containing ``{name}``. Replaces
        :data:`DEFAULT_FILENAME_PATTERNS` entirely when given.
    parsers:
        Parser chain. Replaces :data:`lib_config_explorer.parsers.DEFAULT_PARSERS`
        entirely when given; there is no implicit append.
    merge_results:
        ``True`` merges every matching document (later keys win); ``False``
        keeps only the last match.
    fs:
        Filesystem capability. Defaults to :class:`LocalFileSystem`.
    env:
        Environment mapping for home directory resolution. Defaults to
        :data:`os.environ`.

    Raises
    ------
    PatternError
        When a filename template or parser pattern is not a valid regex.

    Examples
    --------
    >>> from lib_config_explorer.adapters.filesystem.memory import MemoryFileSystem
    >>> fs = MemoryFileSystem({
    ...     "/repo/pyproject.toml": '[tool.demo]\\nlevel = 1\\n',
    ...     "/repo/.demo.json": '{"level": 2, "color": "red"}',
    ... }, cwd="/repo")
    >>> explorer = ConfigExplorer("demo", fs=fs, env={"HOME": "/home/nobody"})
    >>> explorer.paths
    ('/repo', '/home/nobody')
    >>> explorer.search()
    {'level': 1, 'color': 'red'}
    >>> explorer.find_config()
    '/repo/.demo.json'
    """

    def __init__(
        self,
        name: str,
        *,
        paths: Sequence[str] | None = None,
        filename_patterns: Sequence[str] | None = None,
        parsers: Sequence[ConfigParser] | None = None,
        merge_results: bool = True,
        fs: FileSystem | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self.resolver = DefaultPathResolver(self.fs, env=env)
        self.request = SearchRequest(
            name=name,
            paths=tuple(paths) if paths is not None else tuple(self.resolver.default_paths()),
            filename_patterns=tuple(filename_patterns) if filename_patterns is not None else DEFAULT_FILENAME_PATTERNS,
            merge_results=merge_results,
            parsers=tuple(parsers) if parsers is not None else DEFAULT_PARSERS,
        )
        self._patterns = self.request.compiled_patterns()

    @property
    def name(self) -> str:
        return self.request.name

    @property
    def paths(self) -> tuple[str, ...]:
        return self.request.paths

    @property
    def filename_patterns(self) -> tuple[str, ...]:
        return self.request.filename_patterns

    @property
    def parsers(self) -> tuple[ConfigParser, ...]:
        return self.request.parsers

    @property
    def merge_results(self) -> bool:
        return self.request.merge_results

    @property
    def project_root(self) -> str:
        """Nearest ancestor holding ``pyproject.toml``, else the current directory."""

        return self.resolver.project_root()

    @property
    def home_directory(self) -> str:
        return self.resolver.home_directory()

    def search(self) -> Document | None:
        """Return the configuration document, or ``None`` if nothing matched.

        Every path and every candidate is visited even after a match. With
        ``merge_results`` the documents are shallow-merged in traversal order;
        otherwise the last document wins and earlier ones are discarded.
        """

        documents = (document for _path, document in self._documents())
        if self.request.merge_results:
            result = merge_documents(documents)
        else:
            result = last_document(documents)
        if not result:
            log_info("configuration_empty", **make_event(self.name, None))
            return None
        log_info("configuration_found", **make_event(self.name, None, {"keys": len(result)}))
        return result

    def find_config(self) -> str | None:
        """Return the path of the first candidate that yields a document.

        Unlike :meth:`search` the traversal stops at the earliest path, file,
        and parser that succeed.
        """

        for path, _document in self._documents():
            log_info("configuration_located", **make_event(self.name, path))
            return path
        log_info("configuration_empty", **make_event(self.name, None))
        return None

    async def asearch(self) -> Document | None:
        """Run :meth:`search` in a worker thread for callers inside an event loop."""

        return await asyncio.to_thread(self.search)

    async def afind_config(self) -> str | None:
        """Run :meth:`find_config` in a worker thread for callers inside an event loop."""

        return await asyncio.to_thread(self.find_config)

    def _documents(self) -> Iterator[tuple[str, Document]]:
        """Yield ``(path, document)`` for each candidate a parser accepts, in traversal order."""

        parsers = [parser.with_filesystem(self.fs) for parser in self.request.parsers]
        for root in self.request.paths:
            directory = self._absolute(root)
            if not self.fs.exists(directory):
                log_debug("search_path_missing", **make_event(self.name, directory))
                continue
            for entry in self._files(directory):
                if not self._is_candidate(entry):
                    continue
                document = self._parse(parsers, entry)
                if document is not None:
                    yield entry, document

    def _files(self, directory: str) -> Iterator[str]:
        try:
            for entry in self.fs.list_recursive(directory):
                if self.fs.is_file(entry):
                    yield entry
        except OSError as exc:
            log_debug("search_path_unlistable", **make_event(self.name, directory, {"error": str(exc)}))

    def _is_candidate(self, path: str) -> bool:
        filename = os.path.basename(path)
        return any(pattern.search(path) or pattern.search(filename) for pattern in self._patterns)

    def _parse(self, parsers: Sequence[ConfigParser], path: str) -> Document | None:
        filename = os.path.basename(path)
        for parser in parsers:
            if not parser.matches(filename):
                continue
            document = parser.load(self.name, path)
            if document is not None:
                log_debug("candidate_matched", **make_event(self.name, path, {"parser": parser.pattern.pattern}))
                return document
        return None

    def _absolute(self, path: str) -> str:
        if os.path.isabs(path):
            return path
        return os.path.normpath(os.path.join(self.fs.current_directory(), path))


def search_config(name: str, **options: object) -> Document | None:
    """Build a :class:`ConfigExplorer` with *options* and return :meth:`ConfigExplorer.search`."""

    return ConfigExplorer(name, **options).search()  # type: ignore[arg-type]


def find_config(name: str, **options: object) -> str | None:
    """Build a :class:`ConfigExplorer` with *options* and return :meth:`ConfigExplorer.find_config`."""

    return ConfigExplorer(name, **options).find_config()  # type: ignore[arg-type]


__all__ = [
    "DEFAULT_FILENAME_PATTERNS",
    "ConfigExplorer",
    "search_config",
    "find_config",
]
