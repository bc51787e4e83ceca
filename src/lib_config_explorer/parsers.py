"""Config parser chain: filename matchers paired with extraction functions.

Purpose
-------
Decide, for a candidate file, whether and how its contents become a
configuration document. Each :class:`ConfigParser` pairs a regex tested against
the bare filename with an ``extract(name, path, contents)`` function.

Contents
--------
* :class:`ConfigParser` – one strategy in the chain.
* :func:`json_parser` / :func:`yaml_parser` / :func:`toml_parser` – whole-file
  parsers built on the structured decoders.
* :func:`manifest_parser` – extracts the section named after the searched
  configuration from a project manifest (``[tool.<name>]`` in ``pyproject.toml``).
* :data:`DEFAULT_PARSERS` – the default chain.

System Role
-----------
The explorer binds its filesystem into every parser
(:meth:`ConfigParser.with_filesystem`) and tries them in order. Passing
``parsers=`` to the explorer replaces :data:`DEFAULT_PARSERS` entirely; splice
the defaults back in explicitly when extending them::

    ConfigExplorer("demo", parsers=[*DEFAULT_PARSERS, my_parser])
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Final, Sequence

from .adapters.decoders.structured import JSONDecoder, TOMLDecoder, YAMLDecoder
from .adapters.filesystem.local import LocalFileSystem
from .adapters.path_resolvers.default import DEFAULT_MANIFEST
from .application.ports import Decoder, FileSystem
from .domain.errors import PatternError
from .domain.request import Document
from .observability import log_debug, log_error

Extractor = Callable[[str, str, str], "Mapping[str, Any] | None"]
"""``extract(name, path, contents)`` returning a mapping, or ``None`` for "no match"."""


@dataclass(frozen=True)
class ConfigParser:
    """Pair a filename pattern with a content extraction function.

    Parameters
    ----------
    pattern:
        Regex (or regex source) searched in the bare filename.
    extract:
        ``(name, path, contents) -> Mapping | None``. Return ``None`` to decline
        the file. Any exception it raises rejects the file as malformed
        without aborting the search.
    fs:
        Filesystem used by :meth:`load`; the explorer binds its own before a
        search. ``None`` means the local disk.

    Examples
    --------
    >>> from lib_config_explorer.adapters.filesystem.memory import MemoryFileSystem
    >>> fs = MemoryFileSystem({"/notes/.demo.txt": "hello"})
    >>> text = ConfigParser(r"\\.txt$", lambda name, path, contents: {"text": contents}, fs=fs)
    >>> text.matches(".demo.txt"), text.matches("demo.json")
    (True, False)
    >>> text.load("demo", "/notes/.demo.txt")
    {'text': 'hello'}
    """

    pattern: re.Pattern[str] | str
    extract: Extractor
    fs: FileSystem | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            try:
                compiled = re.compile(self.pattern)
            except re.error as exc:
                raise PatternError(f"Invalid parser pattern {self.pattern!r}: {exc}") from exc
            object.__setattr__(self, "pattern", compiled)

    def matches(self, filename: str) -> bool:
        """Return ``True`` when the pattern occurs in *filename* (not the full path)."""

        return self.pattern.search(filename) is not None  # type: ignore[union-attr]

    def load(self, name: str, path: str) -> Document | None:
        """Read *path* and extract the document for *name*.

        Returns ``None`` (and logs why) when the file cannot be read, the
        extractor rejects it, or the extractor produces something other than a
        mapping. Never raises for environmental problems.
        """

        fs = self.fs if self.fs is not None else LocalFileSystem()
        try:
            contents = fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            log_error("config_file_unreadable", config=name, path=path, error=str(exc))
            return None
        log_debug("config_file_read", config=name, path=path, size=len(contents))

        try:
            document = self.extract(name, path, contents)
        except Exception as exc:
            log_error("config_file_rejected", config=name, path=path, error=str(exc))
            return None
        if document is None:
            return None
        if not isinstance(document, Mapping):
            log_error(
                "config_file_rejected",
                config=name,
                path=path,
                error=f"expected a mapping, got {type(document).__name__}",
            )
            return None
        return dict(document)

    def with_filesystem(self, fs: FileSystem) -> "ConfigParser":
        """Return a copy of this parser reading through *fs*."""

        return replace(self, fs=fs)


def _whole_file(decoder: Decoder) -> Extractor:
    def extract(name: str, path: str, contents: str) -> Mapping[str, Any]:
        return decoder.decode(contents, path=path)

    return extract


def json_parser(pattern: str = r"\.json$") -> ConfigParser:
    """Parse any matching file as a JSON object."""

    return ConfigParser(pattern, _whole_file(JSONDecoder()))


def yaml_parser(pattern: str = r"\.ya?ml$") -> ConfigParser:
    """Parse any matching file as YAML; malformed or non-mapping YAML yields ``{}``."""

    return ConfigParser(pattern, _whole_file(YAMLDecoder()))


def toml_parser(pattern: str = r"\.toml$") -> ConfigParser:
    """Parse any matching file as a TOML table. Not part of :data:`DEFAULT_PARSERS`."""

    return ConfigParser(pattern, _whole_file(TOMLDecoder()))


def manifest_parser(
    filename: str = DEFAULT_MANIFEST,
    decoder: Decoder | None = None,
    section: Sequence[str] = ("tool",),
) -> ConfigParser:
    """Extract the table named after the searched configuration from a manifest.

    The manifest is decoded whole, then the keys in *section* followed by the
    configuration name are looked up in turn. When any of them is missing the
    parser declines the file, so a manifest that does not mention the tool
    never shadows other candidates.

    Parameters
    ----------
    filename:
        Exact manifest file name; only files with this bare name match.
    decoder:
        Decoder for the manifest format, :class:`TOMLDecoder` by default.
    section:
        Keys leading to the per-tool namespace; ``()`` looks the name up at
        the top level, as ``manifest_parser("pubspec.yaml", YAMLDecoder(), ())``.

    Examples
    --------
    >>> from lib_config_explorer.adapters.filesystem.memory import MemoryFileSystem
    >>> fs = MemoryFileSystem({"/repo/pyproject.toml": '[tool.demo]\\nstrict = true\\n'})
    >>> parser = manifest_parser().with_filesystem(fs)
    >>> parser.load("demo", "/repo/pyproject.toml")
    {'strict': True}
    >>> parser.load("other", "/repo/pyproject.toml") is None
    True
    """

    active = decoder if decoder is not None else TOMLDecoder()
    keys = tuple(section)

    def extract(name: str, path: str, contents: str) -> Any:
        node: Any = active.decode(contents, path=path)
        for key in (*keys, name):
            if not isinstance(node, Mapping) or key not in node:
                log_debug("manifest_section_missing", config=name, path=path, key=key)
                return None
            node = node[key]
        return node

    return ConfigParser("^" + re.escape(filename) + "$", extract)


DEFAULT_PARSERS: Final[tuple[ConfigParser, ...]] = (
    manifest_parser(),
    json_parser(),
    yaml_parser(),
)
"""Default chain: project manifest section, then JSON, then YAML."""
