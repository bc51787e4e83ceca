"""Find a tool's configuration wherever the user put it.

``ConfigExplorer("mytool").search()`` walks the project root and the home
directory for ``pyproject.toml`` (``[tool.mytool]``), ``.mytool.json``,
``.mytool.yaml`` and ``.config/mytool.*`` files and returns the merged
document. Everything is configurable: search paths, filename templates, the
parser chain, merge policy, and the filesystem itself.
"""

from __future__ import annotations

from .adapters.filesystem.local import LocalFileSystem
from .adapters.filesystem.memory import MemoryFileSystem
from .adapters.path_resolvers.default import resolve_home_directory, resolve_project_root
from .core import DEFAULT_FILENAME_PATTERNS, ConfigExplorer, find_config, search_config
from .domain.errors import ConfigError, InvalidFormat, NotFound, PatternError
from .observability import bind_trace_id, get_logger
from .parsers import DEFAULT_PARSERS, ConfigParser, json_parser, manifest_parser, toml_parser, yaml_parser

__all__ = [
    "ConfigExplorer",
    "ConfigParser",
    "DEFAULT_FILENAME_PATTERNS",
    "DEFAULT_PARSERS",
    "json_parser",
    "yaml_parser",
    "toml_parser",
    "manifest_parser",
    "search_config",
    "find_config",
    "resolve_project_root",
    "resolve_home_directory",
    "LocalFileSystem",
    "MemoryFileSystem",
    "ConfigError",
    "InvalidFormat",
    "NotFound",
    "PatternError",
    "bind_trace_id",
    "get_logger",
]
