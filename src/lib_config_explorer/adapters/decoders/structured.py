"""Structured text decoders.

Purpose
-------
Convert the raw text of a candidate file into a Python mapping. Decoders are
small wrappers around ``json.loads``/``yaml.safe_load``/``tomllib.loads`` so
error handling and observability policies live in one place.

Contents
--------
* :class:`BaseDecoder` – shared mapping validation.
* :class:`JSONDecoder` – strict JSON decoder.
* :class:`YAMLDecoder` – forgiving YAML decoder (never raises).
* :class:`TOMLDecoder` – strict TOML decoder used for ``pyproject.toml``.

System Role
-----------
Invoked by the builtin parsers in :mod:`lib_config_explorer.parsers`. Strict
decoders raise :class:`InvalidFormat`; the parser chain turns that into "no
match" for the candidate.
"""

from __future__ import annotations

import json
from typing import Mapping

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import yaml

from ...domain.errors import InvalidFormat
from ...observability import log_debug, log_error


class BaseDecoder:
    """Common utilities shared by the structured decoders."""

    format_name = "text"

    @staticmethod
    def _ensure_mapping(data: object, *, path: str) -> dict[str, object]:
        """Ensure *data* is a mapping, otherwise raise ``InvalidFormat``.

        Examples
        --------
        >>> BaseDecoder._ensure_mapping({"key": 1}, path="demo")
        {'key': 1}
        >>> BaseDecoder._ensure_mapping([1, 2], path="demo")
        Traceback (most recent call last):
        ...
        lib_config_explorer.domain.errors.InvalidFormat: File demo did not produce a mapping
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        return dict(data)


class JSONDecoder(BaseDecoder):
    """Decode JSON documents whose top level is an object."""

    format_name = "json"

    def decode(self, text: str, *, path: str) -> dict[str, object]:
        """Return the object encoded in *text*.

        Examples
        --------
        >>> JSONDecoder().decode('{"enabled": true}', path="demo.json")
        {'enabled': True}
        """

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            log_error("config_file_invalid", path=path, format=self.format_name, error=str(exc))
            raise InvalidFormat(f"Invalid JSON in {path}: {exc}") from exc
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", path=path, format=self.format_name)
        return result


class YAMLDecoder(BaseDecoder):
    """Decode YAML documents, degrading to an empty mapping instead of raising.

    Malformed input (including values the safe constructors reject, such as
    impossible dates), an empty document, and a non-mapping top level all
    decode to ``{}``.
    """

    format_name = "yaml"

    def decode(self, text: str, *, path: str) -> dict[str, object]:
        """Return the mapping encoded in *text*, or ``{}``.

        Examples
        --------
        >>> YAMLDecoder().decode("service:\\n  ports: [80, 443]\\n", path="demo.yaml")
        {'service': {'ports': [80, 443]}}
        >>> YAMLDecoder().decode("- just\\n- a list\\n", path="demo.yaml")
        {}
        """

        try:
            data = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError, RecursionError) as exc:
            log_error("config_file_invalid", path=path, format=self.format_name, error=str(exc))
            return {}
        if not isinstance(data, Mapping):
            log_debug("config_file_empty", path=path, format=self.format_name)
            return {}
        log_debug("config_file_loaded", path=path, format=self.format_name)
        return dict(data)


class TOMLDecoder(BaseDecoder):
    """Decode TOML documents with the standard library parser."""

    format_name = "toml"

    def decode(self, text: str, *, path: str) -> dict[str, object]:
        """Return the table encoded in *text*.

        Examples
        --------
        >>> TOMLDecoder().decode('[tool.demo]\\nlevel = 3\\n', path="pyproject.toml")
        {'tool': {'demo': {'level': 3}}}
        """

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            log_error("config_file_invalid", path=path, format=self.format_name, error=str(exc))
            raise InvalidFormat(f"Invalid TOML in {path}: {exc}") from exc
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", path=path, format=self.format_name)
        return result
