"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by adapters, the parser chain, and the
explorer. The hierarchy lives in the domain layer so outer layers depend on it
and never the other way round.

Contents
--------
* :class:`ConfigError` – umbrella base class for all library errors.
* :class:`InvalidFormat` – a candidate file could not be decoded.
* :class:`NotFound` – an optional resource (file, directory) is missing.
* :class:`PatternError` – a caller supplied a pattern that does not compile.

System Role
-----------
Decoders raise :class:`InvalidFormat`; the parser chain converts it into "no
match" for that candidate. :class:`PatternError` is the only error the
explorer lets escape, because it signals a programming error in the caller's
setup rather than an environmental condition.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_config_explorer``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidFormat(ConfigError):
    """Raised when a candidate file cannot be decoded into a mapping.

    Typical Sources
    ---------------
    The structured decoders (:mod:`json`, :mod:`tomllib`) and custom extractors
    that want to reject a file explicitly.
    """


class NotFound(ConfigError):
    """Represents missing-but-optional resources (files, directories).

    The explorer treats this as a non-fatal condition.
    """


class PatternError(ConfigError):
    """Raised when a filename pattern template or parser pattern is not a valid regex.

    Why
    ----
    Invalid patterns are caller misuse and must fail at construction time
    instead of silently matching nothing.
    """
