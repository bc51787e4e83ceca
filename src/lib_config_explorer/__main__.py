"""Support ``python -m lib_config_explorer`` by delegating to :func:`lib_config_explorer.cli.main`."""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main(sys.argv[1:]))
