"""CLI adapter for ``lib_config_explorer`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let users check which configuration a tool would pick up, and from where,
without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling into ``lib_cli_exit_tools``.
* :func:`cli_info` – prints the version and the default search rules.
* :func:`cli_search` – runs :meth:`ConfigExplorer.search` and prints JSON.
* :func:`cli_locate` – runs :meth:`ConfigExplorer.find_config` and prints the path.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The outermost layer. It only talks to :class:`lib_config_explorer.core.ConfigExplorer`
and leaves exit code policy to ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import DEFAULT_FILENAME_PATTERNS, ConfigExplorer
from .domain.errors import NotFound
from .parsers import DEFAULT_PARSERS

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("lib_config_explorer")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Locate and load a tool's configuration files",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_config_explorer",
    message="lib_config_explorer version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Record ``--traceback`` in ``lib_cli_exit_tools.config`` before a subcommand runs."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the installed version and the default search rules."""

    try:
        version = metadata.version("lib_config_explorer")
    except metadata.PackageNotFoundError:
        version = "metadata unavailable"
    click.echo(f"lib_config_explorer ({version})")
    click.echo("Filename patterns ({name} is the configuration name):")
    for template in DEFAULT_FILENAME_PATTERNS:
        click.echo(f"  {template}")
    click.echo("Parsers, in the order they are tried:")
    for parser in DEFAULT_PARSERS:
        click.echo(f"  {parser.pattern.pattern}")


_path_option = click.option(
    "--path",
    "paths",
    multiple=True,
    help="Directory to search (repeatable, highest priority first). Defaults to project root and home",
)
_pattern_option = click.option(
    "--pattern",
    "patterns",
    multiple=True,
    help="Filename pattern template containing {name} (repeatable). Replaces the defaults",
)


@cli.command("search", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@_path_option
@_pattern_option
@click.option(
    "--merge/--no-merge",
    default=True,
    show_default=True,
    help="Merge every match (later keys win) or keep only the last one",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
def cli_search(
    name: str,
    paths: Sequence[str],
    patterns: Sequence[str],
    merge: bool,
    indent: Optional[int],
) -> None:
    """Search for configuration NAME and print it as JSON (``null`` when absent)."""

    explorer = _build_explorer(name, paths, patterns, merge=merge)
    click.echo(json.dumps(explorer.search(), indent=indent, default=str))


@cli.command("locate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@_path_option
@_pattern_option
def cli_locate(name: str, paths: Sequence[str], patterns: Sequence[str]) -> None:
    """Print the path of the first file that provides configuration NAME.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["locate", "demo", "--path", "/nonexistent-dir"])
    >>> result.exit_code
    1
    """

    explorer = _build_explorer(name, paths, patterns)
    location = explorer.find_config()
    if location is None:
        raise NotFound(f"No configuration found for {name!r}")
    click.echo(location)


def _build_explorer(
    name: str,
    paths: Sequence[str],
    patterns: Sequence[str],
    *,
    merge: bool = True,
) -> ConfigExplorer:
    """Translate CLI options into explorer arguments; empty tuples mean defaults."""

    return ConfigExplorer(
        name,
        paths=list(paths) or None,
        filename_patterns=list(patterns) or None,
        merge_results=merge,
    )


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_config_explorer",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
