"""CLI adapter for ``lib_properties_resolver`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators check which properties file a process would load and which
source wins for a given key, without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_locate` – prints the located properties file URI or ``none``.
* :func:`cli_file_name` – prints the requested properties file name.
* :func:`cli_get` – resolves one key, optionally with its provenance.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer: builds adapters from command-line options and calls the
composition root. The process environment is the override source.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.locator.default import DefaultFileLocator
from .adapters.resources.default import SearchPathResourceLoader
from .core import PropertiesResolver, find_properties_file, specified_properties_file_name

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DIST_NAME: Final[str] = "lib_properties_resolver"
NONE_FOUND: Final[str] = "none"


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version(_DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _search_options(command):
    """Attach the options shared by every command that searches for a file."""

    command = click.option(
        "--search-path",
        "search_path",
        multiple=True,
        type=click.Path(path_type=Path, exists=False),
        help="Directory or zip archive searched for resources (repeatable, defaults to sys.path)",
    )(command)
    command = click.option(
        "--home",
        type=click.Path(path_type=Path, file_okay=False, dir_okay=True),
        default=None,
        help="Home directory used for the second search location",
    )(command)
    command = click.option(
        "--cwd",
        type=click.Path(path_type=Path, exists=True, file_okay=False, dir_okay=True),
        default=None,
        help="Working directory used for relative file names (defaults to CWD)",
    )(command)
    return command


def _build_locator(cwd: Optional[Path], home: Optional[Path], search_path: Sequence[Path]) -> DefaultFileLocator:
    """Translate CLI options into a :class:`DefaultFileLocator`."""

    resources = SearchPathResourceLoader(search_path) if search_path else SearchPathResourceLoader()
    return DefaultFileLocator(cwd=cwd, home=home, resources=resources)


@click.group(
    help="Layered properties file locator and value resolver",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=_DIST_NAME,
    message="lib_properties_resolver version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DIST_NAME)
    except metadata.PackageNotFoundError:
        click.echo(f"{_DIST_NAME} (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DIST_NAME)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("locate", context_settings=CLICK_CONTEXT_SETTINGS)
@_search_options
def cli_locate(cwd: Optional[Path], home: Optional[Path], search_path: Sequence[Path]) -> None:
    """Print the URI of the properties file the process would load, or ``none``."""

    location = find_properties_file(locator=_build_locator(cwd, home, search_path))
    click.echo(location.uri if location is not None else NONE_FOUND)


@cli.command("file-name", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_file_name() -> None:
    """Print the properties file name requested through the environment.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["file-name"], env={"geodePropertyFile": "custom.properties"})
    >>> result.output.strip()
    'custom.properties'
    """

    click.echo(specified_properties_file_name())


@cli.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--properties",
    "properties_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Load this properties file instead of searching for one",
)
@click.option("--default", "default", default=None, help="Value printed when no source supplies the key")
@click.option(
    "--provenance/--no-provenance",
    default=False,
    help="Print JSON including the source that supplied the value",
)
@_search_options
@click.pass_context
def cli_get(
    ctx: click.Context,
    key: str,
    properties_file: Optional[Path],
    default: Optional[str],
    provenance: bool,
    cwd: Optional[Path],
    home: Optional[Path],
    search_path: Sequence[Path],
) -> None:
    """Resolve KEY from overrides and the properties file.

    Exits with status 1 when no source supplies KEY and no ``--default`` was
    given.
    """

    if properties_file is not None:
        resolver = PropertiesResolver(properties_file)
    else:
        resolver = PropertiesResolver.from_search(locator=_build_locator(cwd, home, search_path))

    if provenance:
        resolved = resolver.resolve(key)
        if resolved is None:
            payload = {"key": key, "value": default, "layer": "default" if default is not None else None, "origin": None}
        else:
            payload = {"key": key, "value": resolved.value, "layer": resolved.layer, "origin": resolved.origin}
        click.echo(json.dumps(payload, separators=(",", ":")))
        if payload["value"] is None:
            ctx.exit(1)
        return

    value = resolver.get_property(key, default=default)
    if value is None:
        ctx.exit(1)
    click.echo(value)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=_DIST_NAME,
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
