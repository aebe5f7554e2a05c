"""CLI adapter for ``lib_env_perm`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let users persist environment variables from a terminal or an install script
and inspect which profile file would be targeted, without writing Python.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling and ``--home``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_shells` – dumps the profile catalog as JSON.
* :func:`cli_locate` – previews the profile a write would target.
* :func:`cli_set` / :func:`cli_append` / :func:`cli_check_or_set` – the
  mutation commands, each printing a JSON summary.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer: it only calls :mod:`lib_env_perm.core`. Domain errors bubble
up to ``lib_cli_exit_tools`` which prints the message and maps the exit code.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Any, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import CATALOG, ProfileWrite, append_var, check_or_set, preview_profile, set_var

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for bare checkouts."""

    try:
        return metadata.version("lib_env_perm")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Persist environment variables in your shell profile",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_env_perm",
    message="lib_env_perm version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--home",
    type=click.Path(path_type=Path, file_okay=False, dir_okay=True),
    default=None,
    help="Home directory to use instead of $HOME",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, home: Optional[Path]) -> None:
    """Root command storing the traceback preference and home override.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    ctx.obj["home"] = home
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_env_perm")
    except metadata.PackageNotFoundError:
        click.echo("lib_env_perm (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_env_perm')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("shells", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_shells() -> None:
    """List supported shells and their profile candidates in search order."""

    payload = {
        shell.value: [
            {"role": candidate.role.value, "file": candidate.filename, "creatable": candidate.creatable}
            for candidate in entry.candidates()
        ]
        for shell, entry in CATALOG.items()
    }
    click.echo(json.dumps(payload, indent=2))


@cli.command("locate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_locate(ctx: click.Context) -> None:
    """Show which profile a write would go to, without touching it."""

    preview = preview_profile(home=ctx.obj["home"])
    click.echo(
        json.dumps(
            {
                "shell": preview.shell.value,
                "role": preview.role.value,
                "path": str(preview.path),
                "exists": preview.exists,
            },
            indent=2,
        )
    )


@cli.command("set", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.argument("value")
@click.pass_context
def cli_set(ctx: click.Context, name: str, value: str) -> None:
    """Append ``export NAME=VALUE`` to the profile (no duplicate check)."""

    _echo_write(set_var(name, value, home=ctx.obj["home"]))


@cli.command("append", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.argument("value")
@click.pass_context
def cli_append(ctx: click.Context, name: str, value: str) -> None:
    """Append ``export NAME="VALUE:$NAME"`` to the profile.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> runner = CliRunner()
    >>> result = runner.invoke(cli, ["append", "1BAD", "/x/bin"])
    >>> result.exit_code != 0
    True
    """

    _echo_write(append_var(name, value, home=ctx.obj["home"]))


@cli.command("check-or-set", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.argument("value")
@click.pass_context
def cli_check_or_set(ctx: click.Context, name: str, value: str) -> None:
    """Set NAME unless it is already present in the current environment."""

    result = check_or_set(name, value, home=ctx.obj["home"])
    if result is None:
        click.echo(json.dumps({"name": name, "skipped": True}, indent=2))
        return
    _echo_write(result)


def _echo_write(result: ProfileWrite) -> None:
    """Print a :class:`ProfileWrite` as indented JSON."""

    payload: dict[str, Any] = {
        "shell": result.shell.value,
        "role": result.role.value,
        "path": str(result.path),
        "created": result.created,
        "line": result.line.strip(),
    }
    click.echo(json.dumps(payload, indent=2))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_env_perm",
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
