"""Composition root for ``lib_env_perm``.

Purpose
-------
Wire the home guard, shell resolver, and profile locator into the public
operations that persist environment variables in a shell startup file.

Contents
--------
* :class:`ProfileWrite` – what an operation wrote and where.
* :func:`locate_profile` / :func:`preview_profile` – acquisition steps.
* :func:`set_var` / :func:`append_var` / :func:`check_or_set` – mutations.

System Role
-----------
Each call re-runs the full pipeline ``guard home → resolve shell → locate
file → write line → flush → close``. Nothing is cached between calls and no
handle outlives the call that opened it. A failure in any acquisition step
aborts before a single byte is written.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .adapters.home.default import DefaultHomeGuard
from .adapters.profile.default import DefaultProfileLocator
from .adapters.shell.default import DefaultShellResolver, resolve_shell
from .application.exports import ensure_encodable, format_append_line, format_set_line, validate_name, write_line
from .application.ports import HomeGuard, LocatedProfile, ProfileLocator, ProfilePreview, ShellResolver
from .domain.catalog import CATALOG, catalog
from .domain.errors import (
    CatalogInconsistency,
    EnvPermError,
    HomeNotFound,
    InvalidPath,
    InvalidVariableName,
    NoProfileFound,
    PermissionDenied,
    ProfileDirNotFound,
    ProfileIOError,
    UnsupportedShell,
)
from .domain.shells import ProfileCandidate, ProfileRole, ShellKind, ShellProfileEntry
from .observability import log_debug, log_info, make_event


@dataclass(frozen=True, slots=True)
class ProfileWrite:
    """Outcome of a successful mutation.

    Attributes
    ----------
    path:
        Profile file that received the line; callers may source it.
    shell / role:
        Resolved shell and the catalog role of :attr:`path`.
    created:
        ``True`` when the profile did not exist before this write.
    line:
        Exact text appended (including the leading blank line).
    """

    path: Path
    shell: ShellKind
    role: ProfileRole
    created: bool
    line: str


def locate_profile(
    *,
    home: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    guard: HomeGuard | None = None,
    resolver: ShellResolver | None = None,
    locator: ProfileLocator | None = None,
) -> LocatedProfile:
    """Validate the home directory and open the selected profile for appending.

    Why
    ----
    Exposes the acquisition step for callers that write their own content.
    The returned :class:`LocatedProfile` owns an open handle; use it as a
    context manager.

    Parameters
    ----------
    home:
        Home directory override; defaults to ``$HOME`` / the platform default.
    environ:
        Environment mapping read for ``HOME`` and ``SHELL``. Defaults to
        :data:`os.environ`.
    guard / resolver / locator:
        Adapter overrides satisfying the ports in
        :mod:`lib_env_perm.application.ports`.

    Raises
    ------
    EnvPermError
        Any guard, resolution, or location failure. The guard always runs
        before the shell is resolved.
    """

    guard = guard or DefaultHomeGuard(home=home, environ=environ)
    resolver = resolver or DefaultShellResolver(environ=environ)
    locator = locator or DefaultProfileLocator()
    home_dir = guard.validate()
    return locator.locate(home_dir, resolver.resolve())


def preview_profile(
    *,
    home: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    guard: HomeGuard | None = None,
    resolver: ShellResolver | None = None,
    locator: ProfileLocator | None = None,
) -> ProfilePreview:
    """Return the profile a write would target without opening or creating it."""

    guard = guard or DefaultHomeGuard(home=home, environ=environ)
    resolver = resolver or DefaultShellResolver(environ=environ)
    locator = locator or DefaultProfileLocator()
    home_dir = guard.validate()
    return locator.preview(home_dir, resolver.resolve())


def set_var(
    name: str,
    value: object,
    *,
    home: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProfileWrite:
    """Append ``export NAME=VALUE`` to the user's profile.

    No existence check is made: calling this twice writes two lines. Prefer
    :func:`check_or_set` unless the variable is known to be absent. Values are
    written verbatim; quote them yourself if they contain spaces.

    Examples
    --------
    >>> import tempfile
    >>> tmp = tempfile.TemporaryDirectory()
    >>> result = set_var('DUMMY', 1, home=tmp.name, environ={'SHELL': '/bin/zsh'})
    >>> result.path.name, result.line
    ('.zprofile', '\\nexport DUMMY=1\\n')
    >>> tmp.cleanup()
    """

    validate_name(name)
    return _write(format_set_line(name, value), name, home=home, environ=environ)


def append_var(
    name: str,
    value: object,
    *,
    home: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProfileWrite:
    """Append ``export NAME="VALUE:$NAME"`` to the user's profile.

    Meant for ``PATH``-like variables. Whether ``NAME`` currently has a value
    is not checked.
    """

    validate_name(name)
    return _write(format_append_line(name, value), name, home=home, environ=environ)


def check_or_set(
    name: str,
    value: object,
    *,
    home: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProfileWrite | None:
    """Set *name* in the profile unless the current process already has it.

    Only the process environment is consulted, never the profile itself. A
    fresh process that has not re-sourced its profile will therefore write the
    line again.

    Returns
    -------
    ProfileWrite | None
        ``None`` when *name* was already present and nothing was touched.
    """

    validate_name(name)
    current = os.environ if environ is None else environ
    if name in current:
        log_debug("export_skipped", shell=None, path=None, name=name)
        return None
    return set_var(name, value, home=home, environ=environ)


def _write(
    line: str,
    name: str,
    *,
    home: str | Path | None,
    environ: Mapping[str, str] | None,
) -> ProfileWrite:
    """Acquire a profile, append *line*, flush, and close."""

    ensure_encodable(line)
    with locate_profile(home=home, environ=environ) as located:
        write_line(located.handle, line, located.path)
    log_info(
        "export_written",
        **make_event(located.shell.value, str(located.path), {"name": name, "role": located.role.value}),
    )
    return ProfileWrite(
        path=located.path,
        shell=located.shell,
        role=located.role,
        created=located.created,
        line=line,
    )


__all__ = [
    "CATALOG",
    "CatalogInconsistency",
    "EnvPermError",
    "HomeNotFound",
    "InvalidPath",
    "InvalidVariableName",
    "LocatedProfile",
    "NoProfileFound",
    "PermissionDenied",
    "ProfileCandidate",
    "ProfileDirNotFound",
    "ProfileIOError",
    "ProfilePreview",
    "ProfileRole",
    "ProfileWrite",
    "ShellKind",
    "ShellProfileEntry",
    "UnsupportedShell",
    "append_var",
    "catalog",
    "check_or_set",
    "locate_profile",
    "preview_profile",
    "resolve_shell",
    "set_var",
]
