"""Profile locator adapter.

Purpose
-------
Pick the startup file that receives an export line and open it append-only.
Candidates come from the catalog in role order (profile → login → shellrc);
the first one that opens wins and only the profile role may be created. This
avoids scattering duplicate exports over several files while guaranteeing that
some file always receives the write.

Contents
--------
* :class:`DefaultProfileLocator` – the search loop.
* :func:`_open_append` – ``os.open`` wrapper enforcing append-only semantics.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Final, Mapping

from ...application.ports import LocatedProfile, ProfilePreview
from ...domain.catalog import CATALOG, catalog
from ...domain.errors import CatalogInconsistency, NoProfileFound, UnsupportedShell
from ...domain.shells import ProfileCandidate, ShellKind, ShellProfileEntry
from ...observability import log_debug, log_error, log_info, make_event

_APPEND_FLAGS: Final[int] = os.O_WRONLY | os.O_APPEND
_FILE_MODE: Final[int] = 0o644


class DefaultProfileLocator:
    """Walk catalog candidates and open the first usable profile."""

    def __init__(self, *, catalog: Mapping[ShellKind, ShellProfileEntry] = CATALOG) -> None:
        """Store the shell → files table (injectable for tests and extensions)."""

        self._catalog = catalog

    def locate(self, home: Path, shell: ShellKind) -> LocatedProfile:
        """Open the profile that should receive the next export line.

        Parameters
        ----------
        home:
            Validated home directory (see
            :class:`~lib_env_perm.adapters.home.default.DefaultHomeGuard`).
        shell:
            Shell resolved by a
            :class:`~lib_env_perm.application.ports.ShellResolver`.

        Returns
        -------
        LocatedProfile
            Handle positioned at end-of-file, opened without truncation.

        Raises
        ------
        UnsupportedShell
            *shell* is ``UNRECOGNIZED``; nothing is opened.
        CatalogInconsistency
            A recognised shell has no catalog entry.
        NoProfileFound
            No candidate could be opened.
        """

        entry = self._entry_for(shell)
        for candidate in entry.candidates():
            path = Path(home) / candidate.filename
            existed = path.exists()
            try:
                handle = _open_append(path, create=candidate.creatable)
            except OSError as exc:
                log_debug(
                    "profile_candidate_skipped",
                    **make_event(entry.shell.value, str(path), {"role": candidate.role.value, "error": str(exc)}),
                )
                continue
            log_info(
                "profile_selected",
                **make_event(entry.shell.value, str(path), {"role": candidate.role.value, "created": not existed}),
            )
            return LocatedProfile(
                path=path,
                shell=entry.shell,
                role=candidate.role,
                created=not existed,
                handle=handle,
            )
        log_error("profile_not_found", **make_event(entry.shell.value, str(home)))
        raise NoProfileFound(f"No shell profiles were found in {home} for {entry.shell.value}")

    def preview(self, home: Path, shell: ShellKind) -> ProfilePreview:
        """Report which profile :meth:`locate` would pick, without opening anything.

        The first candidate that already exists as a regular file wins;
        otherwise the creatable candidate is reported with ``exists=False``.
        """

        entry = self._entry_for(shell)
        fallback: ProfileCandidate | None = None
        for candidate in entry.candidates():
            path = Path(home) / candidate.filename
            if path.is_file():
                return ProfilePreview(path=path, shell=entry.shell, role=candidate.role, exists=True)
            if candidate.creatable and fallback is None:
                fallback = candidate
        if fallback is None:
            raise NoProfileFound(f"No shell profiles were found in {home} for {entry.shell.value}")
        return ProfilePreview(
            path=Path(home) / fallback.filename,
            shell=entry.shell,
            role=fallback.role,
            exists=False,
        )

    def _entry_for(self, shell: ShellKind) -> ShellProfileEntry:
        if shell is ShellKind.UNRECOGNIZED:
            raise UnsupportedShell("Cannot locate a profile for an unrecognised shell")
        entry = catalog(shell, self._catalog)
        if entry is None:
            raise CatalogInconsistency(f"Shell {shell.value!r} is recognised but has no profile catalog entry")
        return entry


def _open_append(path: Path, *, create: bool) -> IO[str]:
    """Open *path* for appending; create it only when *create* is set.

    Raises
    ------
    OSError
        Propagated from :func:`os.open` (e.g. ``FileNotFoundError`` for a
        missing non-creatable candidate).
    """

    flags = _APPEND_FLAGS | os.O_CREAT if create else _APPEND_FLAGS
    fd = os.open(path, flags, _FILE_MODE)
    try:
        return os.fdopen(fd, "a", encoding="utf-8")
    except BaseException:
        os.close(fd)
        raise
