"""Home directory guard.

Purpose
-------
Validate that the home directory can receive a profile write before any shell
resolution or file opening happens. Checks run in a fixed order and each
failure maps to its own domain error.

Contents
--------
* :class:`DefaultHomeGuard` – resolve → coerce → exists → writable.
* :func:`_is_writable` – ``os.access`` write check.

System Role
-----------
First step of every mutation performed by :mod:`lib_env_perm.core`. The guard
is read-only; it never creates directories.
"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from typing import Mapping

from ...domain.errors import HomeNotFound, InvalidPath, PermissionDenied, ProfileDirNotFound
from ...observability import log_debug

HOME_VARIABLE = "HOME"


class DefaultHomeGuard:
    """Resolve and validate the current user's home directory.

    Why
    ----
    A missing or read-only home directory must abort the operation before a
    profile file is created anywhere.
    """

    def __init__(
        self,
        *,
        home: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Store the inputs used during :meth:`validate`.

        Parameters
        ----------
        home:
            Explicit home directory. Takes precedence over the environment.
        environ:
            Mapping consulted for ``HOME``. Defaults to :data:`os.environ`.
        """

        self._home = home
        self._environ = os.environ if environ is None else environ

    def validate(self) -> Path:
        """Return the absolute, existing, writable home directory.

        Raises
        ------
        HomeNotFound
            No home directory could be determined.
        InvalidPath
            The path holds NUL bytes or undecodable characters.
        ProfileDirNotFound
            The path does not exist or is not a directory.
        PermissionDenied
            The directory is not writable by the current user.
        """

        try:
            raw = self._resolve()
            text = _coerce(raw)
            path = Path(text).absolute()
            _require_directory(path)
            if not _is_writable(path):
                raise PermissionDenied(f"Unable to write to home directory {path}, cannot export env var")
        except (HomeNotFound, InvalidPath, ProfileDirNotFound, PermissionDenied) as exc:
            log_debug("home_guard_failed", shell=None, path=None, error=exc.kind)
            raise
        log_debug("home_validated", shell=None, path=str(path))
        return path

    def _resolve(self) -> str | Path:
        """Pick the explicit home, then ``$HOME``, then the platform default."""

        if self._home is not None and str(self._home):
            return self._home
        from_env = self._environ.get(HOME_VARIABLE)
        if from_env:
            return from_env
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise HomeNotFound("No home directory") from exc
        if str(home) in ("", "~"):
            raise HomeNotFound("No home directory")
        return home


def _coerce(raw: str | Path) -> str:
    """Return *raw* as a plain path string.

    Raises
    ------
    InvalidPath
        When *raw* contains NUL or cannot be encoded with the filesystem
        encoding (e.g. ``surrogateescape`` remnants of undecodable bytes).
    """

    text = os.fspath(raw)
    if "\x00" in text:
        raise InvalidPath("Failed to coerce home directory as a valid path (contains NUL)")
    try:
        text.encode(sys.getfilesystemencoding())
    except UnicodeEncodeError as exc:
        raise InvalidPath(f"Failed to coerce home directory as a valid path: {exc}") from exc
    return text


def _require_directory(path: Path) -> None:
    try:
        info = path.stat()
    except OSError as exc:
        raise ProfileDirNotFound(f"Home directory {path} was invalid, or was not found") from exc
    if not stat.S_ISDIR(info.st_mode):
        raise ProfileDirNotFound(f"Home directory {path} is not a directory")


def _is_writable(path: Path) -> bool:
    return os.access(path, os.W_OK)
