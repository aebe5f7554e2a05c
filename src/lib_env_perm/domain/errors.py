"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by adapters, the composition root, and
consuming applications. Every failure along the guard → resolve → locate →
write pipeline surfaces as one of these types so callers have a single failure
channel carrying both a machine-readable ``kind`` and a human-readable message.

Contents
--------
* :class:`EnvPermError` – umbrella base class.
* :class:`HomeNotFound` / :class:`InvalidPath` / :class:`ProfileDirNotFound` /
  :class:`PermissionDenied` – raised by the home directory guard.
* :class:`UnsupportedShell` – the ``SHELL`` value is empty or unknown.
* :class:`NoProfileFound` – no candidate profile file could be opened.
* :class:`ProfileIOError` – write or flush failures on the selected profile.
* :class:`InvalidVariableName` – the target name is not a POSIX identifier.
* :class:`CatalogInconsistency` – a recognised shell has no catalog entry.

System Role
-----------
None of these errors is retried internally. The CLI relies on
``lib_cli_exit_tools`` to turn them into exit codes.
"""

from __future__ import annotations

from typing import ClassVar


class EnvPermError(Exception):
    """Base type for all exceptions emitted by ``lib_env_perm``.

    Why
    ----
    Provide a single catch-all type for consumers that only want to abort or
    prompt the user.

    What
    ----
    Subclasses override :attr:`kind` so handlers can branch without
    ``isinstance`` ladders.
    """

    kind: ClassVar[str] = "error"

    @property
    def message(self) -> str:
        """Return the human-readable message passed at construction time."""

        return str(self)


class HomeNotFound(EnvPermError):
    """The platform could not determine a home directory."""

    kind = "home_not_found"


class InvalidPath(EnvPermError):
    """The home directory cannot be represented as a plain path string."""

    kind = "invalid_path"


class ProfileDirNotFound(EnvPermError):
    """The home directory does not exist (or is not a directory)."""

    kind = "profile_dir_not_found"


class PermissionDenied(EnvPermError):
    """The home directory is not writable so no export can be persisted."""

    kind = "permission_denied"


class UnsupportedShell(EnvPermError):
    """Raised when the shell identifier is absent, empty, or not in the catalog.

    Why
    ----
    Writing into the profile of a guessed shell would corrupt unrelated shell
    state, so there is deliberately no default.
    """

    kind = "unsupported_shell"


class NoProfileFound(EnvPermError):
    """Every candidate profile file failed to open."""

    kind = "no_profile_found"


class ProfileIOError(EnvPermError):
    """Writing or flushing the export line failed.

    The originating :class:`OSError` is always chained as ``__cause__``.
    """

    kind = "io"


class InvalidVariableName(EnvPermError):
    """The variable name cannot appear on the left side of ``export``."""

    kind = "invalid_variable_name"


class CatalogInconsistency(EnvPermError):
    """A recognised :class:`~lib_env_perm.domain.shells.ShellKind` has no catalog entry."""

    kind = "internal"
