"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the composition root depends on so the guard,
the shell resolver, and the locator can be swapped (for tests or other
platforms) without touching :mod:`lib_env_perm.core`.

Contents
--------
* :class:`LocatedProfile` – an open append handle plus what was selected.
* :class:`ProfilePreview` – which profile a write would target.
* :class:`HomeGuard` – produces a validated, writable home directory.
* :class:`ShellResolver` – maps the active shell to a :class:`ShellKind`.
* :class:`ProfileLocator` – opens the profile that should receive a write.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from ..domain.shells import ProfileRole, ShellKind


@dataclass(frozen=True, slots=True)
class LocatedProfile:
    """An open, append-mode profile handle and the facts behind its selection.

    The handle belongs to the caller; the object doubles as a context manager
    that closes it.

    Attributes
    ----------
    path:
        Selected profile file.
    shell / role:
        Resolved shell and the catalog role of :attr:`path`.
    created:
        ``True`` when the file did not exist before it was opened.
    handle:
        Text handle positioned at end-of-file.
    """

    path: Path
    shell: ShellKind
    role: ProfileRole
    created: bool
    handle: IO[str]

    def __enter__(self) -> LocatedProfile:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.handle.close()


@dataclass(frozen=True, slots=True)
class ProfilePreview:
    """Which profile a write would target; ``exists`` is ``False`` when it would be created."""

    path: Path
    shell: ShellKind
    role: ProfileRole
    exists: bool


@runtime_checkable
class HomeGuard(Protocol):
    """Validate the home directory before any profile is touched.

    Why
    ----
    The guard runs first so permission problems surface before shell
    resolution or file opening.
    """

    def validate(self) -> Path:
        """Return the absolute home path or raise a guard error."""


@runtime_checkable
class ShellResolver(Protocol):
    """Identify the user's shell."""

    @property
    def identifier(self) -> str | None:
        """Raw shell identifier (typically ``$SHELL``)."""

    def resolve(self) -> ShellKind:
        """Return a recognised :class:`ShellKind` or raise ``UnsupportedShell``."""


@runtime_checkable
class ProfileLocator(Protocol):
    """Select the startup file that receives an export line."""

    def locate(self, home: Path, shell: ShellKind) -> LocatedProfile:
        """Open the selected profile for appending."""

    def preview(self, home: Path, shell: ShellKind) -> ProfilePreview:
        """Report which profile :meth:`locate` would select without opening it."""
