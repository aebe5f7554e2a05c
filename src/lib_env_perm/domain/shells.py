"""Shell identity and profile role value objects.

Purpose
-------
Model the closed vocabulary the resolution algorithm works with: which shells
are recognised, which roles a startup file can play, and the ordered
candidates derived from a catalog entry. The module performs no I/O.

Contents
--------
* :class:`ShellKind` – recognised shells plus the terminal ``UNRECOGNIZED``.
* :class:`ProfileRole` – the three startup file roles in priority order.
* :class:`ProfileCandidate` – ``(role, filename, creatable)`` walked by the
  locator.
* :class:`ShellProfileEntry` – immutable catalog record for one shell.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class ShellKind(Enum):
    """Closed set of shells whose startup files we know how to target."""

    ZSH = "zsh"
    BASH = "bash"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_identifier(cls, identifier: str | None) -> ShellKind:
        """Map a raw ``SHELL`` value to a :class:`ShellKind`.

        Only the final path segment matters and matching ignores case.

        Examples
        --------
        >>> ShellKind.from_identifier('/usr/local/bin/zsh')
        <ShellKind.ZSH: 'zsh'>
        >>> ShellKind.from_identifier('/bin/BASH')
        <ShellKind.BASH: 'bash'>
        >>> ShellKind.from_identifier('/usr/bin/fish')
        <ShellKind.UNRECOGNIZED: 'unrecognized'>
        """

        if not identifier:
            return cls.UNRECOGNIZED
        name = identifier.rsplit("/", 1)[-1].upper()
        return _BY_NAME.get(name, cls.UNRECOGNIZED)


_BY_NAME: Mapping[str, ShellKind] = MappingProxyType({"ZSH": ShellKind.ZSH, "BASH": ShellKind.BASH})


class ProfileRole(Enum):
    """Purpose a startup file serves; declaration order is the search priority."""

    PROFILE = "profile"
    LOGIN = "login"
    SHELL_RC = "shellrc"

    @classmethod
    def ordered(cls) -> tuple[ProfileRole, ...]:
        """Return roles in the order the locator must try them."""

        return tuple(cls)

    @property
    def creatable(self) -> bool:
        """Only the ``PROFILE`` role may be created when it is missing."""

        return self is ProfileRole.PROFILE


@dataclass(frozen=True, slots=True)
class ProfileCandidate:
    """One file the locator may select."""

    role: ProfileRole
    filename: str
    creatable: bool


@dataclass(frozen=True, slots=True)
class ShellProfileEntry:
    """Immutable catalog record binding a shell to its startup files.

    Why
    ----
    Keeps the shell → files table declarative so new shells can be added
    without touching the search loop.

    Attributes
    ----------
    shell:
        Recognised shell this entry belongs to.
    files:
        Read-only mapping from :class:`ProfileRole` to a home-relative filename.
    """

    shell: ShellKind
    files: Mapping[ProfileRole, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))

    def candidates(self) -> Iterator[ProfileCandidate]:
        """Yield candidates in role priority order, skipping blank filenames.

        Examples
        --------
        >>> entry = ShellProfileEntry(ShellKind.ZSH, {ProfileRole.SHELL_RC: '.zshrc', ProfileRole.PROFILE: '.zprofile'})
        >>> [(c.filename, c.creatable) for c in entry.candidates()]
        [('.zprofile', True), ('.zshrc', False)]
        """

        for role in ProfileRole.ordered():
            filename = self.files.get(role)
            if filename:
                yield ProfileCandidate(role=role, filename=filename, creatable=role.creatable)
