"""Static registry of shell startup files.

Purpose
-------
Map every recognised :class:`~lib_env_perm.domain.shells.ShellKind` to its
candidate profile files. The table is built once at import time and exposed
read-only; the locator only ever reads it.

Contents
--------
* :data:`CATALOG` – ``ShellKind`` → :class:`ShellProfileEntry`.
* :func:`catalog` – lookup helper returning ``None`` for unknown shells.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from .shells import ProfileRole, ShellKind, ShellProfileEntry

CATALOG: Final[Mapping[ShellKind, ShellProfileEntry]] = MappingProxyType(
    {
        ShellKind.ZSH: ShellProfileEntry(
            shell=ShellKind.ZSH,
            files={
                ProfileRole.PROFILE: ".zprofile",
                ProfileRole.LOGIN: ".zlogin",
                ProfileRole.SHELL_RC: ".zshrc",
            },
        ),
        ShellKind.BASH: ShellProfileEntry(
            shell=ShellKind.BASH,
            files={
                ProfileRole.PROFILE: ".bash_profile",
                ProfileRole.LOGIN: ".bash_login",
                ProfileRole.SHELL_RC: ".bashrc",
            },
        ),
    }
)
"""Process-wide, immutable shell → startup file table."""


def catalog(
    shell: ShellKind,
    table: Mapping[ShellKind, ShellProfileEntry] = CATALOG,
) -> ShellProfileEntry | None:
    """Return the catalog entry for *shell* or ``None`` when it has none.

    Examples
    --------
    >>> catalog(ShellKind.BASH).files[ProfileRole.SHELL_RC]
    '.bashrc'
    >>> catalog(ShellKind.UNRECOGNIZED) is None
    True
    """

    return table.get(shell)
