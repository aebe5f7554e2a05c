"""Shell identity adapter.

Purpose
-------
Turn the raw ``SHELL`` value into a recognised
:class:`~lib_env_perm.domain.shells.ShellKind`. An empty, missing, or unknown
value is a hard error: guessing a shell would write into the wrong startup
file.

Contents
--------
* :func:`resolve_shell` – pure mapping used by the locator.
* :class:`DefaultShellResolver` – reads the identifier from an environment
  mapping (``os.environ`` by default).
"""

from __future__ import annotations

import os
from typing import Mapping

from ...domain.errors import UnsupportedShell
from ...domain.shells import ShellKind
from ...observability import log_debug

SHELL_VARIABLE = "SHELL"


def resolve_shell(identifier: str | None) -> ShellKind:
    """Return the :class:`ShellKind` named by *identifier*.

    Parameters
    ----------
    identifier:
        Path-like shell value such as ``/bin/zsh``. Only the last segment is
        inspected, case-insensitively.

    Raises
    ------
    UnsupportedShell
        When *identifier* is ``None``, empty, or names an unknown shell.

    Examples
    --------
    >>> resolve_shell('/usr/local/bin/zsh')
    <ShellKind.ZSH: 'zsh'>
    >>> resolve_shell('/usr/bin/fish')
    Traceback (most recent call last):
    ...
    lib_env_perm.domain.errors.UnsupportedShell: Unsupported shell '/usr/bin/fish' (expected one of: zsh, bash)
    """

    kind = ShellKind.from_identifier(identifier)
    if kind is ShellKind.UNRECOGNIZED:
        log_debug("shell_unsupported", shell=None, path=None, identifier=identifier)
        if not identifier:
            raise UnsupportedShell(f"{SHELL_VARIABLE} environment variable is not set")
        raise UnsupportedShell(f"Unsupported shell {identifier!r} (expected one of: {_supported()})")
    return kind


def _supported() -> str:
    return ", ".join(kind.value for kind in ShellKind if kind is not ShellKind.UNRECOGNIZED)


class DefaultShellResolver:
    """Resolve the active shell from an environment mapping."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Store the environment to read ``SHELL`` from.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ = os.environ if environ is None else environ

    @property
    def identifier(self) -> str | None:
        """Raw ``SHELL`` value, or ``None`` when the variable is unset."""

        return self._environ.get(SHELL_VARIABLE)

    def resolve(self) -> ShellKind:
        """Resolve :attr:`identifier` via :func:`resolve_shell`."""

        return resolve_shell(self.identifier)
