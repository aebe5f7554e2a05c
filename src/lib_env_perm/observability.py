"""Structured logging helpers for profile resolution and export writes.

Purpose
    Report which profile file was selected and what was written without
    forcing applications to adopt a logging backend. The package logger ships
    with a ``NullHandler`` so the library stays silent until a host
    application attaches handlers.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger.
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit entries carrying a
      structured ``context`` attribute.
    - ``make_event``: builds payloads keyed by ``shell`` and ``path``.

System Integration
    Adapters log candidate skips and guard failures at DEBUG; the locator and
    the composition root log the selected profile and written lines at INFO.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_env_perm_trace_id", default=None)
"""Identifier correlating one caller's operations across log records."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_env_perm")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the trace identifier attached to subsequent records.

    Examples
    --------
    >>> bind_trace_id('install-42')
    >>> TRACE_ID.get()
    'install-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug entry."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info entry."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error entry."""

    _emit(logging.ERROR, message, fields)


def make_event(
    shell: str | None,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a logging payload for a profile lifecycle event.

    Inputs
        shell: Shell kind value (``"zsh"``, ``"bash"``) or ``None`` before
            resolution.
        path: Profile or home path the event refers to.
        payload: Optional extra fields merged over the base keys.

    Examples
    --------
    >>> make_event('zsh', '/home/ada/.zprofile', {'role': 'profile'})
    {'shell': 'zsh', 'path': '/home/ada/.zprofile', 'role': 'profile'}
    """

    event: dict[str, Any] = {"shell": shell, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send an entry through the package logger with the trace context attached."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    _LOGGER.log(level, message, extra={"context": context})
