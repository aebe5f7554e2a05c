"""Export line formatting and writing.

Purpose
-------
Turn a variable name and value into the POSIX ``export`` line appended to a
profile, and push it through an already-open append handle. This is the thin
consumer of the locator's output; it never reads the profile.

Contents
--------
* :func:`validate_name` – rejects names that are not POSIX identifiers.
* :func:`format_set_line` / :func:`format_append_line` – render export lines.
* :func:`ensure_encodable` – rejects lines the profile encoding cannot hold.
* :func:`write_line` – write and flush, translating ``OSError``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Final

from ..domain.errors import InvalidVariableName, ProfileIOError

PROFILE_ENCODING: Final[str] = "utf-8"

_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def validate_name(name: str) -> str:
    """Return *name* unchanged when it is a valid shell variable name.

    Raises
    ------
    InvalidVariableName
        If *name* is empty or contains characters outside ``[A-Za-z0-9_]`` or
        starts with a digit.
    """

    if not isinstance(name, str) or _NAME_PATTERN.fullmatch(name) is None:
        raise InvalidVariableName(f"Not a valid environment variable name: {name!r}")
    return name


def format_set_line(name: str, value: object) -> str:
    """Render an unconditional assignment.

    Examples
    --------
    >>> format_set_line('DUMMY', 1)
    '\\nexport DUMMY=1\\n'
    """

    return f"\nexport {name}={value}\n"


def format_append_line(name: str, value: object) -> str:
    """Render a path-style prepend that keeps the current value.

    Examples
    --------
    >>> format_append_line('PATH', '/x/bin')
    '\\nexport PATH="/x/bin:$PATH"\\n'
    """

    return f'\nexport {name}="{value}:${name}"\n'


def ensure_encodable(line: str) -> str:
    """Return *line* unchanged when it can be written as ``PROFILE_ENCODING``.

    Runs before any profile is opened so an unencodable value (lone
    surrogates from undecodable bytes, for example) never creates a file.

    Raises
    ------
    ProfileIOError
        When *line* cannot be encoded; the ``UnicodeEncodeError`` is chained.
    """

    try:
        line.encode(PROFILE_ENCODING)
    except UnicodeEncodeError as exc:
        raise ProfileIOError(f"Export line cannot be encoded as {PROFILE_ENCODING}: {exc}") from exc
    return line


def write_line(handle: IO[str], line: str, path: Path) -> None:
    """Write *line* to *handle* and flush it.

    Raises
    ------
    ProfileIOError
        When the write or the flush fails (including encoding failures); the
        original error is chained.
    """

    try:
        handle.write(line)
        handle.flush()
    except (OSError, UnicodeError) as exc:
        raise ProfileIOError(f"Failed to write export to {path}: {exc}") from exc
