"""Public package surface for persisting environment variables in shell profiles.

``set_var``, ``append_var`` and ``check_or_set`` cover the common cases;
``locate_profile`` and ``preview_profile`` expose the profile resolution step
on its own. Logging stays silent until an application attaches a handler to
:func:`get_logger`.
"""

from __future__ import annotations

from .core import (
    CATALOG,
    CatalogInconsistency,
    EnvPermError,
    HomeNotFound,
    InvalidPath,
    InvalidVariableName,
    LocatedProfile,
    NoProfileFound,
    PermissionDenied,
    ProfileCandidate,
    ProfileDirNotFound,
    ProfileIOError,
    ProfilePreview,
    ProfileRole,
    ProfileWrite,
    ShellKind,
    ShellProfileEntry,
    UnsupportedShell,
    append_var,
    catalog,
    check_or_set,
    locate_profile,
    preview_profile,
    resolve_shell,
    set_var,
)
from .observability import bind_trace_id, get_logger

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
    "bind_trace_id",
    "catalog",
    "check_or_set",
    "get_logger",
    "locate_profile",
    "preview_profile",
    "resolve_shell",
    "set_var",
]
