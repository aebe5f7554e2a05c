from __future__ import annotations

from lib_env_perm.domain.errors import (
    CatalogInconsistency,
    EnvPermError,
    HomeNotFound,
    InvalidPath,
    InvalidVariableName,
    NoProfileFound,
    PermissionDenied,
    ProfileDirNotFound,
    ProfileIOError,
    UnsupportedShell,
)

ALL_ERRORS = (
    HomeNotFound,
    InvalidPath,
    ProfileDirNotFound,
    PermissionDenied,
    UnsupportedShell,
    NoProfileFound,
    ProfileIOError,
    InvalidVariableName,
    CatalogInconsistency,
)


def test_error_hierarchy() -> None:
    for error_cls in ALL_ERRORS:
        assert issubclass(error_cls, EnvPermError)
        assert isinstance(error_cls("boom"), EnvPermError)


def test_error_kinds_are_unique_and_stable() -> None:
    kinds = [error_cls.kind for error_cls in ALL_ERRORS]
    assert len(set(kinds)) == len(kinds)
    assert UnsupportedShell.kind == "unsupported_shell"
    assert PermissionDenied.kind == "permission_denied"
    assert ProfileIOError.kind == "io"


def test_message_mirrors_str() -> None:
    error = NoProfileFound("No shell profiles were found")
    assert error.message == "No shell profiles were found"
