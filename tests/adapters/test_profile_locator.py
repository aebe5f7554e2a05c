"""Profile locator tests: candidate order, creation policy, and append-only opens."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

import pytest

from lib_env_perm.adapters.profile.default import DefaultProfileLocator
from lib_env_perm.domain.catalog import CATALOG
from lib_env_perm.domain.errors import CatalogInconsistency, NoProfileFound, UnsupportedShell
from lib_env_perm.domain.shells import ProfileRole, ShellKind, ShellProfileEntry
from tests.support import ProfileSandbox, create_profile_sandbox


@pytest.fixture()
def sandbox(tmp_path: Path) -> ProfileSandbox:
    return create_profile_sandbox(tmp_path, shell="/bin/zsh")


def test_only_shellrc_present_selects_it_without_creating_profile(sandbox: ProfileSandbox) -> None:
    sandbox.write(".zshrc", "# rc\n")
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        assert located.path == sandbox.home / ".zshrc"
        assert located.role is ProfileRole.SHELL_RC
        assert located.created is False
    assert not sandbox.exists(".zprofile")
    assert sandbox.listing() == [".zshrc"]


def test_empty_home_creates_profile(sandbox: ProfileSandbox) -> None:
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        assert located.path == sandbox.home / ".zprofile"
        assert located.role is ProfileRole.PROFILE
        assert located.created is True
    assert sandbox.listing() == [".zprofile"]


def test_login_preferred_over_shellrc(sandbox: ProfileSandbox) -> None:
    sandbox.write(".zlogin")
    sandbox.write(".zshrc")
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        assert located.role is ProfileRole.LOGIN
    assert not sandbox.exists(".zprofile")


def test_existing_profile_wins(sandbox: ProfileSandbox) -> None:
    sandbox.write(".zprofile", "existing\n")
    sandbox.write(".zlogin")
    sandbox.write(".zshrc")
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        assert located.role is ProfileRole.PROFILE
        assert located.created is False


def test_bash_candidates(tmp_path: Path) -> None:
    sandbox = create_profile_sandbox(tmp_path, shell="/usr/local/bin/bash")
    sandbox.write(".bashrc")
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.BASH) as located:
        assert located.path.name == ".bashrc"
        assert located.shell is ShellKind.BASH


def test_handle_appends_without_truncating(sandbox: ProfileSandbox) -> None:
    sandbox.write(".zshrc", "original\n")
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        located.handle.write("added\n")
    assert sandbox.read(".zshrc") == "original\nadded\n"


def test_context_manager_closes_handle(sandbox: ProfileSandbox) -> None:
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        pass
    assert located.handle.closed


def test_unrecognized_shell_opens_nothing(sandbox: ProfileSandbox) -> None:
    with pytest.raises(UnsupportedShell):
        DefaultProfileLocator().locate(sandbox.home, ShellKind.UNRECOGNIZED)
    with pytest.raises(UnsupportedShell):
        DefaultProfileLocator().preview(sandbox.home, ShellKind.UNRECOGNIZED)
    assert sandbox.listing() == []


def test_unreadable_candidates_are_skipped(sandbox: ProfileSandbox) -> None:
    (sandbox.home / ".zprofile").mkdir()
    sandbox.write(".zshrc")
    with DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH) as located:
        assert located.role is ProfileRole.SHELL_RC


def test_no_profile_found_when_nothing_opens(sandbox: ProfileSandbox) -> None:
    (sandbox.home / ".zprofile").mkdir()
    with pytest.raises(NoProfileFound):
        DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH)


def test_no_profile_found_is_logged_as_error(sandbox: ProfileSandbox, caplog: pytest.LogCaptureFixture) -> None:
    (sandbox.home / ".zprofile").mkdir()
    caplog.set_level("DEBUG", logger="lib_env_perm")
    with pytest.raises(NoProfileFound):
        DefaultProfileLocator().locate(sandbox.home, ShellKind.ZSH)
    errors = [record for record in caplog.records if record.levelname == "ERROR"]
    assert [record.getMessage() for record in errors] == ["profile_not_found"]
    assert getattr(errors[0], "context")["shell"] == "zsh"
    assert getattr(errors[0], "context")["path"] == str(sandbox.home)


def test_missing_catalog_entry_is_an_internal_error(sandbox: ProfileSandbox) -> None:
    partial = MappingProxyType({ShellKind.BASH: CATALOG[ShellKind.BASH]})
    with pytest.raises(CatalogInconsistency):
        DefaultProfileLocator(catalog=partial).locate(sandbox.home, ShellKind.ZSH)


def test_catalog_can_be_extended_without_changing_the_locator(sandbox: ProfileSandbox) -> None:
    custom = MappingProxyType(
        {ShellKind.ZSH: ShellProfileEntry(ShellKind.ZSH, {ProfileRole.PROFILE: ".zenv"})}
    )
    with DefaultProfileLocator(catalog=custom).locate(sandbox.home, ShellKind.ZSH) as located:
        assert located.path.name == ".zenv"


def test_preview_reports_first_existing(sandbox: ProfileSandbox) -> None:
    sandbox.write(".zlogin")
    preview = DefaultProfileLocator().preview(sandbox.home, ShellKind.ZSH)
    assert preview.role is ProfileRole.LOGIN
    assert preview.exists is True


def test_preview_reports_creation_without_creating(sandbox: ProfileSandbox) -> None:
    preview = DefaultProfileLocator().preview(sandbox.home, ShellKind.ZSH)
    assert preview.path == sandbox.home / ".zprofile"
    assert preview.exists is False
    assert sandbox.listing() == []
