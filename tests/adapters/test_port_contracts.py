"""Adapter contract tests for the default ports implementation."""

from __future__ import annotations

from pathlib import Path

from lib_env_perm.adapters.home.default import DefaultHomeGuard
from lib_env_perm.adapters.profile.default import DefaultProfileLocator
from lib_env_perm.adapters.shell.default import DefaultShellResolver
from lib_env_perm.application import ports
from lib_env_perm.domain.shells import ShellKind


def test_default_home_guard_contract(tmp_path: Path) -> None:
    guard = DefaultHomeGuard(home=tmp_path)
    assert isinstance(guard, ports.HomeGuard)
    assert guard.validate().is_dir()


def test_default_shell_resolver_contract() -> None:
    resolver = DefaultShellResolver(environ={"SHELL": "/bin/zsh"})
    assert isinstance(resolver, ports.ShellResolver)
    assert resolver.resolve() is ShellKind.ZSH


def test_default_profile_locator_contract(tmp_path: Path) -> None:
    locator = DefaultProfileLocator()
    assert isinstance(locator, ports.ProfileLocator)
    with locator.locate(tmp_path, ShellKind.BASH) as located:
        assert located.path.parent == tmp_path
