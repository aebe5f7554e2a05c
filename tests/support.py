"""Shared sandbox factory for profile resolution tests.

Each sandbox owns a throwaway home directory plus the ``HOME``/``SHELL``
environment that points at it, so tests never touch the real profile files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest


@dataclass
class ProfileSandbox:
    """Temporary home directory wired to a specific shell."""

    home: Path
    shell: str
    env: dict[str, str] = field(default_factory=dict)

    def write(self, filename: str, content: str = "") -> Path:
        """Create ``home/filename`` with *content* and return its path."""

        path = self.home / filename
        path.write_text(content, encoding="utf-8")
        return path

    def read(self, filename: str) -> str:
        return (self.home / filename).read_text(encoding="utf-8")

    def exists(self, filename: str) -> bool:
        return (self.home / filename).exists()

    def listing(self) -> list[str]:
        """Return the sorted names present in the home directory."""

        return sorted(path.name for path in self.home.iterdir())

    def apply_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Export the sandbox variables into ``os.environ`` for the test duration."""

        for key, value in self.env.items():
            monkeypatch.setenv(key, value)


def create_profile_sandbox(tmp_path: Path, *, shell: str = "/bin/zsh") -> ProfileSandbox:
    """Build a :class:`ProfileSandbox` rooted under *tmp_path*."""

    home = tmp_path / "home"
    home.mkdir(parents=True, exist_ok=True)
    env = {"HOME": str(home), "SHELL": shell}
    return ProfileSandbox(home=home, shell=shell, env=env)
