"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_workspace_root(fixtures_root: Path) -> Path:
    """Return the primary fixture workspace path (read-only)."""
    return fixtures_root / "workspaces" / "basic"


@pytest.fixture
def workspace(tmp_path: Path, basic_workspace_root: Path) -> Path:
    """Return a writable copy of the basic fixture workspace."""
    target = tmp_path / "skills"
    shutil.copytree(basic_workspace_root, target)
    return target


@pytest.fixture
def make_skill(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that lays out a skill directory under ``tmp_path``."""

    def _make(
        name: str,
        *,
        descriptor: str | None = None,
        metadata: str | None = None,
        content_dir: str = "rules",
        files: dict[str, str] | None = None,
    ) -> Path:
        skill_dir = tmp_path / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if descriptor is not None:
            (skill_dir / "SKILL.md").write_text(descriptor, encoding="utf-8")
        if metadata is not None:
            (skill_dir / "metadata.json").write_text(metadata, encoding="utf-8")
        if files is not None:
            folder = skill_dir / content_dir
            folder.mkdir(exist_ok=True)
            for filename, body in files.items():
                (folder / filename).write_text(body, encoding="utf-8")
        return skill_dir

    return _make
