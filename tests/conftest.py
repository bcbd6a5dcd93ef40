"""Shared fixtures for release-guard tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

CI_ENV_VARS = ("VERSION", "PRERELEASE_ID", "GITHUB_OUTPUT")


@pytest.fixture(autouse=True)
def clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's own CI variables out of the tests."""
    for name in CI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_json_project(tmp_path: Path) -> Path:
    """Create a project directory with a package.json manifest."""
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "test-project", "version": "1.2.0-alpha.0"}, indent=2)
    )
    return tmp_path


@pytest.fixture
def pyproject_project(tmp_path: Path) -> Path:
    """Create a project directory with a pyproject.toml manifest."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "2.0.0-beta.1"
dependencies = [
    "rich>=13",
]

[tool.release-guard]
output_key = "next-is-prerelease"
"""
    )
    return tmp_path
