"""Read the currently published version from a project manifest.

Two manifest formats are supported:
- package.json (``"version"`` field)
- pyproject.toml (``[project].version`` or ``[tool.poetry].version``)

The version string is returned as-is; checking it is the job of the
validation core.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from release_guard.config.loader import load_pyproject_toml
from release_guard.exceptions import (
    ConfigError,
    ManifestNotFoundError,
    ProjectError,
    VersionNotFoundError,
)

MANIFEST_NAMES = ("package.json", "pyproject.toml")


def find_manifest(start: Path | None = None) -> Path:
    """Find the nearest manifest in ``start`` or any of its parents.

    In each directory package.json is preferred over pyproject.toml.

    Raises:
        ManifestNotFoundError: If no manifest is found
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        for name in MANIFEST_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate

    raise ManifestNotFoundError(
        f"No {' or '.join(MANIFEST_NAMES)} found in {current} or its parents"
    )


def get_manifest_version(path: Path | None = None) -> str:
    """Get the current version from a manifest.

    Args:
        path: Manifest file, or directory to search from (defaults to cwd)

    Returns:
        Version string

    Raises:
        ManifestNotFoundError: If the manifest cannot be found
        VersionNotFoundError: If the manifest has no usable version
        ProjectError: If the manifest cannot be parsed
    """
    if path is None or path.is_dir():
        manifest_path = find_manifest(path)
    elif path.is_file():
        manifest_path = path
    else:
        raise ManifestNotFoundError(f"Manifest not found: {path}")

    if manifest_path.name == "package.json" or manifest_path.suffix == ".json":
        return _get_package_json_version(manifest_path)
    return _get_pyproject_version(manifest_path)


def _get_package_json_version(manifest_path: Path) -> str:
    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectError(f"Could not read {manifest_path}: {e}") from e

    try:
        manifest = json.loads(content)
    except json.JSONDecodeError as e:
        raise ProjectError(f"Invalid JSON in {manifest_path}: {e}") from e

    version = manifest.get("version") if isinstance(manifest, dict) else None
    if not version or not isinstance(version, str):
        raise VersionNotFoundError(
            f'Could not read a valid "version" field from {manifest_path}.'
        )
    return version


def _get_pyproject_version(manifest_path: Path) -> str:
    try:
        data = load_pyproject_toml(manifest_path)
    except ConfigError as e:
        raise ProjectError(str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectError(f"Could not read {manifest_path}: {e}") from e

    # PEP 621 format first, then Poetry
    for version in (
        _get_table(data, "project").get("version"),
        _get_table(_get_table(data, "tool"), "poetry").get("version"),
    ):
        if version and isinstance(version, str):
            return version

    raise VersionNotFoundError(
        f"Could not find version in {manifest_path}. "
        "Expected [project].version or [tool.poetry].version."
    )


def _get_table(data: dict[str, Any], key: str) -> dict[str, Any]:
    table = data.get(key)
    return table if isinstance(table, dict) else {}
