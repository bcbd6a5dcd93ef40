"""Load release-guard configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_guard.config.models import ReleaseGuardConfig
from release_guard.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_NAME = "release-guard"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or any of its parents.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_guard_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-guard]`` table, or an empty dict."""
    section = pyproject.get("tool", {}).get(TOOL_NAME, {})
    if not isinstance(section, dict):
        raise ConfigValidationError(f"[tool.{TOOL_NAME}] must be a table")
    return section


def load_config(path: Path | None = None) -> ReleaseGuardConfig:
    """Load configuration for the project at ``path``.

    A project without pyproject.toml, or without a ``[tool.release-guard]``
    table, gets the defaults. A relative ``manifest`` is resolved against the
    directory holding pyproject.toml.

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        return ReleaseGuardConfig()

    data = extract_release_guard_config(load_pyproject_toml(pyproject_path))

    try:
        config = ReleaseGuardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_NAME}] config: {e}") from e

    if config.manifest is not None and not config.manifest.is_absolute():
        config = config.model_copy(
            update={"manifest": pyproject_path.parent / config.manifest}
        )
    return config
