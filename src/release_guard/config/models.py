"""Pydantic models for release-guard configuration.

Configuration comes from two places:
- ``[tool.release-guard]`` in pyproject.toml (project-wide settings)
- Environment variables set by the CI workflow (per-run inputs)
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_guard.core.transitions import PrereleaseId


class ReleaseGuardConfig(BaseModel):
    """Project configuration from ``[tool.release-guard]``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    manifest: Path | None = Field(
        default=None,
        description="Manifest holding the current version. Autodetected when unset.",
    )
    output_key: str = Field(
        default="is-prerelease",
        min_length=1,
        description="Key written to the CI output file.",
    )
    default_prerelease_id: PrereleaseId = Field(
        default=PrereleaseId.NONE,
        description="Identifier used when PRERELEASE_ID is not supplied.",
    )

    @field_validator("output_key")
    @classmethod
    def _no_separator_in_key(cls, value: str) -> str:
        if "=" in value or "\n" in value:
            raise ValueError("output_key must not contain '=' or newlines")
        return value


class ReleaseInputs(BaseModel):
    """Per-run inputs supplied by the CI workflow.

    Values stay plain strings; they are checked against the allowed bump
    types and identifiers by the validation core.
    """

    model_config = ConfigDict(frozen=True)

    version_type: str | None = None
    prerelease_id: str | None = None
    github_output: Path | None = None

    @field_validator("version_type", "prerelease_id", "github_output", mode="before")
    @classmethod
    def _empty_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> ReleaseInputs:
        """Read ``VERSION``, ``PRERELEASE_ID`` and ``GITHUB_OUTPUT``."""
        return cls(
            version_type=environ.get("VERSION"),
            prerelease_id=environ.get("PRERELEASE_ID"),
            github_output=environ.get("GITHUB_OUTPUT"),
        )
