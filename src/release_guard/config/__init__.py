"""Configuration management for release-guard."""

from __future__ import annotations

from release_guard.config.loader import load_config
from release_guard.config.models import ReleaseGuardConfig, ReleaseInputs

__all__ = [
    "ReleaseGuardConfig",
    "ReleaseInputs",
    "load_config",
]
