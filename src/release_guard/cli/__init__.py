"""Command-line interface for release-guard."""

from __future__ import annotations

from release_guard.cli.main import app

__all__ = ["app"]
