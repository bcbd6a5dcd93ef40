"""Project manifest handling."""

from __future__ import annotations

from release_guard.project.manifest import find_manifest, get_manifest_version

__all__ = ["find_manifest", "get_manifest_version"]
