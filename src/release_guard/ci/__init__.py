"""CI integration for release-guard."""

from __future__ import annotations

from release_guard.ci.output import format_output_line, write_output

__all__ = ["format_output_line", "write_output"]
