"""release-guard: validate semantic-version transitions before a release."""

from __future__ import annotations

from release_guard.core import Approved, Outcome, Rejected, validate_transition

__version__ = "0.1.0"

__all__ = ["Approved", "Outcome", "Rejected", "__version__", "validate_transition"]
