"""Core business logic for release-guard.

This module contains the validation pipeline, strictly layered:
- Version parsing (SemVer core and prerelease segments)
- Track classification (premajor/preminor/prepatch)
- Transition rules for a requested bump
"""

from __future__ import annotations

from release_guard.core.result import Err, Ok, Result
from release_guard.core.track import Classification, Track, classify
from release_guard.core.transitions import (
    Approved,
    BumpRequest,
    Outcome,
    PrereleaseId,
    Rejected,
    RuleId,
    VersionType,
    validate,
    validate_transition,
)
from release_guard.core.version import MAX_SAFE_INTEGER, ParsedVersion, parse_version

__all__ = [
    # Transitions
    "Approved",
    "BumpRequest",
    # Track
    "Classification",
    # Result
    "Err",
    # Version
    "MAX_SAFE_INTEGER",
    "Ok",
    "Outcome",
    "ParsedVersion",
    "PrereleaseId",
    "Rejected",
    "Result",
    "RuleId",
    "Track",
    "VersionType",
    "classify",
    "parse_version",
    "validate",
    "validate_transition",
]
