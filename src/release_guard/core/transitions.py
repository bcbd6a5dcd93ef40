"""Transition rules for a requested version bump.

A bump request (bump type plus prerelease identifier) is checked against the
classification of the currently published version. Rules run in a fixed
order and the first violation is reported:

1. Starting a prerelease track needs a real identifier (alpha, beta, rc).
2. "prerelease" cannot be requested on a stable version.
3. A prerelease is locked to its track: it may finish the track, restart it,
   or escalate to a coarser granularity.
4. Within a track the identifier only moves forward
   (alpha -> beta -> rc -> stable).

Failures are returned as :class:`Rejected` values, never raised.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Literal, TypeVar

from release_guard.core.result import Err, Ok, Result
from release_guard.core.track import Classification, Track, classify
from release_guard.core.version import parse_version
from release_guard.exceptions import (
    InvalidInputError,
    MalformedVersionError,
    RuleViolationError,
)


C = TypeVar("C", bound=StrEnum)


class VersionType(StrEnum):
    """Requested bump type, as understood by the external bump tool."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    @property
    def starts_track(self) -> bool:
        """True for the bump types that seed a new prerelease track."""
        return self in PRERELEASE_INIT_TYPES

    @property
    def yields_prerelease(self) -> bool:
        """True if the bumped version will carry a prerelease tag."""
        return self in PRERELEASE_INIT_TYPES or self is VersionType.PRERELEASE


class PrereleaseId(StrEnum):
    """Requested prerelease identifier; ``none`` means graduate to stable."""

    ALPHA = "alpha"
    BETA = "beta"
    RC = "rc"
    NONE = "none"

    @property
    def weight(self) -> int:
        return PRERELEASE_ID_WEIGHT[self]


class RuleId(StrEnum):
    """Identifies why a request was rejected."""

    INVALID_INPUT = "invalid-input"
    MALFORMED_VERSION = "malformed-version"
    TRACK_INITIATION = "rule-1"
    STABLE_PRERELEASE = "rule-2"
    TRACK_LOCK_IN = "rule-3"
    FORWARD_ONLY = "rule-4"


PRERELEASE_INIT_TYPES: frozenset[VersionType] = frozenset(
    {VersionType.PREMAJOR, VersionType.PREMINOR, VersionType.PREPATCH}
)

PRERELEASE_ID_WEIGHT: Mapping[PrereleaseId, int] = MappingProxyType(
    {
        PrereleaseId.ALPHA: 0,
        PrereleaseId.BETA: 1,
        PrereleaseId.RC: 2,
        PrereleaseId.NONE: 3,
    }
)

# Bump types a prerelease may request, per track. Ordered for messages.
TRACK_ALLOWED_TYPES: Mapping[Track, tuple[VersionType, ...]] = MappingProxyType(
    {
        Track.PREMAJOR: (VersionType.PRERELEASE, VersionType.MAJOR),
        Track.PREMINOR: (
            VersionType.PRERELEASE,
            VersionType.MINOR,
            VersionType.PREMAJOR,
        ),
        Track.PREPATCH: (
            VersionType.PRERELEASE,
            VersionType.PATCH,
            VersionType.PREMINOR,
            VersionType.PREMAJOR,
        ),
    }
)


def _parse_choice(
    enum_cls: type[C], value: str, name: str
) -> Result[C, InvalidInputError]:
    try:
        return Ok(enum_cls(value))
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        return Err(
            InvalidInputError(
                f'Invalid {name} "{value}". Must be one of: {allowed}.',
                name=name,
                value=value,
            )
        )


@dataclass(frozen=True, slots=True)
class BumpRequest:
    """A validated bump request."""

    version_type: VersionType
    prerelease_id: PrereleaseId = PrereleaseId.NONE

    @classmethod
    def from_strings(
        cls, version_type: str, prerelease_id: str
    ) -> Result[BumpRequest, InvalidInputError]:
        """Build a request from raw strings, checking both enumerations.

        The bump type is checked first.
        """
        parsed_type = _parse_choice(VersionType, version_type, "version")
        if isinstance(parsed_type, Err):
            return parsed_type
        parsed_id = _parse_choice(PrereleaseId, prerelease_id, "prerelease-id")
        if isinstance(parsed_id, Err):
            return parsed_id
        return Ok(cls(parsed_type.value, parsed_id.value))


@dataclass(frozen=True, slots=True)
class Approved:
    """The request passed every rule."""

    next_is_prerelease: bool

    @property
    def approved(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """The request failed; ``rule`` names the first failed check."""

    rule: RuleId
    message: str

    @property
    def approved(self) -> Literal[False]:
        return False

    @classmethod
    def from_error(
        cls, error: InvalidInputError | MalformedVersionError | RuleViolationError
    ) -> Rejected:
        if isinstance(error, InvalidInputError):
            rule = RuleId.INVALID_INPUT
        elif isinstance(error, MalformedVersionError):
            rule = RuleId.MALFORMED_VERSION
        else:
            rule = RuleId(error.rule)
        return cls(rule=rule, message=str(error))


Outcome = Approved | Rejected


# Rules. Each returns the violation, or None when the rule holds.

Rule = Callable[[BumpRequest, Classification], RuleViolationError | None]


def check_track_initiation(
    request: BumpRequest, current: Classification
) -> RuleViolationError | None:
    if request.version_type.starts_track and request.prerelease_id is PrereleaseId.NONE:
        return RuleViolationError(
            f'Starting a new prerelease track ("{request.version_type}") requires an '
            'explicit prerelease-id (alpha, beta or rc); "none" is not allowed here.',
            rule=RuleId.TRACK_INITIATION,
        )
    return None


def check_stable_prerelease(
    request: BumpRequest, current: Classification
) -> RuleViolationError | None:
    if not current.is_prerelease and request.version_type is VersionType.PRERELEASE:
        return RuleViolationError(
            f'Cannot use version "prerelease" when the current version ({current}) '
            "is not already a prerelease.",
            rule=RuleId.STABLE_PRERELEASE,
        )
    return None


def check_track_lock_in(
    request: BumpRequest, current: Classification
) -> RuleViolationError | None:
    if not current.is_prerelease:
        return None
    allowed = TRACK_ALLOWED_TYPES[current.track]
    if request.version_type not in allowed:
        return RuleViolationError(
            f"Current version ({current}) is on the {current.track} track. "
            f"Next version must be one of: {', '.join(allowed)}, "
            f'got "{request.version_type}".',
            rule=RuleId.TRACK_LOCK_IN,
        )
    return None


def check_forward_only(
    request: BumpRequest, current: Classification
) -> RuleViolationError | None:
    if request.version_type is not VersionType.PRERELEASE or not current.is_prerelease:
        return None
    # Graduation to stable is allowed from any identifier
    if request.prerelease_id is PrereleaseId.NONE:
        return None
    # Unknown identifiers (e.g. "dev") have no place in the ordering
    if current.prerelease_id not in PRERELEASE_ID_WEIGHT:
        return None

    current_id = PrereleaseId(current.prerelease_id)
    if request.prerelease_id.weight < current_id.weight:
        return RuleViolationError(
            f'Cannot move prerelease identifier from "{current_id}" to '
            f'"{request.prerelease_id}". Identifier progression is: '
            "alpha -> beta -> rc -> (stable).",
            rule=RuleId.FORWARD_ONLY,
        )
    return None


RULES: tuple[Rule, ...] = (
    check_track_initiation,
    check_stable_prerelease,
    check_track_lock_in,
    check_forward_only,
)


def validate(request: BumpRequest, current: Classification) -> Outcome:
    """Run the transition rules in order; the first violation wins."""
    for rule in RULES:
        violation = rule(request, current)
        if violation is not None:
            return Rejected.from_error(violation)
    return Approved(next_is_prerelease=request.version_type.yields_prerelease)


def validate_transition(
    version_type: str, prerelease_id: str, current_version: str
) -> Outcome:
    """Check a requested bump against the current version.

    Args:
        version_type: Requested bump type (e.g. "minor", "prerelease")
        prerelease_id: Requested identifier ("alpha", "beta", "rc" or "none")
        current_version: Currently published SemVer string

    Returns:
        ``Approved`` with the next-is-prerelease flag, or ``Rejected`` with
        the first failed check. Bad input is reported before a bad version.
    """
    request = BumpRequest.from_strings(version_type, prerelease_id)
    if isinstance(request, Err):
        return Rejected.from_error(request.error)

    parsed = parse_version(current_version)
    if isinstance(parsed, Err):
        return Rejected.from_error(parsed.error)

    return validate(request.value, classify(parsed.value, source=current_version))
