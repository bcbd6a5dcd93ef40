"""SemVer parsing for the currently published version.

Only the parts needed to judge a bump are kept: the three core numbers and
the raw prerelease segments. Build metadata is dropped. The grammar is
checked by hand rather than with a regex so that each failure can name the
offending segment.
"""

from __future__ import annotations

from dataclasses import dataclass

from release_guard.core.result import Err, Ok, Result
from release_guard.exceptions import MalformedVersionError

# Largest integer a JSON/JavaScript consumer of the manifest can represent
MAX_SAFE_INTEGER = 2**53 - 1
_MAX_SAFE_DIGITS = len(str(MAX_SAFE_INTEGER))

_ASCII_DIGITS = frozenset("0123456789")


def _is_digits(segment: str) -> bool:
    return all(char in _ASCII_DIGITS for char in segment)


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """A SemVer version reduced to its core numbers and prerelease tuple.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Raw prerelease segments, empty for a stable version
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{core}-{'.'.join(self.prerelease)}"
        return core


def parse_version(raw: str) -> Result[ParsedVersion, MalformedVersionError]:
    """Parse a SemVer string.

    Args:
        raw: Version string such as ``"1.2.0-alpha.0+build.5"``

    Returns:
        ``Ok(ParsedVersion)`` or ``Err(MalformedVersionError)`` when the core
        is not three non-empty, all-digit, safe-integer segments.
    """
    plus_index = raw.find("+")
    base = raw if plus_index == -1 else raw[:plus_index]

    dash_index = base.find("-")
    if dash_index == -1:
        core_part, prerelease_part = base, ""
    else:
        core_part, prerelease_part = base[:dash_index], base[dash_index + 1 :]

    pieces = core_part.split(".")
    if len(pieces) != 3:
        return Err(
            MalformedVersionError(
                f'Invalid version format: "{raw}". Expected MAJOR.MINOR.PATCH.',
                version=raw,
            )
        )

    numbers: list[int] = []
    for piece in pieces:
        if not piece or not _is_digits(piece):
            return Err(
                MalformedVersionError(
                    f'Invalid version segment "{piece}" in "{raw}".',
                    version=raw,
                )
            )
        # Length check first: int() refuses very long digit strings
        significant = piece.lstrip("0") or "0"
        if len(significant) > _MAX_SAFE_DIGITS or int(significant) > MAX_SAFE_INTEGER:
            return Err(
                MalformedVersionError(
                    f'Version segment "{piece}" in "{raw}" exceeds safe integer range.',
                    version=raw,
                )
            )
        numbers.append(int(significant))

    prerelease = tuple(prerelease_part.split(".")) if prerelease_part else ()

    major, minor, patch = numbers
    return Ok(ParsedVersion(major, minor, patch, prerelease))
