"""Prerelease track classification.

A prerelease is seeded by resetting the lower core numbers, so the track it
is building toward can be read off its numeric shape:

    premajor  ->  X.0.0-<id>.N
    preminor  ->  X.Y.0-<id>.N
    prepatch  ->  X.Y.Z-<id>.N

The shape is the only signal. A hand-written ``1.0.0-alpha.0`` meant as a
prepatch of ``1.0.0`` is indistinguishable from a premajor seed and is
classified as premajor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from release_guard.core.version import ParsedVersion

# Characters trimmed by JavaScript string-to-number conversion
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_DECIMAL_DIGITS = frozenset("0123456789")
_RADIX_DIGITS = {
    "0x": frozenset("0123456789abcdefABCDEF"),
    "0o": frozenset("01234567"),
    "0b": frozenset("01"),
}


class Track(StrEnum):
    """Granularity a prerelease sequence is building toward."""

    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Classification:
    """What a version says about the release currently in flight."""

    version: ParsedVersion
    is_prerelease: bool
    track: Track
    prerelease_id: str | None
    source: str = ""

    def __str__(self) -> str:
        """The version as it was written, or its normalized form."""
        return self.source or str(self.version)


def _digits_only(text: str, digits: frozenset[str]) -> bool:
    return bool(text) and all(char in digits for char in text)


def is_numeric_segment(segment: str) -> bool:
    """Return True if JavaScript's ``Number(segment)`` is not NaN.

    Accepted after trimming whitespace: the empty string, decimal literals with
    optional sign, fraction and exponent, ``0x``/``0o``/``0b`` integers, and
    ``Infinity`` with optional sign.
    """
    text = segment.strip(_JS_WHITESPACE)
    if not text:
        return True

    radix_digits = _RADIX_DIGITS.get(text[:2].lower())
    if radix_digits is not None:
        return _digits_only(text[2:], radix_digits)

    if text[0] in "+-":
        text = text[1:]
    if text == "Infinity":
        return True

    mantissa, has_exponent, exponent = text.lower().partition("e")
    if has_exponent:
        if exponent[:1] in ("+", "-"):
            exponent = exponent[1:]
        if not _digits_only(exponent, _DECIMAL_DIGITS):
            return False

    integer, _, fraction = mantissa.partition(".")
    if not integer and not fraction:
        return False
    return all(char in _DECIMAL_DIGITS for char in integer + fraction)


def get_track(version: ParsedVersion) -> Track:
    if not version.is_prerelease:
        return Track.NONE
    if version.minor == 0 and version.patch == 0:
        return Track.PREMAJOR
    if version.patch == 0:
        return Track.PREMINOR
    return Track.PREPATCH


def get_prerelease_id(version: ParsedVersion) -> str | None:
    """Return the first non-numeric prerelease segment, if any."""
    for segment in version.prerelease:
        if not is_numeric_segment(segment):
            return segment
    return None


def classify(version: ParsedVersion, source: str = "") -> Classification:
    """Classify a parsed version. Never fails.

    ``source`` is the version string as written, kept for messages.
    """
    return Classification(
        version=version,
        is_prerelease=version.is_prerelease,
        track=get_track(version),
        prerelease_id=get_prerelease_id(version),
        source=source,
    )
