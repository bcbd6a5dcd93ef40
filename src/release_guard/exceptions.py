"""Exception hierarchy for release-guard.

All errors raised (or carried as values) by release-guard derive from
:class:`ReleaseGuardError`, so callers can treat any of them as
"do not proceed with the release".
"""

from __future__ import annotations


class ReleaseGuardError(Exception):
    """Base class for all release-guard errors."""


# Input errors


class InputError(ReleaseGuardError):
    """A requested input is missing or not acceptable."""


class InvalidInputError(InputError):
    """Bump type or prerelease identifier is outside its closed enumeration."""

    def __init__(self, message: str, *, name: str, value: str) -> None:
        super().__init__(message)
        self.name = name
        self.value = value


class MissingInputError(InputError):
    """A required input was not supplied."""


# Version errors


class VersionError(ReleaseGuardError):
    """Base class for version string errors."""


class MalformedVersionError(VersionError):
    """Version string does not have a valid SemVer core."""

    def __init__(self, message: str, *, version: str) -> None:
        super().__init__(message)
        self.version = version


# Transition rule errors


class RuleViolationError(ReleaseGuardError):
    """A transition rule rejected the requested bump."""

    def __init__(self, message: str, *, rule: str) -> None:
        super().__init__(message)
        self.rule = rule


# Configuration errors


class ConfigError(ReleaseGuardError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Configuration file could not be found."""


class ConfigValidationError(ConfigError):
    """Configuration content is invalid."""


# Project errors


class ProjectError(ReleaseGuardError):
    """Base class for project manifest errors."""


class ManifestNotFoundError(ProjectError):
    """No version manifest could be located."""


class VersionNotFoundError(ProjectError):
    """The manifest does not declare a usable version."""


# CI output errors


class OutputError(ReleaseGuardError):
    """The CI output file could not be written."""
