"""Tests for SemVer parsing."""

from __future__ import annotations

import pytest

from release_guard.core.result import Err, Ok
from release_guard.core.version import MAX_SAFE_INTEGER, ParsedVersion, parse_version
from release_guard.exceptions import MalformedVersionError


class TestParseVersion:
    """Tests for parse_version()."""

    def test_parse_stable(self):
        """Parse a plain MAJOR.MINOR.PATCH version."""
        result = parse_version("1.2.3")

        assert isinstance(result, Ok)
        assert result.value == ParsedVersion(1, 2, 3)
        assert result.value.prerelease == ()

    def test_parse_prerelease(self):
        """Prerelease segments are split on dots and kept as strings."""
        result = parse_version("1.2.0-alpha.0")

        assert result.unwrap() == ParsedVersion(1, 2, 0, ("alpha", "0"))

    def test_build_metadata_is_discarded(self):
        """Everything from '+' onward is dropped."""
        version = parse_version("1.2.3-beta.1+build.7").unwrap()

        assert version.prerelease == ("beta", "1")
        assert str(version) == "1.2.3-beta.1"

    def test_dash_inside_build_metadata_is_not_prerelease(self):
        """Build metadata is stripped before looking for a prerelease."""
        version = parse_version("1.2.3+build-5").unwrap()

        assert version.prerelease == ()

    def test_unvalidated_build_metadata(self):
        """Build metadata is not validated."""
        assert parse_version("1.2.3+!!not semver!!").ok

    def test_first_dash_splits_prerelease(self):
        """Later dashes belong to the prerelease."""
        version = parse_version("1.0.0-x-y.1").unwrap()

        assert version.prerelease == ("x-y", "1")

    def test_prerelease_segments_not_validated(self):
        """Prerelease segments are kept raw, including empty ones."""
        version = parse_version("1.0.0-alpha..1").unwrap()

        assert version.prerelease == ("alpha", "", "1")

    def test_empty_prerelease_is_stable(self):
        """A trailing '-' with nothing after it is not a prerelease."""
        version = parse_version("1.0.0-").unwrap()

        assert version.prerelease == ()
        assert not version.is_prerelease

    def test_leading_zeros_allowed(self):
        """Core segments are only required to be digits."""
        assert parse_version("01.002.0003").unwrap() == ParsedVersion(1, 2, 3)

    def test_max_safe_integer_accepted(self):
        """Segments up to the safe integer limit parse."""
        version = parse_version(f"{MAX_SAFE_INTEGER}.0.0").unwrap()

        assert version.major == MAX_SAFE_INTEGER

    def test_long_leading_zeros_within_limit(self):
        """Padding with zeros does not count toward the limit."""
        version = parse_version("0000000000000000000001.0.0").unwrap()

        assert version.major == 1

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "1",
            "1.2",
            "1.2.3.4",
            "v1.2.3",
            "1..3",
            "1.2.x",
            "1.2.3 ",
            " 1.2.3",
            "1.2.-3",
            "１.2.3",
            "-alpha",
            "+build",
        ],
    )
    def test_malformed_core(self, raw: str):
        """Anything but three all-digit core segments fails."""
        result = parse_version(raw)

        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedVersionError)
        assert result.error.version == raw

    def test_segment_above_safe_integer(self):
        """Segments above the safe integer limit fail."""
        result = parse_version(f"1.{MAX_SAFE_INTEGER + 1}.0")

        assert isinstance(result, Err)
        assert "safe integer" in str(result.error)

    def test_huge_segment(self):
        """Very long digit strings are rejected, not converted."""
        result = parse_version("1" * 5000 + ".0.0")

        assert isinstance(result, Err)
        assert "safe integer" in str(result.error)

    def test_error_names_segment(self):
        """The failing segment is quoted in the message."""
        result = parse_version("1.2b.3")

        assert isinstance(result, Err)
        assert '"2b"' in str(result.error)

    def test_unwrap_raises(self):
        """unwrap() on a failure raises the carried error."""
        with pytest.raises(MalformedVersionError, match="Invalid version format"):
            parse_version("1.2").unwrap()


class TestParsedVersion:
    """Tests for the ParsedVersion value object."""

    def test_str_stable(self):
        """Stable versions render without a dash."""
        assert str(ParsedVersion(3, 0, 1)) == "3.0.1"

    def test_str_prerelease(self):
        """Prerelease segments are rejoined with dots."""
        assert str(ParsedVersion(3, 0, 0, ("rc", "2"))) == "3.0.0-rc.2"

    def test_immutable(self):
        """ParsedVersion is frozen."""
        version = ParsedVersion(1, 0, 0)

        with pytest.raises(AttributeError):
            version.major = 2  # type: ignore[misc]
