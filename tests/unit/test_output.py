"""Tests for GitHub Actions output handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from release_guard.ci.output import format_output_line, write_output
from release_guard.exceptions import OutputError


class TestFormatOutputLine:
    """Tests for format_output_line()."""

    @pytest.mark.parametrize(("value", "expected"), [(True, "true"), (False, "false")])
    def test_booleans_lowercase(self, value: bool, expected: str):
        """Booleans are rendered the way workflow expressions expect."""
        assert format_output_line("is-prerelease", value) == f"is-prerelease={expected}\n"

    def test_string_value(self):
        """Strings are written verbatim."""
        assert format_output_line("tag", "next") == "tag=next\n"

    def test_multiline_rejected(self):
        """Multi-line values would corrupt the output file."""
        with pytest.raises(OutputError):
            format_output_line("notes", "a\nb")


class TestWriteOutput:
    """Tests for write_output()."""

    def test_appends(self, tmp_path: Path):
        """Lines are appended, not overwritten."""
        path = tmp_path / "github_output"
        path.write_text("existing=1\n")

        write_output(path, "is-prerelease", True)
        write_output(path, "tag", "next")

        assert path.read_text() == "existing=1\nis-prerelease=true\ntag=next\n"

    def test_creates_file(self, tmp_path: Path):
        """A missing output file is created."""
        path = tmp_path / "out"

        write_output(path, "is-prerelease", False)

        assert path.read_text() == "is-prerelease=false\n"

    def test_unwritable_raises(self, tmp_path: Path):
        """Write failures raise OutputError."""
        with pytest.raises(OutputError):
            write_output(tmp_path, "is-prerelease", True)
