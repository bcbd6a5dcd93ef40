"""GitHub Actions step outputs.

Outputs are appended to the file named by ``GITHUB_OUTPUT`` as
``key=value`` lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_guard.exceptions import OutputError

if TYPE_CHECKING:
    from pathlib import Path


def format_output_line(key: str, value: str | bool) -> str:
    """Render a single ``key=value`` output line.

    Booleans are written in lower case (``true``/``false``) so workflow
    expressions can compare them as strings.
    """
    if isinstance(value, bool):
        value = "true" if value else "false"
    if "\n" in value:
        raise OutputError(f"Output {key!r} must be a single line")
    return f"{key}={value}\n"


def write_output(path: Path, key: str, value: str | bool) -> None:
    """Append an output line to the CI output file.

    Raises:
        OutputError: If the file cannot be written
    """
    line = format_output_line(key, value)
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        raise OutputError(f"Could not write output to {path}: {e}") from e
