"""Implementation of the 'validate' command.

The validate command checks a requested bump against the current version
and, on success, publishes whether the next version is a prerelease.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from release_guard.ci.output import format_output_line, write_output
from release_guard.config import ReleaseInputs, load_config
from release_guard.core.transitions import Rejected, validate_transition
from release_guard.exceptions import MissingInputError, ReleaseGuardError
from release_guard.project.manifest import get_manifest_version

if TYPE_CHECKING:
    from rich.console import Console


def run_validate(
    path: str | None,
    version_type: str | None,
    prerelease_id: str | None,
    current: str | None,
    manifest: Path | None,
    github_output: Path | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the validate command.

    Command-line values win over the ``VERSION``, ``PRERELEASE_ID`` and
    ``GITHUB_OUTPUT`` environment variables.

    Args:
        path: Optional path to project directory
        version_type: Requested bump type (e.g., "minor", "prerelease")
        prerelease_id: Requested identifier ("alpha", "beta", "rc", "none")
        current: Current version; read from the manifest when omitted
        manifest: Manifest to read the current version from
        github_output: File receiving the CI output line
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(project_path)
    except ReleaseGuardError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    inputs = ReleaseInputs.from_env(os.environ)
    version_type = version_type or inputs.version_type
    prerelease_id = prerelease_id or inputs.prerelease_id or config.default_prerelease_id
    github_output = github_output or inputs.github_output

    if not version_type:
        error = MissingInputError("Missing required input: VERSION (or --version-type).")
        err_console.print(f"[red]Error:[/] {escape(str(error))}")
        raise SystemExit(1) from error

    # Get current version
    if current is None:
        try:
            current = get_manifest_version(manifest or config.manifest or project_path)
        except ReleaseGuardError as e:
            err_console.print(f"[red]Error getting version:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    console.print(f'Current version: "[cyan]{escape(current)}[/]"')
    console.print(f'Version input: "[cyan]{escape(version_type)}[/]"')
    console.print(f'Prerelease ID: "[cyan]{escape(str(prerelease_id))}[/]"')

    outcome = validate_transition(version_type, str(prerelease_id), current)

    if isinstance(outcome, Rejected):
        err_console.print(
            f"\n[red]✗ Validation failed ({outcome.rule}):[/] {escape(outcome.message)}"
        )
        raise SystemExit(1)

    console.print("\n[green]✓[/] All transition rules passed.")

    if github_output is None:
        line = format_output_line(config.output_key, outcome.next_is_prerelease)
        console.print(f"[dim]{escape(line.rstrip())}[/]")
        return

    try:
        write_output(github_output, config.output_key, outcome.next_is_prerelease)
    except ReleaseGuardError as e:
        err_console.print(f"[red]Error writing output:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(f"  [green]✓[/] Wrote {config.output_key} to {escape(str(github_output))}")
