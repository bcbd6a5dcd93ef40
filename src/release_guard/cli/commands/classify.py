"""Implementation of the 'classify' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from release_guard.core.result import Err
from release_guard.core.track import classify
from release_guard.core.version import parse_version

if TYPE_CHECKING:
    from rich.console import Console


def run_classify(version: str, console: Console, err_console: Console) -> None:
    """Print the prerelease flag, track and identifier of ``version``."""
    parsed = parse_version(version)
    if isinstance(parsed, Err):
        err_console.print(f"[red]Error:[/] {escape(str(parsed.error))}")
        raise SystemExit(1)

    result = classify(parsed.value, source=version)

    table = Table(title=f"Version {escape(str(result))}")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Prerelease", "yes" if result.is_prerelease else "no")
    table.add_row("Track", str(result.track))
    table.add_row("Identifier", escape(result.prerelease_id or "-"))
    console.print(table)
