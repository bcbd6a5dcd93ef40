"""Command-line interface for release-guard."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from release_guard.cli.commands.classify import run_classify
from release_guard.cli.commands.validate import run_validate

app = typer.Typer(
    help="Validate semantic-version transitions before a release.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def validate(
    version_type: Annotated[
        str | None,
        typer.Option(
            "--version-type",
            "-t",
            help="Bump type: major, minor, patch, premajor, preminor, prepatch, prerelease. "
            "Defaults to $VERSION.",
        ),
    ] = None,
    prerelease_id: Annotated[
        str | None,
        typer.Option(
            "--prerelease-id",
            "-p",
            help="Prerelease identifier: alpha, beta, rc or none. Defaults to $PRERELEASE_ID.",
        ),
    ] = None,
    current: Annotated[
        str | None,
        typer.Option("--current", "-c", help="Current version (skips the manifest)."),
    ] = None,
    manifest: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="package.json or pyproject.toml to read."),
    ] = None,
    github_output: Annotated[
        Path | None,
        typer.Option("--github-output", help="CI output file. Defaults to $GITHUB_OUTPUT."),
    ] = None,
    path: Annotated[
        str | None,
        typer.Option("--path", help="Project directory (defaults to cwd)."),
    ] = None,
) -> None:
    """Check that a requested version bump is a legal transition."""
    run_validate(
        path=path,
        version_type=version_type,
        prerelease_id=prerelease_id,
        current=current,
        manifest=manifest,
        github_output=github_output,
        console=console,
        err_console=err_console,
    )


@app.command()
def classify(
    version: Annotated[str, typer.Argument(help="SemVer string to classify.")],
) -> None:
    """Show the prerelease track and identifier of a version."""
    run_classify(version, console=console, err_console=err_console)


if __name__ == "__main__":
    app()
