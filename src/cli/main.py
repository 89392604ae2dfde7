"""nix-headbump command line.

Commands:
- `detect`: print the target file, the pinned revision or the upstream head.
- `bump`: pin the target file to the upstream head.

Flags also accept the single-dash spelling (`-version`, `-current`, ...).
"""

from __future__ import annotations

from typing import Callable, TypeVar

import typer
from pydantic import ValidationError
from typer.core import TyperGroup

from adapters.github_branches import GitHubBranchSource
from cli.ui_components import configure_logging, print_error
from core.config import AppSettings
from core.domain.errors import HeadbumpError
from core.services.headbump import (
    bump_to_latest,
    fetch_last_version,
    find_target,
    read_current_version,
)
from core.version import version_banner

USAGE_ERROR = "expected 'bump' or 'detect' subcommands"

T = TypeVar("T")

# typer.BadParameter derives from the UsageError class typer raises, whether
# click is installed on its own or vendored inside typer.
_UsageError: type = next(c for c in typer.BadParameter.__mro__ if c.__name__ == "UsageError")


class HeadbumpGroup(TyperGroup):
    """Root group whose usage errors exit with 1, like every other failure.

    Unknown subcommands print the same usage line as a missing one, on stdout.
    """

    def resolve_command(self, ctx: typer.Context, args: list[str]):  # type: ignore[override]
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            typer.echo(USAGE_ERROR)
            raise typer.Exit(code=1)
        return super().resolve_command(ctx, args)

    def make_context(self, info_name, args, parent=None, **extra):  # type: ignore[override]
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except _UsageError as exc:
            exc.exit_code = 1
            raise

    def invoke(self, ctx: typer.Context):  # type: ignore[override]
        try:
            return super().invoke(ctx)
        except _UsageError as exc:
            exc.exit_code = 1
            raise


app = typer.Typer(
    cls=HeadbumpGroup,
    invoke_without_command=True,
    add_completion=False,
    help="Bump the nixpkgs revision pinned in default.nix or shell.nix to the head of master.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_banner())
        raise typer.Exit()


def _run(step: str, func: Callable[..., T], *args, **kwargs) -> T:
    """Run one step; domain errors become a message and exit code 1."""

    try:
        return func(*args, **kwargs)
    except HeadbumpError as exc:
        print_error(f"{step} failed: {exc}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version of this program.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs (requests, resolved files).",
    ),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        typer.echo(USAGE_ERROR)
        raise typer.Exit(code=1)


@app.command()
def detect(
    ctx: typer.Context,
    current: bool = typer.Option(
        False, "--current", "-current", help="Print the current pinned revision without bumping."
    ),
    last: bool = typer.Option(
        False, "--last", "-last", help="Print the upstream head revision without bumping."
    ),
    target: bool = typer.Option(
        False, "--target", "-target", help="Print which file will be bumped."
    ),
) -> None:
    """Inspect the target file or the upstream branch without bumping."""

    settings: AppSettings = ctx.obj

    if target:
        path = _run("Getting the target file", find_target)
        typer.echo(str(path))
        return
    if current:
        path = _run("Getting the target file", find_target)
        typer.echo(_run("Getting the current version", read_current_version, path))
        return
    if last:
        source = GitHubBranchSource(settings=settings)
        typer.echo(_run("Getting the last version", fetch_last_version, source))
        return

    typer.echo(ctx.get_help())


@app.command()
def bump(ctx: typer.Context) -> None:
    """Pin the target file to the head of NixOS/nixpkgs master."""

    settings: AppSettings = ctx.obj

    source = GitHubBranchSource(settings=settings)
    _run("Bumping the version", bump_to_latest, source, settings=settings)


def run() -> None:
    app(prog_name="nix-headbump")
