from __future__ import annotations

from pathlib import Path

import typer

from relbranch.cli.commands._helpers import finish
from relbranch.cli.context import build_context
from relbranch.release.service import validate_release


def validate(
    repo: Path = typer.Option(Path("."), "--repo", "-C", help="Repository working tree."),
    context_file: Path | None = typer.Option(
        None,
        "--context-file",
        help="JSON event context (defaults to the GitHub Actions environment).",
    ),
    push: bool | None = typer.Option(
        None,
        "--push/--no-push",
        help="Push a created branch to the remote (default from config: push).",
    ),
    config: Path | None = typer.Option(None, "--config", help="Config file (TOML)."),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result."),
) -> None:
    """Check a published release against the release branch rules."""
    ctx = build_context(repo, config_path=config, quiet=quiet)
    outcome = validate_release(
        ctx.repo_path,
        console=ctx.console,
        context_file=context_file,
        push=push,
        config=ctx.config,
    )
    finish(outcome, ctx, as_json=as_json)
