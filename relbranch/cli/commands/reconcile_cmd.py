from __future__ import annotations

from pathlib import Path

import typer

from relbranch.cli.commands._helpers import finish
from relbranch.cli.context import build_context
from relbranch.release.grouping import TagOrder
from relbranch.release.service import reconcile_repository


def reconcile(
    repo: Path = typer.Option(Path("."), "--repo", "-C", help="Repository working tree."),
    context_file: Path | None = typer.Option(
        None,
        "--context-file",
        help="JSON event context (defaults to the GitHub Actions environment when present).",
    ),
    push: bool | None = typer.Option(
        None,
        "--push/--no-push",
        help="Push created branches to the remote (default from config: push).",
    ),
    default_branch: str | None = typer.Option(
        None,
        "--default-branch",
        help="Default branch name (skips auto detection).",
    ),
    tag_order: TagOrder | None = typer.Option(
        None,
        "--tag-order",
        case_sensitive=False,
        help="Which tag represents a major: highest 'version' or first 'listed'.",
    ),
    config: Path | None = typer.Option(None, "--config", help="Config file (TOML)."),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result."),
) -> None:
    """Create missing release/v<major> branches for superseded major versions."""
    ctx = build_context(repo, config_path=config, quiet=quiet)
    outcome = reconcile_repository(
        ctx.repo_path,
        console=ctx.console,
        context_file=context_file,
        push=push,
        default_branch=default_branch,
        tag_order=tag_order,
        config=ctx.config,
    )
    finish(outcome, ctx, as_json=as_json)
