"""Entry points for reconcile and validate runs.

These functions wire configuration, event context and the git adapter
together and are the only place where an unexpected exception is turned into
a failed Outcome. Callers always get an Outcome back.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from relbranch.core.config import Config
from relbranch.core.result import Err, Ok, Result
from relbranch.git.repository import Repository
from relbranch.output.console import ConsoleProtocol
from relbranch.release.branching import git_failure
from relbranch.release.context import (
    EventContext,
    load_event_context,
    load_optional_event_context,
)
from relbranch.release.errors import ReleaseError
from relbranch.release.grouping import TagOrder, order_tags
from relbranch.release.outcome import Outcome
from relbranch.release.reconcile import Reconciler
from relbranch.release.validate import ReleaseValidator

__all__ = [
    "reconcile_repository",
    "resolve_default_branch",
    "validate_release",
]


def _open_repository(repo_path: Path, config: Config) -> Result[Repository, ReleaseError]:
    repo = Repository(
        repo_path,
        remote=config.release.remote,
        timeout=config.git.timeout_seconds,
    )
    if not repo.is_work_tree():
        return Err(
            ReleaseError(
                kind="context_invalid",
                message=f"Not a git working tree: {repo_path}",
                hint="Pass --repo pointing at a checkout",
            )
        )
    return Ok(repo)


def resolve_default_branch(
    *,
    explicit: str | None,
    context: EventContext | None,
    config: Config,
    repo: Repository,
) -> Result[str, ReleaseError]:
    """Resolve the default branch name.

    Resolution order:
    1. explicit (--default-branch)
    2. repository.default_branch from the event payload
    3. release.default_branch from config
    4. the remote's HEAD (refs/remotes/<remote>/HEAD)
    5. the currently checked-out branch
    """
    if explicit:
        return Ok(explicit)
    if context is not None:
        from_context = context.default_branch()
        if from_context:
            return Ok(from_context)
    if config.release.default_branch:
        return Ok(config.release.default_branch)

    detected = repo.remote_default_branch() or repo.current_branch()
    if detected:
        return Ok(detected)
    return Err(
        ReleaseError(
            kind="context_invalid",
            message="Cannot determine the default branch",
            hint="Pass --default-branch or set release.default_branch in .relbranch.toml",
        )
    )


def reconcile_repository(
    repo_path: Path,
    *,
    console: ConsoleProtocol,
    context_file: Path | None = None,
    push: bool | None = None,
    default_branch: str | None = None,
    tag_order: TagOrder | None = None,
    config: Config | None = None,
    env: Mapping[str, str] | None = None,
) -> Outcome:
    """Create the missing release branches of the repository at repo_path.

    push, default_branch and tag_order override the config when given.
    """
    try:
        return _reconcile_repository(
            repo_path,
            console=console,
            context_file=context_file,
            push=push,
            default_branch=default_branch,
            tag_order=tag_order,
            config=config or Config(),
            env=os.environ if env is None else env,
        )
    except Exception as e:  # noqa: BLE001
        return Outcome.failure(ReleaseError(kind="unexpected", message=str(e) or repr(e)))


def _reconcile_repository(
    repo_path: Path,
    *,
    console: ConsoleProtocol,
    context_file: Path | None,
    push: bool | None,
    default_branch: str | None,
    tag_order: TagOrder | None,
    config: Config,
    env: Mapping[str, str],
) -> Outcome:
    opened = _open_repository(repo_path, config)
    if isinstance(opened, Err):
        return Outcome.failure(opened.error)
    repo = opened.value

    context = load_optional_event_context(context_file, env)
    if isinstance(context, Err):
        return Outcome.failure(context.error)

    branch = resolve_default_branch(
        explicit=default_branch,
        context=context.value,
        config=config,
        repo=repo,
    )
    if isinstance(branch, Err):
        return Outcome.failure(branch.error)
    console.info(f"Default branch: {branch.value}")

    tags = repo.list_tags().map_err(git_failure)
    if isinstance(tags, Err):
        return Outcome.failure(tags.error)

    order = tag_order or TagOrder(config.release.tag_order)
    ordered = order_tags(tags.value, order)

    reconciler = Reconciler(ops=repo, console=console)
    return reconciler.reconcile(
        ordered,
        branch.value,
        push=config.release.push if push is None else push,
    )


def validate_release(
    repo_path: Path,
    *,
    console: ConsoleProtocol,
    context_file: Path | None = None,
    push: bool | None = None,
    config: Config | None = None,
    env: Mapping[str, str] | None = None,
) -> Outcome:
    """Check a release event and branch the previous major line when it opens a new one."""
    try:
        cfg = config or Config()
        opened = _open_repository(repo_path, cfg)
        if isinstance(opened, Err):
            return Outcome.failure(opened.error)

        context = load_event_context(context_file, os.environ if env is None else env)
        if isinstance(context, Err):
            return Outcome.failure(context.error)

        validator = ReleaseValidator(ops=opened.value, console=console)
        return validator.validate(
            context.value,
            push=cfg.release.push if push is None else push,
        )
    except Exception as e:  # noqa: BLE001
        return Outcome.failure(ReleaseError(kind="unexpected", message=str(e) or repr(e)))
