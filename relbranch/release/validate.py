"""Release event validation.

Checks a published release against the branching rules:

- releases cut from the default branch may open a new major line; the first
  release of major N branches release/v<N-1> off the commit before it
- releases cut from release/v<N> must carry major N
- releases cut from any other branch are rejected
"""

from __future__ import annotations

from relbranch.core.result import Err
from relbranch.output.console import ConsoleProtocol
from relbranch.release.branches import release_branch_major, release_branch_name
from relbranch.release.branching import branch_at_ref, git_failure
from relbranch.release.context import EventContext
from relbranch.release.errors import ReleaseError
from relbranch.release.grouping import group_latest_per_major
from relbranch.release.ops import BranchOps
from relbranch.release.outcome import Outcome
from relbranch.release.semver import is_valid_semver, major_of

__all__ = ["RELEASE_EVENT", "ReleaseValidator"]

RELEASE_EVENT = "release"


def _policy(message: str, hint: str | None = None) -> Outcome:
    return Outcome.failure(ReleaseError(kind="policy_violation", message=message, hint=hint))


def _missing(field_name: str) -> Outcome:
    return Outcome.failure(
        ReleaseError(kind="context_invalid", message=f"Event context has no {field_name}")
    )


class ReleaseValidator:
    def __init__(self, *, ops: BranchOps, console: ConsoleProtocol) -> None:
        self._ops = ops
        self._console = console

    def validate(self, context: EventContext, *, push: bool) -> Outcome:
        """Validate one release event, creating the previous major's branch if needed."""
        try:
            return self._validate(context, push=push)
        except Exception as e:  # noqa: BLE001
            return Outcome.failure(ReleaseError(kind="unexpected", message=str(e) or repr(e)))

    def _validate(self, context: EventContext, *, push: bool) -> Outcome:
        if context.event_name != RELEASE_EVENT:
            return _policy(
                f"Unsupported event '{context.event_name}'."
                f" Only supported event is '{RELEASE_EVENT}'"
            )

        tag = context.release_tag()
        if tag is None:
            return _missing("release.tag_name")
        if not is_valid_semver(tag):
            return _policy(f"Release tag '{tag}' is not in SemVer format")

        target = context.target_branch()
        if target is None:
            return _missing("release.target_commitish")
        default_branch = context.default_branch()
        if default_branch is None:
            return _missing("repository.default_branch")

        major = major_of(tag)
        self._console.info(f"Release tag: {tag} (major {major})")
        self._console.info(f"Target branch: {target}")
        self._console.info(f"Default branch: {default_branch}")

        if target == default_branch:
            return self._from_default_branch(context, tag, major, default_branch, push=push)

        branch_major = release_branch_major(target)
        if branch_major is None:
            return _policy(f"Target branch '{target}' is not a default or release branch")
        if branch_major != major:
            return _policy(
                f"Major version in release tag '{tag}' does not match "
                f"release branch version '{target}'"
            )
        return Outcome.no_changes(f"Published release {tag} for release branch '{target}'")

    def _from_default_branch(
        self,
        context: EventContext,
        tag: str,
        major: int,
        default_branch: str,
        *,
        push: bool,
    ) -> Outcome:
        tags = self._ops.list_tags().map_err(git_failure)
        if isinstance(tags, Err):
            return Outcome.failure(tags.error)

        others = group_latest_per_major(t for t in tags.value if t != tag)
        if major in others:
            return Outcome.no_changes(f"Major tag '{major}' for '{tag}' already exists")
        if major == 0:
            return Outcome.no_changes(f"'{tag}' opens the first major line, nothing to branch")

        branch = release_branch_name(major - 1)
        if self._ops.branch_exists(branch):
            return _policy(f"Branch '{branch}' already exists")

        if not context.sha:
            return _missing("commit sha")
        parent = self._ops.parent_commit(context.sha).map_err(git_failure)
        if isinstance(parent, Err):
            return Outcome.failure(parent.error)
        self._console.info(f"Previous commit: {parent.value}")

        result = branch_at_ref(
            self._ops,
            self._console,
            branch=branch,
            ref=parent.value,
            default_branch=default_branch,
            push=push,
        )
        if isinstance(result, Err):
            return Outcome.failure(result.error)

        self._console.success(f"Created '{branch}' at {parent.value}")
        return Outcome.created({branch: parent.value})
