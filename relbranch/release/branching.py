"""Creating one release branch from a ref.

The working tree is the only shared resource: every step here checks out
something, so branch_at_ref always switches back to the default branch before
returning, whether the creation succeeded, failed, or raised.
"""

from __future__ import annotations

from relbranch.core.result import Err, Ok, Result
from relbranch.git.repository import GitError
from relbranch.output.console import ConsoleProtocol
from relbranch.release.errors import ReleaseError
from relbranch.release.ops import BranchOps

__all__ = ["branch_at_ref", "git_failure"]


def git_failure(error: GitError, hint: str | None = None) -> ReleaseError:
    return ReleaseError(kind="git_failed", message=str(error), hint=hint)


def branch_at_ref(
    ops: BranchOps,
    console: ConsoleProtocol,
    *,
    branch: str,
    ref: str,
    default_branch: str,
    push: bool,
) -> Result[None, ReleaseError]:
    """Check out ref, create branch there, optionally push it, return to default_branch.

    No rollback: if the push fails the local branch is left in place.
    """
    result: Result[None, ReleaseError] = Ok(None)
    try:
        result = _create_at(ops, console, branch=branch, ref=ref, push=push)
    finally:
        restored = ops.checkout_branch(default_branch)

    if isinstance(restored, Err):
        console.error(f"Could not switch back to '{default_branch}': {restored.error.message}")
        if isinstance(result, Ok):
            return Err(
                git_failure(
                    restored.error,
                    hint=f"The working tree is not on '{default_branch}'",
                )
            )
    return result


def _create_at(
    ops: BranchOps,
    console: ConsoleProtocol,
    *,
    branch: str,
    ref: str,
    push: bool,
) -> Result[None, ReleaseError]:
    checkout = ops.checkout_ref(ref)
    if isinstance(checkout, Err):
        return Err(git_failure(checkout.error, hint=f"Does '{ref}' exist in this clone?"))

    console.info(f"Creating branch '{branch}' from '{ref}'")
    created = ops.create_branch(branch).map_err(git_failure)
    if isinstance(created, Err):
        return created

    if not push:
        console.print(f"Push disabled, '{branch}' was created locally only")
        return Ok(None)

    pushed = ops.push_branch(branch)
    if isinstance(pushed, Err):
        return Err(
            git_failure(
                pushed.error,
                hint=(
                    "Check the remote's permissions and that the branch"
                    " does not already exist there"
                ),
            )
        )
    console.info(f"Pushed '{branch}'")
    return Ok(None)
