"""Release branch reconciliation.

For every major version found in the tags, except the highest one, make sure
a release/v<major> branch exists, creating it at the representative tag when
missing. The highest major keeps living on the default branch.
"""

from __future__ import annotations

from collections.abc import Iterable

from relbranch.core.result import Err
from relbranch.output.console import ConsoleProtocol
from relbranch.release.branches import release_branch_name
from relbranch.release.branching import branch_at_ref
from relbranch.release.errors import ReleaseError
from relbranch.release.grouping import MajorGroups, group_latest_per_major
from relbranch.release.ops import BranchOps
from relbranch.release.outcome import NO_TAGS_MESSAGE, Outcome

__all__ = ["Reconciler"]


class Reconciler:
    """Creates missing release branches in one working tree.

    Runs are independent: nothing is kept between calls except the branches
    created in the repository.
    """

    def __init__(self, *, ops: BranchOps, console: ConsoleProtocol) -> None:
        self._ops = ops
        self._console = console

    def reconcile(self, all_tags: Iterable[str], default_branch: str, *, push: bool) -> Outcome:
        """Create release/v<major> for every superseded major without one.

        Tags are grouped in the order given (first valid tag per major wins).
        Any error stops the run and yields a failed Outcome; branches created
        before the error are kept.
        """
        try:
            return self._reconcile(all_tags, default_branch, push=push)
        except Exception as e:  # noqa: BLE001
            return Outcome.failure(ReleaseError(kind="unexpected", message=str(e) or repr(e)))

    def _reconcile(self, all_tags: Iterable[str], default_branch: str, *, push: bool) -> Outcome:
        groups = group_latest_per_major(all_tags)
        if not groups:
            self._console.info(NO_TAGS_MESSAGE)
            return Outcome.no_changes(NO_TAGS_MESSAGE)

        self._report_groups(groups)
        highest = max(groups)

        created: dict[str, str] = {}
        for major, tag in groups.items():
            branch = release_branch_name(major)

            if self._ops.branch_exists(branch):
                self._console.print(f"'{branch}' already exists, skipping")
                continue

            if major == highest:
                self._console.print(
                    f"Major {major} is the current line, it stays on '{default_branch}'"
                )
                continue

            result = branch_at_ref(
                self._ops,
                self._console,
                branch=branch,
                ref=tag,
                default_branch=default_branch,
                push=push,
            )
            if isinstance(result, Err):
                return Outcome.failure(result.error)

            self._console.success(f"Created '{branch}' at {tag}")
            created[branch] = tag

        if not created:
            return Outcome.no_changes()
        return Outcome.created(created)

    def _report_groups(self, groups: MajorGroups) -> None:
        summary = ", ".join(f"v{major}: {tag}" for major, tag in groups.items())
        self._console.info(f"Tag per major: {summary}")
