"""Release branch management.

- semver / grouping / branches: pure tag and branch-name rules
- reconcile / validate: the two flows, driven through BranchOps
- context / service: event loading and the entry points used by the CLI
"""

from relbranch.release.errors import ReleaseError
from relbranch.release.grouping import TagOrder, group_latest_per_major, order_tags
from relbranch.release.outcome import Outcome, OutcomeReason
from relbranch.release.reconcile import Reconciler
from relbranch.release.semver import is_valid_semver, major_of
from relbranch.release.service import reconcile_repository, validate_release
from relbranch.release.validate import ReleaseValidator

__all__ = [
    "Outcome",
    "OutcomeReason",
    "Reconciler",
    "ReleaseError",
    "ReleaseValidator",
    "TagOrder",
    "group_latest_per_major",
    "is_valid_semver",
    "major_of",
    "order_tags",
    "reconcile_repository",
    "validate_release",
]
