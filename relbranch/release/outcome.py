"""Outcome of a reconcile or validate run.

Every run ends in exactly one Outcome: a success (possibly with nothing to
do) or a failure carrying the ReleaseError that stopped it. Branches created
before a failure stay in the repository but are not listed in data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from relbranch.release.errors import ReleaseError

__all__ = [
    "CREATED_MESSAGE",
    "NO_CHANGES_MESSAGE",
    "NO_TAGS_MESSAGE",
    "Outcome",
    "OutcomeReason",
]

NO_TAGS_MESSAGE = "No SemVer tags found"
NO_CHANGES_MESSAGE = "No changes were made"
CREATED_MESSAGE = "Successfully created release branches"


class OutcomeReason(Enum):
    NO_CHANGES = "NO_CHANGES"
    CREATED_BRANCHES = "CREATED_BRANCHES"

    def __str__(self) -> str:
        return self.value


def _empty_data() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of one run.

    Attributes:
        succeeded: False only when the run stopped on an error
        reason: Why a successful run ended; None for failures
        message: Human-readable summary
        data: Created branch name -> ref it was created from (read-only)
        error: The error that stopped a failed run
    """

    succeeded: bool
    reason: OutcomeReason | None
    message: str
    data: Mapping[str, str] = field(default_factory=_empty_data)
    error: ReleaseError | None = None

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict are not visible.
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @classmethod
    def no_changes(cls, message: str = NO_CHANGES_MESSAGE) -> Outcome:
        return cls(succeeded=True, reason=OutcomeReason.NO_CHANGES, message=message)

    @classmethod
    def created(cls, data: Mapping[str, str], message: str = CREATED_MESSAGE) -> Outcome:
        return cls(
            succeeded=True,
            reason=OutcomeReason.CREATED_BRANCHES,
            message=message,
            data=data,
        )

    @classmethod
    def failure(cls, error: ReleaseError) -> Outcome:
        return cls(succeeded=False, reason=None, message=error.message, error=error)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation."""
        return {
            "succeeded": self.succeeded,
            "reason": None if self.reason is None else self.reason.value,
            "message": self.message,
            "data": dict(self.data),
            "error": (
                None
                if self.error is None
                else {
                    "kind": self.error.kind,
                    "message": self.error.message,
                    "hint": self.error.hint,
                }
            ),
        }
