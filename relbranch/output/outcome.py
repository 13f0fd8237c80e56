"""Outcome presentation.

Centralized rendering and exit code mapping so both commands report the
same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relbranch.core.errors import ErrorCode
from relbranch.output.console import Style
from relbranch.release.outcome import Outcome, OutcomeReason

if TYPE_CHECKING:
    from relbranch.output.console import ConsoleProtocol

__all__ = ["outcome_exit_code", "print_outcome"]


def print_outcome(outcome: Outcome, console: ConsoleProtocol) -> None:
    """Print a one-run summary."""
    if not outcome.succeeded:
        console.error(outcome.message)
        if outcome.error is not None and outcome.error.hint:
            console.print(f"hint: {outcome.error.hint}", Style.DIM)
        return

    match outcome.reason:
        case OutcomeReason.CREATED_BRANCHES:
            console.success(outcome.message)
            for branch, ref in outcome.data.items():
                console.print(f"  {branch} <- {ref}")
        case _:
            console.success(outcome.message)


def outcome_exit_code(outcome: Outcome) -> int:
    if outcome.succeeded:
        return int(ErrorCode.OK)
    if outcome.error is None:
        return int(ErrorCode.INTERNAL_ERROR)
    match outcome.error.kind:
        case "context_invalid":
            return int(ErrorCode.CONTEXT_ERROR)
        case "git_failed":
            return int(ErrorCode.GIT_ERROR)
        case "policy_violation":
            return int(ErrorCode.POLICY_ERROR)
        case _:
            return int(ErrorCode.INTERNAL_ERROR)
