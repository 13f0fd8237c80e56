"""Tests for relbranch.output.outcome (rendering and exit codes)."""

from __future__ import annotations

import pytest

from relbranch.core.errors import ErrorCode
from relbranch.output.console import MockConsole, Style
from relbranch.output.outcome import outcome_exit_code, print_outcome
from relbranch.release.errors import ReleaseError, ReleaseErrorKind
from relbranch.release.outcome import Outcome


def test_print_created_lists_branches() -> None:
    console = MockConsole()

    print_outcome(Outcome.created({"release/v1": "1.2.0", "release/v2": "2.0.0"}), console)

    assert console.messages == [
        "OK Successfully created release branches",
        "  release/v1 <- 1.2.0",
        "  release/v2 <- 2.0.0",
    ]


def test_print_no_changes() -> None:
    console = MockConsole()

    print_outcome(Outcome.no_changes(), console)

    assert console.messages == ["OK No changes were made"]


def test_print_failure_with_hint() -> None:
    console = MockConsole()
    error = ReleaseError("git_failed", "git push origin release/v1: rejected", hint="Check access")

    print_outcome(Outcome.failure(error), console)

    assert console.messages == [
        "error: git push origin release/v1: rejected",
        "hint: Check access",
    ]
    assert console.outputs[1].style == Style.DIM
    assert not console.has_success()


def test_print_failure_without_hint() -> None:
    console = MockConsole()

    print_outcome(Outcome.failure(ReleaseError("unexpected", "boom")), console)

    assert console.messages == ["error: boom"]


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("context_invalid", ErrorCode.CONTEXT_ERROR),
        ("git_failed", ErrorCode.GIT_ERROR),
        ("policy_violation", ErrorCode.POLICY_ERROR),
        ("unexpected", ErrorCode.INTERNAL_ERROR),
    ],
)
def test_exit_code_per_error_kind(kind: ReleaseErrorKind, code: ErrorCode) -> None:
    assert outcome_exit_code(Outcome.failure(ReleaseError(kind, "x"))) == code


def test_exit_code_success() -> None:
    assert outcome_exit_code(Outcome.no_changes()) == 0
    assert outcome_exit_code(Outcome.created({"release/v1": "1.0.0"})) == 0


def test_exit_code_failure_without_error() -> None:
    outcome = Outcome(succeeded=False, reason=None, message="odd")
    assert outcome_exit_code(outcome) == ErrorCode.INTERNAL_ERROR
