"""Error payload for the release flows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "context_invalid",
    "git_failed",
    "policy_violation",
    "unexpected",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error.

    kind drives the CLI exit code; message is shown to the user as-is.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
