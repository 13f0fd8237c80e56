"""Exit codes for the relbranch CLI.

Every command maps its Outcome onto one of these codes. The values are part
of the CLI contract (CI workflows branch on them) and must remain stable:
- 0: Success, including runs that changed nothing
- 1: User error (bad options, unreadable config)
- 2: Context error (missing or malformed event payload, not a git repo)
- 3: Git error (checkout, branch creation or push failed)
- 4: Policy violation (release event does not follow the branching rules)
- 5: Internal error (unexpected exception)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    USER_ERROR = 1
    CONTEXT_ERROR = 2
    GIT_ERROR = 3
    POLICY_ERROR = 4
    INTERNAL_ERROR = 5

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
