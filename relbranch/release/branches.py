"""Release branch naming: release/v<major>."""

from __future__ import annotations

import re

__all__ = [
    "RELEASE_BRANCH_PREFIX",
    "release_branch_major",
    "release_branch_name",
]

RELEASE_BRANCH_PREFIX = "release/v"

_RELEASE_BRANCH_RE = re.compile(r"release/v(?P<major>0|[1-9][0-9]*)")


def release_branch_name(major: int) -> str:
    if major < 0:
        raise ValueError(f"major version must be non-negative: {major}")
    return f"{RELEASE_BRANCH_PREFIX}{major}"


def release_branch_major(name: str) -> int | None:
    """Major number encoded in a release branch name, None for other branches."""
    m = _RELEASE_BRANCH_RE.fullmatch(name)
    if m is None:
        return None
    return int(m.group("major"))
