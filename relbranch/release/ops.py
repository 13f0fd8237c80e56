"""Branch operations required by the release flows.

relbranch.git.Repository is the production implementation; tests use an
in-memory fake.
"""

from __future__ import annotations

from typing import Protocol

from relbranch.core.result import Result
from relbranch.git.repository import GitError

__all__ = ["BranchOps"]


class BranchOps(Protocol):
    """Version-control operations for one working tree."""

    def list_tags(self) -> Result[list[str], GitError]: ...

    def branch_exists(self, name: str) -> bool: ...

    def checkout_ref(self, ref: str) -> Result[None, GitError]: ...

    def create_branch(self, name: str) -> Result[None, GitError]: ...

    def push_branch(self, name: str) -> Result[None, GitError]: ...

    def checkout_branch(self, name: str) -> Result[None, GitError]: ...

    def parent_commit(self, sha: str) -> Result[str, GitError]: ...
