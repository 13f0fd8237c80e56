"""Shared fixtures: an in-memory stand-in for a git working tree."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from relbranch.core.result import Err, Ok, Result
from relbranch.git.repository import GitError
from relbranch.output.console import MockConsole


class FakeBranchOps:
    """BranchOps implementation backed by dicts.

    branches maps branch name -> ref it points at. head is the branch that is
    checked out, or None when detached at detached_at.
    """

    def __init__(
        self,
        *,
        tags: Iterable[str] = (),
        branches: Iterable[str] = ("main",),
        remote_branches: Iterable[str] = (),
        parents: dict[str, str] | None = None,
        fail: dict[tuple[str, str], str] | None = None,
        raise_on: tuple[str, str] | None = None,
    ) -> None:
        self.tags = list(tags)
        self.branches: dict[str, str] = {name: f"{name}-tip" for name in branches}
        self.remote_branches = set(remote_branches)
        self.parents = dict(parents or {})
        self.fail = dict(fail or {})
        self.raise_on = raise_on
        self.head: str | None = next(iter(self.branches), None)
        self.detached_at: str | None = None
        self.pushed: list[str] = []
        self.calls: list[tuple[str, str]] = []

    def _check(self, op: str, arg: str) -> GitError | None:
        self.calls.append((op, arg))
        if self.raise_on == (op, arg):
            raise RuntimeError(f"{op} {arg} exploded")
        message = self.fail.get((op, arg))
        if message is not None:
            return GitError(command=f"{op} {arg}", message=message)
        return None

    def list_tags(self) -> Result[list[str], GitError]:
        error = self._check("list_tags", "")
        if error:
            return Err(error)
        return Ok(list(self.tags))

    def branch_exists(self, name: str) -> bool:
        self.calls.append(("branch_exists", name))
        return name in self.branches or name in self.remote_branches

    def checkout_ref(self, ref: str) -> Result[None, GitError]:
        error = self._check("checkout_ref", ref)
        if error:
            return Err(error)
        self.head = None
        self.detached_at = ref
        return Ok(None)

    def create_branch(self, name: str) -> Result[None, GitError]:
        error = self._check("create_branch", name)
        if error:
            return Err(error)
        if name in self.branches:
            return Err(GitError(command=f"branch {name}", message="already exists"))
        position = self.detached_at if self.head is None else self.branches[self.head]
        self.branches[name] = position or ""
        return Ok(None)

    def push_branch(self, name: str) -> Result[None, GitError]:
        error = self._check("push_branch", name)
        if error:
            return Err(error)
        self.pushed.append(name)
        self.remote_branches.add(name)
        return Ok(None)

    def checkout_branch(self, name: str) -> Result[None, GitError]:
        error = self._check("checkout_branch", name)
        if error:
            return Err(error)
        if name not in self.branches:
            return Err(GitError(command=f"checkout {name}", message="no such branch"))
        self.head = name
        self.detached_at = None
        return Ok(None)

    def parent_commit(self, sha: str) -> Result[str, GitError]:
        error = self._check("parent_commit", sha)
        if error:
            return Err(error)
        parent = self.parents.get(sha)
        if parent is None:
            return Err(GitError(command=f"rev-parse {sha}^", message="unknown revision"))
        return Ok(parent)

    def ops_named(self, op: str) -> list[str]:
        return [arg for name, arg in self.calls if name == op]


@pytest.fixture
def make_ops() -> Callable[..., FakeBranchOps]:
    return FakeBranchOps


@pytest.fixture
def console() -> MockConsole:
    return MockConsole()
