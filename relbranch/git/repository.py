"""Git repository adapter.

Repository implements the branch operations the release flows need
(relbranch.release.ops.BranchOps) on top of the git CLI. Every operation that
can fail returns a Result.

Usage:
    repo = Repository(Path("/path/to/repo"), remote="origin")

    match repo.list_tags():
        case Ok(tags):
            print(tags)
        case Err(e):
            print(f"{e.command}: {e.message}")

    if not repo.branch_exists("release/v1"):
        repo.checkout_ref("1.4.2")
        repo.create_branch("release/v1")
        repo.checkout_branch("main")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relbranch.core.config import DEFAULT_REMOTE
from relbranch.core.result import Err, Ok, Result
from relbranch.platform.process import ProcessError
from relbranch.platform.process import run as run_process

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "push origin release/v1")
        message: Error message, usually git's stderr
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1

    def __str__(self) -> str:
        return f"git {self.command}: {self.message}"


class Repository:
    """A git working tree plus the remote that branches are pushed to.

    Attributes:
        path: Path to the working tree
        remote: Remote name used for pushes and remote branch lookups
    """

    def __init__(
        self,
        path: Path,
        *,
        remote: str = DEFAULT_REMOTE,
        timeout: float | None = None,
    ) -> None:
        self.path = path
        self.remote = remote
        self._timeout = timeout

    def is_work_tree(self) -> bool:
        """Check that path is inside a git working tree."""
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        match result:
            case Ok(stdout):
                return stdout.strip() == "true"
            case Err(_):
                return False

    def list_tags(self) -> Result[list[str], GitError]:
        """List all tags in the order git prints them."""
        return self._call(["tag", "--list"], "tag --list").map(
            lambda stdout: [line.strip() for line in stdout.splitlines() if line.strip()]
        )

    def branch_exists(self, name: str) -> bool:
        """True if the branch exists locally or on the remote.

        A branch known only as a remote-tracking ref still counts, so fresh
        clones (which only have the default branch locally) do not try to
        recreate branches that were already pushed.
        """
        for ref in (f"refs/heads/{name}", f"refs/remotes/{self.remote}/{name}"):
            if isinstance(self._run(["rev-parse", "--verify", "--quiet", ref]), Ok):
                return True
        return False

    def checkout_ref(self, ref: str) -> Result[None, GitError]:
        """Check out ref (tag or commit) in detached HEAD state."""
        return self._call(["checkout", "--detach", ref], f"checkout {ref}").map(lambda _: None)

    def create_branch(self, name: str) -> Result[None, GitError]:
        """Create a branch at HEAD without switching to it.

        Fails if the branch already exists.
        """
        return self._call(["branch", name], f"branch {name}").map(lambda _: None)

    def push_branch(self, name: str) -> Result[None, GitError]:
        """Push a local branch to the remote under the same name."""
        refspec = f"refs/heads/{name}:refs/heads/{name}"
        return self._call(
            ["push", self.remote, refspec],
            f"push {self.remote} {name}",
        ).map(lambda _: None)

    def checkout_branch(self, name: str) -> Result[None, GitError]:
        return self._call(["checkout", name], f"checkout {name}").map(lambda _: None)

    def current_branch(self) -> str | None:
        """Get current branch name.

        Returns None if detached HEAD or error.
        """
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        match result:
            case Ok(stdout):
                branch = stdout.strip()
                return None if branch == "HEAD" else branch
            case Err(_):
                return None

    def parent_commit(self, sha: str) -> Result[str, GitError]:
        """Resolve the first parent of a commit."""
        return self._call(["rev-parse", "--verify", f"{sha}^"], f"rev-parse {sha}^").map(
            lambda stdout: stdout.strip()
        )

    def remote_default_branch(self) -> str | None:
        """Default branch advertised by the remote (refs/remotes/<remote>/HEAD).

        Returns None when the symbolic ref is not set, e.g. in repos that were
        not created by clone.
        """
        result = self._run(["symbolic-ref", "--short", f"refs/remotes/{self.remote}/HEAD"])
        match result:
            case Ok(stdout):
                ref = stdout.strip()
                prefix = f"{self.remote}/"
                if ref.startswith(prefix):
                    ref = ref[len(prefix) :]
                return ref or None
            case Err(_):
                return None

    def _call(self, args: list[str], command: str) -> Result[str, GitError]:
        """Run git and convert process failures into GitError."""
        result = self._run(args)
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=command,
                        message=e.detail,
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=self._timeout,
        )
