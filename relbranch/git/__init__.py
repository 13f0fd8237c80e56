"""Git operations module.

Usage:
    from relbranch.git import Repository

    repo = Repository(Path("/path/to/repo"))
    tags = repo.list_tags()
"""

from relbranch.git.repository import (
    GitError,
    Repository,
)

__all__ = [
    "GitError",
    "Repository",
]
