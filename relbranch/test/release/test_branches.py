from __future__ import annotations

import pytest

from relbranch.release.branches import (
    release_branch_major,
    release_branch_name,
)


def test_release_branch_name() -> None:
    assert release_branch_name(0) == "release/v0"
    assert release_branch_name(12) == "release/v12"


def test_release_branch_name_rejects_negative() -> None:
    with pytest.raises(ValueError):
        release_branch_name(-1)


@pytest.mark.parametrize(
    ("name", "major"),
    [
        ("release/v1", 1),
        ("release/v10", 10),
        ("release/v0", 0),
        ("release/v01", None),
        ("release/v00", None),
        ("release/v", None),
        ("release/v1.2", None),
        ("release/1", None),
        ("main", None),
        ("feature/release/v1", None),
    ],
)
def test_release_branch_major(name: str, major: int | None) -> None:
    assert release_branch_major(name) == major
