"""Semantic version (SemVer 2.0.0) classification and precedence.

Tags are versions only when they match the full grammar, without any "v"
prefix: "1.2.3", "2.0.0-rc.1", "1.0.0+build.5". Anything else is simply not
a version and is ignored by the release flows.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "SemVer",
    "is_valid_semver",
    "major_of",
    "parse_semver",
]

_NUM = r"0|[1-9]\d*"
_PRE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

_SEMVER_RE = re.compile(
    rf"(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<prerelease>{_PRE_ID}(?:\.{_PRE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def precedence_key(self) -> tuple[int, int, int, int, tuple[tuple[int, int, str], ...]]:
        """Sort key implementing SemVer precedence; build metadata is ignored.

        A release sorts above all of its pre-releases. Numeric pre-release
        identifiers sort below alphanumeric ones, and a shorter identifier list
        sorts below a longer one sharing the same prefix.
        """
        ids = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part) for part in self.prerelease
        )
        return (self.major, self.minor, self.patch, 0 if self.prerelease else 1, ids)

    def __str__(self) -> str:
        s = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            s += "-" + ".".join(self.prerelease)
        if self.build:
            s += "+" + ".".join(self.build)
        return s


def parse_semver(tag: str) -> SemVer | None:
    m = _SEMVER_RE.fullmatch(tag)
    if m is None:
        return None
    pre = m.group("prerelease")
    build = m.group("build")
    return SemVer(
        major=int(m.group("major")),
        minor=int(m.group("minor")),
        patch=int(m.group("patch")),
        prerelease=tuple(pre.split(".")) if pre else (),
        build=tuple(build.split(".")) if build else (),
    )


def is_valid_semver(tag: str) -> bool:
    return _SEMVER_RE.fullmatch(tag) is not None


def major_of(tag: str) -> int:
    """Major component of a valid version.

    Raises:
        ValueError: if tag is not a valid semantic version.
    """
    m = _SEMVER_RE.fullmatch(tag)
    if m is None:
        raise ValueError(f"not a semantic version: {tag!r}")
    return int(m.group("major"))
