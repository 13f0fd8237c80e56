"""Tag grouping by major version.

group_latest_per_major keeps the first valid version it sees for each major,
so the caller decides which tag represents a major line by choosing the
order. order_tags provides the two supported orders.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from relbranch.release.semver import SemVer, is_valid_semver, major_of, parse_semver

__all__ = [
    "MajorGroups",
    "TagOrder",
    "group_latest_per_major",
    "order_tags",
]

MajorGroups = dict[int, str]


class TagOrder(StrEnum):
    """How tags are ordered before grouping.

    VERSION: newest first by SemVer precedence, so each major is represented
             by its highest version.
    LISTED: the order the tag source produced (git prints tags sorted by
            name, which usually picks the oldest tag of a major).
    """

    VERSION = "version"
    LISTED = "listed"


def group_latest_per_major(tags: Iterable[str]) -> MajorGroups:
    """Map each major version to the first valid tag seen for it.

    Invalid tags are skipped. Later tags for an already-claimed major are
    ignored. Dict insertion order follows first appearance.
    """
    groups: MajorGroups = {}
    for tag in tags:
        if not is_valid_semver(tag):
            continue
        major = major_of(tag)
        if major not in groups:
            groups[major] = tag
    return groups


def order_tags(tags: Iterable[str], order: TagOrder) -> list[str]:
    """Return tags in the requested order.

    For VERSION, valid versions come first sorted by descending precedence
    (ties, i.e. versions differing only in build metadata, keep their listed
    order), followed by every non-version tag in listed order.
    """
    listed = list(tags)
    if order is TagOrder.LISTED:
        return listed

    versions: list[tuple[str, SemVer]] = []
    others: list[str] = []
    for tag in listed:
        parsed = parse_semver(tag)
        if parsed is None:
            others.append(tag)
        else:
            versions.append((tag, parsed))

    versions.sort(key=lambda item: item[1].precedence_key(), reverse=True)
    return [tag for tag, _ in versions] + others
