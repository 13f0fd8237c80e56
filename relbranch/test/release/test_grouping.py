from __future__ import annotations

from relbranch.release.grouping import TagOrder, group_latest_per_major, order_tags


class TestGroupLatestPerMajor:
    def test_first_valid_tag_per_major_wins(self) -> None:
        tags = ["1.0.0", "1.2.0", "2.0.0", "3.0.0", "abc", "3.0.0-rc.1"]
        assert group_latest_per_major(tags) == {1: "1.0.0", 2: "2.0.0", 3: "3.0.0"}

    def test_invalid_tags_ignored(self) -> None:
        assert group_latest_per_major(["v1.0.0", "nightly", "1.0"]) == {}

    def test_empty(self) -> None:
        assert group_latest_per_major([]) == {}

    def test_prerelease_can_represent_a_major(self) -> None:
        assert group_latest_per_major(["4.0.0-rc.1", "4.0.0"]) == {4: "4.0.0-rc.1"}

    def test_insertion_order_is_first_appearance(self) -> None:
        groups = group_latest_per_major(["2.0.0", "1.0.0", "2.1.0", "0.1.0"])
        assert list(groups) == [2, 1, 0]

    def test_accepts_any_iterable(self) -> None:
        groups = group_latest_per_major(t for t in ["1.0.0", "1.1.0"])
        assert groups == {1: "1.0.0"}


class TestOrderTags:
    def test_listed_keeps_input(self) -> None:
        tags = ["1.0.0", "abc", "1.2.0"]
        assert order_tags(tags, TagOrder.LISTED) == tags

    def test_version_sorts_descending_with_others_last(self) -> None:
        tags = ["1.0.0", "abc", "1.10.0", "1.2.0", "2.0.0-rc.1", "2.0.0", "nightly"]
        assert order_tags(tags, TagOrder.VERSION) == [
            "2.0.0",
            "2.0.0-rc.1",
            "1.10.0",
            "1.2.0",
            "1.0.0",
            "abc",
            "nightly",
        ]

    def test_version_sort_is_stable_for_build_metadata(self) -> None:
        tags = ["1.0.0+b", "1.0.0+a"]
        assert order_tags(tags, TagOrder.VERSION) == ["1.0.0+b", "1.0.0+a"]

    def test_version_order_picks_newest_per_major(self) -> None:
        tags = ["1.0.0", "1.2.0", "2.0.0", "3.0.0", "abc", "3.0.0-rc.1"]
        groups = group_latest_per_major(order_tags(tags, TagOrder.VERSION))
        assert groups == {3: "3.0.0", 2: "2.0.0", 1: "1.2.0"}
