"""Tests for style fragment merging and descendant name collection."""

import copy

import pytest

from stylegen.errors import InvalidStyleError
from stylegen.merge import find_names_for_descendants, merge_styles, recursive_merge


# ---------------------------------------------------------------------------
# recursive_merge
# ---------------------------------------------------------------------------


class TestRecursiveMerge:
    def test_later_value_wins(self):
        assert recursive_merge({"color": "red"}, {"color": "blue"}) == {"color": "blue"}

    def test_disjoint_keys_are_unioned(self):
        merged = recursive_merge({"color": "red"}, {"margin": 0})
        assert merged == {"color": "red", "margin": 0}

    def test_nested_maps_merge_recursively(self):
        a = {":hover": {"color": "red", "margin": 1}}
        b = {":hover": {"color": "blue"}}
        assert recursive_merge(a, b) == {":hover": {"color": "blue", "margin": 1}}

    def test_lists_are_replaced(self):
        merged = recursive_merge({"fontFamily": ["a", "b"]}, {"fontFamily": ["c"]})
        assert merged == {"fontFamily": ["c"]}

    def test_map_replaces_leaf(self):
        merged = recursive_merge({"x": "flat"}, {"x": {"color": "red"}})
        assert merged == {"x": {"color": "red"}}

    def test_list_names_are_unioned(self):
        a = {">> span": {"_names": ["x"], "color": "red"}}
        b = {">> span": {"_names": ["y", "x"]}}
        merged = recursive_merge(a, b)
        assert merged == {">> span": {"_names": ["x", "y"], "color": "red"}}

    def test_mixed_names_are_unioned(self):
        a = {">> span": {"_names": {"x": True}}}
        b = {">> span": {"_names": {"y"}}}
        assert recursive_merge(a, b)[">> span"]["_names"] == ["x", "y"]

    def test_dict_names_merge_as_maps(self):
        a = {">> span": {"_names": {"x": True}}}
        b = {">> span": {"_names": {"y": True}}}
        assert recursive_merge(a, b)[">> span"]["_names"] == {"x": True, "y": True}

    def test_inputs_are_not_mutated(self):
        a = {":hover": {"color": "red"}}
        b = {":hover": {"margin": 0}}
        a_before, b_before = copy.deepcopy(a), copy.deepcopy(b)
        merged = recursive_merge(a, b)
        merged[":hover"]["padding"] = 1
        assert a == a_before
        assert b == b_before


# ---------------------------------------------------------------------------
# merge_styles
# ---------------------------------------------------------------------------


class TestMergeStyles:
    def test_single_fragment_is_identity(self):
        fragment = {"color": "red", ":hover": {"color": "blue"}}
        merged = merge_styles([fragment])
        assert merged == fragment
        assert merged is not fragment
        assert merged[":hover"] is not fragment[":hover"]

    def test_left_to_right_override(self):
        merged = merge_styles([{"color": "red"}, {"color": "blue"}])
        assert merged == {"color": "blue"}

    def test_disjoint_order_independent(self):
        a = {"color": "red"}
        b = {"margin": 4}
        assert merge_styles([a, b]) == merge_styles([b, a])

    def test_three_fragments(self):
        merged = merge_styles(
            [
                {"color": "red", "@media print": {"color": "black"}},
                {"margin": 0},
                {"@media print": {"margin": 1}},
            ]
        )
        assert merged == {
            "color": "red",
            "margin": 0,
            "@media print": {"color": "black", "margin": 1},
        }

    def test_empty_sequence_rejected(self):
        with pytest.raises(InvalidStyleError):
            merge_styles([])

    def test_non_mapping_fragment_rejected(self):
        with pytest.raises(InvalidStyleError, match="fragment 1"):
            merge_styles([{"color": "red"}, "color: blue"])


# ---------------------------------------------------------------------------
# find_names_for_descendants
# ---------------------------------------------------------------------------


class TestFindNamesForDescendants:
    def test_names_from_all_fragments(self):
        merged = merge_styles(
            [
                {">> span": {"_names": ["x"], "color": "red"}},
                {">> span": {"_names": ["y"]}},
            ]
        )
        assert find_names_for_descendants(merged) == {">> span": ["x", "y"]}

    def test_top_level_descendant(self):
        styles = {">> span": {"_names": {"x": True, "y": True}, "color": "green"}}
        assert find_names_for_descendants(styles) == {">> span": ["x", "y"]}

    def test_names_as_list_or_set(self):
        styles = {
            ">> a": {"_names": ["one"]},
            ">> b": {"_names": {"two"}},
        }
        assert find_names_for_descendants(styles) == {">> a": ["one"], ">> b": ["two"]}

    def test_descendant_without_names_is_absent(self):
        assert find_names_for_descendants({">> span": {"color": "red"}}) == {}

    def test_declarations_ignored(self):
        assert find_names_for_descendants({"color": "red", "margin": 0}) == {}

    def test_found_inside_pseudo_and_media(self):
        styles = {
            ":hover": {">> a": {"_names": ["h"]}},
            "@media print": {">> b": {"_names": ["p"]}},
        }
        assert find_names_for_descendants(styles) == {">> a": ["h"], ">> b": ["p"]}

    def test_deeper_levels_recorded_first(self):
        styles = {
            ">> outer": {
                "_names": ["o"],
                ">> inner": {"_names": ["i"]},
            }
        }
        names = find_names_for_descendants(styles)
        assert list(names) == [">> inner", ">> outer"]

    def test_same_key_accumulates(self):
        styles = {
            ">> a": {"_names": ["x"]},
            ":hover": {">> a": {"_names": ["y"]}},
        }
        assert find_names_for_descendants(styles) == {">> a": ["x", "y"]}

    def test_duplicates_are_kept(self):
        styles = {
            ">> a": {"_names": ["x"]},
            ":focus": {">> a": {"_names": ["x"]}},
        }
        assert find_names_for_descendants(styles) == {">> a": ["x", "x"]}

    def test_extends_given_map(self):
        names = {">> z": ["existing"]}
        find_names_for_descendants({">> a": {"_names": ["x"]}}, names)
        assert names == {">> z": ["existing"], ">> a": ["x"]}
