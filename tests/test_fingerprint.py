"""Tests for attribute and node fingerprints over in-memory trees."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from xmlmatch_core.fingerprint import (
    DepthLimitExceededError,
    attribute_key,
    attributes_key,
    node_key,
)
from xmlmatch_core.keys import combine_loosely, combine_uniquely, hash_text


@dataclass(frozen=True)
class Attr:
    name: str
    value: str


@dataclass
class Node:
    tag_name: str
    text_value: str = ""
    attrs: list[Attr] = field(default_factory=list)
    kids: list["Node"] = field(default_factory=list)

    def attributes(self):
        return iter(self.attrs)

    def children(self):
        return iter(self.kids)


def _chain(depth: int) -> Node:
    """A single path of nested elements, *depth* levels below the root."""
    node = Node("leaf")
    for i in range(depth):
        node = Node(f"n{i}", kids=[node])
    return node


# ── attribute_key / attributes_key ───────────────────────────────────


class TestAttributeKeys:
    def test_attribute_key_formula(self):
        attr = Attr("id", "42")
        assert attribute_key(attr) == combine_uniquely(hash_text("id"), hash_text("42"))

    def test_name_and_value_roles_differ(self):
        assert attribute_key(Attr("a", "b")) != attribute_key(Attr("b", "a"))

    def test_no_attributes_is_zero(self):
        assert attributes_key(Node("r")) == 0

    def test_attribute_order_ignored(self):
        attrs = [Attr("a", "1"), Attr("b", "2"), Attr("c", "3")]
        forward = Node("r", attrs=attrs)
        backward = Node("r", attrs=list(reversed(attrs)))
        assert attributes_key(forward) == attributes_key(backward)

    def test_attributes_key_is_xor_of_attribute_keys(self):
        attrs = [Attr("a", "1"), Attr("b", "2")]
        expected = combine_loosely(*(attribute_key(a) for a in attrs))
        assert attributes_key(Node("r", attrs=attrs)) == expected

    def test_value_change_detected(self):
        assert attributes_key(Node("r", attrs=[Attr("a", "1")])) != attributes_key(
            Node("r", attrs=[Attr("a", "2")])
        )


# ── node_key ─────────────────────────────────────────────────────────


class TestNodeKey:
    def test_leaf_formula(self):
        leaf = Node("x", text_value="t", attrs=[Attr("k", "v")])
        expected = combine_uniquely(
            hash_text("x"),
            hash_text("t"),
            attribute_key(Attr("k", "v")),
            0,
        )
        assert node_key(leaf) == expected

    def test_parent_folds_children_loosely(self):
        x, y = Node("x"), Node("y")
        parent = Node("r", kids=[x, y])
        expected = combine_uniquely(
            hash_text("r"),
            hash_text(""),
            0,
            combine_loosely(node_key(x), node_key(y)),
        )
        assert node_key(parent) == expected

    def test_sibling_order_ignored(self):
        a = Node("r", kids=[Node("x"), Node("y", text_value="hi")])
        b = Node("r", kids=[Node("y", text_value="hi"), Node("x")])
        assert node_key(a) == node_key(b)

    def test_nested_reordering_ignored(self):
        a = Node("r", kids=[Node("p", kids=[Node("x"), Node("y")]), Node("q")])
        b = Node("r", kids=[Node("q"), Node("p", kids=[Node("y"), Node("x")])])
        assert node_key(a) == node_key(b)

    def test_tag_change_detected(self):
        assert node_key(Node("r")) != node_key(Node("s"))

    def test_text_change_detected(self):
        assert node_key(Node("r", text_value="hello")) != node_key(Node("r", text_value="world"))

    def test_tag_and_text_roles_differ(self):
        assert node_key(Node("a", text_value="b")) != node_key(Node("b", text_value="a"))

    def test_change_propagates_to_ancestors(self):
        before = Node("r", kids=[Node("p", kids=[Node("x", attrs=[Attr("v", "1")])])])
        after = Node("r", kids=[Node("p", kids=[Node("x", attrs=[Attr("v", "2")])])])
        assert node_key(before) != node_key(after)

    def test_child_moved_between_parents_detected(self):
        a = Node("r", kids=[Node("p", kids=[Node("x")]), Node("q")])
        b = Node("r", kids=[Node("p"), Node("q", kids=[Node("x")])])
        assert node_key(a) != node_key(b)

    def test_deterministic(self):
        tree = Node("r", attrs=[Attr("a", "1")], kids=[Node("x"), Node("y")])
        assert node_key(tree) == node_key(tree)

    def test_read_only(self):
        tree = Node("r", attrs=[Attr("a", "1")], kids=[Node("x")])
        node_key(tree)
        assert tree.tag_name == "r"
        assert tree.attrs == [Attr("a", "1")]
        assert [k.tag_name for k in tree.kids] == ["x"]

    @pytest.mark.parametrize("width", [32, 64, 128])
    def test_width_bounds_key(self, width):
        tree = Node("r", kids=[Node("x"), Node("y")])
        assert 0 <= node_key(tree, width=width) < (1 << width)


# ── depth limit ──────────────────────────────────────────────────────


class TestDepthLimit:
    def test_within_limit(self):
        assert node_key(_chain(5), max_depth=5) == node_key(_chain(5))

    def test_exceeding_limit_raises(self):
        with pytest.raises(DepthLimitExceededError) as exc_info:
            node_key(_chain(5), max_depth=4)
        assert exc_info.value.max_depth == 4
        assert exc_info.value.tag_name == "leaf"

    def test_unbounded_by_default(self):
        assert isinstance(node_key(_chain(200)), int)
