"""
Tests for Tree and LogTreeLabel
"""

import pytest

from treelog.tree import Tree, leaf, node
from treelog.labels import (
    DescribedLogTreeLabel,
    UndescribedLogTreeLabel,
    described_label,
    undescribed_label,
)


def deep_chain(depth, bottom="x"):
    tree = leaf(bottom)
    for i in range(depth):
        tree = node(f"n{i}", [tree])
    return tree


class TestTree:
    def test_leaf_has_no_children(self):
        t = leaf(1)
        assert t.label == 1
        assert t.root_label == 1
        assert t.children == ()
        assert t.is_leaf

    def test_node_keeps_child_order(self):
        t = node(1, [leaf(2), leaf(3)])
        assert [c.label for c in t.children] == [2, 3]
        assert not t.is_leaf

    def test_children_are_stored_as_tuple(self):
        t = Tree(1, [leaf(2)])
        assert isinstance(t.children, tuple)

    def test_structural_equality(self):
        a = node(1, [leaf(2), node(3, [leaf(4)])])
        b = node(1, [leaf(2), node(3, [leaf(4)])])
        assert a == b
        assert hash(a) == hash(b)

    def test_child_order_matters(self):
        assert node(1, [leaf(2), leaf(3)]) != node(1, [leaf(3), leaf(2)])

    def test_different_child_count(self):
        assert node(1, [leaf(2)]) != node(1, [leaf(2), leaf(2)])

    def test_not_equal_to_other_types(self):
        assert leaf(1) != 1

    def test_usable_in_sets(self):
        trees = {node(1, [leaf(2)]), node(1, [leaf(2)]), leaf(1)}
        assert len(trees) == 2

    def test_flatten_is_pre_order(self):
        t = node(1, [node(2, [leaf(3), leaf(4)]), leaf(5)])
        assert list(t.flatten()) == [1, 2, 3, 4, 5]

    def test_flatten_is_restartable(self):
        labels = node(1, [leaf(2), leaf(3)]).flatten()
        assert list(labels) == list(labels) == [1, 2, 3]
        assert labels.to_list() == [1, 2, 3]

    def test_size_and_depth(self):
        t = node(1, [node(2, [leaf(3)]), leaf(4)])
        assert t.size() == 4
        assert t.depth() == 3
        assert leaf(0).depth() == 1

    def test_repr_is_shallow(self):
        assert repr(node("a", [leaf("b")])) == "Tree(label='a', children=<1>)"


class TestDeepTrees:
    DEPTH = 20000

    def test_equality_of_deep_trees(self):
        assert deep_chain(self.DEPTH) == deep_chain(self.DEPTH)

    def test_inequality_at_the_bottom(self):
        assert deep_chain(self.DEPTH, "x") != deep_chain(self.DEPTH, "y")

    def test_hash_of_deep_tree(self):
        assert hash(deep_chain(self.DEPTH)) == hash(deep_chain(self.DEPTH))

    def test_flatten_deep_tree(self):
        labels = list(deep_chain(self.DEPTH).flatten())
        assert len(labels) == self.DEPTH + 1
        assert labels[-1] == "x"

    def test_depth_of_deep_tree(self):
        assert deep_chain(self.DEPTH).depth() == self.DEPTH + 1


class TestLogTreeLabel:
    def test_described_label(self):
        label = described_label("Step", True, {"k"})
        assert isinstance(label, DescribedLogTreeLabel)
        assert label.description == "Step"
        assert label.success is True
        assert label.annotations == frozenset({"k"})
        assert label.is_described

    def test_undescribed_label_defaults(self):
        label = undescribed_label(False)
        assert isinstance(label, UndescribedLogTreeLabel)
        assert label.success is False
        assert label.annotations == frozenset()
        assert not label.is_described

    def test_annotations_are_coerced_to_frozenset(self):
        label = DescribedLogTreeLabel("d", True, [1, 2, 2])
        assert label.annotations == frozenset({1, 2})
        hash(label)

    def test_fold(self):
        on_d = lambda l: "described:" + l.description
        on_u = lambda l: "undescribed"
        assert described_label("a", True).fold(on_d, on_u) == "described:a"
        assert undescribed_label(True).fold(on_d, on_u) == "undescribed"

    def test_with_annotations_is_union(self):
        label = described_label("a", False, {1})
        updated = label.with_annotations({2, 3})
        assert updated.annotations == frozenset({1, 2, 3})
        assert updated.description == "a"
        assert updated.success is False
        assert label.annotations == frozenset({1})

    def test_with_annotations_subset_returns_same_label(self):
        label = undescribed_label(True, {1, 2})
        assert label.with_annotations({1}) is label

    def test_with_success(self):
        label = described_label("a", True, {1})
        failed = label.with_success(False)
        assert failed == described_label("a", False, {1})

    def test_described_and_undescribed_never_equal(self):
        assert described_label("", True) != undescribed_label(True)

    @pytest.mark.parametrize("annotations", [set(), {1}, {1, 2}])
    def test_equality_by_value(self, annotations):
        assert described_label("a", True, annotations) == described_label("a", True, set(annotations))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
