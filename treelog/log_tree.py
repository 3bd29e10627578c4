"""
Log Tree Algebra
================

A log tree is a Tree whose labels are LogTreeLabels. Sequential
composition combines the trees of its two halves with `merge`:

    merge(NIL, t)           = t
    merge(t, NIL)           = t
    merge(U(a), U(b))       = U(a.s and b.s, a.ann | b.ann)[a.children ++ b.children]
    merge(U(a), D)          = U(a.s and D.s, a.ann)[a.children ++ [D]]
    merge(D, U(b))          = U(D.s and b.s, b.ann)[[D] ++ b.children]
    merge(D1, D2)           = U(D1.s and D2.s)[[D1, D2]]

Undescribed roots are absorbed, so a chain of steps accumulates as
siblings under one unnamed node rather than nesting. Described subtrees
are never absorbed; they keep their names and become children.

Properties:
- Identity: NIL_TREE on either side returns the other tree untouched
- Associative: merge(merge(a, b), c) == merge(a, merge(b, c))
- Only the two roots are inspected, so merge is O(children) not O(tree)
"""

from __future__ import annotations
from typing import Iterable, List, Optional

from .labels import LogTreeLabel, undescribed_label
from .tree import Tree, leaf


LogTree = Tree[LogTreeLabel]

# Zero-value tree: "nothing has happened yet", the identity for merge
NIL_TREE: LogTree = leaf(undescribed_label(True))


def is_nil(tree: LogTree) -> bool:
    """True for the undescribed, successful, unannotated, childless leaf."""
    return tree is NIL_TREE or (tree.is_leaf and tree.label == NIL_TREE.label)


def merge(left: LogTree, right: LogTree) -> LogTree:
    """
    Combine the trees of two sequentially composed computations.

    Args:
        left: Tree of the computation that ran first
        right: Tree of the computation that ran second

    Returns:
        The combined tree (see module docstring for the rules)
    """
    if not isinstance(left, Tree) or not isinstance(right, Tree):
        raise TypeError("merge expects two Tree instances")

    if is_nil(left):
        return right
    if is_nil(right):
        return left

    left_label, right_label = left.label, right.label
    success = left_label.success and right_label.success

    if not left_label.is_described and not right_label.is_described:
        return Tree(
            undescribed_label(success, left_label.annotations | right_label.annotations),
            left.children + right.children,
        )
    if not left_label.is_described:
        return Tree(undescribed_label(success, left_label.annotations), left.children + (right,))
    if not right_label.is_described:
        return Tree(undescribed_label(success, right_label.annotations), (left,) + right.children)
    return Tree(undescribed_label(success), (left, right))


class TreeAccumulator:
    """
    Left fold of merge that appends children in place.

    Once two non-NIL trees have been merged the root is always a fresh
    undescribed node, so later trees only extend its child list. A chain
    of n trees costs O(n) here instead of the O(n^2) of repeated merge.
    """

    def __init__(self):
        self._tree: LogTree = NIL_TREE
        self._success = True
        self._annotations: set = set()
        self._children: Optional[List[LogTree]] = None

    def add(self, tree: LogTree) -> None:
        if not isinstance(tree, Tree):
            raise TypeError(f"expected a Tree, got {type(tree).__name__}")
        if is_nil(tree):
            return
        if self._children is None:
            if is_nil(self._tree):
                self._tree = tree
                return
            merged = merge(self._tree, tree)
            self._success = merged.label.success
            self._annotations = set(merged.label.annotations)
            self._children = list(merged.children)
            return
        label = tree.label
        self._success = self._success and label.success
        if label.is_described:
            self._children.append(tree)
        else:
            self._annotations.update(label.annotations)
            self._children.extend(tree.children)

    def result(self) -> LogTree:
        """The tree that merging every added tree in order would give."""
        if self._children is None:
            return self._tree
        return Tree(undescribed_label(self._success, self._annotations), tuple(self._children))


def merge_all(trees: Iterable[LogTree]) -> LogTree:
    """Left fold of merge over `trees`, starting from NIL_TREE."""
    log = TreeAccumulator()
    for tree in trees:
        log.add(tree)
    return log.result()


def all_successful(trees: Iterable[LogTree]) -> bool:
    """AND of the root success flags (True for no trees)."""
    return all(tree.label.success for tree in trees)


def with_root_label(tree: LogTree, label: LogTreeLabel) -> LogTree:
    """Same children, new root label."""
    return Tree(label, tree.children)


def collect_annotations(tree: LogTree) -> frozenset:
    """Union of the annotations of every node in the tree."""
    collected: set = set()
    for label in tree.flatten():
        collected.update(label.annotations)
    return frozenset(collected)


__all__ = [
    'LogTree',
    'NIL_TREE',
    'is_nil',
    'merge',
    'merge_all',
    'TreeAccumulator',
    'all_successful',
    'with_root_label',
    'collect_annotations',
]
