"""
Tree - Immutable Ordered Rooted Trees
=====================================

A Tree is a label plus an ordered tuple of child trees. A leaf is simply
a tree with no children; `leaf` and `node` are the two factories.

Trees are pure values:
- Immutable: frozen dataclass, children held in a tuple
- Structural equality: equal labels and pairwise equal children, in order
- Finite: built bottom-up, so no node can alias itself

Chained computations build trees as deep as the chain is long, so every
whole-tree operation here (equality, hashing, pre-order flatten, size,
depth) walks the tree with an explicit work stack instead of recursion.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar


L = TypeVar("L")


@dataclass(frozen=True, eq=False)
class Tree(Generic[L]):
    """
    Immutable ordered rooted tree.

    Attributes:
        label: Label carried by the root node
        children: Ordered child subtrees (empty for a leaf)
    """
    label: L
    children: Tuple["Tree[L]", ...] = ()
    _hash: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children))

    @property
    def root_label(self) -> L:
        return self.label

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def flatten(self) -> "PreOrder[L]":
        """Lazy, restartable pre-order sequence of labels."""
        return PreOrder(self)

    def nodes(self) -> Iterator["Tree[L]"]:
        """Iterate over every subtree in pre-order."""
        stack: List[Tree[L]] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def size(self) -> int:
        """Number of nodes."""
        return sum(1 for _ in self.nodes())

    def depth(self) -> int:
        """Number of levels (a leaf has depth 1)."""
        deepest = 0
        stack: List[Tuple[Tree[L], int]] = [(self, 1)]
        while stack:
            current, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in current.children)
        return deepest

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        pending: List[Tuple[Tree, Tree]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if len(left.children) != len(right.children):
                return False
            if left._hash is not None and right._hash is not None and left._hash != right._hash:
                return False
            if left.label != right.label:
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        if self._hash is not None:
            return self._hash
        # Post-order: every child hash is cached before its parent needs it
        stack: List[Tuple[Tree, bool]] = [(self, False)]
        while stack:
            current, expanded = stack.pop()
            if current._hash is not None:
                continue
            if expanded:
                child_hashes = tuple(child._hash for child in current.children)
                object.__setattr__(current, '_hash', hash((current.label, child_hashes)))
            else:
                stack.append((current, True))
                stack.extend((child, False) for child in current.children if child._hash is None)
        return self._hash

    def __repr__(self) -> str:
        # Children shown by count only
        return f"Tree(label={self.label!r}, children=<{len(self.children)}>)"


class PreOrder(Generic[L]):
    """
    Pre-order view of a tree's labels.

    Iterating it twice walks the tree twice; nothing is materialized.
    """

    def __init__(self, tree: Tree[L]):
        self._tree = tree

    def __iter__(self) -> Iterator[L]:
        for subtree in self._tree.nodes():
            yield subtree.label

    def to_list(self) -> List[L]:
        return list(self)


def leaf(label: L) -> Tree[L]:
    """Create a tree with no children."""
    return Tree(label=label)


def node(label: L, children: Iterable[Tree[L]] = ()) -> Tree[L]:
    """Create a tree with the given ordered children."""
    return Tree(label=label, children=tuple(children))


__all__ = [
    'Tree',
    'PreOrder',
    'leaf',
    'node',
]
