"""
DescribedComputation
====================

Pairs an Outcome with the LogTree explaining how it was reached:

    DescribedComputation(outcome=Success(25), tree=<Calc [Got a, Got a^2]>)

Primitive constructors:
- success(value, description)  : Success + described leaf
- success(value)               : Success + NIL_TREE (to be named later)
- failure(description)         : Failure(description) + failed described leaf
- failure_log(dc)              : same outcome, root marked as failed

Sequential composition (`and_then`) merges the two trees with
`log_tree.merge` and short-circuits on Failure: the continuation is not
called, so steps that never ran contribute nothing to the log.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

from .labels import described_label
from .log_tree import LogTree, NIL_TREE, merge, with_root_label, collect_annotations
from .outcome import Outcome, Success, Failure
from .tree import leaf


V = TypeVar("V")
W = TypeVar("W")

Description = Union[str, Callable[[Any], str]]


@dataclass(frozen=True)
class DescribedComputation(Generic[V]):
    """
    A computation result together with its hierarchical log.

    Attributes:
        outcome: Success(value) or Failure(description)
        tree: Log tree recording the steps that produced the outcome
    """
    outcome: Outcome[V]
    tree: LogTree = NIL_TREE

    @property
    def is_success(self) -> bool:
        return self.outcome.is_success

    @property
    def value(self) -> V:
        """Success value; raises ValueError on a Failure."""
        return self.outcome.get()

    @property
    def failure_description(self) -> Optional[str]:
        return self.outcome.fold(lambda description: description, lambda _: None)

    # -------------------------------------------------------------------------
    # Sequential composition
    # -------------------------------------------------------------------------

    def and_then(self, f: Callable[[V], "DescribedComputation[W]"]) -> "DescribedComputation[W]":
        """
        Feed the success value to `f` and merge the logs.

        On Failure `f` is never called and the result keeps this tree.
        """
        if not self.outcome.is_success:
            return self
        following = f(self.outcome.value)
        if not isinstance(following, DescribedComputation):
            raise TypeError(
                f"and_then step must return a DescribedComputation, got {type(following).__name__}"
            )
        return DescribedComputation(following.outcome, merge(self.tree, following.tree))

    def map(self, f: Callable[[V], W]) -> "DescribedComputation[W]":
        """Transform the success value; the tree is unchanged."""
        return DescribedComputation(self.outcome.map(f), self.tree)

    def then(self, following: Union["DescribedComputation[W]",
                                    Callable[[], "DescribedComputation[W]"]]) -> "DescribedComputation[W]":
        """Sequence, discarding this value. Pass a callable to defer evaluation."""
        if callable(following):
            return self.and_then(lambda _: following())
        return self.and_then(lambda _: following)

    # -------------------------------------------------------------------------
    # Labelling and annotations (see syntax.py)
    # -------------------------------------------------------------------------

    def describe(self, description: str) -> "DescribedComputation[V]":
        """Give the root a description, or nest under a new described root."""
        from .syntax import hoist
        return hoist(description, self)

    def annotate(self, annotations: Iterable[Any]) -> "DescribedComputation[V]":
        """Add `annotations` to the root label."""
        from .syntax import annotate
        return annotate(self, annotations)

    def annotate_with(self, annotation: Any) -> "DescribedComputation[V]":
        """Add a single annotation to the root label."""
        return self.annotate((annotation,))

    def all_annotations(self) -> frozenset:
        return collect_annotations(self.tree)

    def failure_log(self) -> "DescribedComputation[V]":
        return failure_log(self)

    def show(self, renderer: Callable[[Any], str] = str, config=None) -> str:
        """Render the log tree as indented text."""
        from .render import show
        return show(self.tree, renderer, config)


# =============================================================================
# Primitive constructors
# =============================================================================

def _describe(value: Any, description: Description) -> str:
    return description(value) if callable(description) else description


def success(value: V, description: Optional[Description] = None) -> DescribedComputation[V]:
    """
    Lift a value into a successful computation.

    Args:
        value: The success value
        description: Text for a described leaf, or a function of `value`
            producing it. Omit to leave the tree empty (NIL_TREE).
    """
    if description is None:
        return DescribedComputation(Success(value), NIL_TREE)
    return DescribedComputation(Success(value), leaf(described_label(_describe(value, description), True)))


def failure(description: str) -> DescribedComputation[Any]:
    """Failed computation whose message and leaf both carry `description`."""
    return DescribedComputation(Failure(description), leaf(described_label(description, False)))


def failure_of(value: Any, description: Description) -> DescribedComputation[Any]:
    """Failure whose description may be computed from `value`."""
    return failure(_describe(value, description))


def failure_log(dc: DescribedComputation[V]) -> DescribedComputation[V]:
    """Mark the root of the log as failed; outcome and children untouched."""
    return DescribedComputation(dc.outcome, with_root_label(dc.tree, dc.tree.label.with_success(False)))


__all__ = [
    'Description',
    'DescribedComputation',
    'success',
    'failure',
    'failure_of',
    'failure_log',
]
