"""
Log Syntax - Branching, Hoisting, Folding, Annotating
=====================================================

Operators that build structure on top of DescribedComputation:

Branch:
    branch(d, items)            - new described root over the items' trees
    branch_fold(d, items, f)    - same, value is f(list of values)
    map_each(d, values, f)      - branch(d, [f(v) for v in values])

Hoist:
    hoist(d, dc)                - name an undescribed root, or nest a described one

Fold:
    fold_log(d, initial, step, values) - auditable fold, stops at first Failure

Annotations:
    annotate(dc, anns)          - union into the root label
    all_annotations(dc)         - union over every node

Lifting:
    from_bool / from_optional / from_either

Chaining:
    sequence(dcs)               - chain a list, collecting values
    @described                  - generator do-notation: x = yield dc

A branch that contains any Failure fails with the branch's own
description; the tree is the record of which child failed.
"""

from __future__ import annotations
import functools
import inspect
import logging
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .computation import Description, DescribedComputation, success, failure, failure_log
from .labels import described_label
from .log_tree import TreeAccumulator, all_successful, with_root_label, collect_annotations
from .outcome import Outcome, Success, Failure
from .tree import Tree


logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")


# ═══════════════════════════════════════════════════════════════════════════
# BRANCH OPERATIONS
# ═══════════════════════════════════════════════════════════════════════════

def branch_fold(description: str,
                items: Iterable[DescribedComputation[V]],
                fold: Callable[[List[V]], R]) -> DescribedComputation[R]:
    """
    Gather computations as children of a new described node.

    Args:
        description: Description of the new parent node
        items: Computations whose trees become the children, in order
        fold: Applied to the list of success values when none failed

    Returns:
        Failure(description) if any item failed, else Success(fold(values))
    """
    items = list(items)
    children = tuple(item.tree for item in items)
    failed = [item for item in items if not item.is_success]
    root = described_label(description, all_successful(children) and not failed)
    tree = Tree(root, children)

    logger.debug("Branch %r: %d children, %d failed", description, len(children), len(failed))

    if failed:
        return DescribedComputation(Failure(description), tree)
    return DescribedComputation(Success(fold([item.outcome.value for item in items])), tree)


def branch(description: str, items: Iterable[DescribedComputation[V]]) -> DescribedComputation[List[V]]:
    """branch_fold with the identity fold: the value is the list of values."""
    return branch_fold(description, items, lambda values: values)


def map_each(description: str,
             values: Iterable[V],
             f: Callable[[V], DescribedComputation[R]]) -> DescribedComputation[List[R]]:
    """Apply `f` to every value and branch the results under `description`."""
    return branch(description, [f(value) for value in values])


# ═══════════════════════════════════════════════════════════════════════════
# HOIST
# ═══════════════════════════════════════════════════════════════════════════

def hoist(description: str, dc: DescribedComputation[V]) -> DescribedComputation[V]:
    """
    Attach `description` to the root of `dc`'s tree.

    An undescribed root is adopted: it gets the description, keeps its
    children and annotations, and its success becomes the AND of its
    children. A described root is never renamed: a new described root
    is created with the whole existing tree as its only child.

    The outcome is preserved unchanged.
    """
    tree = dc.tree
    if tree.label.is_described:
        logger.debug("Hoist %r: wrapping described root", description)
        hoisted = Tree(described_label(description, tree.label.success), (tree,))
    else:
        logger.debug("Hoist %r: adopting undescribed root", description)
        hoisted = Tree(
            described_label(description, all_successful(tree.children), tree.label.annotations),
            tree.children,
        )
    return DescribedComputation(dc.outcome, hoisted)


# ═══════════════════════════════════════════════════════════════════════════
# FOLD
# ═══════════════════════════════════════════════════════════════════════════

def fold_log(description: str,
             initial: DescribedComputation[R],
             step: Callable[[R, V], DescribedComputation[R]],
             values: Iterable[V]) -> DescribedComputation[R]:
    """
    Fold `values` through `step`, logging every attempted step.

    Steps are chained with and_then, so each step's node lands as a
    sibling under one root. The first Failure stops the fold: no further
    value is pulled from `values`. The accumulated computation is hoisted
    under `description`, and the root is marked failed whenever the
    outcome is a Failure, even if no failed node was logged.
    """
    accumulated = initial
    if accumulated.is_success:
        for index, value in enumerate(values):
            accumulated = accumulated.and_then(functools.partial(_fold_step, step, value))
            if not accumulated.is_success:
                logger.debug("Fold %r: stopped at item %d", description, index)
                break
    hoisted = hoist(description, accumulated)
    if not accumulated.is_success:
        return failure_log(hoisted)
    return hoisted


def _fold_step(step, value, accumulator):
    return step(accumulator, value)


# ═══════════════════════════════════════════════════════════════════════════
# ANNOTATIONS
# ═══════════════════════════════════════════════════════════════════════════

def annotate(dc: DescribedComputation[V], annotations: Iterable[Any]) -> DescribedComputation[V]:
    """Add `annotations` to the root label only; outcome and children untouched."""
    if isinstance(annotations, (str, bytes)):
        raise TypeError("annotations must be a collection; use annotate_with for a single value")
    label = dc.tree.label.with_annotations(annotations)
    return DescribedComputation(dc.outcome, with_root_label(dc.tree, label))


def all_annotations(dc: DescribedComputation[Any]) -> frozenset:
    return collect_annotations(dc.tree)


# ═══════════════════════════════════════════════════════════════════════════
# LIFTING
# ═══════════════════════════════════════════════════════════════════════════

def from_bool(condition: bool,
              failure_description: str,
              success_description: Optional[str] = None) -> DescribedComputation[bool]:
    """
    Treat `condition` as success (True) or failure (False).

    One description serves both cases when `success_description` is omitted.
    """
    if condition:
        return success(True, success_description if success_description is not None else failure_description)
    return failure(failure_description)


def from_optional(value: Optional[V],
                  none_description: str,
                  some_description: Optional[Description] = None) -> DescribedComputation[V]:
    """Treat None as failure; `some_description` may be a function of the value."""
    if value is None:
        return failure(none_description)
    return success(value, some_description if some_description is not None else none_description)


def from_either(outcome: Outcome[V],
                description: Optional[Description] = None,
                left_description: Optional[Callable[[str], str]] = None) -> DescribedComputation[V]:
    """
    Lift an Outcome, describing both cases.

    Args:
        outcome: Success(value) or Failure(message)
        description: Success description (string or function of the value)
        left_description: Function of the failure message. When omitted,
            a string `description` yields "<description> - <message>",
            otherwise the message itself is used.
    """
    if left_description is None:
        if isinstance(description, str):
            left_description = lambda message: f"{description} - {message}"
        else:
            left_description = lambda message: message

    def on_success(value):
        if description is None:
            return success(value)
        return success(value, description)

    return outcome.fold(lambda message: failure(left_description(message)), on_success)


def optional_or_default(value: Optional[V],
                        f: Callable[[V], DescribedComputation[R]],
                        default: DescribedComputation[Optional[R]]) -> DescribedComputation[Optional[R]]:
    """`f(value)` when a value is present, otherwise the default computation."""
    if value is None:
        return default
    return f(value)


# ═══════════════════════════════════════════════════════════════════════════
# CHAINING
# ═══════════════════════════════════════════════════════════════════════════

def sequence(dcs: Iterable[DescribedComputation[V]]) -> DescribedComputation[List[V]]:
    """
    Chain computations left to right, collecting their values.

    Trees merge as with and_then; the first Failure ends the chain and
    later computations are not consumed from the iterable.
    """
    log = TreeAccumulator()
    values: List[V] = []
    for dc in dcs:
        log.add(dc.tree)
        if not dc.is_success:
            return DescribedComputation(dc.outcome, log.result())
        values.append(dc.outcome.value)
    return DescribedComputation(Success(values), log.result())


def described(fn: Callable[..., Any]) -> Callable[..., DescribedComputation[Any]]:
    """
    Do-notation for DescribedComputation via generators.

    Inside the decorated generator, `x = yield dc` binds the success value
    of `dc`; the generator's return value becomes the success value. The
    first Failure closes the generator, so later steps never run.

    Example:
        >>> @described
        ... def calc():
        ...     a = yield success(5, "Got a")
        ...     b = yield success(a * a, "Got a^2")
        ...     return b
        >>> calc().describe("Calc").value
        25
    """
    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> DescribedComputation[Any]:
        steps = fn(*args, **kwargs)
        if not inspect.isgenerator(steps):
            raise TypeError(
                f"@described expects a generator function, {fn.__name__} returned {type(steps).__name__}"
            )
        log = TreeAccumulator()
        sent = None
        while True:
            try:
                step = steps.send(sent)
            except StopIteration as stop:
                return DescribedComputation(Success(stop.value), log.result())
            if not isinstance(step, DescribedComputation):
                steps.close()
                raise TypeError(
                    f"@described generators must yield DescribedComputation, got {type(step).__name__}"
                )
            log.add(step.tree)
            if not step.is_success:
                steps.close()
                return DescribedComputation(step.outcome, log.result())
            sent = step.outcome.value

    return wrapper


__all__ = [
    'branch',
    'branch_fold',
    'map_each',
    'hoist',
    'fold_log',
    'annotate',
    'all_annotations',
    'from_bool',
    'from_optional',
    'from_either',
    'optional_or_default',
    'sequence',
    'described',
]
