"""
Gathering Concurrent Results into a Branch

Computations produced by independent tasks are combined with
branch_fold once they are all done. Children appear in the order the
futures are given (normally submission order), never completion order,
so the resulting tree is reproducible.
"""

from __future__ import annotations
import logging
from concurrent.futures import Future
from typing import Callable, List, Optional, Sequence, TypeVar

from .computation import DescribedComputation
from .syntax import branch_fold


logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")


def gather(description: str,
           futures: Sequence["Future[DescribedComputation[V]]"],
           fold: Optional[Callable[[List[V]], R]] = None,
           timeout: Optional[float] = None) -> DescribedComputation[R]:
    """
    Wait for `futures` and branch their computations under `description`.

    Args:
        description: Description of the parent node
        futures: Futures resolving to DescribedComputation, in the order
            their trees should appear
        fold: Applied to the list of values (default: keep the list)
        timeout: Per-future wait limit passed to Future.result

    Exceptions raised inside a task propagate from Future.result.
    """
    results = [future.result(timeout=timeout) for future in futures]
    logger.debug("Gathered %d results for %r", len(results), description)
    return branch_fold(description, results, fold if fold is not None else list)


__all__ = [
    'gather',
]
