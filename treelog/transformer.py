"""
DescribedComputationT - Described Computations Inside an Effect
===============================================================

Wraps an effectful container of DescribedComputation, e.g. a list of
alternatives or an optional result:

    Effect[DescribedComputation[V]]

and_then unwraps one effect layer, then the described layer, and merges
the log trees exactly as DescribedComputation.and_then does. A Failure
in the described layer short-circuits the continuation for that branch.

Effects provided:
- LIST_EFFECT      : list monad, every combination in order
- OPTIONAL_EFFECT  : None means the value is absent
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .computation import Description, DescribedComputation, success
from .log_tree import merge
from .syntax import hoist


A = TypeVar("A")
B = TypeVar("B")


class Effect:
    """Minimal monad interface an effect must provide."""
    name = "effect"

    def pure(self, a: Any) -> Any:
        raise NotImplementedError

    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        raise NotImplementedError

    def flat_map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        raise NotImplementedError


class ListEffect(Effect):
    name = "list"

    def pure(self, a: Any) -> List[Any]:
        return [a]

    def map(self, fa: List[Any], f: Callable[[Any], Any]) -> List[Any]:
        return [f(a) for a in fa]

    def flat_map(self, fa: List[Any], f: Callable[[Any], List[Any]]) -> List[Any]:
        return [b for a in fa for b in f(a)]


class OptionalEffect(Effect):
    name = "optional"

    def pure(self, a: Any) -> Any:
        return a

    def map(self, fa: Optional[Any], f: Callable[[Any], Any]) -> Optional[Any]:
        return None if fa is None else f(fa)

    def flat_map(self, fa: Optional[Any], f: Callable[[Any], Optional[Any]]) -> Optional[Any]:
        return None if fa is None else f(fa)


LIST_EFFECT = ListEffect()
OPTIONAL_EFFECT = OptionalEffect()


@dataclass(frozen=True)
class DescribedComputationT(Generic[A]):
    """
    An effect wrapping DescribedComputation values.

    Attributes:
        effect: The Effect instance that knows how to map / flat_map `run`
        run: The wrapped container, Effect[DescribedComputation[A]]
    """
    effect: Effect
    run: Any

    @classmethod
    def lift(cls, effect: Effect, fa: Any, description: Description) -> "DescribedComputationT[A]":
        """Describe every value inside `fa` with a success leaf."""
        return cls(effect, effect.map(fa, lambda a: success(a, description)))

    @classmethod
    def pure(cls, effect: Effect, value: A) -> "DescribedComputationT[A]":
        """A single undescribed success."""
        return cls(effect, effect.pure(success(value)))

    def map(self, f: Callable[[A], B]) -> "DescribedComputationT[B]":
        return DescribedComputationT(self.effect, self.effect.map(self.run, lambda dc: dc.map(f)))

    def and_then(self, f: Callable[[A], "DescribedComputationT[B]"]) -> "DescribedComputationT[B]":
        effect = self.effect

        def bind(dc: DescribedComputation[A]):
            if not dc.is_success:
                return effect.pure(dc)
            following = f(dc.outcome.value)
            return effect.map(
                following.run,
                lambda next_dc: DescribedComputation(next_dc.outcome, merge(dc.tree, next_dc.tree)),
            )

        return DescribedComputationT(effect, effect.flat_map(self.run, bind))

    def hoist(self, description: str) -> "DescribedComputationT[A]":
        return DescribedComputationT(self.effect, self.effect.map(self.run, lambda dc: hoist(description, dc)))


__all__ = [
    'Effect',
    'ListEffect',
    'OptionalEffect',
    'LIST_EFFECT',
    'OPTIONAL_EFFECT',
    'DescribedComputationT',
]
