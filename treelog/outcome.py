"""
Outcome - Success or Failure
============================

The result half of a DescribedComputation:

    Success(value)        - the computation produced a value
    Failure(description)  - the computation stopped; description says why

This is the only error channel of the algebra. Failing never raises.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar


T = TypeVar("T")
U = TypeVar("U")


class Outcome(ABC, Generic[T]):
    """Either a Success carrying a value or a Failure carrying a message."""

    @property
    @abstractmethod
    def is_success(self) -> bool:
        ...

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @abstractmethod
    def fold(self, on_failure: Callable[[str], U], on_success: Callable[[T], U]) -> U:
        ...

    def map(self, f: Callable[[T], U]) -> "Outcome[U]":
        return self.fold(lambda _: self, lambda value: Success(f(value)))

    def get(self) -> T:
        """Return the success value, or raise ValueError on a Failure."""
        def fail(description: str):
            raise ValueError(f"Outcome is a failure: {description}")
        return self.fold(fail, lambda value: value)

    def get_or_else(self, default: T) -> T:
        return self.fold(lambda _: default, lambda value: value)


@dataclass(frozen=True)
class Success(Outcome[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def fold(self, on_failure, on_success):
        return on_success(self.value)


@dataclass(frozen=True)
class Failure(Outcome[Any]):
    description: str

    @property
    def is_success(self) -> bool:
        return False

    def fold(self, on_failure, on_success):
        return on_failure(self.description)


__all__ = [
    'Outcome',
    'Success',
    'Failure',
]
