"""
Log Tree Labels

Every node of a log tree carries a LogTreeLabel:

    Described(description, success, annotations)
    Undescribed(success, annotations)

An undescribed label marks a group of steps nobody has named yet; a later
hoist can supply the name. Labels are immutable: with_annotations and
with_success return new labels.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Callable, FrozenSet, Iterable, TypeVar


T = TypeVar("T")


class LogTreeLabel(ABC):
    """Base for the two label variants."""

    success: bool
    annotations: FrozenSet[Any]

    @property
    @abstractmethod
    def is_described(self) -> bool:
        ...

    @abstractmethod
    def fold(self,
             on_described: Callable[["DescribedLogTreeLabel"], T],
             on_undescribed: Callable[["UndescribedLogTreeLabel"], T]) -> T:
        """Structural case-match over the two variants."""

    def with_annotations(self, added: Iterable[Any]) -> "LogTreeLabel":
        """Return a new label whose annotations are the union with `added`."""
        added = frozenset(added)
        if added <= self.annotations:
            return self
        return replace(self, annotations=self.annotations | added)

    def with_success(self, success: bool) -> "LogTreeLabel":
        """Return a new label with the success flag replaced."""
        if success == self.success:
            return self
        return replace(self, success=success)


@dataclass(frozen=True)
class DescribedLogTreeLabel(LogTreeLabel):
    """Label of a node that has a human-readable description."""
    description: str
    success: bool
    annotations: FrozenSet[Any] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.annotations, frozenset):
            object.__setattr__(self, 'annotations', frozenset(self.annotations))

    @property
    def is_described(self) -> bool:
        return True

    def fold(self, on_described, on_undescribed):
        return on_described(self)


@dataclass(frozen=True)
class UndescribedLogTreeLabel(LogTreeLabel):
    """Label of a node still waiting for a description."""
    success: bool
    annotations: FrozenSet[Any] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.annotations, frozenset):
            object.__setattr__(self, 'annotations', frozenset(self.annotations))

    @property
    def is_described(self) -> bool:
        return False

    def fold(self, on_described, on_undescribed):
        return on_undescribed(self)


def described_label(description: str, success: bool,
                    annotations: Iterable[Any] = ()) -> DescribedLogTreeLabel:
    return DescribedLogTreeLabel(description, success, frozenset(annotations))


def undescribed_label(success: bool, annotations: Iterable[Any] = ()) -> UndescribedLogTreeLabel:
    return UndescribedLogTreeLabel(success, frozenset(annotations))


__all__ = [
    'LogTreeLabel',
    'DescribedLogTreeLabel',
    'UndescribedLogTreeLabel',
    'described_label',
    'undescribed_label',
]
