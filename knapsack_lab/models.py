"""Core data types for the 0/1 knapsack problem."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Sequence


class SolverError(Exception):
    """Raised when a solver cannot handle the given knapsack."""


@dataclass(frozen=True)
class Item:
    """An item that may be placed in a knapsack."""

    weight: int
    value: int

    def __post_init__(self) -> None:
        if self.weight < 0 or self.value < 0:
            raise ValueError("item weight and value must be non-negative")


@dataclass(frozen=True)
class Knapsack:
    """A knapsack instance: a capacity and the items that may go into it."""

    capacity: int
    items: tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    @classmethod
    def of(cls, capacity: int, items: Sequence[Item]) -> "Knapsack":
        """Build a knapsack from any sequence of items."""
        return cls(capacity, tuple(items))


class KnapsackSolver(ABC):
    """Base class of every knapsack-solving algorithm."""

    name: str = ""

    @abstractmethod
    def solve(self, knapsack: Knapsack) -> int:
        """Return the best total value reachable within the capacity."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"