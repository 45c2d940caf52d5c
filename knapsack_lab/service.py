"""Lookup and dispatch of the available knapsack algorithms."""

from __future__ import annotations

from typing import Iterable

from .models import Knapsack, KnapsackSolver, SolverError
from .solvers import (
    BitMaskKnapsackSolver,
    DynamicKnapsackSolver,
    GreedyKnapsackSolver,
    LazyDynamicKnapsackSolver,
    RecursiveKnapsackSolver,
)


def get_all_algorithms() -> list[KnapsackSolver]:
    """Return a fresh instance of every available algorithm."""
    return [
        RecursiveKnapsackSolver(),
        BitMaskKnapsackSolver(),
        DynamicKnapsackSolver(),
        LazyDynamicKnapsackSolver(),
        GreedyKnapsackSolver(),
    ]


def get_algorithms_by_names(algorithm_names: Iterable[str]) -> list[KnapsackSolver]:
    """Return the algorithms whose names are listed, in the standard order."""
    wanted = set(algorithm_names)
    return [solver for solver in get_all_algorithms() if solver.name in wanted]


def solve(name: str, knapsack: Knapsack) -> int:
    """Solve the knapsack with the algorithm of the given name."""
    for solver in get_all_algorithms():
        if solver.name == name:
            return solver.solve(knapsack)
    raise SolverError("Can't find algorithm name")


def get_algorithms_names() -> list[str]:
    """Return the names of all available algorithms."""
    return [solver.name for solver in get_all_algorithms()]