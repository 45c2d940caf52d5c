"""Knapsack-solving algorithms."""

from __future__ import annotations

import math

from .models import Knapsack, KnapsackSolver, SolverError

MAX_CAPACITY = 2**64 - 1
MAX_BITMASK_ITEMS = 64

_CAPACITY_TOO_LARGE = "Capacity too large to process"


class RecursiveKnapsackSolver(KnapsackSolver):
    """Exhaustive search over all item subsets by recursion."""

    name = "Recursion"

    def solve(self, knapsack: Knapsack) -> int:
        items = knapsack.items
        capacity = knapsack.capacity
        best = 0

        def explore(index: int, weight: int, value: int) -> None:
            nonlocal best
            if index == len(items):
                best = max(best, value)
                return
            explore(index + 1, weight, value)
            item = items[index]
            if weight + item.weight <= capacity:
                explore(index + 1, weight + item.weight, value + item.value)

        explore(0, 0, 0)
        return best


class BitMaskKnapsackSolver(KnapsackSolver):
    """Exhaustive search over all item subsets encoded as bit masks."""

    name = "Bit mask"

    def solve(self, knapsack: Knapsack) -> int:
        count = len(knapsack)
        if count > MAX_BITMASK_ITEMS:
            raise SolverError(
                f"The number of items exceeds the maximum allowed ({MAX_BITMASK_ITEMS})."
            )
        capacity = knapsack.capacity
        best = 0
        for mask in range(1 << count):
            weight = 0
            value = 0
            for bit, item in enumerate(knapsack.items):
                if mask >> bit & 1:
                    weight += item.weight
                    value += item.value
                    if weight > capacity:
                        break
            if weight <= capacity:
                best = max(best, value)
        return best


class DynamicKnapsackSolver(KnapsackSolver):
    """Bottom-up dynamic programming over capacities, O(n*W) time, O(W) space."""

    name = "Dynamic"

    def solve(self, knapsack: Knapsack) -> int:
        capacity = knapsack.capacity
        if capacity >= MAX_CAPACITY:
            raise SolverError(_CAPACITY_TOO_LARGE)
        best = [0] * (capacity + 1)
        for item in knapsack.items:
            best = [
                max(current, best[w - item.weight] + item.value)
                if item.weight <= w
                else current
                for w, current in enumerate(best)
            ]
        return best[capacity]


class LazyDynamicKnapsackSolver(KnapsackSolver):
    """Top-down memoised dynamic programming that only visits reachable states."""

    name = "Lazy Dynamic"

    def solve(self, knapsack: Knapsack) -> int:
        capacity = knapsack.capacity
        if capacity >= MAX_CAPACITY:
            raise SolverError(_CAPACITY_TOO_LARGE)
        count = len(knapsack)
        if count == 0 or capacity == 0:
            return 0

        memo: dict[tuple[int, int], int] = {}
        stack = [(count, capacity)]
        while stack:
            state = stack[-1]
            if state in memo:
                stack.pop()
                continue
            i, w = state
            if i == 0 or w == 0:
                memo[state] = 0
                stack.pop()
                continue
            item = knapsack[i - 1]
            skip = (i - 1, w)
            take = (i - 1, w - item.weight) if item.weight <= w else None
            pending = [s for s in (skip, take) if s is not None and s not in memo]
            if pending:
                stack.extend(pending)
                continue
            stack.pop()
            result = memo[skip]
            if take is not None:
                result = max(result, memo[take] + item.value)
            memo[state] = result
        return memo[(count, capacity)]


class GreedyKnapsackSolver(KnapsackSolver):
    """Heuristic: take items by descending value-to-weight ratio while they fit."""

    name = "Greedy"

    def solve(self, knapsack: Knapsack) -> int:
        def ratio(index: int) -> float:
            item = knapsack[index]
            if item.weight == 0:
                if item.value == 0:
                    raise SolverError("Cannot rank an item with zero weight and zero value")
                return math.inf
            return item.value / item.weight

        order = sorted(range(len(knapsack)), key=ratio, reverse=True)
        weight = 0
        total = 0
        for index in order:
            item = knapsack[index]
            if weight + item.weight <= knapsack.capacity:
                weight += item.weight
                total += item.value
        return total