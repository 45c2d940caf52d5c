"""Random knapsack generation driven by an experiment configuration."""

from __future__ import annotations

import random
from os import PathLike

from .config import ExperimentConfig, read_rand_config
from .models import Item, Knapsack


def _check_range(name: str, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if low > high:
        raise ValueError(f"{name} is empty: {low} > {high}")


def generate_knapsack(
    config: ExperimentConfig, rng: random.Random | None = None
) -> Knapsack:
    """Generate one knapsack with random items drawn from the configured ranges."""
    rng = rng or random.Random()
    _check_range("weights_range", config.weights_range)
    _check_range("costs_range", config.costs_range)
    items = [
        Item(rng.randint(*config.weights_range), rng.randint(*config.costs_range))
        for _ in range(config.num_items)
    ]
    return Knapsack.of(config.capacity, items)


def generate_rnd_knapsacks(
    path: str | PathLike[str], rng: random.Random | None = None
) -> tuple[list[Knapsack], list[str]]:
    """Read a configuration file and generate its knapsacks.

    Returns the generated knapsacks and the algorithm names from the file.
    """
    config = read_rand_config(path)
    rng = rng or random.Random()
    knapsacks = [generate_knapsack(config, rng) for _ in range(config.generations)]
    return knapsacks, list(config.algorithms)