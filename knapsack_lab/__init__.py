"""Solvers for the 0/1 knapsack problem, random instance generation and benchmarking."""

__version__ = "0.1.0"