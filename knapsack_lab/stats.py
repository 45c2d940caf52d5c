"""Timing statistics and per-solver measurements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeStats:
    """Execution time statistics, in milliseconds."""

    mean_time_ms: float
    std_dev_ms: float
    median_time_ms: float
    median_abs_dev_ms: float

    def scaled(self, divisor: float) -> "TimeStats":
        """Return these statistics with every value divided by ``divisor``."""
        return TimeStats(
            self.mean_time_ms / divisor,
            self.std_dev_ms / divisor,
            self.median_time_ms / divisor,
            self.median_abs_dev_ms / divisor,
        )


@dataclass(frozen=True)
class Measurement:
    """A solver's name, its percentage of correct answers (0-100) and its timings."""

    solver_name: str
    correct_rate: float
    time_stats: TimeStats