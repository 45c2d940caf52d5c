"""Benchmarking of knapsack solvers and markdown reporting of the results."""

from __future__ import annotations

import statistics
import sys
import time
from os import PathLike
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from .collector import NS_PER_MS, delete_criterion_dir, get_mean_plots
from .models import Knapsack, KnapsackSolver, SolverError
from .reporter import Reporter
from .stats import Measurement, TimeStats

SAMPLE_SIZE = 10
WARM_UP_TIME = 1.0
MEASUREMENT_TIME = 60.0
MIN_SAMPLE_SIZE = 10

HEADERS = (
    "Algorithm",
    "Success Rate",
    "Execution Time (ms) (mean/std_dev/median/median_abs_dev)",
)
NO_DATA = "Нет доступных данных."

_MAD_SCALE = 1.4826


def _solve_or_zero(solver: KnapsackSolver, knapsack: Knapsack) -> int:
    try:
        return solver.solve(knapsack)
    except SolverError:
        return 0


def _validate(sample_size: int, warm_up_time: float, measurement_time: float) -> None:
    if sample_size < MIN_SAMPLE_SIZE:
        raise ValueError(f"sample size must be at least {MIN_SAMPLE_SIZE}")
    if warm_up_time <= 0:
        raise ValueError("warm-up time must be positive")
    if measurement_time <= 0:
        raise ValueError("measurement time must be positive")


def _measure(
    routine: Callable[[], None],
    sample_size: int,
    warm_up_time: float,
    measurement_time: float,
) -> TimeStats:
    clock = time.perf_counter
    iterations = 0
    start = clock()
    while True:
        routine()
        iterations += 1
        elapsed = clock() - start
        if elapsed >= warm_up_time:
            break

    per_iteration = elapsed / iterations
    budget = measurement_time / sample_size
    per_sample = max(1, int(budget / per_iteration)) if per_iteration > 0 else 1

    samples_ns = []
    for _ in range(sample_size):
        began = clock()
        for _ in range(per_sample):
            routine()
        samples_ns.append((clock() - began) / per_sample * 1e9)

    median = statistics.median(samples_ns)
    mad = statistics.median(abs(x - median) for x in samples_ns) * _MAD_SCALE
    return TimeStats(
        statistics.fmean(samples_ns) / NS_PER_MS,
        statistics.stdev(samples_ns) / NS_PER_MS,
        median / NS_PER_MS,
        mad / NS_PER_MS,
    )


def calculate_correct_rates(
    solvers: Sequence[KnapsackSolver], knapsacks: Sequence[Knapsack]
) -> dict[str, float]:
    """Return, per solver name, the percentage of knapsacks it solved best.

    A failing solver counts as reaching value 0. Solvers that never reached
    the best value are absent from the result.
    """
    counts: dict[str, float] = {}
    for knapsack in knapsacks:
        results = [_solve_or_zero(solver, knapsack) for solver in solvers]
        if not results:
            continue
        best = max(results)
        for solver, result in zip(solvers, results):
            if result == best:
                counts[solver.name] = counts.get(solver.name, 0.0) + 1.0
    total = len(knapsacks)
    return {name: (count / total) * 100.0 for name, count in counts.items()}


def get_stats(
    solvers: Sequence[KnapsackSolver],
    knapsacks: Sequence[Knapsack],
    time_stats: Mapping[str, TimeStats],
) -> list[Measurement]:
    """Combine correctness rates and timings into measurements sorted by solver name.

    Solvers without both a correctness rate and a timing are left out.
    """
    rates = calculate_correct_rates(solvers, knapsacks)
    return [
        Measurement(name, rates[name], time_stats[name])
        for name in sorted(solver.name for solver in solvers)
        if name in rates and name in time_stats
    ]


def format_markdown_table(rows: Sequence[Sequence[str]]) -> str:
    """Render rows under the standard headers as a padded markdown table."""
    if not rows:
        return NO_DATA

    widths = [len(header) for header in HEADERS]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |\n"

    separator = "|" + "|".join("-" * (w + 2) for w in widths) + "|\n"
    return line(HEADERS) + separator + "".join(line(row) for row in rows)


class Bencher:
    """Times knapsack solvers and reports their speed and correctness.

    With ``write_to_file`` the report is appended to
    ``<base_dir>/docs/experiments/<os_string>/experiment.md``, where
    ``base_dir`` defaults to the parent of the working directory; otherwise
    it goes to stdout. When ``criterion_dir`` is set, the mean plots found
    there are moved to ``<assets_dir>/<os_string>`` after an experiment and
    the directory is removed.
    """

    SAMPLE_SIZE = SAMPLE_SIZE
    WARM_UP_TIME = WARM_UP_TIME
    MEASUREMENT_TIME = MEASUREMENT_TIME

    def __init__(
        self,
        os_string: str | None = None,
        write_to_file: bool = True,
        *,
        base_dir: str | PathLike[str] | None = None,
        criterion_dir: str | PathLike[str] | None = None,
        assets_dir: str | PathLike[str] | None = None,
        sample_size: int = SAMPLE_SIZE,
        warm_up_time: float = WARM_UP_TIME,
        measurement_time: float = MEASUREMENT_TIME,
    ):
        _validate(sample_size, warm_up_time, measurement_time)
        self.sample_size = sample_size
        self.warm_up_time = warm_up_time
        self.measurement_time = measurement_time
        self.criterion_dir = Path(criterion_dir) if criterion_dir is not None else None
        self.assets_dir = Path(assets_dir) if assets_dir is not None else Path("assets")
        self.results_dir: Path | None = None

        if write_to_file:
            if os_string is None:
                raise ValueError("an output name is required when writing to a file")
            root = Path(base_dir) if base_dir is not None else Path.cwd().parent
            self.results_dir = root / "docs" / "experiments" / os_string
            self.results_dir.mkdir(parents=True, exist_ok=True)
            self.reporter = Reporter(self.results_dir / "experiment.md", append=True)
        else:
            self.reporter = Reporter(None, append=True)

    def bench_group(
        self,
        solvers: Sequence[KnapsackSolver],
        knapsacks: Sequence[Knapsack],
        sample_size: int | None = None,
        warm_up_time: float | None = None,
        measurement_time: float | None = None,
    ) -> dict[str, TimeStats]:
        """Time each solver over the whole set of knapsacks.

        One timed iteration solves every knapsack once. Returns the timing
        statistics per solver name, in milliseconds per iteration.
        """
        if not knapsacks:
            return {}
        sample_size = self.sample_size if sample_size is None else sample_size
        warm_up_time = self.warm_up_time if warm_up_time is None else warm_up_time
        measurement_time = (
            self.measurement_time if measurement_time is None else measurement_time
        )
        _validate(sample_size, warm_up_time, measurement_time)

        results: dict[str, TimeStats] = {}
        for solver in solvers:

            def routine(solver: KnapsackSolver = solver) -> None:
                for knapsack in knapsacks:
                    _solve_or_zero(solver, knapsack)

            results[solver.name] = _measure(
                routine, sample_size, warm_up_time, measurement_time
            )
        return results

    def conduct_experiment(
        self,
        solvers: Sequence[KnapsackSolver],
        knapsacks: Sequence[Knapsack],
        os_string: str,
    ) -> list[Measurement]:
        """Benchmark the solvers, report a table and return the measurements."""
        if not solvers or not knapsacks:
            return []
        num_items = len(knapsacks[0])
        time_stats = self.bench_group(solvers, knapsacks)
        measurements = get_stats(solvers, knapsacks, time_stats)
        print(measurements)
        self.report_table(len(knapsacks), num_items, measurements)

        if self.criterion_dir is not None:
            get_mean_plots(self.criterion_dir, self.assets_dir / os_string)
            delete_criterion_dir(self.criterion_dir)
        return measurements

    def report_table(
        self,
        number_of_samples: int,
        num_items: int,
        measurements: Sequence[Measurement],
    ) -> None:
        """Report measurements as a markdown table, timings per knapsack."""
        rows = []
        for measurement in measurements:
            stats = measurement.time_stats.scaled(number_of_samples)
            timings = "/".join(
                f"{value:6.3f}"
                for value in (
                    stats.mean_time_ms,
                    stats.std_dev_ms,
                    stats.median_time_ms,
                    stats.median_abs_dev_ms,
                )
            )
            rows.append(
                [measurement.solver_name, f"{measurement.correct_rate:3.2f}%", timings]
            )

        output = f"\n#### {num_items} items\n\n{format_markdown_table(rows)}"
        try:
            self.reporter.report(output)
        except OSError as exc:
            print(f"Failed to report metrics: {exc}", file=sys.stderr)

    def close(self) -> None:
        """Close the report output."""
        self.reporter.close()

    def __enter__(self) -> "Bencher":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()