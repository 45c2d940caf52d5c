"""Command line entry point: generate random knapsacks and benchmark solvers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .bencher import MEASUREMENT_TIME, SAMPLE_SIZE, WARM_UP_TIME, Bencher
from .config import ConfigError
from .generator import generate_rnd_knapsacks
from .service import get_algorithms_by_names

DEFAULT_CONFIG = "experiment.json"
DEFAULT_OS_STRING = "out"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knapsack-lab",
        description="Benchmark knapsack solvers on randomly generated knapsacks.",
    )
    parser.add_argument(
        "-c", "--config", default=DEFAULT_CONFIG, help="experiment configuration file"
    )
    parser.add_argument(
        "-o",
        "--os-string",
        dest="os_string",
        default=DEFAULT_OS_STRING,
        help="name of the results subdirectory",
    )
    parser.add_argument(
        "--results-root",
        type=Path,
        default=None,
        help="directory holding docs/experiments (default: parent of the working directory)",
    )
    parser.add_argument(
        "--console", action="store_true", help="print the report instead of writing a file"
    )
    parser.add_argument("--sample-size", type=int, default=SAMPLE_SIZE)
    parser.add_argument("--warm-up-time", type=float, default=WARM_UP_TIME)
    parser.add_argument("--measurement-time", type=float, default=MEASUREMENT_TIME)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one experiment; return the process exit status."""
    args = _parser().parse_args(argv)

    try:
        bencher = Bencher(
            args.os_string,
            not args.console,
            base_dir=args.results_root,
            sample_size=args.sample_size,
            warm_up_time=args.warm_up_time,
            measurement_time=args.measurement_time,
        )
    except (OSError, ValueError) as exc:
        print(f"Failed to set up benchmarking: {exc}", file=sys.stderr)
        return 1

    with bencher:
        try:
            knapsacks, algorithm_names = generate_rnd_knapsacks(args.config)
        except (ConfigError, ValueError) as exc:
            print(f"Failed to create knapsack: {exc}", file=sys.stderr)
            return 1
        algorithms = get_algorithms_by_names(algorithm_names)
        bencher.conduct_experiment(algorithms, knapsacks, args.os_string)
    return 0


if __name__ == "__main__":
    sys.exit(main())