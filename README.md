# knapsack_lab

`knapsack_lab` solves the 0/1 knapsack problem with five different
algorithms. It can also run experiments that compare these algorithms on
randomly generated instances. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Solving a knapsack

```python
from knapsack_lab.models import Item, Knapsack
from knapsack_lab.service import solve, get_algorithms_names

knapsack = Knapsack(10, [Item(5, 10), Item(3, 7), Item(2, 5)])

print(get_algorithms_names())
# ['Recursion', 'Bit mask', 'Dynamic', 'Lazy Dynamic', 'Greedy']

print(solve("Dynamic", knapsack))   # 22
```

An `Item` is a frozen dataclass with a `weight` and a `value`. A `Knapsack`
has a `capacity` and a tuple of `items`. You can pass the items as any
sequence, and `Knapsack.of(capacity, items)` does the same thing. A knapsack
supports `len()`, indexing and iteration over its items. If a weight, value
or capacity is negative, construction raises `ValueError`.

### Algorithms

| Name           | Class                        | Notes                                                 |
|----------------|------------------------------|-------------------------------------------------------|
| `Recursion`    | `RecursiveKnapsackSolver`    | exhaustive search over every subset                   |
| `Bit mask`     | `BitMaskKnapsackSolver`      | exhaustive search over bit masks; at most 64 items    |
| `Dynamic`      | `DynamicKnapsackSolver`      | bottom-up table, O(n·W) time, O(W) memory             |
| `Lazy Dynamic` | `LazyDynamicKnapsackSolver`  | memoised top-down search over reachable states        |
| `Greedy`       | `GreedyKnapsackSolver`       | takes items by value/weight ratio; not always optimal |

All of these classes live in `knapsack_lab.solvers`. Each one derives from
`knapsack_lab.models.KnapsackSolver`, has a `name` attribute and has a
`solve(knapsack)` method that returns the best total value it found.

A solver raises `knapsack_lab.models.SolverError` when it cannot handle an
instance:

- the bit-mask solver is given more than 64 items;
- a capacity reaches 2**64 - 1 in the `Dynamic` or `Lazy Dynamic` solver;
- the greedy solver is given an item whose weight and value are both zero.

The functions in `knapsack_lab.service` work with all the algorithms at once:

- `get_all_algorithms()` returns a fresh instance of every solver, in the
  order of the table above.
- `get_algorithms_by_names(names)` keeps only the solvers whose names you
  list. The order stays the same as in the table.
- `get_algorithms_names()` returns the names.
- `solve(name, knapsack)` runs the solver with the given name. It raises
  `SolverError` if no solver has that name.

## Running an experiment

An experiment is described by a JSON file:

```json
{
    "num_items": 20,
    "capacity": 500,
    "weights_range": [1, 100],
    "costs_range": [1, 100],
    "generations": 10,
    "algorithms": ["Dynamic", "Lazy Dynamic", "Greedy"]
}
```

- `num_items`: the number of items in each generated knapsack.
- `capacity`: the capacity of each knapsack. It must be at most 2**32 - 1.
- `weights_range`, `costs_range`: inclusive `[min, max]` bounds for each
  item's random weight and value. Each bound must be at most 2**32 - 1.
- `generations`: how many knapsacks to generate. Defaults to 1.
- `algorithms`: the names of the algorithms to compare. Defaults to an empty
  list.

`knapsack_lab.config.read_rand_config(path)` loads such a file into an
`ExperimentConfig`. If the file cannot be read, is not valid JSON, or has a
missing or ill-typed field, it raises `knapsack_lab.config.ConfigError`.
`ExperimentConfig.from_dict(data)` runs the same checks on data that has
already been decoded.

`knapsack_lab.generator.generate_knapsack(config, rng=None)` builds one
random knapsack. `generate_rnd_knapsacks(path, rng=None)` reads a file and
returns the generated knapsacks together with the algorithm names. Pass a
`random.Random` as `rng` if you want results you can reproduce. Both
functions raise `ValueError` when a range has its minimum above its maximum.

### The command

```
knapsack-lab
```

By default the command reads `experiment.json` from the working directory.
It then times each chosen algorithm on the generated knapsacks and counts
how often each one reached the best value among the compared algorithms.
The results go into a Markdown table that is appended to
`docs/experiments/out/experiment.md` under the parent of the working
directory. The table lists the success rate and the timing statistics: mean,
standard deviation, median and median absolute deviation, in milliseconds
per knapsack.

Options:

| Option                     | Meaning                                                           |
|----------------------------|-------------------------------------------------------------------|
| `-c`, `--config PATH`      | configuration file (default `experiment.json`)                    |
| `-o`, `--os-string NAME`   | results subdirectory under `docs/experiments` (default `out`)     |
| `--results-root DIR`       | directory that holds `docs/experiments` (default: parent of cwd)  |
| `--console`                | print the table to standard output instead of writing a file      |
| `--sample-size N`          | timed samples per algorithm (default 10, minimum 10)              |
| `--warm-up-time SECONDS`   | warm-up before timing (default 1)                                 |
| `--measurement-time SECONDS` | total time to spend on the timed samples of each algorithm (default 60) |

The exit status is 0 on success. It is 1 if the configuration cannot be
loaded or the timing settings are invalid.

## Using the pieces directly

- `knapsack_lab.bencher.Bencher` times solvers and reports tables.
  `bench_group(...)` returns a `TimeStats` per solver name.
  `conduct_experiment(...)` benchmarks, reports and returns the list of
  `Measurement`s, sorted by solver name. `Bencher` is a context manager.
  The helpers behind the tables are in the same module:
  `calculate_correct_rates`, `get_stats` and `format_markdown_table`.
  `calculate_correct_rates` counts a solver that raises `SolverError` as
  reaching value 0. `format_markdown_table` returns a fixed "no data"
  message (`NO_DATA`) when it is given no rows.
- `knapsack_lab.reporter.Reporter` writes lines, compact JSON documents or
  batches of JSON documents, one per line. It writes to a file, which it
  appends to or truncates, or to standard output. Dataclasses are written as
  JSON objects. `Reporter` is a context manager and is safe to use from
  several threads.
- `knapsack_lab.stats.TimeStats` holds four timing figures in milliseconds.
  `TimeStats.scaled(divisor)` divides all four by the same number.
  `knapsack_lab.stats.Measurement` pairs a solver name and its success rate
  with its `TimeStats`.
- `knapsack_lab.collector` reads an existing result tree laid out as
  `<root>/<group>/<solver>/<run>/...`. `get_criterion_stats(root)` reads
  the `estimates.json` files below a `new` directory and converts
  nanoseconds to milliseconds. `get_mean_plots(root, dest)` moves every
  `mean.svg` into another directory. `delete_criterion_dir(root)` removes
  the tree.

## What it does not do

The package produces no plots. `Bencher` does its own timing with
`time.perf_counter` and writes no estimate files or images. The functions in
`knapsack_lab.collector`, and the `criterion_dir` option of `Bencher`, only
read or move files that some other tool has already written.

## Running the tests

```
pytest
```