[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knapsack_lab"
version = "0.1.0"
description = "Solvers for the 0/1 knapsack problem and a harness for comparing them on random instances"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "knapsack",
    "optimization",
    "dynamic-programming",
    "greedy",
    "benchmark",
    "combinatorics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knapsack-lab = "knapsack_lab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knapsack_lab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
