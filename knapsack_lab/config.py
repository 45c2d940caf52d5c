"""Experiment configuration and its JSON loader."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Mapping

U32_MAX = 2**32 - 1
DEFAULT_GENERATIONS = 1


class ConfigError(Exception):
    """Raised when an experiment configuration cannot be read or is malformed."""


def _require_int(name: str, value: Any, upper: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name!r} must be a non-negative integer, got {value!r}")
    if value < 0 or (upper is not None and value > upper):
        raise ConfigError(f"{name!r} is out of range: {value}")
    return value


def _require_range(name: str, value: Any) -> tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{name!r} must be a pair of integers, got {value!r}")
    low, high = value
    return (
        _require_int(f"{name}[0]", low, U32_MAX),
        _require_int(f"{name}[1]", high, U32_MAX),
    )


def _require_names(name: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{name!r} must be a list of strings, got {value!r}")
    return list(value)


@dataclass
class ExperimentConfig:
    """Parameters for generating random knapsacks and choosing algorithms.

    Both ranges are inclusive ``(minimum, maximum)`` pairs.
    """

    num_items: int
    capacity: int
    weights_range: tuple[int, int]
    costs_range: tuple[int, int]
    generations: int = DEFAULT_GENERATIONS
    algorithms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperimentConfig":
        """Build a validated configuration from decoded JSON data."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a JSON object")
        required = ("num_items", "capacity", "weights_range", "costs_range")
        missing = [key for key in required if key not in data]
        if missing:
            raise ConfigError(f"missing field(s): {', '.join(missing)}")
        return cls(
            num_items=_require_int("num_items", data["num_items"]),
            capacity=_require_int("capacity", data["capacity"], U32_MAX),
            weights_range=_require_range("weights_range", data["weights_range"]),
            costs_range=_require_range("costs_range", data["costs_range"]),
            generations=_require_int(
                "generations", data.get("generations", DEFAULT_GENERATIONS)
            ),
            algorithms=_require_names("algorithms", data.get("algorithms", [])),
        )


def read_rand_config(path: str | PathLike[str]) -> ExperimentConfig:
    """Read and validate an experiment configuration from a JSON file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(str(exc)) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(str(exc)) from exc
    return ExperimentConfig.from_dict(data)