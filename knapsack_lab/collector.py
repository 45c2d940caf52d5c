"""Reading benchmark estimates and plots from a criterion-style result tree.

The tree is laid out as ``<root>/<group>/<solver>/<run>/<file>``. The
``estimates.json`` files of the latest run sit in a ``new`` directory.
"""

from __future__ import annotations

import json
import shutil
import sys
from os import PathLike
from pathlib import Path
from typing import Any, Mapping

from .stats import TimeStats

NS_PER_MS = 1_000_000.0
ESTIMATES_FILE = "estimates.json"
MEAN_IMAGE_NAME = "mean.svg"

_LATEST_RUN_DIR = "new"
_STAT_NAMES = ("mean", "std_dev", "median", "median_abs_dev")


def capitalize_first(text: str) -> str:
    """Return ``text`` with its first character upper-cased."""
    return text[:1].upper() + text[1:]


def get_point_estimate(stat_name: str, data: Mapping[str, Any]) -> float:
    """Return ``data[stat_name]["point_estimate"]`` rounded to four significant digits."""
    try:
        value = data[stat_name]["point_estimate"]
    except (KeyError, TypeError, IndexError):
        value = None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Failed to get {stat_name} estimate")
    return float(f"{value:.4e}")


def get_criterion_stats(start_dir: str | PathLike[str]) -> dict[str, TimeStats]:
    """Collect the latest timing estimates under ``start_dir``, keyed by solver name.

    Estimates are read in nanoseconds and returned in milliseconds. When a
    solver appears more than once, the first entry found is kept.
    """
    root = Path(start_dir)
    measurements: dict[str, TimeStats] = {}
    if not root.is_dir():
        return measurements

    for path in sorted(root.rglob(ESTIMATES_FILE)):
        if not path.is_file():
            continue
        relative = path.relative_to(root)
        if _LATEST_RUN_DIR not in relative.parts[:-1]:
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Error reading file {path.name!r}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid estimates in {path}: {exc}") from exc

        mean, std_dev, median, median_abs_dev = (
            get_point_estimate(name, data) for name in _STAT_NAMES
        )
        solver_name = capitalize_first(relative.parts[1])
        measurements.setdefault(
            solver_name,
            TimeStats(
                mean / NS_PER_MS,
                std_dev / NS_PER_MS,
                median / NS_PER_MS,
                median_abs_dev / NS_PER_MS,
            ),
        )
    return measurements


def delete_criterion_dir(start_dir: str | PathLike[str]) -> None:
    """Remove the result tree, reporting a failure on stderr instead of raising."""
    try:
        shutil.rmtree(start_dir)
    except OSError as exc:
        print(f"Failed to delete criterion directory: {exc}", file=sys.stderr)


def get_mean_plots(
    start_dir: str | PathLike[str], end_dir: str | PathLike[str]
) -> list[Path]:
    """Move every mean plot from ``start_dir`` into ``end_dir``, keeping relative paths.

    Returns the paths the plots were moved to.
    """
    source_root = Path(start_dir)
    target_root = Path(end_dir)
    target_root.mkdir(parents=True, exist_ok=True)

    moved: list[Path] = []
    if not source_root.is_dir():
        return moved

    for path in sorted(source_root.rglob(MEAN_IMAGE_NAME)):
        target = target_root / path.relative_to(source_root)
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            path.replace(target)
        except OSError as exc:
            print(f"Error moving {path} to {target}: {exc}")
            continue
        print(f"Moved {path} to {target}")
        moved.append(target)
    return moved