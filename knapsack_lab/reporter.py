"""Thread-safe line-oriented output to a file or to standard output."""

from __future__ import annotations

import dataclasses
import json
import sys
import threading
from os import PathLike
from typing import Any, Iterable, TextIO


def _encode(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, tuple):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class Reporter:
    """Writes reports, one per line, to a file or to the console.

    With a file path the file is created if needed, and either appended to
    or truncated depending on ``append``. Without one, output goes to stdout.
    """

    def __init__(self, file_path: str | PathLike[str] | None = None, append: bool = True):
        self._lock = threading.Lock()
        self._file: TextIO | None = None
        if file_path is not None:
            self._file = open(file_path, "a" if append else "w", encoding="utf-8")

    def report(self, data: Any) -> None:
        """Write ``data`` followed by a newline."""
        line = f"{data}\n"
        with self._lock:
            stream = self._file if self._file is not None else sys.stdout
            stream.write(line)
            stream.flush()

    def report_json(self, data: Any) -> None:
        """Write ``data`` as compact JSON on one line."""
        text = json.dumps(data, default=_encode, separators=(",", ":"), ensure_ascii=False)
        self.report(text)

    def report_batch(self, items: Iterable[Any]) -> None:
        """Write each item as a JSON line."""
        for item in items:
            self.report_json(item)

    def close(self) -> None:
        """Close the output file, if there is one."""
        with self._lock:
            if self._file is not None:
                self._file.close()

    def __enter__(self) -> "Reporter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()