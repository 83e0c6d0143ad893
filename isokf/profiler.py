"""Wall-clock profiling of code sections."""

from __future__ import annotations

import time


class Profiler:
    """Measures elapsed wall-clock time since construction or the last ``start``.

    Used as a context manager, a verbose profiler prints the elapsed time
    when the block is left.
    """

    def __init__(self, name: str = "", verbose: bool = False):
        self.name = name
        self.verbose = verbose
        self._start_t = time.perf_counter()

    def start(self) -> None:
        """Restart the measurement."""
        self._start_t = time.perf_counter()

    def elapsed_sec(self) -> float:
        """Seconds elapsed since the start."""
        return time.perf_counter() - self._start_t

    def elapsed_ms(self) -> float:
        """Milliseconds elapsed since the start."""
        return self.elapsed_sec() * 1000.0

    def __enter__(self) -> "Profiler":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.verbose:
            print(f"{self.name}: {self.elapsed_sec()} [sec]")