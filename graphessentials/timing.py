"""Wall-clock timing and collection of per-run statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter


class Timer:
    """Stopwatch that measures in milliseconds; starts when created."""

    def __init__(self) -> None:
        self.time = 0.0
        self._start = perf_counter()

    def start(self) -> None:
        """Restart the measurement."""
        self._start = perf_counter()

    begin = start

    def end(self) -> float:
        """Stop the measurement and return the elapsed milliseconds."""
        self.time = (perf_counter() - self._start) * 1000.0
        return self.time

    @property
    def milliseconds(self) -> float:
        return self.time

    @property
    def seconds(self) -> float:
        return self.time * 1e-3

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.end()


@dataclass
class RunLog:
    """Running times collected over repeated runs of an algorithm."""

    algo_times: list[float] = field(default_factory=list)
    total_algo_time: float = 0.0

    @property
    def num_runs(self) -> int:
        return len(self.algo_times)

    def collect_single_run(self, elapsed: float) -> None:
        """Record the elapsed time of one run."""
        self.total_algo_time += elapsed
        self.algo_times.append(elapsed)