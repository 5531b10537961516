"""Running independent jobs concurrently and summing their times."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable


def execute(job: Callable[[int], float], number_of_jobs: int) -> float:
    """Run ``job(j)`` for every ``j`` in its own thread; return the summed results."""
    if number_of_jobs < 0:
        raise ValueError("number_of_jobs must be non-negative")
    if number_of_jobs == 0:
        return 0.0
    with ThreadPoolExecutor(max_workers=number_of_jobs) as pool:
        elapsed = list(pool.map(job, range(number_of_jobs)))
    return sum(elapsed, 0.0)