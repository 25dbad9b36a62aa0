"""Stopwatch for timing the phases of a validation run."""

import time
from typing import Optional


class StopWatch:
    """Sequential task timer.

    Usage:
        watch = StopWatch("validate")
        watch.start("init")
        ...
        watch.stop()
        logger.debug("timings", table=watch.pretty_print())
    """

    def __init__(self, id: str = ""):
        self.id = id
        self._tasks: list[tuple[str, float]] = []
        self._current: Optional[str] = None
        self._started_at = 0.0

    @property
    def running(self) -> bool:
        return self._current is not None

    def start(self, task: str = "") -> None:
        if self._current is not None:
            raise RuntimeError(f"StopWatch already running task '{self._current}'")
        self._current = task
        self._started_at = time.perf_counter()

    def stop(self) -> float:
        """Stop the current task and return its duration in milliseconds."""
        if self._current is None:
            raise RuntimeError("StopWatch is not running")
        elapsed = (time.perf_counter() - self._started_at) * 1000
        self._tasks.append((self._current, elapsed))
        self._current = None
        return elapsed

    @property
    def total_ms(self) -> float:
        return sum(duration for _, duration in self._tasks)

    def timings(self) -> dict[str, float]:
        """Task durations in ms, rounded to 2 decimals (repeated names are summed)."""
        result: dict[str, float] = {}
        for name, duration in self._tasks:
            result[name] = result.get(name, 0.0) + duration
        return {name: round(duration, 2) for name, duration in result.items()}

    def pretty_print(self) -> str:
        total = self.total_ms
        lines = [
            f"StopWatch '{self.id}': running time (ms) = {total:.2f}",
            "-" * 41,
            f"{'ms':>10}  {'%':>5}  Task name",
            "-" * 41,
        ]
        for name, duration in self._tasks:
            share = (duration / total * 100) if total else 0.0
            lines.append(f"{duration:>10.2f}  {share:>4.0f}%  {name}")
        return "\n".join(lines)
