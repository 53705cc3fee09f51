from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class EvaluatorTiming:
    """Timing statistics of one evaluator.

    Attributes
    ----------
    name : str
        Evaluator name.
    minimum : float
        Fastest per-call time over all measurements, in seconds.
    median : float
        Median per-call time, in seconds.
    iqr : float
        Interquartile range of the per-call times, in seconds.
    measurements : int
        Number of timed blocks.
    number_per_run : int
        Calls per timed block.
    allocations : int, optional
        Allocation count per call. Neither CPython nor torch expose one,
        so this is always None.
    """

    name: str
    minimum: float
    median: float
    iqr: float
    measurements: int
    number_per_run: int
    allocations: Optional[int] = None


@dataclass(frozen=True)
class BenchmarkReport:
    """Timings of every benchmarked evaluator for one input."""

    degree: int
    points: int
    timings: Tuple[EvaluatorTiming, ...]

    def __getitem__(self, name: str) -> EvaluatorTiming:
        for timing in self.timings:
            if timing.name == name:
                return timing
        raise KeyError(name)

    def __iter__(self) -> Iterator[EvaluatorTiming]:
        return iter(self.timings)

    def __len__(self) -> int:
        return len(self.timings)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(timing.name for timing in self.timings)

    def format(self) -> str:
        """Render the report as an aligned text table, times in microseconds."""
        lines = [
            "Polynomial Evaluation Benchmark "
            f"(degree = {self.degree}, points = {self.points})",
            "=" * 70,
            f"{'Evaluator':<20} {'Min (us)':>12} {'Median (us)':>12} "
            f"{'IQR (us)':>12} {'Runs':>10}",
            "-" * 70,
        ]

        for timing in self.timings:
            runs = timing.measurements * timing.number_per_run
            lines.append(
                f"{timing.name:<20} {timing.minimum * 1e6:>12.4f} "
                f"{timing.median * 1e6:>12.4f} {timing.iqr * 1e6:>12.4f} "
                f"{runs:>10}"
            )

        return "\n".join(lines)
