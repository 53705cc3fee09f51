from typing import Callable

from torch import Tensor

from ._benchmark_report import EvaluatorTiming
from ._exceptions import BenchmarkUnavailableError

# torch.utils.benchmark - handle missing timer
try:
    from torch.utils import benchmark as torch_benchmark

    TIMER_AVAILABLE = True
except ImportError:
    TIMER_AVAILABLE = False


def benchmark_evaluator(
    name: str,
    evaluator: Callable[[Tensor, Tensor], Tensor],
    coeffs: Tensor,
    x: Tensor,
    *,
    min_run_time: float = 0.2,
) -> EvaluatorTiming:
    """Time one evaluator on fixed inputs.

    Parameters
    ----------
    name : str
        Evaluator name, used as the timer's sub-label.
    evaluator : callable
        ``f(coeffs, x) -> Tensor``.
    coeffs : Tensor
        Coefficients, float64.
    x : Tensor
        Evaluation points, float64.
    min_run_time : float
        Minimum total measuring time in seconds. Default is 0.2.

    Returns
    -------
    EvaluatorTiming
        Minimum and median per-call time over the timed blocks.

    Raises
    ------
    ValueError
        If min_run_time is not positive.
    BenchmarkUnavailableError
        If the timer cannot run.

    Notes
    -----
    Inputs reach the timed statement through the timer's ``globals``
    rather than a closure, so the statement is exactly
    ``evaluator(coeffs, x)``. The timer runs single-threaded.
    """
    if min_run_time <= 0:
        raise ValueError(f"min_run_time must be positive, got {min_run_time}")

    if not TIMER_AVAILABLE:
        raise BenchmarkUnavailableError("torch.utils.benchmark is not available")

    timer = torch_benchmark.Timer(
        stmt="evaluator(coeffs, x)",
        globals={"evaluator": evaluator, "coeffs": coeffs, "x": x},
        label="polynomial evaluation",
        sub_label=name,
        num_threads=1,
    )

    try:
        measurement = timer.blocked_autorange(min_run_time=min_run_time)
    except RuntimeError as e:
        raise BenchmarkUnavailableError(f"Timer failed for {name!r}: {e}") from e

    return EvaluatorTiming(
        name=name,
        minimum=min(measurement.times),
        median=measurement.median,
        iqr=measurement.iqr,
        measurements=len(measurement.times),
        number_per_run=measurement.number_per_run,
    )
