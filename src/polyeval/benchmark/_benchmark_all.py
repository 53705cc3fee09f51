import warnings
from typing import Iterable, Optional, Union

from torch import Tensor

from polyeval.polynomial import (
    PolynomialBackend,
    polynomial_coefficients,
    polynomial_evaluators,
    polynomial_point,
)

from ._benchmark_evaluator import benchmark_evaluator
from ._benchmark_report import BenchmarkReport


def benchmark_all(
    coeffs: Tensor,
    x: Tensor,
    *,
    evaluators: Optional[Iterable[str]] = None,
    reference_backend: Union[PolynomialBackend, str] = "numpy",
    min_run_time: float = 0.2,
) -> BenchmarkReport:
    """Time every configured evaluator on the same input.

    Evaluators are timed one after another, never concurrently, so each
    measurement sees the machine to itself.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch).
    evaluators : iterable of str, optional
        Evaluator names, default all of ``EVALUATORS``.
    reference_backend : PolynomialBackend or str
        Backend for the ``"reference"`` evaluator. If it cannot be
        loaded, the reference evaluator is left out of the report with a
        ``RuntimeWarning``.
    min_run_time : float
        Minimum measuring time per evaluator, in seconds.

    Each evaluator is called once before it is timed. One that raises is
    reported with a ``RuntimeWarning`` and left out of the report; the
    others are still timed.

    Returns
    -------
    BenchmarkReport

    Raises
    ------
    InvalidInputError
        If coeffs or x are invalid, or an evaluator name is unknown.
    BenchmarkUnavailableError
        If the timer itself cannot run.
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    resolved = polynomial_evaluators(evaluators, reference_backend)

    timings = []

    for name, evaluator in resolved.items():
        # Warmup; an evaluator that fails here is left out of the report
        try:
            evaluator(coeffs, x)
        except Exception as e:
            warnings.warn(
                f"Skipping benchmark of {name!r}: {e}",
                RuntimeWarning,
                stacklevel=2,
            )
            continue

        timings.append(
            benchmark_evaluator(
                name, evaluator, coeffs, x, min_run_time=min_run_time
            )
        )

    return BenchmarkReport(
        degree=coeffs.shape[-1] - 1,
        points=x.numel(),
        timings=tuple(timings),
    )
