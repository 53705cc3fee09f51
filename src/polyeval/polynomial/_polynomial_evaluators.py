import functools
import warnings
from typing import Callable, Dict, Iterable, Optional, Union

from torch import Tensor

from ._exceptions import EvaluatorUnavailableError, InvalidInputError
from ._polynomial_evaluate_direct_sum import polynomial_evaluate_direct_sum
from ._polynomial_evaluate_horner import polynomial_evaluate_horner
from ._polynomial_evaluate_power_accumulation import (
    polynomial_evaluate_power_accumulation,
)
from ._polynomial_evaluate_reference import polynomial_evaluate_reference
from ._polynomial_evaluate_vandermonde import polynomial_evaluate_vandermonde
from ._reference import PolynomialBackend, get_reference_backend

Evaluator = Callable[[Tensor, Tensor], Tensor]

EVALUATORS: Dict[str, Evaluator] = {
    "direct_sum": polynomial_evaluate_direct_sum,
    "power_accumulation": polynomial_evaluate_power_accumulation,
    "horner": polynomial_evaluate_horner,
    "vandermonde": polynomial_evaluate_vandermonde,
    "reference": polynomial_evaluate_reference,
}


def polynomial_evaluators(
    evaluators: Optional[Iterable[str]] = None,
    reference_backend: Union[PolynomialBackend, str] = "numpy",
) -> Dict[str, Evaluator]:
    """Resolve evaluator names to callables.

    Parameters
    ----------
    evaluators : iterable of str, optional
        Names from ``EVALUATORS``. Default is all of them, in registry
        order.
    reference_backend : PolynomialBackend or str
        Backend bound to the ``"reference"`` evaluator.

    Returns
    -------
    dict
        Name -> ``f(coeffs, x)``, in the requested order. The
        ``"reference"`` entry is left out, with a ``RuntimeWarning``, when
        its backend cannot be loaded.

    Raises
    ------
    InvalidInputError
        If a name is not a registered evaluator.
    """
    names = tuple(EVALUATORS) if evaluators is None else tuple(evaluators)

    unknown = [name for name in names if name not in EVALUATORS]
    if unknown:
        raise InvalidInputError(
            f"Unknown evaluator(s): {', '.join(unknown)}. "
            f"Must be one of: {', '.join(EVALUATORS)}"
        )

    resolved = {}

    for name in names:
        if name != "reference":
            resolved[name] = EVALUATORS[name]
            continue

        backend = reference_backend
        if isinstance(backend, str):
            try:
                backend = get_reference_backend(backend)
            except EvaluatorUnavailableError as e:
                warnings.warn(
                    f"Skipping reference evaluator: {e}",
                    RuntimeWarning,
                    stacklevel=2,
                )
                continue

        resolved[name] = functools.partial(
            polynomial_evaluate_reference,
            backend=backend,
        )

    return resolved
