import warnings
from typing import Iterable, Optional, Union

from tensordict import TensorDict
from torch import Tensor

from ._polynomial_coefficients import (
    _output_shape,
    polynomial_coefficients,
    polynomial_point,
)
from ._polynomial_evaluators import polynomial_evaluators
from ._reference import PolynomialBackend


def polynomial_evaluate_all(
    coeffs: Tensor,
    x: Tensor,
    *,
    evaluators: Optional[Iterable[str]] = None,
    reference_backend: Union[PolynomialBackend, str] = "numpy",
) -> TensorDict:
    """Evaluate polynomial with every configured algorithm.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch).
    evaluators : iterable of str, optional
        Evaluator names, default all of ``EVALUATORS``.
    reference_backend : PolynomialBackend or str
        Backend for the ``"reference"`` evaluator.

    Returns
    -------
    TensorDict
        Locked (read-only) mapping evaluator name -> p(x), with
        ``batch_size`` (...batch, ...x_batch).

    Raises
    ------
    InvalidInputError
        If coeffs or x are invalid, or an evaluator name is unknown.

    Notes
    -----
    Evaluators run independently on the same float64 inputs. One that
    fails is reported with a ``RuntimeWarning`` and its entry is left out;
    the others are unaffected.

    Examples
    --------
    >>> results = polynomial_evaluate_all([1.0, -3.0, 2.0], 0.5)
    >>> results["horner"]
    tensor(0., dtype=torch.float64)
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    resolved = polynomial_evaluators(evaluators, reference_backend)

    results = {}

    for name, evaluator in resolved.items():
        try:
            results[name] = evaluator(coeffs, x)
        except Exception as e:
            warnings.warn(
                f"Evaluator {name!r} failed: {e}",
                RuntimeWarning,
                stacklevel=2,
            )

    return TensorDict(results, batch_size=_output_shape(coeffs, x)).lock_()
