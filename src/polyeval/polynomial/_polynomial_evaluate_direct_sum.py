import torch
from torch import Tensor

from ._polynomial_coefficients import (
    _coefficient,
    _output_shape,
    polynomial_coefficients,
    polynomial_point,
)


def polynomial_evaluate_direct_sum(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate polynomial by summing independently computed terms.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch).

    Returns
    -------
    Tensor
        Values p(x), shape (...batch, ...x_batch).

    Notes
    -----
    Computes

        p(x) = c_0 + c_1 * x + c_2 * x^2 + ... + c_n * x^n

    forming every power x^i from scratch with ``torch.pow`` and adding the
    terms from i = 0 upward. No power is reused, which makes this the
    slowest of the evaluators. ``x^0`` is 1 for every x, including 0.

    Examples
    --------
    >>> polynomial_evaluate_direct_sum(torch.tensor([1.0, -3.0, 2.0]), torch.tensor(0.5))
    tensor(0., dtype=torch.float64)
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    result = torch.zeros(_output_shape(coeffs, x), dtype=coeffs.dtype)

    for i in range(coeffs.shape[-1]):
        result = result + _coefficient(coeffs, i, x) * torch.pow(x, i)

    return result
