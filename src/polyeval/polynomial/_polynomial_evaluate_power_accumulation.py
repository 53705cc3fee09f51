import torch
from torch import Tensor

from ._polynomial_coefficients import (
    _coefficient,
    _output_shape,
    polynomial_coefficients,
    polynomial_point,
)


def polynomial_evaluate_power_accumulation(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate polynomial accumulating powers of x.

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
    Keeps a running power that starts at x^0 = 1 and is multiplied by x
    once per term:

        power = 1
        for c_i in c_0, c_1, ..., c_n:
            s     = s + c_i * power
            power = power * x

    Terms are added in increasing-power order, the same order as
    ``polynomial_evaluate_direct_sum``.

    Examples
    --------
    >>> polynomial_evaluate_power_accumulation(torch.tensor([2.0, 0.0, 0.0, 1.0]), torch.tensor(3.0))
    tensor(29., dtype=torch.float64)
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    result = torch.zeros(_output_shape(coeffs, x), dtype=coeffs.dtype)
    power = torch.ones_like(x)

    for i in range(coeffs.shape[-1]):
        result = result + _coefficient(coeffs, i, x) * power
        power = power * x

    return result
