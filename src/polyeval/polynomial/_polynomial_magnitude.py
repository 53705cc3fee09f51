import torch
from torch import Tensor

from ._polynomial_coefficients import polynomial_coefficients, polynomial_point
from ._polynomial_evaluate_horner import polynomial_evaluate_horner


def polynomial_magnitude(coeffs: Tensor, x: Tensor) -> Tensor:
    """Sum of absolute terms, |c_0| + |c_1| |x| + ... + |c_n| |x|^n.

    Bounds |p(x)| from above. The rounding error of every evaluator in
    this package is a small multiple of machine epsilon times this value,
    so it is the natural scale for comparing their results.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch).

    Returns
    -------
    Tensor
        Magnitudes, shape (...batch, ...x_batch).
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    return polynomial_evaluate_horner(torch.abs(coeffs), torch.abs(x))
