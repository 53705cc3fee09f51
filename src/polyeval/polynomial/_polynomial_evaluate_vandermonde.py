import torch
from torch import Tensor

from ._polynomial_coefficients import polynomial_coefficients, polynomial_point


def polynomial_evaluate_vandermonde(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate polynomial as a single reduction over a row of powers.

    Builds the Vandermonde row [1, x, x^2, ..., x^n] for every point in
    one tensor operation and reduces ``coeffs * powers`` over the last
    axis. The compact, vectorized form of the direct sum.

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
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    n = coeffs.shape[-1]
    batch_shape = coeffs.shape[:-1]

    exponents = torch.arange(n, dtype=coeffs.dtype)

    # (...x_batch, N)
    powers = torch.pow(x.unsqueeze(-1), exponents)

    # (...batch, N) -> (...batch, 1, ..., 1, N)
    coeffs = coeffs.reshape(batch_shape + (1,) * x.dim() + (n,))

    return torch.sum(coeffs * powers, dim=-1)
