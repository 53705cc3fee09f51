from torch import Tensor

from ._polynomial_coefficients import (
    _coefficient,
    _output_shape,
    polynomial_coefficients,
    polynomial_point,
)


def polynomial_evaluate_horner(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch). The result shape is
        (...batch, ...x_batch).

    Returns
    -------
    Tensor
        Values p(x), shape (...batch, ...x_batch).

    Notes
    -----
    Rewrites p(x) = c_0 + c_1 x + ... + c_n x^n in nested form

        p(x) = c_0 + x(c_1 + x(c_2 + ... + x c_n)...)

    and evaluates it from the highest coefficient down:

        s = c_n
        s = s * x + c_{n-1}
        ...
        s = s * x + c_0

    n multiplications and n additions, no powers. Near multiple roots the
    result can differ from the other evaluators by more than a few ulps;
    the problem is ill-conditioned there.

    Examples
    --------
    >>> polynomial_evaluate_horner(torch.tensor([1.0, 2.0, 3.0]), torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    n = coeffs.shape[-1]

    result = _coefficient(coeffs, n - 1, x).expand(_output_shape(coeffs, x))

    for i in range(n - 2, -1, -1):
        result = result * x + _coefficient(coeffs, i, x)

    return result.clone()
