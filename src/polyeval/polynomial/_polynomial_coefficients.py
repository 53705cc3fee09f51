from typing import Sequence, Union

import torch
from torch import Tensor

from polyeval.polynomial._exceptions import InvalidInputError

DTYPE = torch.float64


def polynomial_coefficients(coeffs: Union[Tensor, Sequence[float]]) -> Tensor:
    """Convert a coefficient sequence to a float64 tensor.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in ascending order, shape (..., N) where N = degree + 1.
        coeffs[..., i] is the coefficient of x^i. Leading dimensions, if
        any, index a batch of independent polynomials.

    Returns
    -------
    Tensor
        Coefficients as a float64 tensor of the same shape.

    Raises
    ------
    InvalidInputError
        If coeffs is empty (size 0 in last dimension), zero-dimensional,
        complex, or cannot be converted to a real tensor.

    Examples
    --------
    >>> polynomial_coefficients([1, 2, 3])  # 1 + 2x + 3x^2
    tensor([1., 2., 3.], dtype=torch.float64)
    """
    if isinstance(coeffs, Tensor) and coeffs.is_complex():
        raise InvalidInputError("Polynomial coefficients must be real")

    try:
        coeffs = torch.as_tensor(coeffs, dtype=DTYPE)
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidInputError(
            f"Polynomial coefficients must be real numbers: {e}"
        ) from e

    if coeffs.dim() == 0:
        raise InvalidInputError(
            "Polynomial coefficients must be a sequence, got a scalar"
        )

    if coeffs.numel() == 0 or coeffs.shape[-1] == 0:
        raise InvalidInputError(
            "Polynomial must have at least one coefficient"
        )

    return coeffs


def polynomial_point(x: Union[Tensor, float, str]) -> Tensor:
    """Convert an evaluation point to a float64 tensor.

    Strings are parsed as Python floats, so ``"0.5"``, ``"-3"`` and
    ``"1e-3"`` are accepted. Tensors of points keep their shape.

    Raises
    ------
    InvalidInputError
        If x cannot be parsed or converted to a real tensor, or any point
        is infinite or NaN.
    """
    if isinstance(x, str):
        try:
            x = float(x.strip())
        except ValueError as e:
            raise InvalidInputError(
                f"Evaluation point must be a real number, got {x!r}"
            ) from e

    if isinstance(x, Tensor) and x.is_complex():
        raise InvalidInputError("Evaluation point must be real")

    try:
        x = torch.as_tensor(x, dtype=DTYPE)
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidInputError(
            f"Evaluation point must be a real number: {e}"
        ) from e

    if not bool(torch.all(torch.isfinite(x))):
        raise InvalidInputError("Evaluation point must be finite")

    return x


def _coefficient(coeffs: Tensor, i: int, x: Tensor) -> Tensor:
    # (...batch, N) -> (...batch, 1, ..., 1) so it broadcasts against x
    return coeffs[..., i].reshape(coeffs.shape[:-1] + (1,) * x.dim())


def _output_shape(coeffs: Tensor, x: Tensor) -> torch.Size:
    return coeffs.shape[:-1] + x.shape
