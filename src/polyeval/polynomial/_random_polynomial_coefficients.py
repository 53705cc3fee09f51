from typing import Optional

import torch
from torch import Tensor

from polyeval.polynomial._exceptions import InvalidInputError
from polyeval.polynomial._polynomial_coefficients import DTYPE


def random_polynomial_coefficients(
    degree: int,
    *,
    generator: Optional[torch.Generator] = None,
) -> Tensor:
    """Draw coefficients of a random polynomial.

    Parameters
    ----------
    degree : int
        Degree of the polynomial, must be >= 0.
    generator : torch.Generator, optional
        Source of randomness. Pass a seeded generator for reproducible
        coefficients.

    Returns
    -------
    Tensor
        ``degree + 1`` float64 coefficients uniform in [0, 1), constant
        term first.

    Raises
    ------
    InvalidInputError
        If degree is not an integer or is negative.
    """
    if isinstance(degree, bool) or not isinstance(degree, int):
        raise InvalidInputError(
            f"Degree must be an integer, got {type(degree).__name__}"
        )

    if degree < 0:
        raise InvalidInputError(
            f"Degree must be a non-negative integer, got {degree}"
        )

    return torch.rand(degree + 1, dtype=DTYPE, generator=generator)
