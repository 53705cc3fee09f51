from typing import Optional, Union

import numpy
import torch
from torch import Tensor

from ._polynomial_coefficients import polynomial_coefficients, polynomial_point
from ._reference import PolynomialBackend, get_reference_backend


def polynomial_evaluate_reference(
    coeffs: Tensor,
    x: Tensor,
    backend: Optional[Union[PolynomialBackend, str]] = None,
) -> Tensor:
    """Evaluate polynomial with an external polynomial library.

    Used as an independent correctness oracle for the evaluators
    implemented in this package.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch).
    backend : PolynomialBackend or str, optional
        Backend instance, or the name of a registered backend. Default is
        the ``"numpy"`` backend.

    Returns
    -------
    Tensor
        Values p(x), shape (...batch, ...x_batch), float64.

    Raises
    ------
    EvaluatorUnavailableError
        If the named backend cannot be loaded.

    Examples
    --------
    >>> polynomial_evaluate_reference(torch.tensor([2.0, 0.0, 0.0, 1.0]), torch.tensor(3.0))
    tensor(29., dtype=torch.float64)
    """
    coeffs = polynomial_coefficients(coeffs)
    x = polynomial_point(x)

    if backend is None or isinstance(backend, str):
        backend = get_reference_backend(backend or "numpy")

    batch_shape = tuple(coeffs.shape[:-1])

    coeffs_array = coeffs.detach().cpu().numpy()
    x_array = x.detach().cpu().numpy()

    result = numpy.empty(batch_shape + x_array.shape, dtype=numpy.float64)

    # One polynomial object per batch entry
    for idx in numpy.ndindex(batch_shape):
        p = backend.construct(coeffs_array[idx])
        result[idx] = backend.evaluate(p, x_array)

    return torch.from_numpy(result)
