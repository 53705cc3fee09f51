import itertools
from typing import Dict, Optional

import torch
from tensordict import TensorDict
from torch import Tensor


def polynomial_evaluate_discrepancy(
    results: TensorDict,
    *,
    baseline: str = "horner",
) -> Dict[str, float]:
    """Largest absolute deviation of each evaluator from a baseline.

    Parameters
    ----------
    results : TensorDict
        Result set from ``polynomial_evaluate_all``.
    baseline : str
        Evaluator to compare against. If it is missing from ``results``,
        the first entry is used.

    Returns
    -------
    dict
        Evaluator name -> max |value - baseline value| over all points.
        The baseline maps to 0.0.
    """
    names = list(results.keys())
    if not names:
        return {}

    if baseline not in names:
        baseline = names[0]

    reference = results[baseline]

    discrepancy = {}
    for name in names:
        difference = torch.abs(results[name] - reference)
        discrepancy[name] = (
            float(torch.max(difference)) if difference.numel() > 0 else 0.0
        )

    return discrepancy


def polynomial_evaluate_agreement(
    results: TensorDict,
    *,
    magnitude: Optional[Tensor] = None,
    rtol: float = 1e-9,
    atol: float = 1e-12,
) -> bool:
    """Check that every pair of evaluators agrees within tolerance.

    Two values a and b agree when

        |a - b| <= max(rtol * scale, atol)

    where scale is ``magnitude`` if given and max(|a|, |b|) otherwise.

    Parameters
    ----------
    results : TensorDict
        Result set from ``polynomial_evaluate_all``.
    magnitude : Tensor, optional
        Scale broadcastable to the result shape, normally
        ``polynomial_magnitude(coeffs, x)``. Near a root |p(x)| is tiny
        while the terms that cancel are not, so comparing relative to
        |p(x)| alone would flag ordinary rounding error.
    rtol : float
        Relative tolerance.
    atol : float
        Absolute tolerance.

    Returns
    -------
    bool
        True when all pairs agree at every point. NaN never agrees.
    """
    for a, b in itertools.combinations(results.keys(), 2):
        u = results[a]
        v = results[b]

        if magnitude is None:
            scale = torch.maximum(torch.abs(u), torch.abs(v))
        else:
            scale = magnitude

        tolerance = torch.clamp(rtol * scale, min=atol)

        if not bool(torch.all(torch.abs(u - v) <= tolerance)):
            return False

    return True
