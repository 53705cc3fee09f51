from ._exceptions import EvaluatorUnavailableError, InvalidInputError
from ._polynomial_coefficients import polynomial_coefficients, polynomial_point
from ._polynomial_error import PolynomialError
from ._polynomial_evaluate_agreement import (
    polynomial_evaluate_agreement,
    polynomial_evaluate_discrepancy,
)
from ._polynomial_evaluate_all import polynomial_evaluate_all
from ._polynomial_evaluate_direct_sum import polynomial_evaluate_direct_sum
from ._polynomial_evaluate_horner import polynomial_evaluate_horner
from ._polynomial_evaluate_power_accumulation import (
    polynomial_evaluate_power_accumulation,
)
from ._polynomial_evaluate_reference import polynomial_evaluate_reference
from ._polynomial_evaluate_vandermonde import polynomial_evaluate_vandermonde
from ._polynomial_evaluators import EVALUATORS, polynomial_evaluators
from ._polynomial_magnitude import polynomial_magnitude
from ._random_polynomial_coefficients import random_polynomial_coefficients
from ._reference import (
    REFERENCE_BACKENDS,
    PolynomialBackend,
    get_reference_backend,
)

__all__ = [
    "EVALUATORS",
    "EvaluatorUnavailableError",
    "InvalidInputError",
    "PolynomialBackend",
    "PolynomialError",
    "REFERENCE_BACKENDS",
    "get_reference_backend",
    "polynomial_coefficients",
    "polynomial_evaluate_agreement",
    "polynomial_evaluate_all",
    "polynomial_evaluate_direct_sum",
    "polynomial_evaluate_discrepancy",
    "polynomial_evaluate_horner",
    "polynomial_evaluate_power_accumulation",
    "polynomial_evaluate_reference",
    "polynomial_evaluate_vandermonde",
    "polynomial_evaluators",
    "polynomial_magnitude",
    "polynomial_point",
    "random_polynomial_coefficients",
]
