from ._get_reference_backend import REFERENCE_BACKENDS, get_reference_backend
from ._polynomial_backend import PolynomialBackend

__all__ = [
    "PolynomialBackend",
    "REFERENCE_BACKENDS",
    "get_reference_backend",
]
