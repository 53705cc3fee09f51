import numpy
from numpy.polynomial import Polynomial


class NumpyPolynomialBackend:
    """Reference backend built on ``numpy.polynomial.Polynomial``."""

    name = "numpy"

    def construct(self, coeffs: numpy.ndarray) -> Polynomial:
        return Polynomial(coeffs)

    def evaluate(self, p: Polynomial, x: numpy.ndarray) -> numpy.ndarray:
        return numpy.asarray(p(x), dtype=numpy.float64)
