"""Exception hierarchy for polynomial evaluation."""

from polyeval.polynomial._polynomial_error import PolynomialError


class InvalidInputError(PolynomialError, ValueError):
    """Invalid coefficients, evaluation point or degree.

    Raised when a coefficient sequence is empty or not real, when an
    evaluation point cannot be parsed as a real number, or when a
    polynomial degree is negative or not an integer.
    """

    pass


class EvaluatorUnavailableError(PolynomialError):
    """Evaluator cannot run in this environment.

    Raised when the library behind a reference backend cannot be
    imported, or when no backend is registered under the requested name.
    """

    pass
