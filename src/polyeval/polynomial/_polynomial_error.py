class PolynomialError(Exception):
    """Base class for polynomial evaluation errors."""

    pass
