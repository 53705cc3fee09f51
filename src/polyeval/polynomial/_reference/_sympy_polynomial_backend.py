import numpy
import sympy


class SymPyPolynomialBackend:
    """Reference backend built on ``sympy.Poly`` over the reals.

    Coefficients are converted to ``sympy.Float`` at double precision, so
    the symbolic polynomial holds exactly the values it was given. Points
    are evaluated one at a time.
    """

    name = "sympy"

    def __init__(self):
        self.symbol = sympy.Symbol("x")

    def construct(self, coeffs: numpy.ndarray) -> sympy.Poly:
        # sympy.Poly.from_list expects the leading coefficient first
        return sympy.Poly.from_list(
            [sympy.Float(float(c)) for c in coeffs[::-1]],
            self.symbol,
        )

    def evaluate(self, p: sympy.Poly, x: numpy.ndarray) -> numpy.ndarray:
        result = numpy.zeros_like(x, dtype=numpy.float64)
        for idx in numpy.ndindex(x.shape):
            result[idx] = float(p.eval(sympy.Float(float(x[idx]))))
        return result
