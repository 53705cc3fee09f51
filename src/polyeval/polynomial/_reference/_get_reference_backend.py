from polyeval.polynomial._exceptions import EvaluatorUnavailableError

from ._polynomial_backend import PolynomialBackend

REFERENCE_BACKENDS = ("numpy", "sympy")


def get_reference_backend(name: str = "numpy") -> PolynomialBackend:
    """Load a reference backend by name.

    Parameters
    ----------
    name : str
        ``"numpy"`` or ``"sympy"``.

    Returns
    -------
    PolynomialBackend
        A fresh backend instance.

    Raises
    ------
    EvaluatorUnavailableError
        If the name is unknown or the backend's library cannot be imported.
    """
    if name == "numpy":
        try:
            from ._numpy_polynomial_backend import NumpyPolynomialBackend
        except ImportError as e:
            raise EvaluatorUnavailableError(
                f"Reference backend 'numpy' is unavailable: {e}"
            ) from e

        return NumpyPolynomialBackend()

    if name == "sympy":
        try:
            from ._sympy_polynomial_backend import SymPyPolynomialBackend
        except ImportError as e:
            raise EvaluatorUnavailableError(
                f"Reference backend 'sympy' is unavailable: {e}"
            ) from e

        return SymPyPolynomialBackend()

    raise EvaluatorUnavailableError(
        f"Unknown reference backend: {name!r}. "
        f"Must be one of: {', '.join(REFERENCE_BACKENDS)}"
    )
