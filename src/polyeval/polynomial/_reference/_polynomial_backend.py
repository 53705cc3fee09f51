from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy


@runtime_checkable
class PolynomialBackend(Protocol):
    """Polynomial library used as an independent evaluation oracle.

    A backend exposes two operations: build an opaque polynomial object
    from a one-dimensional array of float64 coefficients (constant term
    first), and evaluate that object at an array of points. Its internal
    representation and algorithm are its own business.

    Attributes
    ----------
    name : str
        Short identifier, e.g. ``"numpy"``.
    """

    name: str

    def construct(self, coeffs: "numpy.ndarray") -> Any: ...

    def evaluate(self, p: Any, x: "numpy.ndarray") -> "numpy.ndarray": ...
