"""polyeval: polynomial evaluation algorithms, compared and timed, in PyTorch."""

from . import benchmark, polynomial

__all__ = [
    "benchmark",
    "polynomial",
]

__version__ = "0.1.0"
