"""Testing helpers for polynomial evaluators."""

from .strategies import coefficient_sequences, evaluation_points

__all__ = [
    "coefficient_sequences",
    "evaluation_points",
]
