"""Hypothesis strategies for polynomial evaluator testing."""

from ._coefficient_sequences import coefficient_sequences
from ._evaluation_points import evaluation_points

__all__ = [
    "coefficient_sequences",
    "evaluation_points",
]
