"""Configuration for the interactive driver."""

import json
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Tuple, Union

from polyeval.polynomial import EVALUATORS, InvalidInputError


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class EvaluationConfig:
    """Settings for one run of the driver.

    Fields left as None are asked for interactively.
    """

    degree: Optional[int] = None
    x: Optional[float] = None
    seed: Optional[int] = None
    evaluators: Optional[Tuple[str, ...]] = None
    reference_backend: str = "numpy"
    benchmark: bool = True
    min_run_time: float = 0.2
    rtol: float = 1e-9
    atol: float = 1e-12

    def validate(self) -> None:
        """Check settings, raising InvalidInputError on the first problem."""
        if self.degree is not None:
            if not _is_integer(self.degree):
                raise InvalidInputError(
                    f"Degree must be an integer, got {self.degree!r}"
                )
            if self.degree < 0:
                raise InvalidInputError(
                    f"Degree must be a non-negative integer, got {self.degree}"
                )

        if self.x is not None:
            if not _is_number(self.x) or not math.isfinite(self.x):
                raise InvalidInputError(
                    f"x must be a finite real number, got {self.x!r}"
                )

        if self.seed is not None and not _is_integer(self.seed):
            raise InvalidInputError(f"seed must be an integer, got {self.seed!r}")

        if self.evaluators is not None:
            unknown = [
                str(name) for name in self.evaluators if name not in EVALUATORS
            ]
            if unknown:
                raise InvalidInputError(
                    f"Unknown evaluator(s): {', '.join(unknown)}. "
                    f"Must be one of: {', '.join(EVALUATORS)}"
                )

        if not isinstance(self.reference_backend, str):
            raise InvalidInputError(
                "reference_backend must be a string, "
                f"got {self.reference_backend!r}"
            )

        if not isinstance(self.benchmark, bool):
            raise InvalidInputError(
                f"benchmark must be true or false, got {self.benchmark!r}"
            )

        for name in ("min_run_time", "rtol", "atol"):
            value = getattr(self, name)
            if not _is_number(value):
                raise InvalidInputError(f"{name} must be a number, got {value!r}")

        if self.min_run_time <= 0:
            raise InvalidInputError(
                f"min_run_time must be positive, got {self.min_run_time}"
            )

        if self.rtol < 0 or self.atol < 0:
            raise InvalidInputError("Tolerances must be non-negative")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        if self.evaluators is not None:
            data["evaluators"] = list(self.evaluators)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "EvaluationConfig":
        """Create from dictionary, rejecting unknown keys."""
        if not isinstance(data, dict):
            raise InvalidInputError("Configuration must be a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidInputError(
                f"Unknown configuration key(s): {', '.join(unknown)}"
            )

        data = dict(data)
        if data.get("evaluators") is not None:
            if not isinstance(data["evaluators"], list):
                raise InvalidInputError(
                    "evaluators must be a list of names, "
                    f"got {data['evaluators']!r}"
                )
            data["evaluators"] = tuple(data["evaluators"])

        config = cls(**data)
        config.validate()
        return config

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "EvaluationConfig":
        """Load configuration from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))
