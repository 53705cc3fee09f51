"""Tests for EvaluationConfig."""

import json

import pytest

from polyeval._config import EvaluationConfig
from polyeval.polynomial import InvalidInputError


class TestEvaluationConfig:
    """Validation and loading."""

    def test_defaults_valid(self):
        config = EvaluationConfig()
        config.validate()
        assert config.degree is None
        assert config.reference_backend == "numpy"
        assert config.benchmark is True

    def test_negative_degree_raises(self):
        with pytest.raises(InvalidInputError, match="non-negative"):
            EvaluationConfig(degree=-2).validate()

    def test_float_degree_raises(self):
        with pytest.raises(InvalidInputError, match="integer"):
            EvaluationConfig(degree=2.5).validate()

    def test_unknown_evaluator_raises(self):
        with pytest.raises(InvalidInputError, match="newton"):
            EvaluationConfig(evaluators=("horner", "newton")).validate()

    def test_min_run_time_must_be_positive(self):
        with pytest.raises(InvalidInputError, match="min_run_time"):
            EvaluationConfig(min_run_time=0.0).validate()

    def test_negative_tolerance_raises(self):
        with pytest.raises(InvalidInputError, match="Tolerances"):
            EvaluationConfig(rtol=-1.0).validate()

    def test_from_dict(self):
        config = EvaluationConfig.from_dict(
            {"degree": 4, "x": 0.5, "evaluators": ["horner", "reference"]}
        )
        assert config.degree == 4
        assert config.evaluators == ("horner", "reference")

    def test_to_dict_from_dict(self):
        config = EvaluationConfig(degree=3, seed=7, evaluators=("horner",))
        assert EvaluationConfig.from_dict(config.to_dict()) == config

    def test_unknown_key_raises(self):
        with pytest.raises(InvalidInputError, match="colour"):
            EvaluationConfig.from_dict({"colour": "blue"})

    def test_non_object_raises(self):
        with pytest.raises(InvalidInputError, match="JSON object"):
            EvaluationConfig.from_dict([1, 2])

    def test_from_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"degree": 2, "benchmark": False}))

        config = EvaluationConfig.from_json(path)

        assert config.degree == 2
        assert config.benchmark is False


class TestEvaluationConfigTypes:
    """Values of the wrong type are rejected before they reach the driver."""

    @pytest.mark.parametrize("x", [[1, 2], "0.5", True, float("inf"), float("nan")])
    def test_x_must_be_finite_real(self, x):
        with pytest.raises(InvalidInputError, match="x must be"):
            EvaluationConfig(x=x).validate()

    def test_integer_x_accepted(self):
        EvaluationConfig(x=3).validate()

    @pytest.mark.parametrize("seed", ["abc", 1.5, False])
    def test_seed_must_be_integer(self, seed):
        with pytest.raises(InvalidInputError, match="seed must be"):
            EvaluationConfig(seed=seed).validate()

    @pytest.mark.parametrize("value", ["0.2", None, True])
    def test_min_run_time_must_be_number(self, value):
        with pytest.raises(InvalidInputError, match="min_run_time must be"):
            EvaluationConfig(min_run_time=value).validate()

    @pytest.mark.parametrize("value", ["1e-9", None])
    def test_rtol_must_be_number(self, value):
        with pytest.raises(InvalidInputError, match="rtol must be"):
            EvaluationConfig(rtol=value).validate()

    @pytest.mark.parametrize("value", ["1e-12", None])
    def test_atol_must_be_number(self, value):
        with pytest.raises(InvalidInputError, match="atol must be"):
            EvaluationConfig(atol=value).validate()

    def test_benchmark_must_be_bool(self):
        with pytest.raises(InvalidInputError, match="benchmark must be"):
            EvaluationConfig(benchmark="yes").validate()

    def test_reference_backend_must_be_string(self):
        with pytest.raises(InvalidInputError, match="reference_backend"):
            EvaluationConfig(reference_backend=1).validate()

    def test_evaluators_must_be_list(self):
        with pytest.raises(InvalidInputError, match="list of names"):
            EvaluationConfig.from_dict({"evaluators": 3})

    def test_non_string_evaluator_rejected(self):
        with pytest.raises(InvalidInputError, match="Unknown evaluator"):
            EvaluationConfig.from_dict({"evaluators": [1]})
