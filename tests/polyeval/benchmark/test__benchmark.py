"""Tests for the benchmark runner."""

import pytest
import torch

from polyeval.benchmark import (
    BenchmarkReport,
    BenchmarkUnavailableError,
    EvaluatorTiming,
    benchmark_all,
    benchmark_evaluator,
)
from polyeval.benchmark import _benchmark_evaluator
from polyeval.polynomial import (
    EVALUATORS,
    InvalidInputError,
    polynomial_evaluate_all,
    polynomial_evaluate_horner,
)

MIN_RUN_TIME = 0.01


class RaisingBackend:
    """Reference backend whose evaluation always fails."""

    name = "raising"

    def __init__(self, error):
        self.error = error

    def construct(self, coeffs):
        return coeffs

    def evaluate(self, p, x):
        raise self.error


def _timing(name, minimum=1e-6, median=2e-6):
    return EvaluatorTiming(
        name=name,
        minimum=minimum,
        median=median,
        iqr=1e-7,
        measurements=10,
        number_per_run=100,
    )


class TestBenchmarkEvaluator:
    """Tests for benchmark_evaluator()."""

    def test_timing_statistics(self):
        timing = benchmark_evaluator(
            "horner",
            polynomial_evaluate_horner,
            torch.rand(11, dtype=torch.float64),
            torch.tensor(0.5, dtype=torch.float64),
            min_run_time=MIN_RUN_TIME,
        )

        assert timing.name == "horner"
        assert 0.0 < timing.minimum <= timing.median
        assert timing.iqr >= 0.0
        assert timing.measurements >= 1
        assert timing.number_per_run >= 1
        assert timing.allocations is None

    def test_non_positive_min_run_time_raises(self):
        with pytest.raises(ValueError, match="min_run_time"):
            benchmark_evaluator(
                "horner",
                polynomial_evaluate_horner,
                torch.ones(2, dtype=torch.float64),
                torch.tensor(1.0, dtype=torch.float64),
                min_run_time=0.0,
            )

    def test_timer_unavailable(self, monkeypatch):
        monkeypatch.setattr(_benchmark_evaluator, "TIMER_AVAILABLE", False)

        with pytest.raises(BenchmarkUnavailableError, match="not available"):
            benchmark_evaluator(
                "horner",
                polynomial_evaluate_horner,
                torch.ones(2, dtype=torch.float64),
                torch.tensor(1.0, dtype=torch.float64),
            )

    def test_timer_failure(self, monkeypatch):
        def fail(self, min_run_time):
            raise RuntimeError("no clock")

        monkeypatch.setattr(
            _benchmark_evaluator.torch_benchmark.Timer,
            "blocked_autorange",
            fail,
        )

        with pytest.raises(BenchmarkUnavailableError, match="no clock"):
            benchmark_evaluator(
                "horner",
                polynomial_evaluate_horner,
                torch.ones(2, dtype=torch.float64),
                torch.tensor(1.0, dtype=torch.float64),
            )


class TestBenchmarkAll:
    """Tests for benchmark_all()."""

    def test_every_evaluator_timed(self):
        report = benchmark_all(
            torch.rand(6, dtype=torch.float64), 0.5, min_run_time=MIN_RUN_TIME
        )

        assert report.names == tuple(EVALUATORS)
        assert report.degree == 5
        assert report.points == 1
        for timing in report:
            assert 0.0 < timing.minimum <= timing.median

    def test_selected_evaluators(self):
        report = benchmark_all(
            [1.0, 2.0],
            torch.linspace(0, 1, 8),
            evaluators=["horner", "vandermonde"],
            min_run_time=MIN_RUN_TIME,
        )

        assert report.names == ("horner", "vandermonde")
        assert report.points == 8

    def test_unavailable_reference_left_out(self):
        with pytest.warns(RuntimeWarning, match="Skipping reference"):
            report = benchmark_all(
                [1.0, 2.0],
                1.0,
                reference_backend="missing",
                min_run_time=MIN_RUN_TIME,
            )

        assert "reference" not in report.names
        assert len(report) == len(EVALUATORS) - 1

    def test_failing_evaluator_left_out(self):
        with pytest.warns(RuntimeWarning, match="'reference': bad backend"):
            report = benchmark_all(
                [1.0, 2.0],
                3.0,
                reference_backend=RaisingBackend(ValueError("bad backend")),
                min_run_time=MIN_RUN_TIME,
            )

        assert report.names == tuple(
            name for name in EVALUATORS if name != "reference"
        )

    def test_runtime_error_in_evaluator_keeps_other_timings(self):
        with pytest.warns(RuntimeWarning, match="'reference': boom"):
            report = benchmark_all(
                [1.0, 2.0],
                3.0,
                reference_backend=RaisingBackend(RuntimeError("boom")),
                min_run_time=MIN_RUN_TIME,
            )

        assert len(report) == len(EVALUATORS) - 1
        assert "horner" in report.names

    def test_does_not_alter_results(self):
        coeffs = torch.rand(8, dtype=torch.float64)
        x = torch.tensor(0.7, dtype=torch.float64)

        before = polynomial_evaluate_all(coeffs, x)
        benchmark_all(coeffs, x, evaluators=["horner"], min_run_time=MIN_RUN_TIME)
        after = polynomial_evaluate_all(coeffs, x)

        for name in EVALUATORS:
            assert torch.equal(before[name], after[name])

    def test_empty_raises(self):
        with pytest.raises(InvalidInputError):
            benchmark_all([], 1.0)


class TestBenchmarkReport:
    """Tests for BenchmarkReport."""

    def test_lookup_by_name(self):
        report = BenchmarkReport(
            degree=3, points=1, timings=(_timing("horner"), _timing("direct_sum"))
        )
        assert report["direct_sum"].name == "direct_sum"

    def test_missing_name_raises(self):
        report = BenchmarkReport(degree=3, points=1, timings=(_timing("horner"),))
        with pytest.raises(KeyError):
            report["reference"]

    def test_format(self):
        report = BenchmarkReport(
            degree=3,
            points=1,
            timings=(_timing("horner", minimum=1.5e-6, median=2.25e-6),),
        )

        text = report.format()

        assert "degree = 3" in text
        assert "Median (us)" in text
        line = text.splitlines()[-1]
        assert line.split() == ["horner", "1.5000", "2.2500", "0.1000", "1000"]
