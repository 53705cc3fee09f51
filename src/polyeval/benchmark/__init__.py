from ._benchmark_all import benchmark_all
from ._benchmark_evaluator import TIMER_AVAILABLE, benchmark_evaluator
from ._benchmark_report import BenchmarkReport, EvaluatorTiming
from ._exceptions import BenchmarkUnavailableError

__all__ = [
    "BenchmarkReport",
    "BenchmarkUnavailableError",
    "EvaluatorTiming",
    "TIMER_AVAILABLE",
    "benchmark_all",
    "benchmark_evaluator",
]
