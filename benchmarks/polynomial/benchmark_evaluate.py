"""Benchmark polynomial evaluation.

Compares direct summation, power accumulation, Horner's method, the
Vandermonde reduction and the numpy reference across polynomial degrees.
"""

import torch

from polyeval.benchmark import BenchmarkUnavailableError, benchmark_all
from polyeval.polynomial import EVALUATORS


def main():
    """Run evaluation benchmarks across degrees."""
    degrees = [0, 1, 4, 16, 64, 256, 1024]
    names = list(EVALUATORS)

    generator = torch.Generator().manual_seed(0)
    x = torch.tensor(0.5, dtype=torch.float64)

    print("Polynomial Evaluation Benchmark (median, us)")
    print("=" * (8 + 20 * len(names)))
    print(f"{'Degree':>8}" + "".join(f"{name:>20}" for name in names))
    print("-" * (8 + 20 * len(names)))

    for degree in degrees:
        coeffs = torch.rand(degree + 1, dtype=torch.float64, generator=generator)

        try:
            report = benchmark_all(coeffs, x, evaluators=names, min_run_time=0.1)
        except BenchmarkUnavailableError as e:
            print(f"Benchmark failed for degree {degree}: {e}")
            continue

        row = "".join(
            f"{report[name].median * 1e6:>20.4f}" if name in report.names
            else f"{'n/a':>20}"
            for name in names
        )
        print(f"{degree:>8}{row}")

    print()
    print("Notes:")
    print("- direct_sum recomputes x^i for every term")
    print("- power_accumulation and horner are O(n) multiplications")
    print("- vandermonde is one vectorized reduction, O(n) memory per point")
    print("- reference delegates to numpy.polynomial.Polynomial")


if __name__ == "__main__":
    main()
