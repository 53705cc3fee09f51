"""Interactive driver: evaluate a random polynomial every way and time it.

Examples:
    # Ask for the degree and the point
    polyeval

    # Non-interactive, reproducible coefficients, no timing
    polyeval --degree 8 --x 0.5 --seed 0 --no-benchmark

    # Compare Horner against the SymPy reference only
    polyeval --degree 20 --x -1.5 --evaluators horner reference --backend sympy
"""

import argparse
import json
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

import torch

from polyeval._config import EvaluationConfig
from polyeval.benchmark import BenchmarkUnavailableError, benchmark_all
from polyeval.polynomial import (
    EVALUATORS,
    REFERENCE_BACKENDS,
    EvaluatorUnavailableError,
    InvalidInputError,
    get_reference_backend,
    polynomial_evaluate_agreement,
    polynomial_evaluate_all,
    polynomial_evaluate_discrepancy,
    polynomial_magnitude,
    polynomial_point,
    random_polynomial_coefficients,
)

logger = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2


def setup_logging(verbose: bool) -> None:
    """Configure logging."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.captureWarnings(True)


def parse_degree(text: str) -> int:
    """Parse a polynomial degree typed by the user."""
    try:
        degree = int(text.strip())
    except ValueError as e:
        raise InvalidInputError(
            f"Degree must be a non-negative integer, got {text.strip()!r}"
        ) from e

    if degree < 0:
        raise InvalidInputError(
            f"Degree must be a non-negative integer, got {degree}"
        )

    return degree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyeval",
        description="Evaluate a random polynomial with several algorithms "
        "and compare their values and running times",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="JSON file with settings (command-line flags take precedence)",
    )
    parser.add_argument(
        "--degree",
        type=int,
        help="Degree of the polynomial (asked for if omitted)",
    )
    parser.add_argument(
        "--x",
        type=float,
        help="Evaluation point (asked for if omitted)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the random coefficients",
    )
    parser.add_argument(
        "--evaluators",
        nargs="+",
        choices=list(EVALUATORS),
        help="Evaluators to run (default: all)",
    )
    parser.add_argument(
        "--backend",
        choices=list(REFERENCE_BACKENDS),
        help="Library used by the reference evaluator (default: numpy)",
    )
    parser.add_argument(
        "--no-benchmark",
        action="store_true",
        help="Skip timing the evaluators",
    )
    parser.add_argument(
        "--min-run-time",
        type=float,
        help="Minimum measuring time per evaluator in seconds (default: 0.2)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser


def load_config(args: argparse.Namespace) -> EvaluationConfig:
    """Merge the optional config file with command-line flags."""
    if args.config:
        config = EvaluationConfig.from_json(args.config)
        logger.info(f"Loaded configuration from {args.config}")
    else:
        config = EvaluationConfig()

    if args.degree is not None:
        config.degree = args.degree
    if args.x is not None:
        config.x = args.x
    if args.seed is not None:
        config.seed = args.seed
    if args.evaluators is not None:
        config.evaluators = tuple(args.evaluators)
    if args.backend is not None:
        config.reference_backend = args.backend
    if args.no_benchmark:
        config.benchmark = False
    if args.min_run_time is not None:
        config.min_run_time = args.min_run_time

    config.validate()
    return config


def run(
    config: EvaluationConfig,
    *,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> None:
    """Ask for missing inputs, evaluate, compare and time.

    Raises
    ------
    InvalidInputError
        If the degree or the point typed by the user is invalid.
    """
    if out is None:
        out = sys.stdout

    print("=" * 50, file=out)
    print(" Numerical evaluation of polynomials", file=out)
    print("=" * 50, file=out)

    if config.degree is None:
        degree = parse_degree(input_fn("Give the degree (integer >= 0): "))
    else:
        degree = config.degree

    generator = None
    if config.seed is not None:
        generator = torch.Generator().manual_seed(config.seed)

    coeffs = random_polynomial_coefficients(degree, generator=generator)
    logger.info(f"Generated {degree + 1} coefficients (seed={config.seed})")

    print("\nCoefficients (constant term first):", file=out)
    print(coeffs.tolist(), file=out)

    if config.x is None:
        x = polynomial_point(input_fn("\nGive the value for x: "))
    else:
        x = polynomial_point(config.x)

    print(f"\nx = {x.item()!r}", file=out)

    try:
        backend = get_reference_backend(config.reference_backend)
    except EvaluatorUnavailableError as e:
        logger.warning(f"Cannot display the polynomial: {e}")
    else:
        p = backend.construct(coeffs.numpy())
        print(f"\nPolynomial ({backend.name}):", file=out)
        print(f"p(x) = {p}", file=out)

    results = polynomial_evaluate_all(
        coeffs,
        x,
        evaluators=config.evaluators,
        reference_backend=config.reference_backend,
    )

    print("\nValues of p(x) from each algorithm:", file=out)
    for name, value in results.items():
        print(f"  {name:<20} = {value.item()!r}", file=out)

    agree = polynomial_evaluate_agreement(
        results,
        magnitude=polynomial_magnitude(coeffs, x),
        rtol=config.rtol,
        atol=config.atol,
    )
    worst = max(polynomial_evaluate_discrepancy(results).values(), default=0.0)

    verdict = "agree" if agree else "DISAGREE"
    print(
        f"\nAll algorithms {verdict} "
        f"(largest deviation: {worst:.3e})",
        file=out,
    )
    if not agree:
        logger.warning("Evaluators disagree beyond tolerance")

    if not config.benchmark:
        logger.info("Benchmarking disabled")
        return

    try:
        report = benchmark_all(
            coeffs,
            x,
            evaluators=config.evaluators,
            reference_backend=config.reference_backend,
            min_run_time=config.min_run_time,
        )
    except BenchmarkUnavailableError as e:
        logger.warning(f"Benchmark failed: {e}")
        print(f"\nBenchmarking skipped: {e}", file=out)
        return

    print("", file=out)
    print(report.format(), file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        config = load_config(args)
        run(config)
    except (InvalidInputError, OSError, json.JSONDecodeError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except EOFError:
        print("Input error: no input", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    return 0
