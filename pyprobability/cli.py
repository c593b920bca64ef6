"""
Command-line entry point: run the matching problem and log the estimate.

    python -m pyprobability --n 100 --trials 10000 --seed 42
"""

from __future__ import annotations

import argparse
import logging
import sys

from pyprobability.core.exceptions import PyProbabilityError
from pyprobability.simulation import matching_problem
from pyprobability.simulation.design import DEFAULT_N, DEFAULT_TRIALS

logger = logging.getLogger("pyprobability.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyprobability-sim",
        description="Estimate P(random permutation has a fixed point) by simulation.",
    )
    parser.add_argument("--n", type=int, default=DEFAULT_N,
                        help=f"items per permutation (default: {DEFAULT_N})")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help=f"number of permutations (default: {DEFAULT_TRIALS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for a reproducible run")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        solution = matching_problem(args.n, args.trials, seed=args.seed)
    except PyProbabilityError as e:
        logger.error("Simulation failed: %s", e)
        return 1

    for warning in solution.warnings:
        logger.warning(warning)
    logger.info("Estimated probability: %s", solution.estimate)
    logger.info("Expected (1 - 1/e): %s", solution.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
