from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import CSV_PATH_ENV, DEFAULT_ITERATIONS, csv_path_from_env
from .errors import DatasetError, DegenerateFitError, FitInputError
from .sources.boston_csv import load_dataset
from .transforms.regression import iterate_fits
from .util import configure_logging, format_iteration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    env_path = csv_path_from_env()
    ap = argparse.ArgumentParser(
        prog="housing-study",
        description="Fit crime rate and room count against median home value.",
    )
    ap.add_argument(
        "--csv",
        type=Path,
        default=env_path,
        required=env_path is None,
        help=f"Boston housing CSV (defaults to ${CSV_PATH_ENV})",
    )
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    ap.add_argument("--verbose", action="store_true", help="Log loader and per-iteration details")
    return ap


def run(csv_path: Path, iterations: int = DEFAULT_ITERATIONS) -> None:
    """Load the dataset once, then print the fit pair for every iteration."""
    try:
        dataset = load_dataset(csv_path)
    except DatasetError as exc:
        raise SystemExit(f"[Loader] {exc}") from exc

    results = iterate_fits(dataset, iterations)
    while True:
        try:
            result = next(results, None)
        except (FitInputError, DegenerateFitError) as exc:
            raise SystemExit(f"[Regression] {exc}") from exc
        if result is None:
            break
        for line in format_iteration(result):
            print(line)

    logger.info("[Regression] Completed %d iterations", iterations)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.iterations < 0:
        raise SystemExit("--iterations must be >= 0")
    configure_logging(args.verbose)
    run(args.csv, iterations=args.iterations)


if __name__ == "__main__":
    main()
