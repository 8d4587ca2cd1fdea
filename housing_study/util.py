import logging
import sys
from typing import List

from .config import TARGET
from .model import FitResult, IterationResult


def configure_logging(verbose: bool = False) -> None:
    """
    Send package log records to stderr so stdout carries only the report.
    Verbose runs show INFO diagnostics; otherwise only warnings and errors.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )


def format_fit(result: FitResult, target_label: str = TARGET.label) -> str:
    name = result.predictor_name
    r2 = f"{result.r_squared:.2f}" if result.r_squared_defined else "undefined"
    return (
        f"{name} vs {target_label}: {result.intercept:.2f} + "
        f"{result.slope:.2f} * {name}, R-squared: {r2}"
    )


def format_iteration(result: IterationResult, target_label: str = TARGET.label) -> List[str]:
    lines = [f"Iteration {result.iteration}:"]
    lines.extend(format_fit(r, target_label) for r in result.results)
    return lines
