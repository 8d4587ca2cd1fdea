from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

import numpy as np

from ..config import PREDICTORS, TARGET, PredictorConfig
from ..errors import DegenerateFitError, FitInputError
from ..model import Dataset, FitResult, IterationResult

logger = logging.getLogger(__name__)


def _as_vectors(x: Sequence[float], y: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)
    if xs.ndim != 1 or ys.ndim != 1:
        raise FitInputError("x and y must be one-dimensional")
    if len(xs) != len(ys):
        raise FitInputError(f"x and y must have equal length, got {len(xs)} and {len(ys)}")
    if len(xs) == 0:
        raise FitInputError("x and y must not be empty")
    if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
        raise FitInputError("x and y must contain only finite values")
    return xs, ys


def r_squared(
    x: Sequence[float], y: Sequence[float], intercept: float, slope: float
) -> Optional[float]:
    """
    Coefficient of determination of the line `intercept + slope * x` on y:

        1 - sum((y - y_hat) ** 2) / sum((y - mean(y)) ** 2)

    Returns None when y has zero variance and R² is undefined.
    """
    xs, ys = _as_vectors(x, y)
    ss_tot = float(np.sum((ys - ys.mean()) ** 2))
    if np.ptp(ys) == 0.0 or ss_tot == 0.0:
        return None
    residuals = ys - (intercept + slope * xs)
    ss_res = float(np.sum(residuals ** 2))
    return 1.0 - ss_res / ss_tot


def fit(x: Sequence[float], y: Sequence[float], predictor_name: str = "x") -> FitResult:
    """
    Ordinary least squares fit of `y = intercept + slope * x`.

    slope = cov(x, y) / var(x); intercept = mean(y) - slope * mean(x).
    Raises FitInputError for mismatched, empty or non-finite inputs and
    DegenerateFitError when x is constant. A constant y yields a FitResult
    whose r_squared is None.
    """
    xs, ys = _as_vectors(x, y)
    x_mean = xs.mean()
    y_mean = ys.mean()
    dx = xs - x_mean

    # A constant series can still leave a nonzero rounded sum of squares.
    ss_x = float(np.sum(dx * dx))
    if np.ptp(xs) == 0.0 or ss_x == 0.0:
        raise DegenerateFitError(
            f"{predictor_name} has zero variance; slope is undefined"
        )

    slope = float(np.sum(dx * (ys - y_mean))) / ss_x
    intercept = float(y_mean) - slope * float(x_mean)

    return FitResult(
        predictor_name=predictor_name,
        intercept=intercept,
        slope=slope,
        r_squared=r_squared(xs, ys, intercept, slope),
    )


def fit_predictors(
    dataset: Dataset,
    predictors: Sequence[PredictorConfig] = PREDICTORS,
    target: PredictorConfig = TARGET,
) -> list[FitResult]:
    y = dataset.series(target.column)
    return [fit(dataset.series(p.column), y, predictor_name=p.label) for p in predictors]


def iterate_fits(
    dataset: Dataset,
    iterations: int,
    predictors: Sequence[PredictorConfig] = PREDICTORS,
    target: PredictorConfig = TARGET,
) -> Iterator[IterationResult]:
    """
    Repeat the predictor fits `iterations` times on the same dataset.

    Nothing is cached between iterations; the loop exists to reproduce the
    repeated run of the study, so every iteration yields identical results.
    """
    if iterations < 0:
        raise FitInputError(f"iterations must be >= 0, got {iterations}")

    for i in range(1, iterations + 1):
        results = tuple(fit_predictors(dataset, predictors, target))
        logger.info("[Regression] Iteration %d: %d fits over %d rows", i, len(results), len(dataset))
        yield IterationResult(iteration=i, results=results)
