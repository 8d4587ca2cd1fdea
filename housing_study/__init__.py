from .errors import DatasetError, DegenerateFitError, FitInputError, MalformedRecordError
from .model import Dataset, FitResult, HousingRow, IterationResult
from .sources.boston_csv import load_dataset, read_rows
from .transforms.regression import fit, fit_predictors, iterate_fits, r_squared

__all__ = [
    "DatasetError",
    "DegenerateFitError",
    "FitInputError",
    "MalformedRecordError",
    "Dataset",
    "FitResult",
    "HousingRow",
    "IterationResult",
    "load_dataset",
    "read_rows",
    "fit",
    "fit_predictors",
    "iterate_fits",
    "r_squared",
]
