import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Positional column layout of the Boston housing CSV (header row is ignored).
LABEL_COLUMN = "neighborhood"
NUMERIC_COLUMNS = [
    "crim",     # per-capita crime rate
    "zn",       # residential land zoned for large lots (%)
    "indus",    # non-retail business acres (proportion)
    "chas",     # Charles River dummy (0/1)
    "nox",      # nitric oxide concentration
    "rooms",    # average rooms per dwelling
    "age",      # owner-occupied units built before 1940 (%)
    "dis",      # weighted distance to employment centres
    "rad",      # radial highway accessibility index
    "tax",      # property-tax rate per $10k
    "ptratio",  # pupil-teacher ratio
    "lstat",    # lower-status population (%)
    "mv",       # median home value ($1000s)
]
COLUMNS = [LABEL_COLUMN] + NUMERIC_COLUMNS


@dataclass(frozen=True)
class PredictorConfig:
    column: str   # column in COLUMNS
    label: str    # name used in the report


PREDICTORS: list[PredictorConfig] = [
    PredictorConfig("crim", "Crim"),
    PredictorConfig("rooms", "Rooms"),
]

TARGET = PredictorConfig("mv", "Median Value")

DEFAULT_ITERATIONS = 100

CSV_PATH_ENV = "HOUSING_STUDY_CSV"


def csv_path_from_env() -> Optional[Path]:
    value = os.getenv(CSV_PATH_ENV)
    if not value:
        return None
    return Path(value).expanduser()
