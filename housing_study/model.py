from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class HousingRow:
    neighborhood: str   # opaque label, column 0
    crim: float
    zn: float
    indus: float
    chas: float         # 0/1 indicator
    nox: float
    rooms: float
    age: float
    dis: float
    rad: float
    tax: float
    ptratio: float
    lstat: float
    mv: float           # target


def _frozen_vector(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    The three series the regression pipeline consumes, aligned by source
    row order. Vectors are read-only float64 arrays of identical length.
    """

    crim: np.ndarray = field(repr=False)
    rooms: np.ndarray = field(repr=False)
    mv: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        for name in ("crim", "rooms", "mv"):
            object.__setattr__(self, name, _frozen_vector(getattr(self, name)))
        lengths = {len(self.crim), len(self.rooms), len(self.mv)}
        if len(lengths) != 1:
            raise ValueError(
                f"Dataset series must have equal length, got "
                f"crim={len(self.crim)} rooms={len(self.rooms)} mv={len(self.mv)}"
            )

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Dataset":
        return cls(
            crim=df["crim"].to_numpy(dtype=np.float64),
            rooms=df["rooms"].to_numpy(dtype=np.float64),
            mv=df["mv"].to_numpy(dtype=np.float64),
        )

    def series(self, column: str) -> np.ndarray:
        if column not in ("crim", "rooms", "mv"):
            raise KeyError(f"Dataset has no series {column!r}")
        return getattr(self, column)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"crim": self.crim, "rooms": self.rooms, "mv": self.mv})

    def __len__(self) -> int:
        return len(self.mv)


@dataclass(frozen=True)
class FitResult:
    predictor_name: str
    intercept: float
    slope: float
    r_squared: Optional[float]   # None when the target has zero variance

    @property
    def r_squared_defined(self) -> bool:
        return self.r_squared is not None


@dataclass(frozen=True)
class IterationResult:
    iteration: int               # 1-based
    results: tuple[FitResult, ...]
