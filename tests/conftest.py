from pathlib import Path
from typing import Callable, Sequence

import pytest

HEADER = "neighborhood,crim,zn,indus,chas,nox,rooms,age,dis,rad,tax,ptratio,lstat,mv"


def _row(label: str, crim: float, rooms: float, mv: float) -> str:
    return f"{label},{crim},18,2.31,0,0.538,{rooms},65.2,4.09,1,296,15.3,4.98,{mv}"


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    def _write(lines: Sequence[str], newline: str = "\n", name: str = "boston.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode("utf-8") + newline.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def boston_csv(write_csv) -> Path:
    return write_csv(
        [
            HEADER,
            _row("Nahant", 0.00632, 6.575, 24.0),
            _row("Swampscott", 0.02731, 6.421, 21.6),
            _row("Marblehead", 0.02729, 7.185, 34.7),
            _row("Salem", 0.03237, 6.998, 33.4),
        ]
    )


@pytest.fixture
def two_row_csv(write_csv) -> Path:
    return write_csv(
        [
            HEADER,
            "A,1,0,0,0,0,6,0,0,0,0,0,0,30",
            "B,2,0,0,0,0,7,0,0,0,0,0,0,35",
        ]
    )


@pytest.fixture
def header() -> str:
    return HEADER
