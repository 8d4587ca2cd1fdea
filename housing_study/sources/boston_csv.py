from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from ..config import COLUMNS, NUMERIC_COLUMNS
from ..errors import DatasetError, MalformedRecordError
from ..model import Dataset, HousingRow

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DatasetError(f"Cannot read dataset at {path}: {exc}") from exc
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DatasetError(f"Dataset at {path} is not valid UTF-8: {exc}") from exc
    # Accept both CRLF and old-Mac CR line endings.
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_record(fields: Sequence[str], row: int) -> HousingRow:
    """
    Build one HousingRow from a raw CSV record.

    The record is validated as a whole: either every numeric column parses
    or a MalformedRecordError is raised and nothing is produced.
    """
    if len(fields) != len(COLUMNS):
        raise MalformedRecordError(
            f"Row {row}: expected {len(COLUMNS)} fields, got {len(fields)}",
            row=row,
        )

    values = {}
    for column, raw in zip(NUMERIC_COLUMNS, fields[1:]):
        try:
            values[column] = float(raw)
        except ValueError as exc:
            raise MalformedRecordError(
                f"Row {row}: column {column!r} is not a number: {raw!r}",
                row=row,
                column=column,
                value=raw,
            ) from exc

    return HousingRow(neighborhood=fields[0], **values)


def read_rows(csv_path: Path | str) -> List[HousingRow]:
    """
    Read every data row of a Boston housing CSV.

    The first record is the header and is discarded. Blank lines are skipped.
    Any unreadable file or malformed record aborts the whole read.
    """
    path = Path(csv_path)
    text = _read_text(path)

    reader = csv.reader(io.StringIO(text), skipinitialspace=True)
    records = (fields for fields in reader if fields)

    try:
        next(records)
    except StopIteration:
        raise DatasetError(f"Dataset at {path} is empty (no header row)") from None
    except csv.Error as exc:
        raise DatasetError(f"Cannot parse header of {path}: {exc}") from exc

    rows: List[HousingRow] = []
    try:
        for fields in records:
            rows.append(parse_record(fields, row=len(rows) + 1))
    except csv.Error as exc:
        raise MalformedRecordError(
            f"Row {len(rows) + 1}: CSV syntax error: {exc}", row=len(rows) + 1
        ) from exc

    return rows


def rows_to_frame(rows: Sequence[HousingRow]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame({c: pd.Series([], dtype="float64") for c in NUMERIC_COLUMNS})
    df = pd.DataFrame([asdict(r) for r in rows], columns=COLUMNS)
    return df.astype({c: "float64" for c in NUMERIC_COLUMNS})


def load_dataset(csv_path: Path | str) -> Dataset:
    """
    Load the crime-rate, rooms and median-value series from `csv_path`.

    Raises DatasetError (or its subclass MalformedRecordError); a partially
    parsed dataset is never returned.
    """
    logger.info("[Loader] Reading dataset from %s", csv_path)
    rows = read_rows(csv_path)
    dataset = Dataset.from_frame(rows_to_frame(rows))
    logger.info("[Loader] Loaded %d rows", len(dataset))
    return dataset
