from typing import Optional


class DatasetError(Exception):
    """Raised when the input dataset cannot be read or parsed."""


class MalformedRecordError(DatasetError):
    """
    A data record that does not match the 14-column layout.

    `row` is the 1-based data row (header excluded); `column` and `value`
    are set when a single field failed to parse.
    """

    def __init__(
        self,
        message: str,
        row: int,
        column: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column
        self.value = value


class DegenerateFitError(ValueError):
    """Raised when the predictor has zero variance and no slope exists."""


class FitInputError(ValueError):
    """Raised when regression inputs are empty, misaligned or non-finite."""
