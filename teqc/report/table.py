"""Growable table of decoded values

Description:
------------

Values are stored in a dense numpy buffer with one row per epoch and one column per satellite. The buffer is allocated
with room for all epochs up front, since there can never be more epochs than lines in the report. The number of
columns is doubled whenever a satellite column falls outside the buffer. Unset cells are NaN.

"""

# Standard library imports
from typing import Sequence

# External library imports
import numpy as np


class ValueTable:
    """Dense value buffer trimmed to its used extent when finished"""

    def __init__(self, num_rows: int, num_columns: int = 99) -> None:
        self._buffer = np.full((max(num_rows, 1), max(num_columns, 1)), np.nan)

    @property
    def shape(self):
        return self._buffer.shape

    def scatter(self, row: int, columns: Sequence[int], values: Sequence[float]) -> None:
        """Store values of one epoch in the given columns

        Args:
            row:      Epoch index.
            columns:  Column index of each value.
            values:   Values, same length as columns.
        """
        if not len(columns):
            return

        self._ensure_size(row + 1, max(columns) + 1)
        self._buffer[row, columns] = values

    def trimmed(self, num_rows: int, num_columns: int) -> np.ndarray:
        """Copy of the used part of the buffer

        Args:
            num_rows:     Number of decoded epochs.
            num_columns:  Number of satellites in catalog.

        Returns:
            Array with shape (num_rows, num_columns).
        """
        self._ensure_size(num_rows, num_columns)
        return self._buffer[:num_rows, :num_columns].copy()

    def _ensure_size(self, num_rows: int, num_columns: int) -> None:
        buffer_rows, buffer_columns = self._buffer.shape
        if num_rows <= buffer_rows and num_columns <= buffer_columns:
            return

        new_rows = max(num_rows, buffer_rows)
        new_columns = buffer_columns
        while new_columns < num_columns:
            new_columns *= 2

        buffer = np.full((new_rows, new_columns), np.nan)
        buffer[:buffer_rows, :buffer_columns] = self._buffer
        self._buffer = buffer
