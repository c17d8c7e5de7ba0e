"""Summed-area table that keeps only the most recent rows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


class RollingIntegralImage:
    """Integral image over a sliding window of rows.

    Rows are appended one at a time; once more than the window holds have
    been added, the oldest rows can no longer be queried.
    """

    def __init__(self, max_rows: int) -> None:
        if max_rows < 0:
            raise ValueError("max_rows must not be negative")
        self._max_rows = max_rows + 1
        self._num_columns = 0
        self._num_rows = 0
        self._data: list[list[float]] = []

    @classmethod
    def from_values(cls, num_columns: int, values: Sequence[float]) -> "RollingIntegralImage":
        """Build an image holding all rows of a flat row-major sequence."""
        if num_columns <= 0:
            raise ValueError("num_columns must be positive")
        data = list(values)
        if len(data) % num_columns:
            raise ValueError("number of values is not a multiple of num_columns")
        image = cls(0)
        image._max_rows = len(data) // num_columns
        for start in range(0, len(data), num_columns):
            image.add_row(data[start:start + num_columns])
        return image

    @property
    def num_columns(self) -> int:
        """Number of columns, fixed by the first row added."""
        return self._num_columns

    @property
    def num_rows(self) -> int:
        """Total number of rows added since the last reset."""
        return self._num_rows

    def reset(self) -> None:
        """Forget all rows and the column count."""
        self._data = []
        self._num_rows = 0
        self._num_columns = 0

    def _row(self, index: int) -> list[float]:
        return self._data[index % self._max_rows]

    def area(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Return the sum of rows ``r1:r2`` and columns ``c1:c2``."""
        if not (0 <= r1 <= self._num_rows and 0 <= r2 <= self._num_rows):
            raise IndexError("row index out of range")
        if self._num_rows > self._max_rows:
            oldest = self._num_rows - self._max_rows
            if r1 <= oldest or r2 <= oldest:
                raise IndexError("row is no longer held by the image")
        if not (0 <= c1 <= self._num_columns and 0 <= c2 <= self._num_columns):
            raise IndexError("column index out of range")

        if r1 == r2 or c1 == c2:
            return 0.0
        if r2 < r1 or c2 < c1:
            raise ValueError("area corners are in the wrong order")

        bottom = self._row(r2 - 1)
        total = bottom[c2 - 1]
        if c1 > 0:
            total -= bottom[c1 - 1]
        if r1 > 0:
            top = self._row(r1 - 1)
            total -= top[c2 - 1]
            if c1 > 0:
                total += top[c1 - 1]
        return total

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row of values."""
        values = [float(value) for value in row]
        if self._num_columns == 0:
            self._num_columns = len(values)
            self._data = [[0.0] * self._num_columns for _ in range(self._max_rows)]
        if len(values) != self._num_columns:
            raise ValueError(
                f"row has {len(values)} columns, expected {self._num_columns}"
            )

        current = list(accumulate(values))
        if self._num_rows > 0:
            previous = self._row(self._num_rows - 1)
            current = [a + b for a, b in zip(previous, current)]
        self._data[self._num_rows % self._max_rows] = current
        self._num_rows += 1