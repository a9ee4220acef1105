"""Row-major 2-D table backed by a single flat list."""

from __future__ import annotations

from typing import Tuple


class Table:
    """Fixed-size grid of ints, ``rows x cols``, zero-initialised.

    Cell ``(i, j)`` lives at ``i * cols + j`` in the backing list.
    """

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"table must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = [0] * (rows * cols)

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"cell ({i}, {j}) outside {self.rows}x{self.cols} table")
        return i * self.cols + j

    def __getitem__(self, key: Tuple[int, int]) -> int:
        return self._cells[self._offset(*key)]

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        self._cells[self._offset(*key)] = value

    def row(self, i: int) -> Tuple[int, ...]:
        start = self._offset(i, 0)
        return tuple(self._cells[start:start + self.cols])

    def freeze(self) -> Tuple[Tuple[int, ...], ...]:
        """Snapshot as a tuple of row tuples."""
        return tuple(self.row(i) for i in range(self.rows))

    def __repr__(self) -> str:
        return f"Table({self.rows}x{self.cols})"
